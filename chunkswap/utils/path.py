#!filepath: chunkswap/utils/path.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, TYPE_CHECKING

from chunkswap import logs

if TYPE_CHECKING:
    from chunkswap.engines.coordinate_resolver import Position


class PathManager:
    """
    世界存档目录结构：

    <world>/region/
         ├── r.0.0.mca
         ├── r.-1.0.mca
         └── ...

    root       = 当前工作目录（可 set_root 覆盖）
    output_dir = root / output
    """

    _root: Optional[Path] = None

    # ---------------------------------------------------------
    # root
    # ---------------------------------------------------------
    @classmethod
    def root(cls) -> Path:
        if cls._root is None:
            return Path.cwd()
        return cls._root

    @classmethod
    def set_root(cls, new_root: Path | str | None):
        if new_root is None:
            cls._root = None
        else:
            cls._root = Path(new_root).resolve()
        logs.debug(f"[PathManager] set_root = {cls._root}")

    @classmethod
    def output_dir(cls, name: str | Path = "output") -> Path:
        p = Path(name)
        if p.is_absolute():
            return p
        return cls.root() / p

    # ---------------------------------------------------------
    # region files
    # ---------------------------------------------------------
    @staticmethod
    def region_file_name(region_x: int, region_y: int, ext: str = "mca") -> str:
        """r.<regionX>.<regionY>.<ext>"""
        return f"r.{region_x}.{region_y}.{ext}"

    @classmethod
    def region_file(cls, directory: str | Path, position: "Position", ext: str = "mca") -> Path:
        return Path(directory) / cls.region_file_name(
            position.region_x, position.region_y, ext
        )
