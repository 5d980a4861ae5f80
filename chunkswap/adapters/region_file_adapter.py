#!filepath: chunkswap/adapters/region_file_adapter.py
from __future__ import annotations

from pathlib import Path

from chunkswap import logs
from chunkswap.adapters.base_adapter import BaseAdapter
from chunkswap.utils.errors import UserInputError
from chunkswap.utils.filesystem import FileSystem


class RegionFileAdapter(BaseAdapter):
    """
    区域文件 I/O（engine 层之外的唯一读写点）
    """

    def read(self, path: str | Path) -> bytes:
        path = Path(path)
        if not FileSystem.file_exists(path):
            raise UserInputError(f"Cannot open region file {path}")

        with self.timer(f"read_{path.parent.name}/{path.name}"):
            data = path.read_bytes()

        logs.info(f"[RegionFile] read {path} ({FileSystem.format_size(len(data))})")
        return data

    def write(self, path: str | Path, data) -> Path:
        path = Path(path)
        with self.timer(f"write_{path.name}"):
            FileSystem.safe_write(path, data)

        logs.info(f"[RegionFile] wrote {path} ({FileSystem.format_size(len(data))})")
        return path
