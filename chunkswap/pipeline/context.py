#!filepath: chunkswap/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from chunkswap.engines.chunk_table import ChunkTable
from chunkswap.engines.coordinate_resolver import Position


@dataclass
class SwapContext:
    """
    SwapContext = Pipeline 运行期唯一上下文

    设计原则：
    - Pipeline 负责构造
    - Step 只填自己那一段
    - 不放业务逻辑

    source_bytes / replacement_bytes 必须活到 StoreRegionStep 结束
    （ChunkTable 的 payload_ref 借用它们）。
    """

    # -------------------------
    # input
    # -------------------------
    original_dir: Path
    replacement_dir: Path
    output_dir: Path
    world_x: int
    world_y: int
    region_ext: str = "mca"

    # -------------------------
    # resolve
    # -------------------------
    position: Optional[Position] = None
    source_file: Optional[Path] = None
    replacement_file: Optional[Path] = None
    output_file: Optional[Path] = None

    # -------------------------
    # load
    # -------------------------
    source_bytes: Optional[bytes] = None
    replacement_bytes: Optional[bytes] = None
    source_table: Optional[ChunkTable] = None
    replacement_table: Optional[ChunkTable] = None

    # -------------------------
    # store
    # -------------------------
    output_length: Optional[int] = None

    @property
    def label(self) -> str:
        return f"({self.world_x}, {self.world_y})"
