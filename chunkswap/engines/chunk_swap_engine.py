#!filepath: chunkswap/engines/chunk_swap_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from chunkswap import logs
from chunkswap.engines.base import BaseEngine
from chunkswap.engines.chunk_table import ChunkTable
from chunkswap.engines.coordinate_resolver import CoordinateResolver, Position
from chunkswap.engines.region_serializer import RegionSerializer
from chunkswap.engines.substitution_engine import SubstitutionEngine


@dataclass(frozen=True, slots=True)
class SwapRequest:
    source: bytes | bytearray | memoryview
    replacement: bytes | bytearray | memoryview
    world_x: int
    world_y: int


@dataclass(frozen=True, slots=True)
class SwapResult:
    data: bytes
    length: int
    position: Position


class ChunkSwapEngine(BaseEngine[SwapRequest, SwapResult]):
    """
    ChunkSwapEngine（核心契约，纯内存）：

    Input:
        - source / replacement 区域文件字节
        - 世界坐标 (x, y)

    Output:
        - 压缩后的区域文件字节 + 长度
        - Position（调用方据此拼 r.<rx>.<ry>.<ext>）

    阶段：
        resolve → load → substitute → store
        process() 一次跑完；pipeline 的各 Step 逐个调用同样的阶段，
        以便在阶段之间插入文件 IO 和计时。

    约束：
        - 不做 IO
        - 不依赖 Path
    """

    def __init__(
            self,
            resolver: CoordinateResolver | None = None,
            substitution: SubstitutionEngine | None = None,
            serializer: RegionSerializer | None = None,
    ):
        self.resolver = resolver or CoordinateResolver()
        self.substitution = substitution or SubstitutionEngine()
        self.serializer = serializer or RegionSerializer()

    # ---------------- stages ----------------
    def resolve(self, world_x: int, world_y: int) -> Position:
        return self.resolver.resolve(world_x, world_y)

    def load(self, source, replacement) -> Tuple[ChunkTable, ChunkTable]:
        """两份都先完整解析，任一越界都在拷贝前失败"""
        return ChunkTable.load(source), ChunkTable.load(replacement)

    def substitute(self, target: ChunkTable, source: ChunkTable, position: Position) -> int:
        return self.substitution.apply(target, source, position.local_x, position.local_y)

    def required_length(self, table: ChunkTable) -> int:
        return self.serializer.required_length(table)

    def store_into(self, table: ChunkTable, buffer) -> int:
        return self.serializer.store_into(table, buffer)

    # ---------------- contract ----------------
    @logs.catch(msg="chunk swap failed")
    def process(self, event: SwapRequest) -> SwapResult:
        position = self.resolve(event.world_x, event.world_y)
        target, source = self.load(event.source, event.replacement)

        self.substitute(target, source, position)

        data, length = self.serializer.store(target)
        return SwapResult(data=data, length=length, position=position)


def swap_chunk(source, replacement, world_x: int, world_y: int) -> SwapResult:
    return ChunkSwapEngine().process(SwapRequest(source, replacement, world_x, world_y))
