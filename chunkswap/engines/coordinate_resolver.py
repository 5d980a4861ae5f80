#!filepath: chunkswap/engines/coordinate_resolver.py
from __future__ import annotations

from dataclasses import dataclass

from chunkswap.engines.layout import BLOCKS_PER_CHUNK, REGION_WIDTH


def floor_div(a: int, b: int) -> int:
    """向负无穷取整的除法（b > 0）：floor_div(-1, 16) == -1"""
    assert b > 0
    return a // b


def floor_mod(a: int, b: int) -> int:
    """a - b * floor_div(a, b)，结果总在 [0, b)"""
    return a - b * floor_div(a, b)


@dataclass(frozen=True, slots=True)
class Position:
    world_x: int
    world_y: int
    chunk_x: int
    chunk_y: int
    region_x: int
    region_y: int
    local_x: int
    local_y: int

    @property
    def index(self) -> int:
        return self.local_y * REGION_WIDTH + self.local_x


class CoordinateResolver:
    """
    世界坐标 → (chunk, region, local slot)

    两级都用 floor 语义；截断取模会让负坐标的 local 变成负数。
    """

    def __init__(self, blocks_per_chunk: int = BLOCKS_PER_CHUNK, region_width: int = REGION_WIDTH):
        self.blocks_per_chunk = blocks_per_chunk
        self.region_width = region_width

    def resolve(self, world_x: int, world_y: int) -> Position:
        chunk_x = floor_div(world_x, self.blocks_per_chunk)
        chunk_y = floor_div(world_y, self.blocks_per_chunk)

        return Position(
            world_x=world_x,
            world_y=world_y,
            chunk_x=chunk_x,
            chunk_y=chunk_y,
            region_x=floor_div(chunk_x, self.region_width),
            region_y=floor_div(chunk_y, self.region_width),
            local_x=floor_mod(chunk_x, self.region_width),
            local_y=floor_mod(chunk_y, self.region_width),
        )
