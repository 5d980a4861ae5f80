from .chunk_table import ChunkSlot, ChunkTable, PayloadRef
from .chunk_swap_engine import ChunkSwapEngine, SwapRequest, SwapResult, swap_chunk
from .codec import decode3, encode3
from .coordinate_resolver import CoordinateResolver, Position, floor_div, floor_mod
from .region_serializer import RegionSerializer
from .substitution_engine import SubstitutionEngine

__all__ = [
    "ChunkSlot", "ChunkTable", "PayloadRef",
    "ChunkSwapEngine", "SwapRequest", "SwapResult", "swap_chunk",
    "decode3", "encode3",
    "CoordinateResolver", "Position", "floor_div", "floor_mod",
    "RegionSerializer",
    "SubstitutionEngine",
]
