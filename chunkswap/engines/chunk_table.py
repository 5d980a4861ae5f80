#!filepath: chunkswap/engines/chunk_table.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from chunkswap.engines.codec import decode3
from chunkswap.engines.layout import (
    ENTRY_SIZE,
    HEADER_SIZE,
    LOCATION_TABLE_OFFSET,
    REGION_WIDTH,
    SECTOR_SIZE,
    SLOT_COUNT,
    TIMESTAMP_TABLE_OFFSET,
)
from chunkswap.utils.errors import BufferTooShort, RegionFormatError


@dataclass(frozen=True, slots=True)
class PayloadRef:
    """
    借用视图：指向调用方输入 buffer 的某个字节偏移。

    长度不在 load 时固定，由 sector_count * 4096 在拷贝时解析。
    buffer 必须在整个 pipeline 期间保持有效且不被修改。
    """

    buffer: memoryview
    offset: int

    def view(self, sector_count: int) -> memoryview:
        end = self.offset + sector_count * SECTOR_SIZE
        if end > len(self.buffer):
            raise BufferTooShort(end, len(self.buffer), what="payload buffer")
        return self.buffer[self.offset:end]


@dataclass(slots=True)
class ChunkSlot:
    payload_ref: Optional[PayloadRef]
    sector_count: int
    # 4 字节原样保留，不做任何数值解释
    timestamp: bytes

    @property
    def is_empty(self) -> bool:
        return self.sector_count == 0

    def payload(self) -> memoryview:
        if self.is_empty:
            return memoryview(b"")
        if self.payload_ref is None:
            raise RegionFormatError(
                f"slot claims {self.sector_count} sectors but has no payload reference"
            )
        return self.payload_ref.view(self.sector_count)


class ChunkTable:
    """
    ChunkTable（一个区域文件的 1024 个槽位）

    - 索引 = local_y * 32 + local_x
    - 长度恒为 1024
    - 只通过 load() 构造；槽位只由 SubstitutionEngine 修改
    """

    def __init__(self, slots: List[ChunkSlot]):
        if len(slots) != SLOT_COUNT:
            raise ValueError(f"a region holds exactly {SLOT_COUNT} slots, got {len(slots)}")
        self.slots = slots

    # --------------------------------------------------
    @classmethod
    def load(cls, buffer) -> "ChunkTable":
        """
        从区域文件字节解析出 ChunkTable（不拷贝 payload）。

        Raises
        ------
        BufferTooShort
            buffer 不足 8192 字节头部，或某个非空槽位声明的
            (offset + sectors) * 4096 超出 buffer 长度。
        """
        view = memoryview(buffer)
        size = len(view)
        if size < HEADER_SIZE:
            raise BufferTooShort(HEADER_SIZE, size, what="region header")

        slots: List[ChunkSlot] = []
        for index in range(SLOT_COUNT):
            entry = LOCATION_TABLE_OFFSET + index * ENTRY_SIZE
            sector_offset = decode3(view, entry)
            sector_count = view[entry + 3]

            ts_at = TIMESTAMP_TABLE_OFFSET + index * ENTRY_SIZE
            timestamp = bytes(view[ts_at:ts_at + ENTRY_SIZE])

            ref = None
            if sector_count:
                end = (sector_offset + sector_count) * SECTOR_SIZE
                if end > size:
                    raise BufferTooShort(end, size, what=f"region payload (slot {index})")
                ref = PayloadRef(view, sector_offset * SECTOR_SIZE)

            slots.append(ChunkSlot(ref, sector_count, timestamp))

        return cls(slots)

    # --------------------------------------------------
    @staticmethod
    def index_of(local_x: int, local_y: int) -> int:
        if not (0 <= local_x < REGION_WIDTH and 0 <= local_y < REGION_WIDTH):
            raise IndexError(f"local position out of region: ({local_x}, {local_y})")
        return local_y * REGION_WIDTH + local_x

    def slot(self, local_x: int, local_y: int) -> ChunkSlot:
        return self.slots[self.index_of(local_x, local_y)]

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> ChunkSlot:
        return self.slots[index]

    def __iter__(self) -> Iterator[ChunkSlot]:
        return iter(self.slots)

    @property
    def total_sectors(self) -> int:
        return sum(s.sector_count for s in self.slots)

    @property
    def occupied_count(self) -> int:
        return sum(1 for s in self.slots if not s.is_empty)
