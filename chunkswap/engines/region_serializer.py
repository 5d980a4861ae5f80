#!filepath: chunkswap/engines/region_serializer.py
from __future__ import annotations

from typing import Tuple

from chunkswap.engines.chunk_table import ChunkTable
from chunkswap.engines.codec import encode3
from chunkswap.engines.layout import (
    ENTRY_SIZE,
    HEADER_SECTORS,
    LOCATION_TABLE_OFFSET,
    MAX_SECTOR_COUNT,
    SECTOR_SIZE,
    TIMESTAMP_TABLE_OFFSET,
)
from chunkswap.utils.errors import BufferTooShort, RegionFormatError, SectorCountOverflow


class RegionSerializer:
    """
    RegionSerializer（全量压缩写出）

    算法：
        cursor = 2（两个 4 KiB 头部块）
        for slot in 0..1023:
            location[slot] = cursor           # 空槽位同样写 cursor
            if sectors > 0:
                copy payload → cursor * 4096
                cursor += sectors
            count[slot] = sectors
            timestamp[slot] = 原样

    结果长度 = (2 + Σ sectors) * 4096，旧布局中的空洞全部丢弃。

    zero_empty_offsets=True 时空槽位 location 写 0。
    """

    def __init__(self, zero_empty_offsets: bool = False):
        self.zero_empty_offsets = zero_empty_offsets

    # --------------------------------------------------
    @staticmethod
    def validate(table: ChunkTable) -> None:
        for index, slot in enumerate(table.slots):
            if not 0 <= slot.sector_count <= MAX_SECTOR_COUNT:
                raise SectorCountOverflow(index, slot.sector_count)
            if slot.sector_count and slot.payload_ref is None:
                raise RegionFormatError(f"slot {index}: {slot.sector_count} sectors without payload")

    @staticmethod
    def required_length(table: ChunkTable) -> int:
        return (HEADER_SECTORS + table.total_sectors) * SECTOR_SIZE

    # --------------------------------------------------
    def store_into(self, table: ChunkTable, buffer) -> int:
        """
        写入调用方提供的可写 buffer（长度 >= required_length）。
        返回实际写入长度。
        """
        self.validate(table)

        length = self.required_length(table)
        out = memoryview(buffer)
        if len(out) < length:
            raise BufferTooShort(length, len(out), what="output buffer")

        cursor = HEADER_SECTORS
        for index, slot in enumerate(table.slots):
            entry = LOCATION_TABLE_OFFSET + index * ENTRY_SIZE

            if slot.sector_count:
                encode3(cursor, out, entry)
                start = cursor * SECTOR_SIZE
                payload = slot.payload()
                out[start:start + len(payload)] = payload
                cursor += slot.sector_count
            else:
                encode3(0 if self.zero_empty_offsets else cursor, out, entry)

            out[entry + 3] = slot.sector_count

            ts_at = TIMESTAMP_TABLE_OFFSET + index * ENTRY_SIZE
            out[ts_at:ts_at + ENTRY_SIZE] = slot.timestamp

        return length

    def store(self, table: ChunkTable) -> Tuple[bytes, int]:
        buffer = bytearray(self.required_length(table))
        length = self.store_into(table, buffer)
        return bytes(buffer), length
