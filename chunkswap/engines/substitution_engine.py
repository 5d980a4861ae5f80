#!filepath: chunkswap/engines/substitution_engine.py
from __future__ import annotations

from chunkswap import logs
from chunkswap.engines.chunk_table import ChunkTable


class SubstitutionEngine:
    """
    SubstitutionEngine（纯逻辑）：

    把 source 表中 (local_x, local_y) 槽位的 payload_ref + sector_count
    搬到 target 表的同一槽位。

    约束：
        - 只改一个槽位
        - target 的 timestamp 保持不变（只搬空间内容，不搬时间元数据）
        - source 槽位为空时照样覆盖（target 槽位会被清空），只打 warning
    """

    def apply(self, target: ChunkTable, source: ChunkTable, local_x: int, local_y: int) -> int:
        index = ChunkTable.index_of(local_x, local_y)

        dst = target.slots[index]
        src = source.slots[index]

        if src.is_empty and not dst.is_empty:
            logs.warning(
                f"[Substitution] slot ({local_x}, {local_y}) is empty in replacement, "
                f"clearing {dst.sector_count} sectors"
            )

        dst.payload_ref = src.payload_ref
        dst.sector_count = src.sector_count

        logs.info(
            f"[Substitution] slot ({local_x}, {local_y}) index={index} "
            f"sectors={dst.sector_count}"
        )
        return index
