#!filepath: chunkswap/observability/metrics.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from chunkswap import logs


@dataclass
class SwapMetrics:
    """
    一次 chunk swap 的计数

    - input_length   : 原区域文件字节数（含旧布局里的空洞）
    - output_length  : 压缩后字节数
    - occupied_slots : 输出中非空槽位数
    - sectors_before : 被替换槽位原有的 sector 数
    - sectors_moved  : 从 replacement 搬来的 sector 数
    """

    input_length: int = 0
    output_length: int = 0
    occupied_slots: int = 0
    sectors_before: int = 0
    sectors_moved: int = 0

    @property
    def reclaimed_bytes(self) -> int:
        # 替换块比原块大时为负
        return self.input_length - self.output_length


class MetricRecorder:

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.swap = SwapMetrics()

    def record_substitution(self, sectors_before: int, sectors_moved: int) -> None:
        if not self.enabled:
            return
        self.swap.sectors_before = sectors_before
        self.swap.sectors_moved = sectors_moved
        logs.info(f"[Metric] sectors {sectors_before} -> {sectors_moved}")

    def record_region(self, input_length: int, output_length: int, occupied_slots: int) -> None:
        if not self.enabled:
            return
        self.swap.input_length = input_length
        self.swap.output_length = output_length
        self.swap.occupied_slots = occupied_slots
        logs.info(
            f"[Metric] output_length = {output_length}, occupied_slots = {occupied_slots}, "
            f"reclaimed_bytes = {self.swap.reclaimed_bytes}"
        )

    @property
    def metrics(self) -> Dict[str, int]:
        if not self.enabled:
            return {}
        return {**asdict(self.swap), "reclaimed_bytes": self.swap.reclaimed_bytes}
