#!filepath: chunkswap/observability/timeline_reporter.py
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from chunkswap import logs

if TYPE_CHECKING:
    from chunkswap.engines.coordinate_resolver import Position


class TimelineReporter:
    """
    单次 swap 的 timeline 报告：
    - 标题：region / 槽位 / 世界坐标
    - 每个叶子阶段：耗时 + 占比
    """

    def __init__(self, timeline: Dict[str, float], position: Optional["Position"] = None):
        self.timeline = timeline
        self.position = position

    def title(self) -> str:
        p = self.position
        if p is None:
            return "unresolved position"
        return (
            f"region ({p.region_x}, {p.region_y}) slot {p.index} "
            f"local ({p.local_x}, {p.local_y}) world ({p.world_x}, {p.world_y})"
        )

    def print(self):
        total = sum(self.timeline.values())

        logs.info(f"[Timeline] ===== {self.title()} =====")
        for name, sec in self.timeline.items():
            share = sec / total * 100 if total > 0 else 0.0
            logs.info(f"[Timeline] {name:<36} {sec:>8.4f}s {share:>5.1f}%")
        logs.info(f"[Timeline] {len(self.timeline)} stages, total {total:.4f}s")
