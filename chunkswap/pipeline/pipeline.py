#!filepath: chunkswap/pipeline/pipeline.py
from __future__ import annotations

from pathlib import Path

from chunkswap.pipeline.context import SwapContext
from chunkswap.pipeline.step import PipelineStep
from chunkswap import logs
from chunkswap.observability.instrumentation import Instrumentation, NoOpInstrumentation


class SwapPipeline:
    """
    SwapPipeline = 调度器

    - Pipeline 负责 orchestration（顺序 / 上下文）
    - Pipeline 不负责任何 Step 级计时
    """

    def __init__(
            self,
            steps: list[PipelineStep],
            inst: Instrumentation | NoOpInstrumentation,
            output_dir: str | Path = "output",
            region_ext: str = "mca",
    ):
        self.steps = steps
        self.inst = inst
        self.output_dir = Path(output_dir)
        self.region_ext = region_ext

    def run(
            self,
            original_dir: str | Path,
            replacement_dir: str | Path,
            world_x: int,
            world_y: int,
    ) -> SwapContext:
        ctx = SwapContext(
            original_dir=Path(original_dir),
            replacement_dir=Path(replacement_dir),
            output_dir=self.output_dir,
            world_x=world_x,
            world_y=world_y,
            region_ext=self.region_ext,
        )

        logs.info(f"[Pipeline] ====== START {ctx.label} ======")

        for step in self.steps:
            ctx = step.run(ctx)

        self.inst.generate_timeline_report(ctx.position)
        logs.info(f"[Pipeline] ====== DONE {ctx.label} -> {ctx.output_file} ======")

        return ctx
