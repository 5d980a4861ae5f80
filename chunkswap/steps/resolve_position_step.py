#!filepath: chunkswap/steps/resolve_position_step.py
from __future__ import annotations

from chunkswap import logs
from chunkswap.engines.chunk_swap_engine import ChunkSwapEngine
from chunkswap.pipeline.context import SwapContext
from chunkswap.pipeline.step import PipelineStep
from chunkswap.utils.path import PathManager


class ResolvePositionStep(PipelineStep):
    """
    世界坐标 → Position，并确定三个区域文件路径（同名 r.<rx>.<ry>.<ext>）。
    """

    def __init__(self, engine: ChunkSwapEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: SwapContext) -> SwapContext:
        with self.timed():
            pos = self.engine.resolve(ctx.world_x, ctx.world_y)

            ctx.position = pos
            ctx.source_file = PathManager.region_file(ctx.original_dir, pos, ctx.region_ext)
            ctx.replacement_file = PathManager.region_file(ctx.replacement_dir, pos, ctx.region_ext)
            ctx.output_file = PathManager.region_file(ctx.output_dir, pos, ctx.region_ext)

            logs.info(
                f"[{self.step_name}] world=({pos.world_x}, {pos.world_y}) "
                f"chunk=({pos.chunk_x}, {pos.chunk_y}) "
                f"region=({pos.region_x}, {pos.region_y}) "
                f"local=({pos.local_x}, {pos.local_y})"
            )
        return ctx
