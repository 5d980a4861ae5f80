#!filepath: chunkswap/steps/substitute_chunk_step.py
from __future__ import annotations

from chunkswap.engines.chunk_swap_engine import ChunkSwapEngine
from chunkswap.pipeline.context import SwapContext
from chunkswap.pipeline.step import PipelineStep


class SubstituteChunkStep(PipelineStep):

    def __init__(self, engine: ChunkSwapEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: SwapContext) -> SwapContext:
        with self.timed():
            pos = ctx.position
            before = ctx.source_table[pos.index].sector_count

            with self.inst.timer("substitute_chunk"):
                index = self.engine.substitute(ctx.source_table, ctx.replacement_table, pos)

            self.inst.metrics.record_substitution(
                sectors_before=before,
                sectors_moved=ctx.source_table[index].sector_count,
            )
        return ctx
