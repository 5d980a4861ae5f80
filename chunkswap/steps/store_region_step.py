#!filepath: chunkswap/steps/store_region_step.py
from __future__ import annotations

from chunkswap import logs
from chunkswap.adapters.region_file_adapter import RegionFileAdapter
from chunkswap.engines.chunk_swap_engine import ChunkSwapEngine
from chunkswap.pipeline.context import SwapContext
from chunkswap.pipeline.step import PipelineStep


class StoreRegionStep(PipelineStep):
    """
    StoreRegionStep

    1. 计算压缩后长度 (2 + Σ sectors) * 4096
    2. 分配输出 buffer，serializer 独占写入
    3. 原子写出到 output/r.<rx>.<ry>.<ext>
    """

    def __init__(self, engine: ChunkSwapEngine, adapter: RegionFileAdapter, inst=None):
        super().__init__(inst)
        self.engine = engine
        self.adapter = adapter

    def run(self, ctx: SwapContext) -> SwapContext:
        with self.timed():
            table = ctx.source_table

            length = self.engine.required_length(table)
            logs.info(f"[{self.step_name}] counted region file size {length}")

            buffer = bytearray(length)
            with self.inst.timer("store_chunks"):
                ctx.output_length = self.engine.store_into(table, buffer)

            self.adapter.write(ctx.output_file, buffer)

            self.inst.metrics.record_region(
                input_length=len(ctx.source_bytes),
                output_length=ctx.output_length,
                occupied_slots=table.occupied_count,
            )
        return ctx
