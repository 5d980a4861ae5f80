#!filepath: chunkswap/steps/load_regions_step.py
from __future__ import annotations

from chunkswap import logs
from chunkswap.adapters.region_file_adapter import RegionFileAdapter
from chunkswap.engines.chunk_swap_engine import ChunkSwapEngine
from chunkswap.pipeline.context import SwapContext
from chunkswap.pipeline.step import PipelineStep
from chunkswap.utils.errors import UserInputError


class LoadRegionsStep(PipelineStep):
    """
    读取 original / replacement 区域文件并解析成 ChunkTable。

    bytes 留在 ctx 上：ChunkTable 只借用，不拷贝 payload。
    """

    def __init__(self, engine: ChunkSwapEngine, adapter: RegionFileAdapter, inst=None):
        super().__init__(inst)
        self.engine = engine
        self.adapter = adapter

    def run(self, ctx: SwapContext) -> SwapContext:
        with self.timed():
            for label, directory in (
                    ("original", ctx.original_dir),
                    ("replacement", ctx.replacement_dir),
            ):
                if not directory.is_dir():
                    raise UserInputError(f"Cannot open {label} directory {directory}")

            ctx.source_bytes = self.adapter.read(ctx.source_file)
            ctx.replacement_bytes = self.adapter.read(ctx.replacement_file)

            with self.inst.timer("load_chunk_tables"):
                ctx.source_table, ctx.replacement_table = self.engine.load(
                    ctx.source_bytes, ctx.replacement_bytes
                )

            logs.info(
                f"[{self.step_name}] original: {ctx.source_table.occupied_count} chunks, "
                f"replacement: {ctx.replacement_table.occupied_count} chunks"
            )
        return ctx
