#!filepath: chunkswap/workflows/chunk_swap_workflow.py
from __future__ import annotations

from chunkswap.pipeline.pipeline import SwapPipeline
from chunkswap.utils.path import PathManager
from chunkswap.config.app_config import AppConfig
from chunkswap.observability.instrumentation import Instrumentation, NoOpInstrumentation

from chunkswap.adapters.region_file_adapter import RegionFileAdapter

from chunkswap.engines.chunk_swap_engine import ChunkSwapEngine
from chunkswap.engines.region_serializer import RegionSerializer

from chunkswap.steps.resolve_position_step import ResolvePositionStep
from chunkswap.steps.load_regions_step import LoadRegionsStep
from chunkswap.steps.substitute_chunk_step import SubstituteChunkStep
from chunkswap.steps.store_region_step import StoreRegionStep


def build_chunk_swap_pipeline(cfg: AppConfig | None = None) -> SwapPipeline:
    """
    Chunk swap pipeline

    Order:
        ResolvePosition   (world x/y → chunk / region / local slot)
        → LoadRegions     (original + replacement → ChunkTable)
        → SubstituteChunk (one slot: payload + sector count)
        → StoreRegion     (compaction → output/r.<rx>.<ry>.<ext>)

    四个 Step 共用同一个 ChunkSwapEngine。
    """

    if cfg is None:
        cfg = AppConfig.load()
    swap_cfg = cfg.swap

    inst = Instrumentation() if swap_cfg.instrumentation else NoOpInstrumentation()
    adapter = RegionFileAdapter(inst=inst if swap_cfg.instrumentation else None)
    engine = ChunkSwapEngine(
        serializer=RegionSerializer(zero_empty_offsets=swap_cfg.zero_empty_offsets),
    )

    steps = [
        ResolvePositionStep(engine=engine, inst=inst),
        LoadRegionsStep(engine=engine, adapter=adapter, inst=inst),
        SubstituteChunkStep(engine=engine, inst=inst),
        StoreRegionStep(engine=engine, adapter=adapter, inst=inst),
    ]

    return SwapPipeline(
        steps=steps,
        inst=inst,
        output_dir=PathManager.output_dir(swap_cfg.output_dir),
        region_ext=swap_cfg.region_ext,
    )
