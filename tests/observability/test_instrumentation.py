#!filepath: tests/observability/test_instrumentation.py

import time
from chunkswap.engines.coordinate_resolver import CoordinateResolver
from chunkswap.observability.instrumentation import Instrumentation, NoOpInstrumentation

from loguru import logger


def test_instrumentation_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("load_chunk_tables"):
        time.sleep(0.01)

    assert "load_chunk_tables" in inst.timeline
    assert inst.timeline["load_chunk_tables"] > 0


def test_parent_scope_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("StoreRegionStep", record=False):
        with inst.timer("store_chunks"):
            pass

    assert list(inst.timeline) == ["store_chunks"]


def test_repeated_leaf_accumulates():
    inst = Instrumentation(enabled=True)

    with inst.timer("read"):
        time.sleep(0.005)
    first = inst.timeline["read"]
    with inst.timer("read"):
        time.sleep(0.005)

    assert list(inst.timeline) == ["read"]
    assert inst.timeline["read"] > first


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("store_chunks"):
        pass
    inst.metrics.record_region(input_length=1, output_length=1, occupied_slots=1)

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("anything"):
        pass

    inst.metrics.record_substitution(sectors_before=1, sectors_moved=2)
    assert inst.metrics.metrics == {}
    inst.generate_timeline_report(None)


def test_generate_timeline_report():
    inst = Instrumentation(enabled=True)

    with inst.timer("phase_X"):
        time.sleep(0.005)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    inst.generate_timeline_report(CoordinateResolver().resolve(-1, -1))

    logger.remove(sink_id)

    output = "\n".join(captured)

    assert "phase_X" in output
    assert "region (-1, -1) slot 1023" in output
    assert "world (-1, -1)" in output
