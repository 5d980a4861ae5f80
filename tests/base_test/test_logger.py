#!filepath: tests/base_test/test_logger.py
import pytest
from loguru import logger

from chunkswap import logs, init_logging
from chunkswap.config.log_config import LogConfig


def test_catch_logs_and_reraises():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="ERROR")

    @logs.catch(msg="boom while storing")
    def fail():
        raise ValueError("bad slot")

    with pytest.raises(ValueError):
        fail()

    logger.remove(sink_id)

    output = "\n".join(captured)
    assert "[ERROR] fail: boom while storing" in output


def test_catch_returns_result():
    @logs.catch()
    def ok(a, b):
        return a + b

    assert ok(2, 3) == 5


def test_init_logging_writes_file(tmp_path):
    cfg = LogConfig(dir=str(tmp_path / "logs"), level="INFO", to_file=True)

    init_logging(cfg)
    logs.info("[Test] hello region")
    logger.remove()

    files = list((tmp_path / "logs").glob("*.log"))
    assert len(files) == 1
    assert "[Test] hello region" in files[0].read_text(encoding="utf-8")


def test_init_logging_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    init_logging(LogConfig(dir="logs", to_file=False))

    assert not (tmp_path / "logs").exists()
