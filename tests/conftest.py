# tests/conftest.py
from __future__ import annotations

from typing import Dict, Optional

import pytest
from loguru import logger

from chunkswap.engines.layout import (
    HEADER_SECTORS,
    HEADER_SIZE,
    SECTOR_SIZE,
    TIMESTAMP_TABLE_OFFSET,
)
from chunkswap.utils.path import PathManager


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def reset_path_root():
    yield
    PathManager.set_root(None)


def build_region(
        chunks: Optional[Dict[int, bytes]] = None,
        timestamps: Optional[Dict[int, bytes]] = None,
        gap_sectors: int = 0,
) -> bytes:
    """
    构造区域文件字节（不经过被测 codec，直接 int.to_bytes）。

    chunks:      slot index -> payload（长度为 4096 的整数倍）
    timestamps:  slot index -> 4 字节
    gap_sectors: 每个 chunk 前插入的空 sector 数（模拟碎片化布局）
    """
    chunks = chunks or {}
    timestamps = timestamps or {}

    header = bytearray(HEADER_SIZE)
    body = bytearray()
    cursor = HEADER_SECTORS

    for index in sorted(chunks):
        payload = chunks[index]
        assert len(payload) % SECTOR_SIZE == 0
        sectors = len(payload) // SECTOR_SIZE

        body += bytes(gap_sectors * SECTOR_SIZE)
        cursor += gap_sectors

        header[index * 4:index * 4 + 3] = cursor.to_bytes(3, "big")
        header[index * 4 + 3] = sectors

        body += payload
        cursor += sectors

    for index, ts in timestamps.items():
        at = TIMESTAMP_TABLE_OFFSET + index * 4
        header[at:at + 4] = ts

    return bytes(header + body)


def make_payload(tag: int, sectors: int) -> bytes:
    """每个 sector 以 (tag, sector_no) 开头，便于比对搬运是否正确"""
    out = bytearray()
    for n in range(sectors):
        sector = bytearray([tag & 0xFF]) * SECTOR_SIZE
        sector[1] = n & 0xFF
        out += sector
    return bytes(out)


@pytest.fixture
def make_region():
    return build_region


@pytest.fixture
def payload():
    return make_payload


@pytest.fixture
def empty_region() -> bytes:
    return bytes(HEADER_SIZE)
