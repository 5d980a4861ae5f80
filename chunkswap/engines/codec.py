#!filepath: chunkswap/engines/codec.py
from __future__ import annotations

U24_MAX = 0xFFFFFF


def decode3(buffer, offset: int) -> int:
    """
    读取 3 字节大端无符号整数（高位在前，零扩展）。

    前置条件 offset + 3 <= len(buffer) 属于调用方责任，只做 assert。
    """
    assert 0 <= offset and offset + 3 <= len(buffer), "decode3 out of range"
    return (buffer[offset] << 16) | (buffer[offset + 1] << 8) | buffer[offset + 2]


def encode3(value: int, buffer, offset: int) -> None:
    """
    写入 value 的低 24 位（大端），只触碰 buffer[offset:offset+3]。
    """
    assert 0 <= offset and offset + 3 <= len(buffer), "encode3 out of range"
    buffer[offset] = (value >> 16) & 0xFF
    buffer[offset + 1] = (value >> 8) & 0xFF
    buffer[offset + 2] = value & 0xFF

