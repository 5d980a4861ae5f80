#!filepath: chunkswap/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


InEvent = TypeVar("InEvent")
OutEvent = TypeVar("OutEvent")


class BaseEngine(ABC, Generic[InEvent, OutEvent]):
    """
    Engine 抽象基类（Atomic Engine Layer）：

    - 不做任何 I/O（不读写文件 / 目录）
    - 专注“输入 → 输出”的纯逻辑
    - 可被 pipeline step 或直接调用方复用
    """

    @abstractmethod
    def process(self, event: InEvent) -> OutEvent:
        """
        处理单个请求（最小粒度单位）。
        """
        raise NotImplementedError

