from __future__ import annotations
from chunkswap.observability.instrumentation import Instrumentation


class BaseAdapter:
    """
    Adapter 的通用接口。

    - 持有 Instrumentation（可选）
    - 提供 timer() 方便在内部对关键区域计时
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst = inst

    def timer(self, name: str = ''):
        if not name:
            name = self.__class__.__name__
        if self.inst is None:
            return _NoOpTimer()
        return self.inst.timer(name)


class _NoOpTimer:
    """inst 为 None，则计时器为 no-op。"""
    def __enter__(self): pass
    def __exit__(self, exc_type, exc, tb): pass
