#!filepath: chunkswap/pipeline/step.py
from __future__ import annotations

from chunkswap.pipeline.context import SwapContext
from chunkswap.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step 基类

    职责：
      1. orchestration（调用 engine / adapter，填写 ctx）
      2. 提供 Step 级时间边界（parent scope）

    规则：
      - Step 本身不进入 timeline
      - 计时发生在 Step 内部（leaf timer）
      - Step 行为不依赖 inst 是否存在
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def timed(self):
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: SwapContext) -> SwapContext:
        raise NotImplementedError
