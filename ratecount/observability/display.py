#!filepath: ratecount/observability/display.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


class DisplayGate:
    """
    输出闸门：counter 每次 emit 前检查 `open`。

    suppressed() 作用域内关闭闸门，退出（正常返回或异常）时恢复原状态，
    可嵌套。
    """

    def __init__(self, open: bool = True):
        self.open = open

    @contextmanager
    def suppressed(self):
        previous = self.open
        self.open = False
        try:
            yield self
        finally:
            self.open = previous


# 默认 gate：未显式传 gate 的 counter 共用
default_gate = DisplayGate()


def run_without_display(func: Callable[[], T], gate: Optional[DisplayGate] = None) -> T:
    """在关闭输出的作用域内执行 func()，返回其结果。"""
    if gate is None:
        gate = default_gate
    with gate.suppressed():
        return func()
