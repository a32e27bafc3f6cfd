#!filepath: ratecount/observability/rate_window.py
from __future__ import annotations

import math
from typing import Iterator, List, Optional, Tuple

Sample = Tuple[int, float]


class RateWindow:
    """
    固定容量环形缓冲：保存最近 capacity 个 (progress, elapsed) 样本。
    写满后覆盖最旧的样本。
    """

    def __init__(self, capacity: int = 5):
        if capacity < 1:
            raise ValueError(f"RateWindow capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[Sample]] = [None] * capacity
        self._cursor = 0
        self._fill = 0

    def __len__(self) -> int:
        return self._fill

    def push(self, progress: int, elapsed: float) -> None:
        self._slots[self._cursor] = (progress, elapsed)
        self._cursor = (self._cursor + 1) % self.capacity
        self._fill = min(self._fill + 1, self.capacity)

    def __iter__(self) -> Iterator[Sample]:
        """newest → oldest"""
        for i in range(self._fill):
            yield self._slots[(self._cursor - 1 - i) % self.capacity]

    def rate(self) -> Optional[float]:
        """
        mean(progress) / mean(elapsed)（不是 per-sample rate 的平均）。
        空窗口返回 None；0 / 负数 / 非有限值统一钳到 1.0。
        """
        if not self._fill:
            return None
        progress = sum(p for p, _ in self) / self._fill
        elapsed = sum(t for _, t in self) / self._fill
        try:
            rate = progress / elapsed
        except ZeroDivisionError:
            return 1.0
        if not math.isfinite(rate) or rate <= 0:
            return 1.0
        return rate
