#!filepath: ratecount/observability/clock.py
import time
from typing import Optional


class SystemClock:
    """
    墙钟时间源
    - now()    → 当前时间（秒，float）
    - started  → 创建时刻，用作“进程启动后秒数”的基准
    """

    def __init__(self):
        self.started = time.time()

    def now(self) -> float:
        return time.time()

    def since_start(self, now: Optional[float] = None) -> float:
        if now is None:
            now = self.now()
        return now - self.started


# 模块导入时创建 ≈ 进程启动时间
default_clock = SystemClock()
