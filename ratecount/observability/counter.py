#!filepath: ratecount/observability/counter.py
from __future__ import annotations

import math
from typing import Any, Optional

from ratecount import logs
from ratecount.config.counter_config import CounterConfig, Direction
from ratecount.observability.clock import default_clock
from ratecount.observability.display import DisplayGate, default_gate
from ratecount.observability.rate_window import RateWindow
from ratecount.observability.sinks import StreamSink
from ratecount.utils.datetime_utils import DateTimeUtils

TITLE_FMT = "\x1b]2;{label} {count}\x07"


class Counter:
    """
    进度 / 吞吐计数器。

    每次 advance()：
    1. 判断是否第一次采样（FORWARD: count == 0；BACKWARD: count == expected）
    2. 按 emit_every_n（计数节流）或 min_interval_seconds（时间节流）决定是否输出
    3. 输出时：记录 (progress, elapsed) 样本 → 平均速率 → ETA → 状态行
    4. count ±1

    count 只由 counter 自己修改。
    """

    def __init__(
        self,
        config: Optional[CounterConfig] = None,
        *,
        clock=None,
        line_sink=None,
        title_sink=None,
        gate: Optional[DisplayGate] = None,
        float_precision: int = 2,
    ):
        self.config = config or CounterConfig()
        self.clock = clock or default_clock
        self.line_sink = line_sink or StreamSink()
        # 未指定 title_sink 时与状态行共用同一个输出
        self.title_sink = title_sink or self.line_sink
        self.gate = gate or default_gate
        self.float_precision = float_precision

        self.history = RateWindow(self.config.average_window)
        # hms 剩余 > 1h 时会被打开，之后保持
        self.show_absolute_date = self.config.show_absolute_date

        self._count = self.config.expected if self.backward else 0
        self.start_time: Optional[float] = None
        self.next_scheduled_emit = 0.0
        self.finished = False

        # 最近一次输出时的估计值
        self.rate: Optional[float] = None
        self.projected_finish: Optional[float] = None
        self.lines_written = 0

        logs.debug(f"[Counter] created {self.label!r} expected={self.expected} {self.direction.value}")

    @classmethod
    def from_directives(cls, *directives: Any, **kwargs) -> "Counter":
        """
        Counter.from_directives("display=scan", "expect", 100, "mod=10")

        未知指令抛 UnknownCounterOption（构造前失败，不返回 counter）。
        """
        return cls(CounterConfig.from_directives(*directives), **kwargs)

    # ------------------------------------------------------------------
    # 只读视图
    # ------------------------------------------------------------------
    @property
    def count(self) -> int:
        return self._count

    @property
    def label(self) -> str:
        return self.config.label

    @property
    def expected(self) -> int:
        return self.config.expected

    @property
    def direction(self) -> Direction:
        return self.config.direction

    @property
    def backward(self) -> bool:
        return self.config.direction == Direction.BACKWARD

    @property
    def _step(self) -> int:
        return -1 if self.backward else 1

    # ------------------------------------------------------------------
    # 公开操作
    # ------------------------------------------------------------------
    def advance(self) -> None:
        self._tick()
        self._count += self._step

    def advance_by(self, n: int) -> None:
        """一次输出检查，净变化 n 个单位（沿配置方向）"""
        self.advance()
        self._count += self._step * (n - 1)

    def retreat_by(self, n: int) -> None:
        """一次输出检查，净变化 n 个单位（逆配置方向）"""
        self.advance()
        self._count -= self._step * (n + 1)

    def finish(self) -> None:
        self.finished = True
        self.advance()
        logs.debug(f"[Counter] {self.label!r} finished at {self._count}")

    def dump(self) -> str:
        text = (
            f"DISPLAY={{{self.label}}} <mod={self.config.emit_every_n} "
            f"wait={self.config.min_interval_seconds}> "
            f"{'persec' if self.config.show_rate_per_second else '!persec'} "
            f"c={self._count} expect={self.expected}\n"
            f"t={self.start_time} nt={self.next_scheduled_emit}\n"
            f"{'title' if self.config.show_title else '!title'} "
            f"{'finished' if self.finished else '!finished'}"
        )
        logs.debug(f"[Counter] {text}")
        return text

    # ------------------------------------------------------------------
    # tick 内部
    # ------------------------------------------------------------------
    def _is_first_sample(self) -> bool:
        return self._count == (self.expected if self.backward else 0)

    def _completed(self) -> int:
        return self.expected - self._count if self.backward else self._count

    def _remaining(self) -> int:
        return self._count if self.backward else self.expected - self._count

    def _should_emit(self) -> bool:
        cfg = self.config
        if self.finished:
            return True
        if cfg.emit_every_n:
            return self._count % cfg.emit_every_n == 0
        return self.clock.now() > self.next_scheduled_emit

    def _tick(self) -> None:
        cfg = self.config
        first_sample = self._is_first_sample()
        if self.start_time is None and first_sample:
            self.start_time = self.clock.now()

        if not (self._should_emit() and cfg.label):
            return

        now = self.clock.now()
        elapsed = now - self.start_time

        if (
            not self.finished
            and not first_sample
            and (self.expected or cfg.show_rate_per_second)
            and elapsed > 0
        ):
            self.history.push(self._completed(), elapsed)

        self.rate = self.history.rate()
        self.projected_finish = None
        if self.expected and self.rate is not None:
            eta = self._remaining() / self.rate
            self.projected_finish = self.start_time + elapsed + eta

        if self.gate.open:
            if cfg.show_title:
                self.title_sink.write(TITLE_FMT.format(label=cfg.label, count=self._count))
            self.line_sink.write(self.status_line(now, elapsed) + "\n")
            self.lines_written += 1

        if not cfg.emit_every_n:
            self.next_scheduled_emit = self._next_boundary(elapsed)

    def _next_boundary(self, elapsed: float) -> float:
        wait = self.config.min_interval_seconds
        if wait <= 0:
            return self.start_time + elapsed
        return self.start_time + wait * (1 + math.floor(elapsed / wait))

    # ------------------------------------------------------------------
    # 状态行格式
    # ------------------------------------------------------------------
    def status_line(self, now: float, elapsed: float) -> str:
        """
        <label> <count>[/<expected>] -- <elapsed> <since_start> [rate] [eta]
        """
        cfg = self.config
        progress = str(self._count)
        if self.expected:
            progress += f"/{self.expected}"

        parts = [
            cfg.label,
            progress,
            "--",
            str(int(elapsed)),
            f"{self.clock.since_start(now):.{self.float_precision}f}",
        ]

        if cfg.show_rate_per_second and self.rate is not None:
            if self.rate > 0.8:
                parts.append(f"[{self.rate:.2f}/sec]")
            else:
                parts.append(f"[{1 / self.rate:.2f} seconds per]")

        if (
            self.projected_finish is not None
            and (cfg.show_duration or self.show_absolute_date)
        ):
            parts.append(self._eta_field(now))

        return " ".join(parts)

    def _eta_field(self, now: float) -> str:
        duration = ""
        if self.config.show_duration:
            left = self.projected_finish - now
            if math.isfinite(left) and left > 3600:
                self.show_absolute_date = True
            duration = DateTimeUtils.format_duration(left)

        date = ""
        if self.show_absolute_date:
            date = DateTimeUtils.format_local(self.projected_finish)

        return DateTimeUtils.eta_bracket(duration, date)
