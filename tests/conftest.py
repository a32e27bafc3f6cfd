# tests/conftest.py
from __future__ import annotations

from typing import List

import pytest
from loguru import logger

from ratecount.observability.display import DisplayGate


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


class FakeClock:
    """手动推进的时钟：now() 不会自己走。"""

    def __init__(self, start: float = 1_000_000.0):
        self.started = start
        self.t = start

    def now(self) -> float:
        return self.t

    def since_start(self, now=None) -> float:
        return (self.t if now is None else now) - self.started

    def advance(self, seconds: float) -> None:
        self.t += seconds


class ListSink:
    def __init__(self):
        self.writes: List[str] = []

    def write(self, text: str) -> None:
        self.writes.append(text)

    @property
    def lines(self) -> List[str]:
        return [w.rstrip("\n") for w in self.writes]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def title_sink() -> ListSink:
    return ListSink()


@pytest.fixture
def gate() -> DisplayGate:
    return DisplayGate()


@pytest.fixture
def make_counter(clock, sink, title_sink, gate):
    """
    Factory fixture：用假时钟 + 内存 sink 构造 Counter。

        c = make_counter("display=scan", "expect", 100, "mod=10")
    """
    from ratecount.observability.counter import Counter

    def _make(*directives, **kwargs):
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("line_sink", sink)
        kwargs.setdefault("title_sink", title_sink)
        kwargs.setdefault("gate", gate)
        return Counter.from_directives(*directives, **kwargs)

    return _make
