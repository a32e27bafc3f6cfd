#!filepath: ratecount/config/counter_config.py
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ratecount.utils.errors import (
    InvalidOptionValue,
    MissingOptionValue,
    UnknownCounterOption,
)


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class CounterConfig(BaseModel):
    """
    计数器配置（全部可选项 + 默认值）。

    - label 为空字符串时完全不输出状态行
    - emit_every_n 非 0 时走计数节流，忽略 min_interval_seconds
    """

    model_config = ConfigDict(extra="forbid")

    label: str = "counter"
    expected: int = 0
    direction: Direction = Direction.FORWARD
    emit_every_n: int = Field(default=0, ge=0)
    min_interval_seconds: float = 5
    show_rate_per_second: bool = False
    show_duration: bool = True
    show_absolute_date: bool = False
    show_title: bool = True
    average_window: int = Field(default=5, ge=1)

    @classmethod
    def from_directives(cls, *directives: Any, **overrides) -> "CounterConfig":
        """
        按顺序解析配置指令：

            CounterConfig.from_directives("display=scan", "expect", 100, "mod=10")

        key 可以用 `key=value` 内联取值，否则取下一个位置参数。
        """
        fields: Dict[str, Any] = {}
        items = iter(directives)
        for item in items:
            if not isinstance(item, str):
                raise UnknownCounterOption(str(item))
            key, sep, inline = item.partition("=")
            target, convert = _lookup(key, item)
            if convert is None:
                fields.update(target)
                continue
            raw = inline if sep else _next_value(items, item)
            fields[target] = _convert(convert, raw, item)

        fields.update(overrides)
        try:
            return cls(**fields)
        except ValidationError as e:
            bad = e.errors()[0]
            name = str(bad["loc"][0]) if bad.get("loc") else "?"
            raise InvalidOptionValue(name, fields.get(name)) from e


# ------------------------------------------------------------------
# 指令表：key → (字段名, 转换函数) 或 (固定字段值, None)
# ------------------------------------------------------------------
_VALUE_KEYS: Dict[str, Tuple[str, Callable[[Any], Any]]] = {
    "display": ("label", str),
    "disp": ("label", str),
    "mod": ("emit_every_n", int),
    "wait": ("min_interval_seconds", float),
    "average": ("average_window", int),
    "avg": ("average_window", int),
}

_FLAG_KEYS: Dict[str, Dict[str, Any]] = {
    "down": {"direction": Direction.BACKWARD},
    "backwards": {"direction": Direction.BACKWARD},
    "persec": {"show_rate_per_second": True},
    "date": {"show_absolute_date": True},
    "nodate": {"show_absolute_date": False},
    "hms": {"show_duration": True},
    "nohms": {"show_duration": False},
}


def _lookup(key: str, directive: str):
    if key in _VALUE_KEYS:
        return _VALUE_KEYS[key]
    if key in _FLAG_KEYS:
        return _FLAG_KEYS[key], None
    # expect / expected / expecting ...
    if key.startswith("expect"):
        return "expected", int
    raise UnknownCounterOption(directive)


def _next_value(items: Iterator[Any], directive: str) -> Any:
    try:
        return next(items)
    except StopIteration:
        raise MissingOptionValue(directive) from None


def _convert(convert: Callable[[Any], Any], raw: Any, directive: str) -> Any:
    if raw is None:
        raise MissingOptionValue(directive)
    try:
        return convert(raw)
    except (TypeError, ValueError) as e:
        raise InvalidOptionValue(directive, raw) from e


