#!filepath: tests/base_test/test_counter_config.py
import pytest

from ratecount.config.counter_config import CounterConfig, Direction
from ratecount.utils.errors import (
    CounterConfigError,
    InvalidOptionValue,
    MissingOptionValue,
    UnknownCounterOption,
    UserInputError,
)


def test_defaults():
    cfg = CounterConfig.from_directives()
    assert cfg.label == "counter"
    assert cfg.emit_every_n == 0
    assert cfg.min_interval_seconds == 5
    assert cfg.show_rate_per_second is False
    assert cfg.expected == 0
    assert cfg.show_title is True
    assert cfg.average_window == 5
    assert cfg.show_duration is True
    assert cfg.show_absolute_date is False
    assert cfg.direction == Direction.FORWARD


def test_inline_and_positional_values():
    cfg = CounterConfig.from_directives("display", "scan", "expect", 100, "mod=10", "wait", "2.5")
    assert cfg.label == "scan"
    assert cfg.expected == 100
    assert cfg.emit_every_n == 10
    assert cfg.min_interval_seconds == 2.5


@pytest.mark.parametrize(
    "directives, field, value",
    [
        (("disp=x",), "label", "x"),
        (("avg=3",), "average_window", 3),
        (("average", 7), "average_window", 7),
        (("backwards",), "direction", Direction.BACKWARD),
        (("down",), "direction", Direction.BACKWARD),
        (("persec",), "show_rate_per_second", True),
        (("expected=42",), "expected", 42),
        (("expecting", "9"), "expected", 9),
        (("date",), "show_absolute_date", True),
        (("date", "nodate"), "show_absolute_date", False),
        (("nohms",), "show_duration", False),
        (("nohms", "hms"), "show_duration", True),
    ],
)
def test_aliases_and_toggles(directives, field, value):
    cfg = CounterConfig.from_directives(*directives)
    assert getattr(cfg, field) == value


def test_later_directive_wins():
    cfg = CounterConfig.from_directives("display=a", "display=b")
    assert cfg.label == "b"


def test_unknown_option():
    with pytest.raises(UnknownCounterOption) as exc:
        CounterConfig.from_directives("display=x", "foo=bar")

    assert exc.value.directive == "foo=bar"
    assert str(exc.value) == "Unknown counter option: foo=bar"
    assert isinstance(exc.value, CounterConfigError)
    assert isinstance(exc.value, UserInputError)


def test_non_string_key_is_unknown():
    with pytest.raises(UnknownCounterOption):
        CounterConfig.from_directives(5)


def test_missing_value():
    with pytest.raises(MissingOptionValue, match="mod needs an argument"):
        CounterConfig.from_directives("mod")


@pytest.mark.parametrize("directives", [("mod=abc",), ("expect", "lots"), ("avg=0",), ("mod=-1",)])
def test_invalid_value(directives):
    with pytest.raises(InvalidOptionValue):
        CounterConfig.from_directives(*directives)


def test_overrides():
    cfg = CounterConfig.from_directives("display=x", show_title=False)
    assert cfg.show_title is False


def test_direct_construction_rejects_unknown_field():
    with pytest.raises(ValueError):
        CounterConfig(bogus=1)
