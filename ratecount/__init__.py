#!filepath: ratecount/__init__.py

from .utils.logger import Logging, logs
from .utils.datetime_utils import DateTimeUtils
from .utils.errors import UserInputError, CounterConfigError, UnknownCounterOption
from .config.app_config import AppConfig
from .config.counter_config import CounterConfig, Direction
from .observability.display import DisplayGate, default_gate, run_without_display
from .observability.counter import Counter

__version__ = "0.1.0"

datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "CounterConfig", "Direction",
    "Counter",
    "DisplayGate", "default_gate", "run_without_display",
    "UserInputError", "CounterConfigError", "UnknownCounterOption",
    "datetime_utils",
]
