#!filepath: ratecount/config/__init__.py
from .app_config import AppConfig
from .counter_config import CounterConfig, Direction
from .display_config import DisplayConfig, SinkKind
from .log_config import LogConfig

__all__ = ["AppConfig", "CounterConfig", "Direction", "DisplayConfig", "SinkKind", "LogConfig"]
