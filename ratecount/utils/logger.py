#!filepath: ratecount/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger


class Logging:
    """
    库级日志模块（loguru 封装）
    ---------------------------------------
    - stderr sink，级别可配置
    - 可选：按日期切割的文件日志 + 保留周期
    ---------------------------------------
    状态行（status line）不走这里，见 observability.sinks。
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        )

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,
                backtrace=True,
                diagnose=True,
            )

    def reconfigure(
        self,
        log_dir: Optional[str] = None,
        rotation: Optional[str] = None,
        retention: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "Logging":
        """按 LogConfig 重新配置全局 logger（CLI 启动时调用）"""
        self.log_dir = log_dir
        if rotation:
            self.rotation = rotation
        if retention:
            self.retention = retention
        if log_level:
            self.level = log_level
        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()
        return self

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    def log(self, level: str, msg: str, *args, **kwargs):
        logger.log(level, msg, *args, **kwargs)


# 默认全局 logs（CLI 会按配置 reconfigure）
logs = Logging()
