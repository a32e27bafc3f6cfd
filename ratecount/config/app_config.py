#!filepath: ratecount/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .display_config import DisplayConfig
from .log_config import LogConfig

ENV_PREFIX = "RATECOUNT_"
_TRUE = {"1", "true", "yes", "on"}


def package_root() -> str:
    """
    ratecount/config/app_config.py → ratecount/config → ratecount
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Optional[str] = None, env_file: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 ratecount/config/base.yml
        - RATECOUNT_QUIET / RATECOUNT_LOG_LEVEL / RATECOUNT_LOG_DIR 覆盖 YAML
        """
        # 1) 先加载 .env（默认当前工作目录），不覆盖已有环境变量
        load_dotenv(env_file or os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 环境变量覆盖
        log = dict(raw.get("log") or {})
        display = dict(raw.get("display") or {})

        quiet = os.getenv(f"{ENV_PREFIX}QUIET")
        if quiet is not None:
            display["quiet"] = quiet.strip().lower() in _TRUE
        level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            log["level"] = level.upper()
        log_dir = os.getenv(f"{ENV_PREFIX}LOG_DIR")
        if log_dir:
            log["dir"] = log_dir

        raw["log"] = log
        raw["display"] = display
        return cls(**raw)
