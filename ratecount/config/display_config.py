# ratecount/config/display_config.py
from enum import Enum

from pydantic import BaseModel, Field


class SinkKind(str, Enum):
    STDERR = "stderr"
    LOG = "log"


class DisplayConfig(BaseModel):
    quiet: bool = False
    float_precision: int = Field(default=2, ge=0)
    show_title: bool = True
    sink: SinkKind = SinkKind.STDERR
