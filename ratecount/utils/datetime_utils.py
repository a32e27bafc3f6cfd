#!filepath: ratecount/utils/datetime_utils.py
from __future__ import annotations
import math
from datetime import datetime, tzinfo
from typing import List, Optional, Tuple


class DateTimeUtils:
    # None → 系统本地时区；测试里可以换成 ZoneInfo("UTC")
    LOCAL_TZ: Optional[tzinfo] = None

    DATE_FMT = "%Y/%m/%d@%H:%M:%S"
    DURATION_UNITS: List[Tuple[int, str]] = [
        (86400, "d"),
        (3600, "h"),
        (60, "m"),
        (1, "s"),
    ]

    # ================================================================
    # 日历转换：timestamp → 本地时间
    # ================================================================
    @classmethod
    def local_time(cls, ts: float) -> datetime:
        if cls.LOCAL_TZ is None:
            return datetime.fromtimestamp(ts)
        return datetime.fromtimestamp(ts, cls.LOCAL_TZ)

    @classmethod
    def format_local(cls, ts: float) -> str:
        """
        timestamp → 'YYYY/MM/DD@HH:MM:SS'
        超出 datetime 可表示范围（year > 9999、inf、nan）时返回空字符串。
        """
        if not math.isfinite(ts):
            return ""
        try:
            return cls.local_time(int(ts)).strftime(cls.DATE_FMT)
        except (OverflowError, OSError, ValueError):
            return ""

    # ================================================================
    # 时长拆分：秒 → [(value, suffix), ...]
    # ================================================================
    @classmethod
    def split_duration(cls, seconds: float) -> List[Tuple[int, str]]:
        """
        按 86400/3600/60/1 拆分剩余秒数，值为 0 的单位全部丢弃。
        负数 / 非有限值按 0 处理。
        """
        if not math.isfinite(seconds):
            return []
        left = max(0, int(seconds))
        parts: List[Tuple[int, str]] = []
        for size, suffix in cls.DURATION_UNITS:
            value, left = divmod(left, size)
            if value:
                parts.append((value, suffix))
        return parts

    @classmethod
    def format_duration(cls, seconds: float) -> str:
        """
        1:05s / 2:46:39s 形式，后缀只挂在最后一个单位上。

        >>> DateTimeUtils.format_duration(3605)
        '1:05s'
        """
        parts = cls.split_duration(seconds)
        if not parts:
            return ""
        head, *rest = parts
        text = str(head[0]) + "".join(f":{value:02d}" for value, _ in rest)
        return text + parts[-1][1]

    @staticmethod
    def eta_bracket(duration: str, date: str) -> str:
        if duration and date:
            return f"[{duration}->{date}]"
        return f"[->{duration or date}]"
