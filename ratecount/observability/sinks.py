#!filepath: ratecount/observability/sinks.py
import sys
from typing import Optional, TextIO, Tuple

from ratecount import logs
from ratecount.config.display_config import DisplayConfig, SinkKind


class StreamSink:
    """
    状态行输出到文本流（默认 stderr）。
    quiet=True 时什么都不写。
    """

    def __init__(self, stream: Optional[TextIO] = None, quiet: bool = False):
        self.stream = stream
        self.quiet = quiet

    def write(self, text: str) -> None:
        if self.quiet:
            return
        # 延迟取 sys.stderr，方便 pytest capsys 替换
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(text)
        stream.flush()


class LogSink:
    """
    状态行写入 loguru（不影响 pytest、CI，不依赖终端）。
    每次 write 一行；末尾换行去掉。
    """

    def __init__(self, level: str = "INFO", quiet: bool = False):
        self.level = level
        self.quiet = quiet

    def write(self, text: str) -> None:
        if self.quiet:
            return
        line = text.rstrip("\n")
        if line:
            logs.log(self.level, f"[Progress] {line}")


class NullSink:
    def write(self, text: str) -> None:
        pass


def build_sinks(cfg: DisplayConfig) -> Tuple[object, object]:
    """
    DisplayConfig → (line_sink, title_sink)
    title escape 序列只发往终端类 sink。
    """
    if cfg.sink == SinkKind.LOG:
        return LogSink(quiet=cfg.quiet), NullSink()

    line_sink = StreamSink(quiet=cfg.quiet)
    title_sink = StreamSink(quiet=cfg.quiet) if cfg.show_title else NullSink()
    return line_sink, title_sink
