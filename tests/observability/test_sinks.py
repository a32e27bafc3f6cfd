#!filepath: tests/observability/test_sinks.py
import io

from loguru import logger

from ratecount.config.display_config import DisplayConfig, SinkKind
from ratecount.observability.sinks import LogSink, NullSink, StreamSink, build_sinks


def test_stream_sink_writes():
    buf = io.StringIO()
    StreamSink(buf).write("a 1 -- 0 0.00\n")
    assert buf.getvalue() == "a 1 -- 0 0.00\n"


def test_stream_sink_quiet():
    buf = io.StringIO()
    StreamSink(buf, quiet=True).write("hidden\n")
    assert buf.getvalue() == ""


def test_stream_sink_defaults_to_stderr(capsys):
    StreamSink().write("to stderr\n")
    assert capsys.readouterr().err == "to stderr\n"


def test_log_sink_routes_to_loguru():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="INFO")

    LogSink().write("scan 10/100 -- 1 1.00\n")

    logger.remove(sink_id)
    output = "\n".join(captured)
    assert "[Progress] scan 10/100 -- 1 1.00" in output


def test_build_sinks_log_kind():
    line, title = build_sinks(DisplayConfig(sink=SinkKind.LOG))
    assert isinstance(line, LogSink)
    assert isinstance(title, NullSink)


def test_build_sinks_stderr_without_title():
    line, title = build_sinks(DisplayConfig(show_title=False, quiet=True))
    assert isinstance(line, StreamSink)
    assert line.quiet is True
    assert isinstance(title, NullSink)


def test_counter_with_log_sink(clock):
    from ratecount import Counter

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="INFO")

    line, title = build_sinks(DisplayConfig(sink="log"))
    c = Counter.from_directives("display=job", "mod=1", clock=clock, line_sink=line, title_sink=title)
    c.advance()

    logger.remove(sink_id)
    assert any("[Progress] job 0 -- 0 0.00" in m for m in captured)
