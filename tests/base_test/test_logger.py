#!filepath: tests/base_test/test_logger.py
from loguru import logger

from ratecount import Logging, logs


def test_logs_route_to_loguru():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    logs.error("Unknown counter option: foo=bar")

    logger.remove(sink_id)
    assert any("Unknown counter option: foo=bar" in m for m in captured)


def test_log_dir_created(tmp_path):
    log_dir = tmp_path / "logs"
    lg = Logging(log_dir=str(log_dir), log_level="DEBUG")
    lg.info("hello")
    logger.complete()
    assert log_dir.is_dir()
