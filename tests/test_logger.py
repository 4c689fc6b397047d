#!filepath: tests/test_logger.py
from loguru import logger

import timeconductor.utils.logger as logger_module
from timeconductor.config.log_config import LogConfig
from timeconductor.utils.logger import Logging, init_logging


def test_file_sink_created_under_log_dir(tmp_path):
    log_dir = tmp_path / "logs"

    logs = Logging(log_dir=str(log_dir))
    logs.info("hello")
    logger.complete()

    assert log_dir.is_dir()
    assert list(log_dir.glob("*.log"))


def test_messages_reach_sinks():
    logs = Logging(log_level="DEBUG")
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")

    logs.debug("[ModeController] debug line")
    logs.warning("careful")

    logger.remove(sink_id)

    output = "".join(captured)
    assert "debug line" in output
    assert "careful" in output


def test_init_logging_replaces_global(monkeypatch):
    monkeypatch.setattr(logger_module, "logs", logger_module.logs)

    logs = init_logging(LogConfig(level="DEBUG"))

    assert logs.level == "DEBUG"
    assert logger_module.logs is logs
