"""
Tests for the environment-gated logger.
"""
import logging
import pytest

from app.core.config import AppConfig
from app.core.logger import AppLogger

LOGGER_NAME = "tests.app_logger"


@pytest.fixture
def capture(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return caplog


def make_config(app_env):
    return AppConfig(
        database_url="sqlite://",
        app_env=app_env,
        log_level="INFO",
        settings_file="settings.json",
        default_language="en",
    )


def test_production_suppresses_everything_but_errors(capture):
    logger = AppLogger.from_config(LOGGER_NAME, make_config("production"))

    logger.log("hidden")
    logger.info("hidden")
    logger.warn("hidden")
    logger.debug("hidden")
    logger.table([{"a": 1}])
    logger.time("t")
    logger.time_end("t")
    logger.group("g")
    logger.group_end()
    assert capture.records == []

    logger.error("boom", 42)
    assert [(r.levelname, r.getMessage()) for r in capture.records] == [("ERROR", "boom 42")]


def test_development_forwards_channels(capture):
    logger = AppLogger.from_config(LOGGER_NAME, make_config("development"))

    logger.log("hello", "world")
    logger.warn("careful")
    logger.debug("details")

    assert [(r.levelname, r.getMessage()) for r in capture.records] == [
        ("INFO", "hello world"),
        ("WARNING", "careful"),
        ("DEBUG", "details"),
    ]


def test_group_indents_messages(capture):
    logger = AppLogger(LOGGER_NAME, enabled=True)
    logger.group("Migration")
    logger.log("step")
    logger.group_end()
    logger.log("done")

    assert [r.getMessage() for r in capture.records] == ["Migration", "  step", "done"]


def test_table_renders_aligned_rows(capture):
    logger = AppLogger(LOGGER_NAME, enabled=True)
    logger.table([{"name": "Acme", "jobs": 3}, {"name": "Roshan Telecom", "jobs": 12}])

    lines = [r.getMessage() for r in capture.records]
    assert lines[0].startswith("name")
    assert "Roshan Telecom" in lines[3]
    assert len({len(line) for line in lines}) == 1


def test_timer(capture):
    logger = AppLogger(LOGGER_NAME, enabled=True)
    logger.time("load")
    logger.time_end("load")
    logger.time_end("load")

    messages = [r.getMessage() for r in capture.records]
    assert messages[0].startswith("load: ") and messages[0].endswith("ms")
    assert messages[1] == "Timer 'load' does not exist"


def test_is_development():
    assert make_config("development").is_development is True
    assert make_config("production").is_development is False


def test_development_debug_survives_info_root_level(caplog):
    root = logging.getLogger()
    previous = root.level
    root.setLevel(logging.INFO)
    try:
        logger = AppLogger("tests.app_logger.debug_channel", enabled=True)
        logger.debug("details")
    finally:
        root.setLevel(previous)

    assert ("DEBUG", "details") in [(r.levelname, r.getMessage()) for r in caplog.records]


def test_production_leaves_logger_level_alone():
    AppLogger("tests.app_logger.untouched", enabled=False)
    assert logging.getLogger("tests.app_logger.untouched").level == logging.NOTSET
