"""
Tests for utils.logging_utils
"""
import logging
import pytest
from pathlib import Path

from cah_toolkit.utils import RunLogHandler, configure_run_logging, reset_run_logging


@pytest.fixture
def handlers():
    created = []
    yield created
    reset_run_logging(created, logger_name="cah_toolkit.test")


def test_when_configured_then_log_file_starts_with_header(tmp_path: Path, handlers):
    log_path = tmp_path / "execution_log.txt"
    handlers.extend(configure_run_logging(log_path, logger_name="cah_toolkit.test"))

    logging.getLogger("cah_toolkit.test.module").info("Total lines for Base: 3")
    for handler in handlers:
        handler.flush()

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Execution started at ")
    assert any("Total lines for Base: 3" in line for line in lines)


def test_when_reconfigured_then_previous_log_wiped(tmp_path: Path):
    log_path = tmp_path / "execution_log.txt"
    first = configure_run_logging(log_path, logger_name="cah_toolkit.test")
    logging.getLogger("cah_toolkit.test").info("first run")
    reset_run_logging(first, logger_name="cah_toolkit.test")

    second = configure_run_logging(log_path, logger_name="cah_toolkit.test")
    reset_run_logging(second, logger_name="cah_toolkit.test")

    text = log_path.read_text(encoding="utf-8")
    assert "first run" not in text
    assert text.count("Execution started at") == 1


def test_when_no_log_path_then_console_only(handlers):
    handlers.extend(configure_run_logging(None, logger_name="cah_toolkit.test"))
    assert len(handlers) == 1
    assert not any(isinstance(h, RunLogHandler) for h in handlers)


def test_console_level_is_independent(tmp_path: Path, handlers):
    handlers.extend(configure_run_logging(
        tmp_path / "log.txt",
        level=logging.DEBUG,
        console_level=logging.WARNING,
        logger_name="cah_toolkit.test",
    ))
    console, file_handler = handlers

    assert console.level == logging.WARNING
    assert file_handler.level == logging.DEBUG
    assert logging.getLogger("cah_toolkit.test").level == logging.DEBUG


def test_reset_detaches_handlers(tmp_path: Path):
    logger = logging.getLogger("cah_toolkit.test")
    attached = configure_run_logging(tmp_path / "log.txt", logger_name="cah_toolkit.test")

    reset_run_logging(attached, logger_name="cah_toolkit.test")

    assert not any(h in logger.handlers for h in attached)


def test_when_log_folder_missing_then_created(tmp_path: Path, handlers):
    log_path = tmp_path / "logs" / "run.txt"
    handlers.extend(configure_run_logging(log_path, logger_name="cah_toolkit.test"))
    assert log_path.is_file()
