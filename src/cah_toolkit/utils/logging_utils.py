"""
Logging utilities for writing a run log file alongside console output.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RunLogHandler(logging.FileHandler):
    """
    A file handler that starts a fresh log for every run.

    The log file is truncated on open and begins with an
    "Execution started at ..." line.
    """

    def __init__(self, log_path: Path, level: int = logging.DEBUG):
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(log_path, mode="w", encoding="utf-8")
        self.setLevel(level)
        self.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.stream.write(f"Execution started at {datetime.now().strftime(DATE_FORMAT)}\n\n")
        self.flush()


def configure_run_logging(
    log_path: Optional[Path] = None,
    level: int = logging.INFO,
    console_level: Optional[int] = None,
    logger_name: Optional[str] = "cah_toolkit",
) -> List[logging.Handler]:
    """
    Attach a console handler and (optionally) a run log file handler.

    Args:
        log_path: Log file to (re)create. None = console only.
        level: Level for the log file and the logger itself.
        console_level: Level for console output (defaults to `level`).
        logger_name: Logger to attach to. None = root logger.

    Returns:
        The attached handlers (for later removal).
    """
    logger = logging.getLogger(logger_name)
    console_level = level if console_level is None else console_level
    logger.setLevel(min(level, console_level))

    handlers: List[logging.Handler] = []

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers.append(console)

    if log_path is not None:
        handlers.append(RunLogHandler(log_path, level))

    for handler in handlers:
        logger.addHandler(handler)
    return handlers


def reset_run_logging(
    handlers: List[logging.Handler],
    logger_name: Optional[str] = "cah_toolkit",
) -> None:
    """
    Remove and close handlers added by configure_run_logging().

    Args:
        handlers: Handlers returned by configure_run_logging().
        logger_name: Logger they were attached to.
    """
    logger = logging.getLogger(logger_name)
    for handler in handlers:
        logger.removeHandler(handler)
        handler.close()
