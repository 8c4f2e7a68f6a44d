"""Shared utilities."""

from .logging_utils import RunLogHandler, configure_run_logging, reset_run_logging

__all__ = [
    "RunLogHandler",
    "configure_run_logging",
    "reset_run_logging",
]
