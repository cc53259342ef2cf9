"""Ready-made :class:`~mockconn.base.interfaces.Reporter` implementations.

- ``LoggingReporter`` mirrors diagnostics and summaries to the shared
  ``mockconn`` logger (errors at ERROR, summaries at INFO).
- ``CollectingReporter`` keeps everything in memory for assertions; the pytest
  plugin builds on it.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .base.logging import LogContext, get_logger, log_event


class LoggingReporter:
    """Reporter that writes to a logger instead of a test framework."""

    def __init__(self, logger: Optional[logging.Logger] = None, *, name: Optional[str] = None) -> None:
        self._logger = logger or get_logger("mockconn.reporter")
        self._ctx = LogContext(connection=name)

    def error(self, message: str) -> None:
        log_event(self._logger, "reporter.error", self._ctx, level=logging.ERROR, message=message)

    def log(self, message: str) -> None:
        log_event(self._logger, "reporter.log", self._ctx, level=logging.INFO, message=message)


class CollectingReporter:
    """Reporter that records messages for later inspection."""

    def __init__(self) -> None:
        self.errors: List[str] = []
        self.logs: List[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def log(self, message: str) -> None:
        self.logs.append(message)

    @property
    def failed(self) -> bool:
        """True once any error has been reported."""
        return bool(self.errors)

    def clear(self) -> None:
        self.errors.clear()
        self.logs.clear()


__all__ = ["LoggingReporter", "CollectingReporter"]
