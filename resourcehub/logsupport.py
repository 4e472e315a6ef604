"""Console log formatting and operation statistics."""

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime

logger = logging.getLogger(__name__)


def _level_label(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN "
    if levelno >= logging.INFO:
        return "INFO "
    if levelno >= logging.DEBUG:
        return "DEBUG"
    return "TRACE"


class SimpleLogFormatter(logging.Formatter):
    """Formats records as ``date time.ms LEVEL [logger] message`` in local time."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = (
            f"{stamp}.{int(record.msecs):03d} {_level_label(record.levelno)} "
            f"[{record.name}] {record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def init_logging(level: int = logging.INFO) -> logging.Handler:
    """Send records at ``level`` and above to standard output.

    Returns the installed handler; raises RuntimeError if already installed.
    """
    root = logging.getLogger()
    if any(isinstance(h.formatter, SimpleLogFormatter) for h in root.handlers):
        raise RuntimeError("logging has already been initialized")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(SimpleLogFormatter())
    handler.setLevel(level)
    root.addHandler(handler)
    root.setLevel(level)
    return handler


class OperationCounter:
    """Thread-safe counts of operations, successes and errors."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._lock = threading.Lock()
        self._count = 0
        self._success_count = 0
        self._error_count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def success_count(self) -> int:
        return self._success_count

    @property
    def error_count(self) -> int:
        return self._error_count

    def increment(self) -> int:
        """Count one operation; return the new total."""
        with self._lock:
            self._count += 1
            return self._count

    def record_success(self) -> int:
        """Count one success; return the new success count."""
        with self._lock:
            self._success_count += 1
            return self._success_count

    def record_error(self) -> int:
        """Count one error; return the new error count."""
        with self._lock:
            self._error_count += 1
            return self._error_count

    def success_rate(self) -> float:
        """Successes per operation, 1.0 when nothing has been counted."""
        total = self.count
        if total == 0:
            return 1.0
        return self.success_count / total

    def summary(self) -> str:
        return (
            f"{self.name}: total={self.count}, success={self.success_count}, "
            f"error={self.error_count}, success_rate={self.success_rate() * 100:.2f}%"
        )

    def log_summary(self, level: int) -> None:
        """Log :meth:`summary` at ``level``."""
        logger.log(level, "%s", self.summary())