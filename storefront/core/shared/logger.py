"""
Shared Logger

Centralized logging configuration for the application.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["extra"] = extra_data

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console log formatter."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors without mutating the shared record."""
        color = self.COLORS.get(record.levelname, self.RESET)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class ContextLogger:
    """Logger with context support."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        """
        Initialize context logger.

        Args:
            name: Logger name
            context: Default context to include in all logs
        """
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, **kwargs) -> None:
        extra = {**self._context, **kwargs}
        self._logger.log(level, message, extra={"extra_data": extra})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._logger.exception(message, extra={"extra_data": {**self._context, **kwargs}})


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json', or 'plain'
        log_file: Optional file path for file logging
    """
    numeric_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    elif format_type == "colored":
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (typically __name__)
        context: Default context

    Returns:
        ContextLogger instance
    """
    return ContextLogger(name, context)


def get_use_case_logger(use_case_name: str) -> ContextLogger:
    """Get logger for application use cases."""
    return get_logger(f"use_case.{use_case_name}", {"component": "use_case", "use_case": use_case_name})
