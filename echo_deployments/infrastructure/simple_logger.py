"""Simple logger implementation for echo deployments."""

import logging
from typing import Any

from ..ports.logger import LoggerPort

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes owned by LogRecord; logging refuses ``extra`` keys that shadow them
RESERVED_RECORD_KEYS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}
CONTEXT_PREFIX = "ctx_"


class SimpleLogger(LoggerPort):
    """Logger backed by Python's standard logging.

    Structured context is appended to the message as ``key=value`` pairs so
    it shows up in plain console output, and is also passed as ``extra`` for
    handlers that understand it. Keys that would shadow a LogRecord
    attribute are passed as ``ctx_<key>`` instead.
    """

    def __init__(self, name: str = "echo_deployments", level: int = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "echo_deployments")
            level: Logging level (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        # One console handler per logger name
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    @staticmethod
    def _render(message: str, context: dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{message} [{pairs}]"

    @staticmethod
    def _extra(context: dict[str, Any]) -> dict[str, Any]:
        return {
            (CONTEXT_PREFIX + key if key in RESERVED_RECORD_KEYS else key): value
            for key, value in context.items()
        }

    def debug(self, message: str, **context: Any) -> None:
        """Log a debug message."""
        self._logger.debug(self._render(message, context), extra=self._extra(context))

    def warning(self, message: str, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(self._render(message, context), extra=self._extra(context))
