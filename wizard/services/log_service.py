"""Logging service."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class LogService:
    """Service for structured logging.

    Renders key-value pairs as ``key=value | key=value`` so game events read
    the same in every log line.
    """

    def __init__(self, name: str | None = None) -> None:
        """Bind the service to a named logger (defaults to this module's)."""
        self._logger = logging.getLogger(name) if name else logger

    @staticmethod
    def format(data: dict[str, Any]) -> str:
        """Render log data as a single line."""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    def info(self, data: dict[str, Any]) -> None:
        """Log info message.

        Args:
            data: Log data as key-value pairs

        """
        self._logger.info(self.format(data))

    def warning(self, data: dict[str, Any]) -> None:
        """Log warning message."""
        self._logger.warning(self.format(data))

    def debug(self, data: dict[str, Any]) -> None:
        """Log debug message."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(self.format(data))
