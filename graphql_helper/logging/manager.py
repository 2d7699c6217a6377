"""
Logging setup for graphql_helper.

Handlers are attached to the ``graphql_helper`` package logger only, so an
application's own root logger configuration is left alone.
"""

import logging
import sys
from typing import Optional

from ..config import LoggingConfig
from .formatters import ColoredFormatter, StructuredFormatter

PACKAGE_LOGGER = "graphql_helper"


class LoggingManager:
    """Installs and removes the package's console handler."""

    def __init__(self) -> None:
        self._handler: Optional[logging.Handler] = None

    @property
    def configured(self) -> bool:
        return self._handler is not None

    def setup_logging(self, config: LoggingConfig) -> logging.Logger:
        """
        Configure the package logger.

        Calling it again replaces the previously installed handler.

        Args:
            config: Logging configuration

        Returns:
            The package logger
        """
        self.cleanup()

        level = getattr(logging, config.level.value)
        handler = logging.StreamHandler(sys.stderr)
        formatter: logging.Formatter
        if config.enable_structured:
            formatter = StructuredFormatter()
        else:
            formatter = ColoredFormatter(config.format, use_colors=config.use_colors)
        handler.setFormatter(formatter)
        handler.setLevel(level)

        logger = logging.getLogger(PACKAGE_LOGGER)
        logger.setLevel(level)
        logger.addHandler(handler)
        self._handler = handler

        logger.debug("Logging configured at %s", config.level.value)
        return logger

    def cleanup(self) -> None:
        if self._handler is not None:
            package_logger = logging.getLogger(PACKAGE_LOGGER)
            package_logger.removeHandler(self._handler)
            package_logger.setLevel(logging.NOTSET)
            self._handler.close()
            self._handler = None


_manager = LoggingManager()


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Configure package logging with ``config`` (defaults if omitted)."""
    return _manager.setup_logging(config or LoggingConfig())


def get_logging_manager() -> LoggingManager:
    return _manager
