"""
Logging support for graphql_helper.
"""

from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, get_logging_manager, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "get_logging_manager",
    "StructuredFormatter",
    "ColoredFormatter",
]
