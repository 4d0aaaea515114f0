"""Utility modules for DocFlow."""

from .logger import setup_logger, LogContext

__all__ = [
    "setup_logger",
    "LogContext",
]
