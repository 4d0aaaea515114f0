"""Logging utilities."""

import logging
import sys
import time
from typing import Optional


def setup_logger(
    name: str = "docflow",
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Setup and configure the logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logging
        format_string: Custom format string

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Diagnostics go to stderr; stdout carries the demonstration output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Library modules log under their package names
    for package in ("core",):
        package_logger = logging.getLogger(package)
        package_logger.setLevel(logger.level)
        package_logger.handlers = list(logger.handlers)
        package_logger.propagate = False

    return logger


class LogContext:
    """
    Log the start and end of an operation.

    The caller may attach an outcome with set_outcome(); it is appended to
    the completion line, e.g. "Completed demonstration in 0.01s: 'PDF' accepted".
    Exceptions are logged and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.outcome: Optional[str] = None
        self._started: Optional[float] = None

    def set_outcome(self, outcome: str) -> None:
        self.outcome = outcome

    @property
    def elapsed(self) -> float:
        if self._started is None:
            return 0.0
        return time.perf_counter() - self._started

    def __enter__(self) -> "LogContext":
        self._started = time.perf_counter()
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        self.logger.info(f"Starting {self.operation} ({details})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {self.elapsed:.2f}s: {exc_val}"
            )
            return False

        message = f"Completed {self.operation} in {self.elapsed:.2f}s"
        if self.outcome:
            message = f"{message}: {self.outcome}"
        self.logger.info(message)
        return False
