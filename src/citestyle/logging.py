"""Logging for citestyle.

Formatting is pure, so the package logs very little: style-id fallbacks
(warnings) and failures while loading reference files (errors). Both go
through the helpers below so messages share one "operation: message |
Context: k=v" shape.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

# Package logger; module loggers are its children ("citestyle.styles", ...)
logger = logging.getLogger("citestyle")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | None = None,
) -> logging.Logger:
    """
    Route package log records to stderr, and optionally to a file.

    Calling it again replaces the previous handlers.

    Args:
        level: Logging level or its name ("debug", "WARNING", ...)
        log_file: Also append records to this file

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for one module, e.g. get_logger("schemas")."""
    return logging.getLogger(f"citestyle.{name}")


def _context_suffix(context: dict[str, Any] | None) -> str:
    if not context:
        return ""
    return "Context: " + ", ".join(f"{k}={v}" for k, v in context.items())


def log_failure(
    logger: logging.Logger,
    operation: str,
    error: Exception | str,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log a failed operation, naming the exception type.

    Args:
        logger: Logger instance to use
        operation: Name of the operation that failed
        error: Exception or error message
        context: Extra key/value details (path, entry index, ...)
        level: Logging level (default: ERROR)
    """
    error_type = type(error).__name__ if isinstance(error, Exception) else "Error"

    msg_parts = [f"{operation} failed: [{error_type}] {error}"]
    if context:
        msg_parts.append(_context_suffix(context))

    logger.log(level, " | ".join(msg_parts))


def log_warning(
    logger: logging.Logger,
    operation: str,
    message: str,
    context: dict[str, Any] | None = None,
) -> None:
    """Log a recoverable problem, such as falling back to the default style."""
    msg_parts = [f"{operation}: {message}"]
    if context:
        msg_parts.append(_context_suffix(context))

    logger.warning(" | ".join(msg_parts))


# Quiet by default; the CLI reconfigures from settings
setup_logging()
