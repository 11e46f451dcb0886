"""Logging utilities for socialgraph.

Provides namespaced, cached loggers and helpers to configure them.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_LEVEL_ENV_VAR = "SOCIALGRAPH_LOG_LEVEL"


def _level_from_env() -> int:
    name = os.getenv(_LEVEL_ENV_VAR, "WARNING")
    level = getattr(logging, name.strip().upper(), logging.WARNING)
    # Names like "basic_format" resolve to non-level attributes
    return level if isinstance(level, int) else logging.WARNING


# Default logging level
_DEFAULT_LEVEL = _level_from_env()

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from socialgraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Building graph")
    """
    if name is None:
        name = "socialgraph"

    logger_name = name if name == "socialgraph" or name.startswith("socialgraph.") else f"socialgraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)

        # Format: [LEVEL] module: message
        formatter = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all socialgraph loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for socialgraph.

    Replaces the handlers of every cached logger. Should typically be called
    once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> from socialgraph.logging import configure_logging
        >>> import logging
        >>> configure_logging(level=logging.DEBUG)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if stream is None:
        stream = sys.stderr

    if format_string is None:
        format_string = "[%(levelname)s] %(name)s: %(message)s"

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level
