"""Debug mode management for socialgraph."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "SOCIALGRAPH_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _debug_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _debug_from_env()


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently enabled.

    In debug mode the engines re-check their own output against the graph
    invariants. Debug mode can be toggled via set_debug_enabled(...) or the
    SOCIALGRAPH_DEBUG environment variable.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     graph = WeightedGraph(3, [(0, 1, 4)])  # symmetry checked
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
