"""Diagnostics and debugging utilities for socialgraph."""

from .core import (
    assert_forest,
    assert_shortest_paths,
    assert_symmetric,
    count_components,
    is_forest,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_symmetric",
    "assert_symmetric",
    "assert_shortest_paths",
    "is_forest",
    "assert_forest",
    "count_components",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
