"""Diagnostics and debugging utilities for digraphs."""

from .core import (
    assert_adjacency_symmetric,
    assert_valid_dfs,
    intervals_nested,
    is_adjacency_symmetric,
)
from .debug_mode import (
    CHECKS,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_adjacency_symmetric",
    "assert_adjacency_symmetric",
    "intervals_nested",
    "assert_valid_dfs",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "CHECKS",
]
