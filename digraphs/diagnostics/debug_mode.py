"""Runtime invariant checks that can be switched on for debugging.

Two checks exist:

* ``"symmetry"``: after every DiGraph mutation, the forward and backward
  adjacency maps must describe the same edges.
* ``"dfs"``: every depth_first_search result is validated against its graph.

The initial set comes from the DIGRAPHS_DEBUG environment variable: ``1``,
``true``, ``yes``, ``on`` or ``all`` turn on every check, a comma-separated
list such as ``symmetry,dfs`` turns on the named ones, anything else leaves
them off.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import FrozenSet, Iterable, Iterator, Optional, Union

CHECKS: FrozenSet[str] = frozenset({"symmetry", "dfs"})

_ENV_VAR = "DIGRAPHS_DEBUG"
_ALL_ON = ("1", "true", "yes", "on", "all")

Selection = Union[bool, Iterable[str]]


def _select(enabled: Selection) -> FrozenSet[str]:
    if isinstance(enabled, bool):
        return CHECKS if enabled else frozenset()
    chosen = frozenset(enabled)
    unknown = chosen - CHECKS
    if unknown:
        raise ValueError(f"Unknown debug checks: {sorted(unknown)}; expected some of {sorted(CHECKS)}")
    return chosen


def _from_env(value: str) -> FrozenSet[str]:
    value = value.strip().lower()
    if value in _ALL_ON:
        return CHECKS
    names = {token.strip() for token in value.split(",")}
    return frozenset(names & CHECKS)


_active: FrozenSet[str] = _from_env(os.getenv(_ENV_VAR, ""))


def is_debug_enabled(check: Optional[str] = None) -> bool:
    """
    Report whether a debug check is active.

    Parameters
    ----------
    check:
        Name of one check, or None to ask whether any check is active.
    """
    if check is None:
        return bool(_active)
    return check in _active


def set_debug_enabled(enabled: Selection) -> None:
    """
    Choose the active debug checks.

    Parameters
    ----------
    enabled:
        True for every check, False for none, or an iterable of check names.

    Raises
    ------
    ValueError
        If a name is not one of CHECKS.
    """
    global _active
    _active = _select(enabled)


@contextmanager
def debug_context(enabled: Selection = True) -> Iterator[None]:
    """
    Activate a selection of checks for the duration of a block.

    Example
    -------
    >>> with debug_context({"symmetry"}):
    ...     graph.add_edge(1, 2)  # maps compared after insertion
    """
    global _active
    prev = _active
    _active = _select(enabled)
    try:
        yield
    finally:
        _active = prev
