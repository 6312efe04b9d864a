"""Token helpers for the graph text format."""

from __future__ import annotations

import math
import re
from typing import Optional, Union

from digraphs.errors import MalformedInputError

# ASCII only: int() and float() also accept "1_0" and non-ASCII digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_int(token: str, line_no: Optional[int] = None, line: Optional[str] = None) -> int:
    """
    Parse an integer token (vertex key or count).

    Raises
    ------
    MalformedInputError
        If the token is not a base-10 integer written with ASCII digits.
    """
    if not _INT_RE.fullmatch(token):
        raise MalformedInputError(f"Expected an integer, got {token!r}", line_no, line)
    return int(token)


def parse_weight(
    token: str, line_no: Optional[int] = None, line: Optional[str] = None
) -> Union[int, float]:
    """
    Parse a weight token.

    Integers stay ints so integer-weighted graphs keep exact arithmetic.
    Other decimal tokens are read as floats; NaN and infinities are rejected,
    including values that overflow to infinity such as ``1e999``.

    Raises
    ------
    MalformedInputError
        If the token is not a finite number.
    """
    if _INT_RE.fullmatch(token):
        return int(token)
    if not _FLOAT_RE.fullmatch(token):
        raise MalformedInputError(f"Expected a numeric weight, got {token!r}", line_no, line)

    value = float(token)
    if not math.isfinite(value):
        raise MalformedInputError(f"Weight must be finite, got {token!r}", line_no, line)
    return value


def format_weight(weight: Union[int, float]) -> str:
    """Format a weight so that parse_weight reads it back unchanged."""
    if isinstance(weight, bool):
        raise TypeError(f"Edge weight must be a real number, got {weight!r}")
    if isinstance(weight, int):
        return str(weight)
    return repr(float(weight))
