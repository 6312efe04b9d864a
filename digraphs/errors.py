"""Exception types raised by digraphs."""

from __future__ import annotations

from typing import Optional


class GraphError(Exception):
    """Base class for all digraphs errors."""


class VertexNotFoundError(GraphError, KeyError):
    """
    Raised when an analysis is started from a vertex key the graph does not hold.

    Store queries never raise this; they return None for absent keys.
    """

    def __init__(self, key: int):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Vertex {self.key} not in graph"


class MalformedInputError(GraphError, ValueError):
    """
    Raised when a graph description cannot be parsed.

    Attributes:
        line_number: 1-based line number of the offending line (None if the
            problem is not tied to a single line).
        line: The offending line text, if any.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
