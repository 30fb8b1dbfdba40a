"""
Exceptions raised while scoring source files.
"""

from typing import Optional


class CogComplexityError(Exception):
    """Base exception for all analysis errors."""


class UnreachableNodeState(CogComplexityError):
    """
    Raised when a node lacks a child the grammar guarantees it has.

    This is a parser contract violation, not bad user input. Analysis of
    the file being scored is aborted.
    """

    def __init__(self, node, message: str) -> None:
        self.node_type = getattr(node, "type", None)
        self.line = getattr(node, "line", None)
        self.column = getattr(node, "column", None)
        location = ""
        if self.line is not None:
            location = f" at {self.line}:{self.column}"
        super().__init__(f"{message} ({self.node_type}{location})")


class MalformedOutputError(CogComplexityError):
    """Raised when a serialized analysis result cannot be decoded."""

    def __init__(self, message: str, payload: Optional[str] = None) -> None:
        super().__init__(message)
        self.payload = payload
