"""Exception types raised by spcore."""

from __future__ import annotations

from typing import Any


class SPCoreError(Exception):
    """Base class for all package-specific errors."""


class VertexNotFound(SPCoreError, KeyError):
    """Raised when a source or target label does not exist in the graph.

    Attributes:
        label: The label that was looked up.
    """

    def __init__(self, label: Any, role: str = "Vertex") -> None:
        self.label = label
        self.role = role
        super().__init__(label)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the argument.
        return f"{self.role} '{self.label}' is not in the graph."


class InvalidEdge(SPCoreError, ValueError):
    """Raised for malformed edges or weights that break the non-negative contract.

    Attributes:
        edge: The offending edge as supplied by the caller.
    """

    def __init__(self, message: str, edge: Any = None) -> None:
        self.edge = edge
        super().__init__(message)


class GraphFormatError(SPCoreError, ValueError):
    """Raised when a graph file or mapping cannot be parsed."""


class AlgorithmError(SPCoreError, RuntimeError):
    """Raised when a result table violates the predecessor-tree invariant."""


__all__ = [
    "SPCoreError",
    "VertexNotFound",
    "InvalidEdge",
    "GraphFormatError",
    "AlgorithmError",
]
