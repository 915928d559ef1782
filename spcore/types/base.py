"""Base types and enums for shortest-path computations."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Hashable, Union

#: Represents a numeric path cost (sum of edge weights).
Cost = Union[int, float]

#: Opaque vertex label. Labels within one graph must be mutually orderable,
#: because the frontier breaks distance ties by label.
Label = Hashable

#: Distance of a vertex that has not been discovered from the source.
INFINITY: float = math.inf

#: Predecessor handle stored for vertices without a predecessor.
NO_PREDECESSOR = -1


class VertexState(IntEnum):
    """Per-run classification of a vertex in a shortest-path tree."""

    #: Not discovered from the source (distance is ``INFINITY``).
    UNREACHED = 0
    #: The source of the run; root of the predecessor tree.
    ROOT = 1
    #: Discovered; the predecessor handle points one hop closer to the root.
    REACHED = 2


class PathStatus(IntEnum):
    """Outcome of a path query."""

    REACHED = 1
    UNREACHED = 2
    NOT_FOUND = 3

    @classmethod
    def from_string(cls, value: str) -> "PathStatus":
        """Parse a case-insensitive status name.

        Args:
            value: Status name such as ``"reached"`` or ``"NOT_FOUND"``.

        Returns:
            The matching PathStatus member.

        Raises:
            ValueError: If the string does not name a member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid path status '{value}'. Valid values are: {valid}"
            ) from None
