"""Structured results of path queries.

A `PathResult` is either a reached path (a non-empty sequence of `PathHop`
entries from the source to the target, each carrying the cumulative distance),
an unreached target, or a label that is not in the graph. Text rendering lives
in :mod:`spcore.report`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from spcore.types.base import INFINITY, Cost, Label, PathStatus


@dataclass(frozen=True)
class PathHop:
    """One vertex on a path with its cumulative distance from the source."""

    label: Label
    distance: Cost


@dataclass(frozen=True)
class PathResult:
    """Outcome of a path query for a single target.

    Attributes:
        target: The queried label.
        status: REACHED, UNREACHED or NOT_FOUND.
        hops: Source-to-target hops; empty unless ``status`` is REACHED.
    """

    target: Label
    status: PathStatus
    hops: Tuple[PathHop, ...] = ()

    def __post_init__(self) -> None:
        if self.status is PathStatus.REACHED:
            if not self.hops:
                raise ValueError("a reached path needs at least one hop")
            if self.hops[-1].label != self.target:
                raise ValueError("the last hop of a path must be its target")
        elif self.hops:
            raise ValueError(f"{self.status.name} result cannot carry hops")

    @classmethod
    def reached(cls, hops: Sequence[PathHop]) -> PathResult:
        hops = tuple(hops)
        target = hops[-1].label if hops else None
        return cls(target=target, status=PathStatus.REACHED, hops=hops)

    @classmethod
    def unreached(cls, target: Label) -> PathResult:
        return cls(target=target, status=PathStatus.UNREACHED)

    @classmethod
    def not_found(cls, target: Label) -> PathResult:
        return cls(target=target, status=PathStatus.NOT_FOUND)

    def __iter__(self) -> Iterator[PathHop]:
        return iter(self.hops)

    def __len__(self) -> int:
        return len(self.hops)

    @property
    def is_reached(self) -> bool:
        return self.status is PathStatus.REACHED

    @property
    def source(self) -> Optional[Label]:
        """First label of a reached path, else ``None``."""
        return self.hops[0].label if self.hops else None

    @property
    def cost(self) -> Cost:
        """Total distance of the path; ``INFINITY`` when not reached."""
        return self.hops[-1].distance if self.hops else INFINITY

    @property
    def labels(self) -> Tuple[Label, ...]:
        return tuple(hop.label for hop in self.hops)

    def as_pairs(self) -> Tuple[Tuple[Label, Cost], ...]:
        """Return hops as plain ``(label, distance)`` tuples."""
        return tuple((hop.label, hop.distance) for hop in self.hops)
