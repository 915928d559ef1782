"""Single-source shortest paths (Dijkstra) over a static `Graph`.

`compute_shortest_paths` runs the classic relaxation loop over a
:class:`~spcore.algorithms.frontier.Frontier` seeded with every vertex. Each
run writes into its own freshly allocated `ShortestPathTree`; the graph's
topology is only read. The finished tree is attached to ``graph.result`` so
that later graph-level queries see the latest run.

Notes:
    Ties in the frontier are broken by vertex label, so the extraction order,
    and therefore the predecessor chosen among equal-cost alternatives, is
    reproducible across runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter
from typing import Dict, Iterator, List, Optional

from spcore.algorithms.frontier import Frontier
from spcore.exceptions import VertexNotFound
from spcore.graph.digraph import Graph
from spcore.logging import get_logger
from spcore.model.path import PathResult
from spcore.types.base import (
    INFINITY,
    NO_PREDECESSOR,
    Cost,
    Label,
    VertexState,
)

logger = get_logger(__name__)


@dataclass
class ShortestPathTree:
    """Per-run result table, indexed by vertex handle.

    Attributes:
        graph: Graph the run was computed on.
        source: Source label, or ``None`` for the table of a graph that has
            not been solved yet.
        distances: Best-known distance per handle (``INFINITY`` if unreached).
        states: Tagged state per handle (ROOT, REACHED or UNREACHED).
        predecessors: Predecessor handle per handle; ``NO_PREDECESSOR`` unless
            the state is REACHED.
        settled: Number of vertices extracted with a finite distance.
        relaxations: Number of successful edge relaxations.
    """

    graph: Graph = field(repr=False)
    source: Optional[Label]
    distances: List[Cost]
    states: List[VertexState]
    predecessors: List[int]
    settled: int = 0
    relaxations: int = 0

    @classmethod
    def unsolved(cls, graph: Graph) -> ShortestPathTree:
        """Return a table where every vertex is UNREACHED."""
        n = len(graph)
        return cls(
            graph=graph,
            source=None,
            distances=[INFINITY] * n,
            states=[VertexState.UNREACHED] * n,
            predecessors=[NO_PREDECESSOR] * n,
        )

    def state(self, label: Label) -> VertexState:
        return self.states[self.graph.index_of(label)]

    def predecessor(self, label: Label) -> Optional[Label]:
        """Return the predecessor label of ``label`` or ``None`` (root or unreached)."""
        idx = self.graph.index_of(label)
        if self.states[idx] is not VertexState.REACHED:
            return None
        return self.graph.label_of(self.predecessors[idx])

    def distance_map(self) -> Dict[Label, Cost]:
        """Return ``{label: distance}`` for every vertex."""
        return dict(zip(self.graph.labels(), self.distances))

    def predecessor_map(self) -> Dict[Label, Optional[Label]]:
        """Return ``{label: predecessor_label_or_None}`` for every vertex."""
        labels = self.graph.labels()
        return {
            labels[i]: (
                labels[p] if self.states[i] is VertexState.REACHED else None
            )
            for i, p in enumerate(self.predecessors)
        }

    def reachable(self) -> List[Label]:
        """Return labels whose distance is finite, in handle order."""
        labels = self.graph.labels()
        return [
            labels[i]
            for i, state in enumerate(self.states)
            if state is not VertexState.UNREACHED
        ]

    # Query conveniences; see spcore.algorithms.paths
    def path_to(self, target: Label, missing_ok: bool = False) -> PathResult:
        from spcore.algorithms.paths import path_to

        return path_to(self, target, missing_ok=missing_ok)

    def distance_to(self, target: Label) -> Cost:
        from spcore.algorithms.paths import distance_to

        return distance_to(self, target)

    def all_paths(self) -> Iterator[PathResult]:
        from spcore.algorithms.paths import all_paths

        return all_paths(self)


def compute_shortest_paths(graph: Graph, source: Label) -> ShortestPathTree:
    """Compute shortest distances and predecessors from ``source``.

    All vertices enter the frontier up front. The vertex with the smallest
    ``(distance, label)`` key is extracted repeatedly and its outgoing edges
    into vertices not yet finalized are relaxed. Once the extracted distance
    is ``INFINITY`` the loop stops: nothing left in the frontier can improve.

    Args:
        graph: Graph to search. Its topology is not modified.
        source: Label of the source vertex.

    Returns:
        The new `ShortestPathTree`, also stored as ``graph.result`` (replacing
        the result of any previous run).

    Raises:
        VertexNotFound: If ``source`` is not in the graph. ``graph.result`` is
            left untouched in this case.
    """
    if source not in graph:
        raise VertexNotFound(source, role="Source vertex")

    started = perf_counter()
    src = graph.index_of(source)
    labels = graph._labels  # type: ignore[attr-defined]
    outgoing_adjacencies = graph._adj  # type: ignore[attr-defined]

    tree = ShortestPathTree.unsolved(graph)
    tree.source = source
    dist = tree.distances
    states = tree.states
    pred = tree.predecessors
    dist[src] = 0
    states[src] = VertexState.ROOT

    frontier = Frontier.from_items(
        (idx, dist[idx], label) for idx, label in enumerate(labels)
    )

    # Finalized vertices are never relaxed again: one extraction per vertex,
    # negative weights included.
    finalized = [False] * len(labels)
    settled = 0
    relaxations = 0
    while frontier:
        node_id, current_cost = frontier.pop()
        if current_cost == INFINITY:
            logger.debug(
                "Stopping early: %d vertices unreachable from '%s'",
                len(frontier) + 1,
                source,
            )
            break
        finalized[node_id] = True
        settled += 1

        for neighbor_id, weight in outgoing_adjacencies[node_id].items():
            if finalized[neighbor_id]:
                continue
            new_cost = current_cost + weight
            if new_cost < dist[neighbor_id]:
                dist[neighbor_id] = new_cost
                states[neighbor_id] = VertexState.REACHED
                pred[neighbor_id] = node_id
                frontier.update(neighbor_id, new_cost, labels[neighbor_id])
                relaxations += 1

    tree.settled = settled
    tree.relaxations = relaxations
    graph.result = tree

    logger.info(
        "Shortest paths from '%s': %d of %d vertices reachable, "
        "%d relaxations in %.3f ms",
        source,
        settled,
        len(graph),
        relaxations,
        (perf_counter() - started) * 1000.0,
    )
    return tree
