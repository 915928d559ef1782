"""Static directed weighted graph used by the shortest-path engine.

`Graph` stores vertices in an arena: each distinct label receives an integer
handle in first-seen order, and adjacency is kept as one ``{neighbor_handle:
weight}`` mapping per vertex. Topology is fixed once `build_graph` returns;
only the attached result of the latest shortest-path run changes afterwards.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
)

from spcore.config import ENGINE_CONFIG, EngineConfig
from spcore.exceptions import InvalidEdge, VertexNotFound
from spcore.logging import get_logger
from spcore.types.base import Cost, Label

if TYPE_CHECKING:
    from spcore.algorithms.spf import ShortestPathTree

logger = get_logger(__name__)


class Edge(NamedTuple):
    """A directed weighted edge ``source -> target``."""

    source: Label
    target: Label
    weight: Cost


class Graph:
    """Directed graph with non-negative edge weights, keyed by vertex label.

    Instances are created with :func:`build_graph` (or :meth:`from_edges`).
    A repeated ``(source, target)`` pair keeps only the last weight supplied.

    Attributes:
        result: The `ShortestPathTree` of the most recent completed run, or
            ``None`` if no run has completed on this graph.
    """

    def __init__(self) -> None:
        self._labels: List[Label] = []
        self._index: Dict[Label, int] = {}
        self._adj: List[Dict[int, Cost]] = []
        self.result: Optional[ShortestPathTree] = None

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Any],
        vertices: Optional[Iterable[Label]] = None,
        config: Optional[EngineConfig] = None,
    ) -> Graph:
        """Build a graph from ``(source, target, weight)`` triples.

        Args:
            edges: Iterable of 3-item sequences (or `Edge` tuples).
            vertices: Optional labels to register before the edges, which
                allows isolated vertices.
            config: Engine configuration; defaults to ``ENGINE_CONFIG``.

        Returns:
            A populated graph.

        Raises:
            InvalidEdge: If an edge is malformed, its weight is not a real
                number, is NaN, or is negative while
                ``config.reject_negative_weights`` is set, or if the vertex
                labels cannot be ordered against each other (e.g. ``1`` and
                ``"b"``).
        """
        cfg = config or ENGINE_CONFIG
        graph = cls()

        if vertices is not None:
            for label in vertices:
                graph._add_vertex(label)

        # One pass to validate edges and discover every endpoint, a second to
        # attach adjacency entries.
        checked: List[Edge] = []
        for raw in edges:
            edge = _coerce_edge(raw, cfg)
            graph._add_vertex(edge.source)
            graph._add_vertex(edge.target)
            checked.append(edge)

        _check_orderable(graph._labels)

        for edge in checked:
            u = graph._index[edge.source]
            v = graph._index[edge.target]
            if v in graph._adj[u]:
                logger.debug(
                    "Edge %r -> %r redefined: weight %s replaces %s",
                    edge.source,
                    edge.target,
                    edge.weight,
                    graph._adj[u][v],
                )
            graph._adj[u][v] = edge.weight

        logger.debug(
            "Built graph with %d vertices and %d edges", len(graph), graph.num_edges
        )
        return graph

    def _add_vertex(self, label: Label) -> int:
        idx = self._index.get(label)
        if idx is None:
            idx = len(self._labels)
            self._index[label] = idx
            self._labels.append(label)
            self._adj.append({})
        return idx

    #
    # Read-only topology access
    #
    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        try:
            return label in self._index
        except TypeError:
            # Unhashable objects are never labels
            return False

    def __iter__(self) -> Iterator[Label]:
        return iter(self._labels)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.num_edges})"

    @property
    def num_edges(self) -> int:
        """Number of distinct ``(source, target)`` pairs."""
        return sum(len(nbrs) for nbrs in self._adj)

    def labels(self) -> List[Label]:
        """Return vertex labels in handle order."""
        return list(self._labels)

    def index_of(self, label: Label) -> int:
        """Return the integer handle of ``label``.

        Raises:
            VertexNotFound: If ``label`` is not a vertex of this graph.
        """
        if label not in self:
            raise VertexNotFound(label)
        return self._index[label]

    def label_of(self, handle: int) -> Label:
        """Return the label stored under ``handle``.

        Raises:
            IndexError: If ``handle`` is out of range.
        """
        if not 0 <= handle < len(self._labels):
            raise IndexError(f"vertex handle {handle} out of range")
        return self._labels[handle]

    def neighbors(self, label: Label) -> Dict[Label, Cost]:
        """Return a ``{neighbor_label: weight}`` copy of the edges leaving ``label``."""
        u = self.index_of(label)
        return {self._labels[v]: w for v, w in self._adj[u].items()}

    def out_degree(self, label: Label) -> int:
        """Return the number of outgoing edges of ``label``."""
        return len(self._adj[self.index_of(label)])

    def weight(self, source: Label, target: Label) -> Optional[Cost]:
        """Return the weight of ``source -> target`` or ``None`` if absent.

        Raises:
            VertexNotFound: If either label is not a vertex of this graph.
        """
        u = self.index_of(source)
        v = self.index_of(target)
        return self._adj[u].get(v)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by source vertex in handle order."""
        labels = self._labels
        for u, nbrs in enumerate(self._adj):
            for v, w in nbrs.items():
                yield Edge(labels[u], labels[v], w)


def build_graph(
    edges: Iterable[Any],
    vertices: Optional[Iterable[Label]] = None,
    config: Optional[EngineConfig] = None,
) -> Graph:
    """Build a `Graph` from a sequence of ``(source, target, weight)`` edges.

    Thin functional alias of :meth:`Graph.from_edges`.
    """
    return Graph.from_edges(edges, vertices=vertices, config=config)


def _coerce_edge(raw: Any, cfg: EngineConfig) -> Edge:
    """Validate one raw edge and return it as an `Edge`."""
    try:
        source, target, weight = raw
    except (TypeError, ValueError):
        raise InvalidEdge(
            f"edge must be a (source, target, weight) triple, got {raw!r}", raw
        ) from None

    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidEdge(
            f"non-numeric weight {weight!r} on edge ({source!r}, {target!r})", raw
        )
    if math.isnan(weight):
        raise InvalidEdge(f"NaN weight on edge ({source!r}, {target!r})", raw)
    if weight < 0:
        if cfg.reject_negative_weights:
            raise InvalidEdge(
                f"negative weight {weight} on edge ({source!r}, {target!r})", raw
            )
        logger.warning(
            "Accepting negative weight %s on edge (%r, %r); results are undefined",
            weight,
            source,
            target,
        )
    return Edge(source, target, weight)


def _check_orderable(labels: List[Label]) -> None:
    """Ensure ``labels`` can be sorted, as the frontier breaks ties by label."""
    try:
        sorted(labels)
    except TypeError as exc:
        kinds = ", ".join(sorted({type(label).__name__ for label in labels}))
        raise InvalidEdge(
            f"vertex labels must be mutually orderable, got labels of types "
            f"{kinds}: {exc}"
        ) from None
