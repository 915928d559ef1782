"""Distance and path queries against a shortest-path result.

Every query accepts either a `Graph` (reading the result of its latest run) or
a `ShortestPathTree` held privately by the caller. A graph that has never been
solved answers as if every vertex were unreached.
"""

from __future__ import annotations

from typing import Iterator, List, Union

from spcore.algorithms.spf import ShortestPathTree
from spcore.exceptions import AlgorithmError, VertexNotFound
from spcore.graph.digraph import Graph
from spcore.model.path import PathHop, PathResult
from spcore.types.base import Cost, Label, VertexState

ResultSource = Union[Graph, ShortestPathTree]


def _resolve_tree(source: ResultSource) -> ShortestPathTree:
    if isinstance(source, ShortestPathTree):
        return source
    if source.result is None:
        return ShortestPathTree.unsolved(source)
    return source.result


def _reconstruct(tree: ShortestPathTree, target_idx: int) -> PathResult:
    """Walk predecessor handles from ``target_idx`` back to the root."""
    labels = tree.graph._labels  # type: ignore[attr-defined]
    states = tree.states
    dist = tree.distances
    pred = tree.predecessors

    if states[target_idx] is VertexState.UNREACHED:
        return PathResult.unreached(labels[target_idx])

    hops: List[PathHop] = []
    idx = target_idx
    while states[idx] is VertexState.REACHED:
        hops.append(PathHop(labels[idx], dist[idx]))
        if len(hops) > len(labels):
            raise AlgorithmError(
                f"predecessor chain of '{labels[target_idx]}' does not reach the root"
            )
        idx = pred[idx]

    if states[idx] is not VertexState.ROOT:
        raise AlgorithmError(
            f"predecessor chain of '{labels[target_idx]}' ends at unreached "
            f"vertex '{labels[idx]}'"
        )
    hops.append(PathHop(labels[idx], dist[idx]))
    hops.reverse()
    return PathResult.reached(hops)


def path_to(
    source: ResultSource, target: Label, missing_ok: bool = False
) -> PathResult:
    """Return the shortest path from the run's source to ``target``.

    Args:
        source: Graph (uses ``graph.result``) or a `ShortestPathTree`.
        target: Label of the target vertex.
        missing_ok: If True, an unknown ``target`` yields a NOT_FOUND result
            instead of raising.

    Returns:
        A `PathResult`: REACHED with ``(label, distance)`` hops from source to
        target (a single hop when ``target`` is the source), or UNREACHED.

    Raises:
        VertexNotFound: If ``target`` is not in the graph and ``missing_ok`` is
            False.
    """
    tree = _resolve_tree(source)
    if target not in tree.graph:
        if missing_ok:
            return PathResult.not_found(target)
        raise VertexNotFound(target, role="Target vertex")
    return _reconstruct(tree, tree.graph.index_of(target))


def distance_to(source: ResultSource, target: Label) -> Cost:
    """Return the shortest distance to ``target`` (``INFINITY`` if unreached).

    Raises:
        VertexNotFound: If ``target`` is not in the graph.
    """
    tree = _resolve_tree(source)
    if target not in tree.graph:
        raise VertexNotFound(target, role="Target vertex")
    return tree.distances[tree.graph.index_of(target)]


def all_paths(source: ResultSource) -> Iterator[PathResult]:
    """Lazily yield one `PathResult` per vertex of the graph.

    The order of results is not part of the contract.
    """
    tree = _resolve_tree(source)
    for idx in range(len(tree.graph)):
        yield _reconstruct(tree, idx)
