"""Conversion between `Graph` and NetworkX graphs.

`to_networkx` produces a ``networkx.DiGraph`` with the edge weight stored in a
configurable attribute. `from_networkx` accepts any NetworkX graph: undirected
edges become two directed edges, and parallel edges of multigraphs collapse
with last-write-wins semantics, as in `build_graph`.
"""

from typing import Any, List, Optional

import networkx as nx

from spcore.config import EngineConfig
from spcore.graph.digraph import Edge, Graph


def to_networkx(graph: Graph, weight: str = "weight") -> nx.DiGraph:
    """Convert a `Graph` to a NetworkX DiGraph.

    Args:
        graph: The graph to convert.
        weight: Name of the edge attribute that receives the weight.

    Returns:
        A DiGraph with every vertex (including isolated ones) and edge.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.labels())
    for edge in graph.edges():
        nx_graph.add_edge(edge.source, edge.target, **{weight: edge.weight})
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default: Any = 1,
    config: Optional[EngineConfig] = None,
) -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Args:
        nx_graph: Any NetworkX graph (directed or not, simple or multi).
        weight: Edge attribute holding the weight.
        default: Weight used for edges without the attribute.
        config: Engine configuration forwarded to `build_graph`.

    Returns:
        A `Graph` with the same vertices and directed edges.

    Raises:
        InvalidEdge: If an edge weight is invalid.
    """
    directed = nx_graph.is_directed()
    edges: List[Edge] = []
    for u, v, data in nx_graph.edges(data=True):
        w = data.get(weight, default)
        edges.append(Edge(u, v, w))
        if not directed and u != v:
            edges.append(Edge(v, u, w))
    return Graph.from_edges(edges, vertices=list(nx_graph.nodes), config=config)
