"""spcore: single-source shortest paths on static weighted digraphs.

Primary API:
    build_graph() - Build a `Graph` from ``(source, target, weight)`` edges
    compute_shortest_paths() - Run Dijkstra from a source; returns the result table
    path_to() / distance_to() / all_paths() - Query the latest run
    format_path() - Render a `PathResult` as ``a -> c(9) -> d(20)``

Example:
    from spcore import build_graph, compute_shortest_paths, path_to, format_path

    g = build_graph([("a", "b", 7), ("a", "c", 9), ("c", "d", 11)])
    compute_shortest_paths(g, "a")
    print(format_path(path_to(g, "d")))  # a -> c(9) -> d(20)
"""

from __future__ import annotations

from spcore import cli, logging
from spcore._version import __version__
from spcore.algorithms.paths import all_paths, distance_to, path_to
from spcore.algorithms.spf import ShortestPathTree, compute_shortest_paths
from spcore.config import ENGINE_CONFIG, EngineConfig
from spcore.exceptions import (
    AlgorithmError,
    GraphFormatError,
    InvalidEdge,
    SPCoreError,
    VertexNotFound,
)
from spcore.graph.convert import from_networkx, to_networkx
from spcore.graph.digraph import Edge, Graph, build_graph
from spcore.graph.io import load_graph, read_graph_document
from spcore.model.path import PathHop, PathResult
from spcore.report import format_all_paths, format_path
from spcore.types.base import INFINITY, PathStatus, VertexState

__all__ = [
    # Version
    "__version__",
    # Graph
    "Edge",
    "Graph",
    "build_graph",
    # Computation and queries
    "compute_shortest_paths",
    "ShortestPathTree",
    "path_to",
    "distance_to",
    "all_paths",
    # Results
    "PathHop",
    "PathResult",
    "PathStatus",
    "VertexState",
    "INFINITY",
    # Presentation
    "format_path",
    "format_all_paths",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Errors
    "SPCoreError",
    "VertexNotFound",
    "InvalidEdge",
    "GraphFormatError",
    "AlgorithmError",
    # I/O and NetworkX interop
    "load_graph",
    "read_graph_document",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
