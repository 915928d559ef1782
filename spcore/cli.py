"""Command-line interface for spcore."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

import yaml

from spcore.algorithms.paths import all_paths, path_to
from spcore.algorithms.spf import compute_shortest_paths
from spcore.exceptions import SPCoreError
from spcore.graph.digraph import Graph
from spcore.graph.io import read_graph_document
from spcore.logging import get_logger, set_global_log_level
from spcore.report import format_all_paths, format_path, path_to_dict
from spcore.types.base import INFINITY, Label

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[col])) for row in all_data), min_width)
        for col in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. ``"12.3 ms"`` or ``"1.23 s"``."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _resolve_label(graph: Graph, text: str) -> Label:
    """Map a command-line label onto a vertex label.

    Labels read from YAML may be numbers; such a label matches when the text
    parses to it as a YAML scalar of the same type (``true`` never selects the
    label ``1``).
    """
    if text in graph:
        return text
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError:
        return text
    if isinstance(parsed, (int, float)) and parsed in graph:
        stored = graph.label_of(graph.index_of(parsed))
        if type(stored) is type(parsed):
            return parsed
    return text


def _run_graph(
    path: Path,
    source: Optional[str],
    targets: Optional[List[str]],
    as_json: bool,
) -> None:
    """Solve shortest paths for a graph file and print the requested paths.

    Args:
        path: Graph file (YAML or CSV).
        source: Source label; falls back to the document's ``source`` key.
        targets: Labels to report; all vertices when ``None``.
        as_json: Emit a JSON object instead of formatted lines.
    """
    logger.info(f"Loading graph from: {path}")
    start_time = perf_counter()

    try:
        document = read_graph_document(path)
        graph = document.build()
        effective_source = (
            _resolve_label(graph, source) if source is not None else document.source
        )
        if effective_source is None:
            raise SPCoreError(
                "no source vertex given; pass --source or set 'source' in the file"
            )

        compute_shortest_paths(graph, effective_source)
        if targets:
            results = [
                path_to(graph, _resolve_label(graph, t), missing_ok=True)
                for t in targets
            ]
        else:
            results = list(all_paths(graph))

        if as_json:
            payload: Dict[str, Any] = {
                "source": effective_source,
                "vertices": len(graph),
                "edges": graph.num_edges,
                "paths": [path_to_dict(r) for r in results],
            }
            print(json.dumps(payload, indent=2, default=str))
        elif targets:
            for result in results:
                print(format_path(result))
        else:
            print(format_all_paths(results))

        reached = sum(1 for r in results if r.cost != INFINITY)
        logger.info(
            f"Reported {len(results)} paths ({reached} reached) in "
            f"{_format_duration(perf_counter() - start_time)}"
        )

    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read graph file {path}: {e}")
        print(f"ERROR: Cannot read graph file {path}: {e}")
        sys.exit(1)
    except SPCoreError as e:
        logger.error(f"Failed to solve graph: {type(e).__name__}: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)


def _inspect_graph(path: Path) -> None:
    """Print a summary table of the vertices of a graph file."""
    logger.info(f"Inspecting graph from: {path}")
    try:
        document = read_graph_document(path)
        graph = document.build()
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"ERROR: Graph file not found: {path}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read graph file {path}: {e}")
        print(f"ERROR: Cannot read graph file {path}: {e}")
        sys.exit(1)
    except SPCoreError as e:
        logger.error(f"Failed to inspect graph: {type(e).__name__}: {e}")
        print(f"ERROR: {e}")
        sys.exit(1)

    in_degree: Dict[Any, int] = {label: 0 for label in graph}
    for edge in graph.edges():
        in_degree[edge.target] += 1

    print(f"Vertices: {len(graph)}")
    print(f"Edges: {graph.num_edges}")
    if document.source is not None:
        print(f"Default source: {document.source}")
    rows = [
        [str(label), str(in_degree[label]), str(graph.out_degree(label))]
        for label in graph
    ]
    print(_format_table(["Vertex", "In", "Out"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spcore`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spcore",
        description="Compute single-source shortest paths on weighted digraphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Solve shortest paths")
    run_parser.add_argument("graph", type=Path, help="Path to graph YAML or CSV")
    run_parser.add_argument(
        "--source", "-s", default=None, help="Source vertex label"
    )
    run_parser.add_argument(
        "--target",
        "-t",
        dest="targets",
        action="append",
        default=None,
        help="Target vertex label (repeatable; default: all vertices)",
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Summarize the vertices and edges of a graph file"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML or CSV")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_graph(args.graph, args.source, args.targets, args.json)
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
