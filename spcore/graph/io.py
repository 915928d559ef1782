"""Loading edge lists from YAML and CSV files.

YAML documents are mappings::

    source: a            # optional default source for the CLI
    vertices: [g]        # optional isolated vertices
    edges:
      - [a, b, 7]
      - {source: a, target: c, weight: 9}

CSV files hold one ``source,target,weight`` row per edge. Blank lines and
lines starting with ``#`` are ignored, as is a leading
``source,target,weight`` header.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from spcore.config import EngineConfig
from spcore.exceptions import GraphFormatError
from spcore.graph.digraph import Edge, Graph
from spcore.logging import get_logger
from spcore.types.base import Cost, Label

logger = get_logger(__name__)

_CSV_HEADER = ["source", "target", "weight"]


@dataclass
class GraphDocument:
    """Parsed contents of a graph file, prior to validation by `Graph`."""

    edges: List[Edge] = field(default_factory=list)
    vertices: List[Label] = field(default_factory=list)
    source: Optional[Label] = None

    def build(self, config: Optional[EngineConfig] = None) -> Graph:
        """Build a `Graph` from this document."""
        return Graph.from_edges(self.edges, vertices=self.vertices, config=config)


def _parse_weight(text: str, where: str) -> Cost:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise GraphFormatError(f"{where}: weight {text!r} is not a number") from None


def _edge_from_entry(entry: Any, where: str) -> Edge:
    if isinstance(entry, dict):
        missing = [k for k in _CSV_HEADER if k not in entry]
        if missing:
            raise GraphFormatError(f"{where}: edge mapping lacks {', '.join(missing)}")
        return Edge(entry["source"], entry["target"], entry["weight"])
    if isinstance(entry, (list, tuple)) and len(entry) == 3:
        return Edge(entry[0], entry[1], entry[2])
    raise GraphFormatError(
        f"{where}: edge must be [source, target, weight] or a mapping, got {entry!r}"
    )


def parse_graph_mapping(data: Any) -> GraphDocument:
    """Validate the shape of a mapping (e.g. parsed YAML) and return a document.

    Raises:
        GraphFormatError: If the mapping does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise GraphFormatError("graph document must be a mapping at top-level")
    unknown = set(data) - {"source", "vertices", "edges"}
    if unknown:
        names = ", ".join(sorted(map(str, unknown)))
        raise GraphFormatError(f"unrecognized keys in graph document: {names}")

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, list):
        raise GraphFormatError("'edges' must be a list")
    raw_vertices = data.get("vertices") or []
    if not isinstance(raw_vertices, list):
        raise GraphFormatError("'vertices' must be a list")

    edges = [
        _edge_from_entry(entry, f"edges[{i}]") for i, entry in enumerate(raw_edges)
    ]
    if not edges and not raw_vertices:
        raise GraphFormatError("graph document defines no vertices or edges")
    return GraphDocument(
        edges=edges, vertices=list(raw_vertices), source=data.get("source")
    )


def parse_yaml(text: str) -> GraphDocument:
    """Parse a YAML string into a `GraphDocument`."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GraphFormatError(f"invalid YAML: {exc}") from exc
    return parse_graph_mapping(data if data is not None else {})


def parse_csv(text: str) -> GraphDocument:
    """Parse ``source,target,weight`` rows into a `GraphDocument`."""
    edges: List[Edge] = []
    rows = csv.reader(
        line for line in text.splitlines() if not line.lstrip().startswith("#")
    )
    for lineno, row in enumerate(rows, start=1):
        cells = [c.strip() for c in row]
        if not any(cells):
            continue
        if not edges and [c.lower() for c in cells] == _CSV_HEADER:
            continue
        where = f"row {lineno}"
        if len(cells) != 3:
            raise GraphFormatError(f"{where}: expected 3 columns, got {len(cells)}")
        source, target, weight = cells
        edges.append(Edge(source, target, _parse_weight(weight, where)))
    if not edges:
        raise GraphFormatError("no edges parsed from CSV")
    return GraphDocument(edges=edges)


_FMT_PARSERS = {
    "yaml": parse_yaml,
    "csv": parse_csv,
}


def _detect_format(path: Path) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in {".yaml", ".yml"}:
        return "yaml"
    if ext in {".csv", ".txt"}:
        return "csv"
    return None


def read_graph_document(
    path: Union[str, Path], fmt: Optional[str] = None
) -> GraphDocument:
    """Read a graph file; the format is detected from the extension by default.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphFormatError: If the format is unknown, the file is not UTF-8 text
            or the contents are invalid.
        OSError: For other failures to read ``path`` (e.g. a directory).
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt not in _FMT_PARSERS:
        raise GraphFormatError(f"unknown graph format for '{p}'")
    logger.debug("Reading %s graph from %s", fmt, p)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"'{p}' is not UTF-8 text: {exc.reason}") from exc
    return _FMT_PARSERS[fmt](text)


def load_graph(
    path: Union[str, Path],
    fmt: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> Graph:
    """Read a graph file and build a `Graph` from it."""
    return read_graph_document(path, fmt).build(config)


def dump_yaml(graph: Graph, source: Optional[Label] = None) -> str:
    """Serialize ``graph`` into the YAML document format read by `parse_yaml`."""
    data: Dict[str, Any] = {}
    if source is not None:
        data["source"] = source
    targets = {e.target for e in graph.edges()}
    isolated = [
        label
        for label in graph
        if graph.out_degree(label) == 0 and label not in targets
    ]
    if isolated:
        data["vertices"] = isolated
    data["edges"] = [[e.source, e.target, e.weight] for e in graph.edges()]
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=None)
