"""Text rendering of path query results.

The library core returns structured `PathResult` objects; this module turns
them into the familiar one-line form::

    a -> c(9) -> d(20) -> e(26)

The source is printed without a distance, an unreached target as
``e(unreached)`` and an unknown label as ``x(not found)``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from spcore.config import ENGINE_CONFIG, EngineConfig
from spcore.model.path import PathResult
from spcore.types.base import INFINITY, PathStatus


def format_path(result: PathResult, config: Optional[EngineConfig] = None) -> str:
    """Return ``result`` as a single line of text."""
    cfg = config or ENGINE_CONFIG
    if result.status is PathStatus.UNREACHED:
        return f"{result.target}(unreached)"
    if result.status is PathStatus.NOT_FOUND:
        return f"{result.target}(not found)"

    first, *rest = result.hops
    parts = [str(first.label)]
    parts.extend(f"{hop.label}({cfg.format_cost(hop.distance)})" for hop in rest)
    return " -> ".join(parts)


def format_all_paths(
    results: Iterable[PathResult], config: Optional[EngineConfig] = None
) -> str:
    """Return one formatted line per result, ordered by target label text."""
    ordered = sorted(results, key=lambda r: str(r.target))
    return "\n".join(format_path(r, config) for r in ordered)


def path_to_dict(result: PathResult) -> Dict[str, Any]:
    """Return a JSON-serializable representation of ``result``.

    Unreached distances are emitted as ``None`` since JSON has no infinity.
    """
    hops: List[List[Any]] = [
        [hop.label, None if hop.distance == INFINITY else hop.distance]
        for hop in result.hops
    ]
    return {
        "target": result.target,
        "status": result.status.name.lower(),
        "cost": None if result.cost == INFINITY else result.cost,
        "hops": hops,
    }
