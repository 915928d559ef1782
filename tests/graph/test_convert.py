import networkx as nx
import pytest

from spcore.algorithms.spf import compute_shortest_paths
from spcore.exceptions import InvalidEdge
from spcore.graph.convert import from_networkx, to_networkx
from spcore.graph.digraph import build_graph


def test_to_networkx_keeps_isolated_vertices():
    g = build_graph([("a", "b", 2)], vertices=["lonely"])
    nxg = to_networkx(g)
    assert isinstance(nxg, nx.DiGraph)
    assert set(nxg.nodes) == {"a", "b", "lonely"}
    assert nxg["a"]["b"]["weight"] == 2


def test_to_networkx_custom_attribute(canonical):
    nxg = to_networkx(canonical, weight="cost")
    assert nxg["c"]["d"]["cost"] == 11
    assert nxg.number_of_edges() == canonical.num_edges


def test_from_networkx_directed():
    nxg = nx.DiGraph()
    nxg.add_edge("a", "b", weight=4)
    nxg.add_edge("b", "c")
    nxg.add_node("d")
    g = from_networkx(nxg)
    assert g.weight("a", "b") == 4
    assert g.weight("b", "c") == 1
    assert "d" in g
    assert g.weight("b", "a") is None


def test_from_networkx_undirected_adds_both_directions():
    nxg = nx.Graph()
    nxg.add_edge("a", "b", weight=3)
    nxg.add_edge("c", "c", weight=0)
    g = from_networkx(nxg)
    assert g.weight("a", "b") == 3
    assert g.weight("b", "a") == 3
    assert g.num_edges == 3


def test_from_networkx_validates_weights():
    nxg = nx.DiGraph()
    nxg.add_edge("a", "b", weight=-1)
    with pytest.raises(InvalidEdge):
        from_networkx(nxg)


def test_roundtrip_preserves_shortest_paths(canonical):
    back = from_networkx(to_networkx(canonical))
    compute_shortest_paths(canonical, "a")
    compute_shortest_paths(back, "a")
    assert back.result.distance_map() == canonical.result.distance_map()
