import pytest

from spcore.algorithms.paths import all_paths, distance_to, path_to
from spcore.algorithms.spf import compute_shortest_paths
from spcore.exceptions import AlgorithmError, VertexNotFound
from spcore.model.path import PathHop
from spcore.types.base import INFINITY, PathStatus, VertexState


class TestPathTo:
    def test_canonical_path_to_e(self, canonical):
        compute_shortest_paths(canonical, "a")
        result = path_to(canonical, "e")
        assert result.status is PathStatus.REACHED
        assert result.as_pairs() == (("a", 0), ("c", 9), ("d", 20), ("e", 26))
        assert result.cost == 26

    def test_canonical_path_to_f(self, canonical):
        compute_shortest_paths(canonical, "a")
        assert path_to(canonical, "f").labels == ("a", "c", "f")

    def test_source_is_single_hop(self, canonical):
        compute_shortest_paths(canonical, "a")
        result = path_to(canonical, "a")
        assert result.hops == (PathHop("a", 0),)
        assert result.source == "a"

    def test_single_vertex_graph(self, single_vertex):
        compute_shortest_paths(single_vertex, "solo")
        assert path_to(single_vertex, "solo").as_pairs() == (("solo", 0),)

    def test_unreached_is_not_an_error(self, two_islands):
        compute_shortest_paths(two_islands, "A")
        result = path_to(two_islands, "Y")
        assert result.status is PathStatus.UNREACHED
        assert result.hops == ()
        assert result.cost == INFINITY

    def test_before_any_run_everything_is_unreached(self, canonical):
        assert path_to(canonical, "a").status is PathStatus.UNREACHED
        assert distance_to(canonical, "a") == INFINITY

    def test_missing_target_raises(self, canonical):
        compute_shortest_paths(canonical, "a")
        before = canonical.result
        with pytest.raises(VertexNotFound) as exc_info:
            path_to(canonical, "nope")
        assert exc_info.value.label == "nope"
        assert canonical.result is before

    def test_missing_target_ok(self, canonical):
        compute_shortest_paths(canonical, "a")
        result = path_to(canonical, "nope", missing_ok=True)
        assert result.status is PathStatus.NOT_FOUND
        assert result.target == "nope"

    def test_hops_are_graph_edges(self, canonical):
        compute_shortest_paths(canonical, "a")
        hops = path_to(canonical, "e").hops
        for prev, hop in zip(hops, hops[1:]):
            assert prev.distance + canonical.weight(prev.label, hop.label) == hop.distance

    def test_query_private_tree(self, canonical):
        tree_a = compute_shortest_paths(canonical, "a")
        compute_shortest_paths(canonical, "b")
        assert path_to(tree_a, "e").labels == ("a", "c", "d", "e")
        assert tree_a.path_to("e").labels == ("a", "c", "d", "e")
        assert path_to(canonical, "e").labels == ("b", "d", "e")


class TestDistanceTo:
    def test_values(self, canonical):
        compute_shortest_paths(canonical, "a")
        assert distance_to(canonical, "d") == 20
        assert distance_to(canonical, "f") == 11

    def test_unreached(self, two_islands):
        compute_shortest_paths(two_islands, "A")
        assert distance_to(two_islands, "X") == INFINITY

    def test_missing(self, canonical):
        with pytest.raises(VertexNotFound):
            distance_to(canonical, "nope")


class TestAllPaths:
    def test_one_result_per_vertex(self, two_islands):
        compute_shortest_paths(two_islands, "A")
        results = {r.target: r for r in all_paths(two_islands)}
        assert set(results) == {"A", "B", "C", "X", "Y"}
        assert results["C"].as_pairs() == (("A", 0), ("B", 1), ("C", 3))
        assert results["X"].status is PathStatus.UNREACHED

    def test_is_lazy(self, canonical):
        compute_shortest_paths(canonical, "a")
        gen = all_paths(canonical)
        assert iter(gen) is gen
        first = next(gen)
        assert first.target in set(canonical)

    def test_tree_method(self, canonical):
        tree = compute_shortest_paths(canonical, "a")
        assert len(list(tree.all_paths())) == len(canonical)


class TestCorruptedTree:
    def test_chain_ending_off_root_raises(self, canonical):
        tree = compute_shortest_paths(canonical, "a")
        root = canonical.index_of("a")
        tree.states[root] = VertexState.UNREACHED
        with pytest.raises(AlgorithmError, match="ends at unreached"):
            path_to(tree, "e")

    def test_cyclic_chain_raises(self, canonical):
        tree = compute_shortest_paths(canonical, "a")
        c, d = canonical.index_of("c"), canonical.index_of("d")
        tree.predecessors[c] = d
        with pytest.raises(AlgorithmError, match="does not reach the root"):
            path_to(tree, "e")
