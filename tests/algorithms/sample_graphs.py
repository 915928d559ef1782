import pytest

from spcore.graph.digraph import build_graph


@pytest.fixture
def canonical_edges():
    #            [7]         [15]
    #     a ─────────► b ───────────► d ──[6]──► e
    #     │ ╲          │ [10]       ▲            │
    #     │  ╲[9]      ▼          │ [11]       │ [9]
    #     │   ╲──────► c ─────────┘            │
    #     │ [14]       │ [2]                   │
    #     └──────────► f ◄─────────────────────┘
    return [
        ("a", "b", 7),
        ("a", "c", 9),
        ("a", "f", 14),
        ("b", "c", 10),
        ("b", "d", 15),
        ("c", "d", 11),
        ("c", "f", 2),
        ("d", "e", 6),
        ("e", "f", 9),
    ]


@pytest.fixture
def canonical(canonical_edges):
    return build_graph(canonical_edges)


@pytest.fixture
def duplicate_edge():
    # a ──[5, then 3]──► b
    return build_graph([("a", "b", 5), ("a", "b", 3)])


@pytest.fixture
def single_vertex():
    return build_graph([], vertices=["solo"])


@pytest.fixture
def two_islands():
    #  A ──[1]──► B ──[2]──► C        X ──[1]──► Y
    return build_graph(
        [("A", "B", 1), ("B", "C", 2), ("X", "Y", 1)],
    )


@pytest.fixture
def tie_square():
    # Two equal-cost routes S -> T; the label tie-break prefers going via A.
    #        [1]        [1]
    #   ┌───────► B ───────┐
    #   S                  T
    #   └───────► A ───────┘
    #        [1]        [1]
    return build_graph(
        [("S", "B", 1), ("B", "T", 1), ("S", "A", 1), ("A", "T", 1)],
    )


@pytest.fixture
def float_line():
    #  p ──[0.5]──► q ──[0.25]──► r ──[0]──► s
    return build_graph([("p", "q", 0.5), ("q", "r", 0.25), ("r", "s", 0)])
