import math

import pytest

from spcore.algorithms.frontier import Frontier


def test_pop_orders_by_distance_then_label():
    f = Frontier.from_items([(0, 5, "x"), (1, 3, "b"), (2, 3, "a"), (3, 0, "z")])
    assert [f.pop() for _ in range(len(f))] == [(3, 0), (2, 3), (1, 3), (0, 5)]
    assert not f


def test_update_repositions_member():
    f = Frontier.from_items([(0, 0, "s"), (1, math.inf, "a"), (2, math.inf, "b")])
    assert f.pop() == (0, 0)
    f.update(2, 4, "b")
    f.update(1, 9, "a")
    f.update(1, 2, "a")
    assert len(f) == 2
    assert f.pop() == (1, 2)
    assert f.pop() == (2, 4)


def test_update_reinserts_non_member():
    f = Frontier()
    f.update(7, 1.5, "q")
    assert 7 in f
    assert f.pop() == (7, 1.5)


def test_same_key_reinsert_does_not_compare_handles():
    f = Frontier()
    f.push(0, 1, "a")
    f.push(0, 1, "a")
    assert len(f) == 1
    assert f.pop() == (0, 1)
    with pytest.raises(KeyError):
        f.pop()


def test_remove_and_peek():
    f = Frontier.from_items([(0, 1, "a"), (1, 2, "b")])
    f.remove(0)
    assert 0 not in f
    assert f.peek() == (1, 2)
    assert len(f) == 1
    with pytest.raises(KeyError):
        f.remove(0)


def test_infinite_keys_sort_last_by_label():
    f = Frontier.from_items([(0, math.inf, "b"), (1, math.inf, "a"), (2, 10, "c")])
    assert f.pop() == (2, 10)
    assert f.pop() == (1, math.inf)


def test_duplicate_handles_rejected():
    with pytest.raises(ValueError):
        Frontier.from_items([(0, 1, "a"), (0, 2, "a")])


def test_empty_peek_raises():
    with pytest.raises(KeyError):
        Frontier().peek()
