import math
import random

import pytest

from cpsolve.structures import (
    FenwickTree,
    MinSegmentTree,
    PrefixFenwick,
    RangeFenwick,
    RangeUpdatePointQuery,
    RangeUpdateRangeQuery,
)


def _values(seed, n, lo=-20, hi=20):
    rng = random.Random(seed)
    return [rng.randint(lo, hi) for _ in range(n)]


def _filled_fenwick(values):
    tree = FenwickTree(len(values))
    for k, v in enumerate(values):
        tree.add(k, v)
    return tree


def test_fenwick_prefix_sums_match_values():
    values = _values(1, 17)
    tree = _filled_fenwick(values)
    for k in range(len(values)):
        assert tree.prefix_sum(k) == sum(values[: k + 1])
    assert tree.prefix_sum(-1) == 0


def test_fenwick_range_sums_match_values():
    values = _values(2, 13)
    tree = _filled_fenwick(values)
    for a in range(len(values)):
        for b in range(a, len(values)):
            assert tree.range_sum(a, b) == sum(values[a : b + 1])


def test_fenwick_set_replaces_value():
    tree = FenwickTree(6)
    tree.add(3, 10)
    tree.set(3, 4)
    assert tree.range_sum(3, 3) == 4
    assert tree.prefix_sum(5) == 4
    tree.set(3, 4)
    assert tree.prefix_sum(5) == 4


def test_fenwick_rejects_out_of_range():
    tree = FenwickTree(5)
    with pytest.raises(IndexError):
        tree.add(5, 1)
    with pytest.raises(IndexError):
        tree.set(-1, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(5)


def test_range_fenwick_from_values_matches_updates():
    values = [0] + _values(3, 20)
    built = RangeFenwick.from_values(values)
    incremental = RangeFenwick(len(values) - 1)
    for i, v in enumerate(values[1:], start=1):
        incremental.update(i, v)
    for j in range(len(values)):
        assert built.rsq(j) == incremental.rsq(j) == sum(values[1 : j + 1])


def test_range_fenwick_range_rsq():
    values = [0] + _values(4, 11)
    tree = RangeFenwick.from_values(values)
    for i in range(1, len(values)):
        for j in range(i, len(values)):
            assert tree.range_rsq(i, j) == sum(values[i : j + 1])


def test_range_fenwick_rejects_position_zero():
    tree = RangeFenwick(4)
    with pytest.raises(IndexError):
        tree.update(0, 1)
    with pytest.raises(IndexError):
        tree.rsq(5)


def test_range_update_point_query():
    rng = random.Random(5)
    m = 15
    tree = RangeUpdatePointQuery(m)
    expected = [0] * (m + 1)
    for _ in range(40):
        i = rng.randint(1, m)
        j = rng.randint(i, m)
        v = rng.randint(-9, 9)
        tree.update(i, j, v)
        for p in range(i, j + 1):
            expected[p] += v
    for p in range(1, m + 1):
        assert tree.query(p) == expected[p]


def test_range_update_range_query():
    rng = random.Random(6)
    m = 12
    tree = RangeUpdateRangeQuery(m)
    expected = [0] * (m + 1)
    for _ in range(30):
        i = rng.randint(1, m)
        j = rng.randint(i, m)
        v = rng.randint(-9, 9)
        tree.update(i, j, v)
        for p in range(i, j + 1):
            expected[p] += v
    for i in range(1, m + 1):
        for j in range(i, m + 1):
            assert tree.range_sum(i, j) == sum(expected[i : j + 1])


def test_prefix_fenwick_query_is_half_open():
    values = _values(7, 19)
    tree = PrefixFenwick(len(values))
    for pos, v in enumerate(values):
        tree.update(pos, v)
    for pos in range(len(values) + 1):
        assert tree.query(pos) == sum(values[:pos])


def test_prefix_fenwick_difference_array_range_updates():
    values = _values(8, 10, 0, 50)
    n = len(values)
    tree = PrefixFenwick(n)
    tree.update(0, values[0])
    for i in range(1, n):
        tree.update(i, values[i] - values[i - 1])
    tree.update(2 - 1, 7)
    tree.update(n, -7)
    values[1:] = [v + 7 for v in values[1:]]
    for k in range(1, n + 1):
        assert tree.query(k) == values[k - 1]


def test_prefix_fenwick_lower_bound():
    values = _values(9, 14, 0, 6)
    tree = PrefixFenwick(len(values))
    for pos, v in enumerate(values):
        tree.update(pos, v)
    total = sum(values)
    assert tree.lower_bound(0) == -1
    assert tree.lower_bound(total + 1) == len(values)
    for target in range(1, total + 1):
        pos = tree.lower_bound(target)
        assert sum(values[: pos + 1]) >= target
        assert sum(values[:pos]) < target


def test_min_segment_tree_queries():
    values = _values(10, 16)
    tree = MinSegmentTree(len(values))
    for pos, v in enumerate(values):
        tree.update(pos, v)
    for b in range(len(values)):
        for e in range(b + 1, len(values) + 1):
            assert tree.query(b, e) == min(values[b:e])


def test_min_segment_tree_empty_range_and_updates():
    tree = MinSegmentTree(5)
    assert tree.query(0, 5) == math.inf
    tree.update(2, 8)
    tree.update(4, 3)
    assert tree.query(0, 5) == 3
    assert tree.query(2, 2) == math.inf
    tree.update(4, 9)
    assert tree.query(0, 5) == 8
    with pytest.raises(IndexError):
        tree.update(5, 1)