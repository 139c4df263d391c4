"""Array query problems built on Fenwick trees, segment trees and sorted lists."""

from __future__ import annotations

import bisect
import heapq
from collections import Counter
from collections.abc import Iterable, Sequence

from .structures import MinSegmentTree, PrefixFenwick


def range_update_queries(
    values: Sequence[int],
    queries: Iterable[tuple[int, ...]],
) -> list[int]:
    """Process ``(1, a, b, u)`` range additions and ``(2, k)`` point reads.

    Positions are numbered ``1..len(values)``. Returns the values read, in order.
    """
    tree = PrefixFenwick(len(values))
    previous = 0
    for pos, value in enumerate(values):
        tree.update(pos, value - previous)
        previous = value

    answers = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            _, a, b, u = query
            tree.update(a - 1, u)
            tree.update(b, -u)
        elif kind == 2:
            _, k = query
            answers.append(tree.query(k))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def pizzeria_queries(
    prices: Sequence[int],
    queries: Iterable[tuple[int, ...]],
) -> list[int]:
    """Process ``(1, k, x)`` price changes and ``(2, k)`` cheapest-pizza queries.

    A pizza from building ``i`` costs its price plus the distance ``|i - k|``.
    Buildings are numbered ``1..len(prices)``.
    """
    n = len(prices)
    left = MinSegmentTree(n + 1)
    right = MinSegmentTree(n + 1)
    for i, price in enumerate(prices, start=1):
        left.update(i, price - i)
        right.update(i, price + i)

    answers = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            _, k, x = query
            left.update(k, x - k)
            right.update(k, x + k)
        elif kind == 2:
            _, k = query
            best = right.query(k, n + 1) - k
            if k > 1:
                best = min(best, left.query(1, k) + k)
            answers.append(int(best))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def concert_tickets(prices: Iterable[int], customers: Iterable[int]) -> list[int]:
    """Sell each customer the dearest ticket not above their limit, or -1."""
    available = sorted(prices)
    answers = []
    for limit in customers:
        idx = bisect.bisect_right(available, limit)
        answers.append(available.pop(idx - 1) if idx else -1)
    return answers


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Longest passage without lights after each light is added to a street."""
    if length <= 0:
        raise ValueError("street length must be positive")
    boundaries = [0, length]
    segments: Counter[int] = Counter({length: 1})
    heap = [-length]

    answers = []
    for p in positions:
        if not 0 < p < length:
            raise ValueError(f"position {p} is outside the street")
        idx = bisect.bisect_left(boundaries, p)
        if boundaries[idx] == p:
            raise ValueError(f"a light already stands at {p}")
        lo, hi = boundaries[idx - 1], boundaries[idx]
        boundaries.insert(idx, p)
        segments[hi - lo] -= 1
        for part in (p - lo, hi - p):
            segments[part] += 1
            heapq.heappush(heap, -part)
        while segments[-heap[0]] <= 0:
            heapq.heappop(heap)
        answers.append(-heap[0])
    return answers


def advertisement(heights: Sequence[int]) -> int:
    """Largest rectangle area that fits under a row of fence boards."""
    n = len(heights)
    left_limit = []
    stack: list[tuple[int, int]] = []
    for i, h in enumerate(heights):
        while stack and stack[-1][0] >= h:
            stack.pop()
        left_limit.append(stack[-1][1] if stack else -1)
        stack.append((h, i))

    best = 0
    stack = []
    for i, h in reversed(list(enumerate(heights))):
        while stack and stack[-1][0] >= h:
            stack.pop()
        right = stack[-1][1] if stack else n
        best = max(best, h * (right - left_limit[i] - 1))
        stack.append((h, i))
    return best