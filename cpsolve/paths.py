"""Shortest paths, spanning trees and path counting on directed graphs."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .graphs import dijkstra, kahn_toposort, mst_prim, toposort

MOD = 10**9 + 7
_MAX_TOTAL = 2000


def flight_discount(n: int, flights: Iterable[tuple[int, int, int]]) -> int:
    """Cheapest route from city 1 to city ``n`` with one flight at half price.

    Raises ``ValueError`` when city ``n`` cannot be reached.
    """
    flights = list(flights)
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    reverse: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, c in flights:
        graph[a].append((b, c))
        reverse[b].append((a, c))

    from_start = dijkstra(graph, 1)
    to_end = dijkstra(reverse, n)
    best = min(
        (
            from_start[a] + c // 2 + to_end[b]
            for a, b, c in flights
            if from_start[a] != math.inf and to_end[b] != math.inf
        ),
        default=None,
    )
    if best is None:
        raise ValueError(f"city {n} is not reachable from city 1")
    return int(best)


def superbull(ids: Sequence[int]) -> int:
    """Largest total score of a tournament where a game scores ``a ^ b``."""
    n = len(ids)
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            weight = ids[i] ^ ids[j]
            graph[i].append((j, weight))
            graph[j].append((i, weight))
    return mst_prim(graph, maximum=True)


def count_routes(n: int, flights: Iterable[tuple[int, int]]) -> int:
    """Number of routes, modulo ``MOD``, in a DAG of cities ``1..n``.

    Routes start at any city without incoming flights and end at the last
    city of the depth-first topological order.
    """
    if n <= 0:
        raise ValueError("there must be at least one city")
    graph: list[list[int]] = [[] for _ in range(n)]
    for a, b in flights:
        graph[a - 1].append(b - 1)

    counts = [1] * n
    for targets in graph:
        for target in targets:
            counts[target] = 0

    order = toposort(graph)
    for node in order[:-1]:
        for target in graph[node]:
            counts[target] = (counts[target] + counts[node]) % MOD
    return counts[order[-1]]


def _path_lengths(n: int, edges: Iterable[tuple[int, int]]) -> set[int]:
    """Lengths of all paths from any source to the last node of a DAG."""
    if n <= 0:
        raise ValueError("a graph needs at least one node")
    graph: list[list[int]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for a, b in edges:
        graph[a - 1].append(b - 1)
        in_degree[b - 1] += 1

    order = kahn_toposort(graph)
    lengths: list[set[int]] = [{0} if degree == 0 else set() for degree in in_degree]
    for node in order:
        extended = {length + 1 for length in lengths[node]}
        for target in graph[node]:
            lengths[target] |= extended
    return lengths[-1]


def quantum_superposition(
    na: int,
    nb: int,
    edges_a: Iterable[tuple[int, int]],
    edges_b: Iterable[tuple[int, int]],
    queries: Iterable[int],
) -> list[bool]:
    """For each query, whether a path through both DAGs can have that length.

    A total is a path length to the last node of the first DAG plus one to the
    last node of the second; totals above 2000 are never reported.
    """
    lengths_a = _path_lengths(na, edges_a)
    lengths_b = _path_lengths(nb, edges_b)
    totals = {a + b for a in lengths_a for b in lengths_b if a + b <= _MAX_TOTAL}
    return [query in totals for query in queries]