"""Graph algorithms: tours, spanning trees, shortest paths, orderings, jumps."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence

Graph = Sequence[Sequence[int]]
WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def euler_tour(adj: Graph) -> tuple[list[int], list[int]]:
    """Entry times and exit times of a DFS from node 0 over a tree.

    The subtree of ``v`` occupies the times ``start[v] .. end[v] - 1``.
    """
    n = len(adj)
    start = [0] * n
    end = [0] * n
    if not n:
        return start, end
    clock = 1
    stack = [(0, 0, iter(adj[0]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child != parent:
                start[child] = clock
                clock += 1
                stack.append((child, node, iter(adj[child])))
                break
        else:
            end[node] = clock
            stack.pop()
    return start, end


def mst_prim(graph: WeightedGraph, maximum: bool = False) -> int:
    """Total weight of a minimum (or maximum) spanning tree.

    ``graph[u]`` lists ``(neighbour, weight)`` pairs. Raises ``ValueError``
    when the graph is not connected.
    """
    n = len(graph)
    sign = -1 if maximum else 1
    best = [math.inf] * n
    visited = [False] * n
    if n:
        best[0] = 0
    heap = [(0, 0)]
    total = 0
    added = 0
    while added < n:
        if not heap:
            raise ValueError("graph is not connected")
        key, u = heapq.heappop(heap)
        if visited[u] or best[u] < key:
            continue
        visited[u] = True
        added += 1
        total += sign * key
        for other, weight in graph[u]:
            candidate = sign * weight
            if visited[other] or best[other] < candidate:
                continue
            best[other] = candidate
            heapq.heappush(heap, (candidate, other))
    return total


def dijkstra(graph: WeightedGraph, source: int) -> list[float]:
    """Shortest distances from ``source``; unreachable nodes get ``math.inf``."""
    dist: list[float] = [math.inf] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if dist[u] < d:
            continue
        for other, weight in graph[u]:
            candidate = d + weight
            if candidate < dist[other]:
                dist[other] = candidate
                heapq.heappush(heap, (candidate, other))
    return dist


def toposort(graph: Graph) -> list[int]:
    """Topological order of a DAG by reversed DFS finishing order."""
    n = len(graph)
    visited = [False] * n
    order: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(graph[child])))
                    break
            else:
                order.append(node)
                stack.pop()
    order.reverse()
    return order


def kahn_toposort(graph: Graph) -> list[int]:
    """Topological order by repeatedly removing sources.

    Raises ``ValueError`` when the graph has a cycle.
    """
    n = len(graph)
    in_degree = [0] * n
    for edges in graph:
        for target in edges:
            in_degree[target] += 1
    queue = deque(node for node, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in graph[node]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order


def tree_jump(parents: Sequence[int], max_steps: int | None = None) -> list[list[int]]:
    """Binary lifting table: ``table[i][v]`` is ``v`` after ``2**i`` steps.

    Roots must point to themselves. The table covers jumps of up to
    ``max_steps`` steps, ``len(parents)`` by default.
    """
    limit = len(parents) if max_steps is None else max_steps
    levels = 1
    reach = 1
    while reach < limit:
        reach *= 2
        levels += 1
    table = [list(parents)]
    for _ in range(1, levels):
        previous = table[-1]
        table.append([previous[target] for target in previous])
    return table


def jump(table: Sequence[Sequence[int]], node: int, steps: int) -> int:
    """Node reached from ``node`` after ``steps`` parent steps."""
    for level, row in enumerate(table):
        if steps & (1 << level):
            node = row[node]
    return node


def lca(table: Sequence[Sequence[int]], depth: Sequence[int], a: int, b: int) -> int:
    """Lowest common ancestor of ``a`` and ``b``."""
    if depth[a] < depth[b]:
        a, b = b, a
    a = jump(table, a, depth[a] - depth[b])
    if a == b:
        return a
    for row in reversed(table):
        up_a, up_b = row[a], row[b]
        if up_a != up_b:
            a, b = up_a, up_b
    return table[0][a]