"""Query problems on rooted and unrooted trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .graphs import euler_tour, jump, lca, tree_jump
from .structures import FenwickTree

_PLANET_MAX_STEPS = 10**9


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Undirected adjacency lists for nodes ``1..n`` (index 0 unused)."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    return adj


def walk_towards(
    n: int,
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int, int]],
) -> list[int]:
    """Answer ``(a, b, e)``: the node reached after ``e`` steps from ``a`` towards ``b``.

    Nodes are numbered ``1..n``; a walk that is longer than the path stops at ``b``.
    """
    adj = _adjacency(n, edges)
    depth = [0] * (n + 1)
    parent = [0] * (n + 1)
    if n:
        parent[1] = 1
        stack = [1]
        while stack:
            node = stack.pop()
            for child in adj[node]:
                if child != parent[node]:
                    parent[child] = node
                    depth[child] = depth[node] + 1
                    stack.append(child)
    table = tree_jump(parent)

    answers = []
    for a, b, e in queries:
        ancestor = lca(table, depth, a, b)
        up = depth[a] - depth[ancestor]
        down = depth[b] - depth[ancestor]
        if up >= e:
            answers.append(jump(table, a, e))
        elif e < up + down:
            remaining = e - up
            answers.append(jump(table, b, down - remaining))
        else:
            answers.append(b)
    return answers


def subtree_queries(
    values: Sequence[int],
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, ...]],
) -> list[int]:
    """Process ``(1, s, x)`` value changes and ``(2, s)`` subtree-sum queries.

    The tree is rooted at node 1; nodes are numbered ``1..len(values)``.
    Returns the answers to the sum queries in order.
    """
    n = len(values)
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a - 1].append(b - 1)
        adj[b - 1].append(a - 1)
    start, end = euler_tour(adj)

    tree = FenwickTree(n)
    for node, value in enumerate(values):
        tree.add(start[node], value)

    answers = []
    for query in queries:
        kind = query[0]
        if kind == 1:
            _, s, x = query
            tree.set(start[s - 1], x)
        elif kind == 2:
            _, s = query
            s -= 1
            answers.append(tree.range_sum(start[s], end[s] - 1))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def planet_queries(
    teleporters: Sequence[int],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer ``(x, k)``: the planet reached from ``x`` after ``k`` teleports.

    ``teleporters[i]`` is the destination of planet ``i + 1``.
    """
    parents = [0, *teleporters]
    table = tree_jump(parents, _PLANET_MAX_STEPS)
    return [jump(table, x, k) for x, k in queries]


def mootube(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """Answer ``(k, v)``: how many other videos are reachable from ``v``
    using only links of relevance at least ``k``."""
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        adj[a].append((b, w))
        adj[b].append((a, w))

    answers = []
    for k, v in queries:
        count = 0
        stack = [(v, v)]
        while stack:
            node, parent = stack.pop()
            count += 1
            for other, weight in adj[node]:
                if weight >= k and other != parent:
                    stack.append((other, node))
        answers.append(count - 1)
    return answers