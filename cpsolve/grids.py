"""Search problems on rectangular grids."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

_FORWARD = ((1, 0, "R"), (-1, 0, "L"), (0, 1, "D"), (0, -1, "U"))
_BACKWARD = ((1, 0, "L"), (-1, 0, "R"), (0, 1, "U"), (0, -1, "D"))
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _rows(grid: Sequence[str]) -> list[str]:
    rows = [str(row) for row in grid]
    if len({len(row) for row in rows}) > 1:
        raise ValueError("grid rows must have equal length")
    return rows


def labyrinth(grid: Sequence[str]) -> str | None:
    """Shortest path from ``A`` to ``B`` through ``.`` cells as ``LRUD`` moves.

    Returns ``None`` when ``B`` cannot be reached.
    """
    rows = _rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    start = None
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == "A":
                start = (x, y)
    if start is None:
        raise ValueError("grid has no start cell 'A'")

    dist = {start: 0}
    queue = deque([start])
    goal = None
    while queue and goal is None:
        x, y = queue.popleft()
        for dx, dy, _ in _FORWARD:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height) or (nx, ny) in dist:
                continue
            cell = rows[ny][nx]
            if cell == "B":
                dist[(nx, ny)] = dist[(x, y)] + 1
                goal = (nx, ny)
                break
            if cell == ".":
                dist[(nx, ny)] = dist[(x, y)] + 1
                queue.append((nx, ny))
    if goal is None:
        return None

    steps = []
    x, y = goal
    while dist[(x, y)]:
        target = dist[(x, y)] - 1
        for dx, dy, letter in _BACKWARD:
            neighbour = (x + dx, y + dy)
            if dist.get(neighbour) == target:
                steps.append(letter)
                x, y = neighbour
                break
        else:
            raise RuntimeError("broken distance table")
    return "".join(reversed(steps))


def cross_country_skiing(
    elevations: Sequence[Sequence[int]],
    waypoints: Sequence[Sequence[int]],
) -> int:
    """Smallest difficulty that lets every waypoint reach every other.

    Moving between neighbouring cells costs the difference of their elevations;
    the difficulty is the largest cost used.
    """
    height = len(elevations)
    width = len(elevations[0]) if height else 0
    if len(waypoints) != height or any(
        len(row) != width for row in (*elevations, *waypoints)
    ):
        raise ValueError("elevations and waypoints must have the same shape")
    targets = [
        (i, j) for i, row in enumerate(waypoints) for j, flag in enumerate(row) if flag
    ]
    if not targets:
        raise ValueError("there must be at least one waypoint")

    remaining = len(targets)
    start_i, start_j = targets[-1]
    heap = [(0, start_i, start_j)]
    visited: set[tuple[int, int]] = set()
    best = 0
    while heap:
        d, i, j = heapq.heappop(heap)
        if (i, j) in visited:
            continue
        best = max(best, d)
        if waypoints[i][j]:
            remaining -= 1
        if remaining == 0:
            break
        visited.add((i, j))
        for di, dj in _NEIGHBOURS:
            ni, nj = i + di, j + dj
            if not (0 <= ni < height and 0 <= nj < width) or (ni, nj) in visited:
                continue
            cost = abs(elevations[i][j] - elevations[ni][nj])
            heapq.heappush(heap, (cost, ni, nj))
    return best


def perimeter(grid: Sequence[str]) -> tuple[int, int]:
    """Area and perimeter of the largest ``#`` blob.

    Among blobs of equal area the smallest perimeter wins; ``(0, 0)`` when the
    grid holds no ``#`` at all.
    """
    rows = _rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0

    def is_blob(i: int, j: int) -> bool:
        return 0 <= i < height and 0 <= j < width and rows[i][j] == "#"

    seen: set[tuple[int, int]] = set()
    blobs = []
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell != "#" or (i, j) in seen:
                continue
            seen.add((i, j))
            stack = [(i, j)]
            area = edges = 0
            while stack:
                ci, cj = stack.pop()
                area += 1
                for di, dj in _NEIGHBOURS:
                    ni, nj = ci + di, cj + dj
                    if not is_blob(ni, nj):
                        edges += 1
                    elif (ni, nj) not in seen:
                        seen.add((ni, nj))
                        stack.append((ni, nj))
            blobs.append((area, edges))
    return min(blobs, key=lambda blob: (-blob[0], blob[1]), default=(0, 0))