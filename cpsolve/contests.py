"""Short contest problems: array splitting, an apple game, lane crossing, haybales."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate

# Length of the window a single car blocks in its lane.
_CAR_SPAN = 10**9 * 20 * 72 // 36 // 5
# Time needed to pass one lane.
_LANE_TIME = 10**9 * 72 // 50


def split_max(values: Iterable[int]) -> list[int] | None:
    """Assign every element to group 1 or 2 so that both groups are used.

    The first maximum goes to group 2 and everything else to group 1.
    Returns ``None`` when all values are equal and no such split works.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    if all(value == values[0] for value in values):
        return None
    top = values.index(max(values))
    return [2 if position == top else 1 for position, _ in enumerate(values)]


def apple_game_winner(values: Sequence[int], k: int) -> str:
    """Winner of the apple game, ``"Tom"`` or ``"Jerry"``.

    Jerry wins outright when the spread of ``values`` exceeds ``k + 1``;
    otherwise the parity of the total decides, an odd total going to Tom.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    if max(values) - min(values) > k + 1:
        return "Jerry"
    return "Tom" if sum(values) % 2 else "Jerry"


def crossing(a: int, b: int, lanes: Sequence[Sequence[int]]) -> int:
    """Time of the crossing over ``a + b`` lanes of cars.

    ``lanes[i]`` holds the positions of the cars in lane ``i``; each car blocks
    a window of time shifted by the lane it drives in. Returns the first free
    moment before a blocked window when there is one, otherwise the end of the
    last window plus the time to cross every lane.
    """
    lanes = [list(lane) for lane in lanes]
    if len(lanes) != a + b:
        raise ValueError(f"expected {a + b} lanes, got {len(lanes)}")
    windows = sorted(
        (car - (lane_no + 1) * _CAR_SPAN, car - lane_no * _CAR_SPAN)
        for lane_no, lane in enumerate(lanes)
        for car in lane
    )
    pos = 0
    for start, end in windows:
        if pos < start:
            return pos
        pos = max(pos, end)
    return pos + (a + b) * _LANE_TIME


def haybale_median(n: int, instructions: Iterable[tuple[int, int]]) -> int:
    """Stack height just above the middle after adding bales to ``[a, b)`` ranges.

    Stacks are numbered ``1..n``; each instruction ``(a, b)`` adds one bale to
    every stack from ``a`` up to but not including ``b``.
    """
    if n < 3:
        raise ValueError("there must be at least three stacks")
    diff = [0] * (n + 2)
    for a, b in instructions:
        if not (0 <= a <= n + 1 and 0 <= b <= n + 1):
            raise ValueError(f"instruction ({a}, {b}) is out of range")
        diff[a] += 1
        diff[b] -= 1
    heights = sorted(accumulate(diff[1 : n + 1]))
    return heights[n // 2 + 1]