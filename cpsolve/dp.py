"""Dynamic programming problems: knapsacks, counting and games."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7
COMBINATION_MOD = 10_000_000_007

_BEATS = {"H": "S", "P": "H", "S": "P"}


def reachable_subset_sums(coins: Iterable[int], k: int) -> list[int]:
    """Sorted values up to ``k`` that are sums of some subset of ``coins``.

    Zero is always included.
    """
    if k < 0:
        raise ValueError("k must be non-negative")
    mask = (1 << (k + 1)) - 1
    reach = 1
    for coin in coins:
        if coin < 0:
            raise ValueError("coin values must be non-negative")
        reach |= (reach << coin) & mask
    return [x for x in range(k + 1) if reach >> x & 1]


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Most pages obtainable buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must be non-negative")
    best = [0] * (budget + 1)
    for price, page in zip(prices, pages):
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + page)
    return best[budget]


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Number of unordered ways to make ``target``, modulo ``COMBINATION_MOD``."""
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for coin in coins:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % COMBINATION_MOD
    return ways[target]


def removing_digits(n: int) -> int:
    """Fewest steps to reach zero, each step subtracting one of the digits."""
    if n < 0:
        raise ValueError("n must be non-negative")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(
            steps[value - int(digit)] for digit in str(value) if digit != "0"
        )
    return steps[n]


def array_description(values: Sequence[int], upper: int) -> int:
    """Ways, modulo ``MOD``, to fill the zeros of ``values`` with ``1..upper``
    so that neighbours differ by at most one."""
    if not values:
        raise ValueError("values must not be empty")
    first, *rest = values
    counts = [0] + [1 if first in (0, m) else 0 for m in range(1, upper + 1)] + [0]
    for value in rest:
        counts = (
            [0]
            + [
                (counts[m - 1] + counts[m] + counts[m + 1]) % MOD if value in (0, m) else 0
                for m in range(1, upper + 1)
            ]
            + [0]
        )
    return sum(counts) % MOD


def hoof_paper_scissors(moves: str, switches: int) -> int:
    """Most games won against ``moves`` (letters H, P, S) changing gesture
    at most ``switches`` times."""
    if switches < 0:
        raise ValueError("switches must be non-negative")
    following: dict[str, list[int]] | None = None
    for move in reversed(moves):
        if move not in _BEATS:
            raise ValueError(f"unknown move {move!r}")
        row: dict[str, list[int]] = {}
        for gesture, beaten in _BEATS.items():
            win = 1 if beaten == move else 0
            scores = []
            for k in range(switches + 1):
                if following is None:
                    scores.append(win)
                elif k == 0:
                    scores.append(win + following[gesture][0])
                else:
                    scores.append(
                        win
                        + max(following[other][k - (other != gesture)] for other in _BEATS)
                    )
            row[gesture] = scores
        following = row
    if following is None:
        return 0
    return max(scores[switches] for scores in following.values())


def increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest non-decreasing subsequence."""
    tails: list[int] = []
    for value in values:
        idx = bisect.bisect_right(tails, value)
        if idx == len(tails):
            tails.append(value)
        else:
            tails[idx] = value
    return len(tails)