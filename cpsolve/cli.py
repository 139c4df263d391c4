"""Command line: solve a named problem from its plain-text input."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable
from pathlib import Path

from .contests import apple_game_winner, crossing, haybale_median, split_max
from .dp import (
    array_description,
    book_shop,
    coin_combinations,
    hoof_paper_scissors,
    increasing_subsequence,
    reachable_subset_sums,
    removing_digits,
)
from .grids import cross_country_skiing, labyrinth, perimeter
from .number_theory import common_divisors, exponentiation, inner_count
from .paths import count_routes, flight_discount, quantum_superposition, superbull
from .queries import (
    advertisement,
    concert_tickets,
    pizzeria_queries,
    range_update_queries,
    traffic_lights,
)
from .trees import mootube, planet_queries, subtree_queries, walk_towards


class _Reader:
    """Whitespace-separated tokens of a problem input."""

    def __init__(self, text: str) -> None:
        self._tokens = deque(text.split())

    def word(self) -> str:
        if not self._tokens:
            raise ValueError("unexpected end of input")
        return self._tokens.popleft()

    def number(self) -> int:
        return int(self.word())

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def tuples(self, count: int, width: int) -> list[tuple[int, ...]]:
        return [tuple(self.numbers(width)) for _ in range(count)]

    def chars(self, count: int) -> str:
        """Next ``count`` non-blank characters, across token boundaries."""
        taken: list[str] = []
        while len(taken) < count:
            token = self.word()
            piece = token[: count - len(taken)]
            taken.append(piece)
            rest = token[len(piece) :]
            if rest:
                self._tokens.appendleft(rest)
            count -= 0
            if sum(map(len, taken)) >= count:
                break
        return "".join(taken)


Solver = Callable[[_Reader], list[str]]


def _split_max(r: _Reader) -> list[str]:
    lines: list[str] = []
    for _ in range(r.number()):
        result = split_max(r.numbers(r.number()))
        lines += ["No"] if result is None else ["Yes", *map(str, result)]
    return lines


def _apple_game(r: _Reader) -> list[str]:
    lines = []
    for _ in range(r.number()):
        n, k = r.numbers(2)
        lines.append(apple_game_winner(r.numbers(n), k))
    return lines


def _subset_sums(r: _Reader) -> list[str]:
    n, k = r.numbers(2)
    sums = reachable_subset_sums(r.numbers(n), k)
    return [str(len(sums)), " ".join(map(str, sums))]


def _walk_towards(r: _Reader) -> list[str]:
    n = r.number()
    edges = r.tuples(n - 1, 2)
    queries = r.tuples(r.number(), 3)
    return [str(node) for node in walk_towards(n, edges, queries)]


def _increasing_subsequence(r: _Reader) -> list[str]:
    return [str(increasing_subsequence(r.numbers(r.number())))]


def _common_divisors(r: _Reader) -> list[str]:
    return [str(common_divisors(r.numbers(r.number())))]


def _concert_tickets(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    prices = r.numbers(n)
    return [str(price) for price in concert_tickets(prices, r.numbers(m))]


def _subtree_queries(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    values = r.numbers(n)
    edges = r.tuples(n - 1, 2)
    queries = []
    for _ in range(q):
        kind = r.number()
        queries.append((kind, *r.numbers(2 if kind == 1 else 1)))
    return [str(total) for total in subtree_queries(values, edges, queries)]


def _advertisement(r: _Reader) -> list[str]:
    return [str(advertisement(r.numbers(r.number())))]


def _book_shop(r: _Reader) -> list[str]:
    n, budget = r.numbers(2)
    prices = r.numbers(n)
    return [str(book_shop(prices, r.numbers(n), budget))]


def _traffic_lights(r: _Reader) -> list[str]:
    length, n = r.numbers(2)
    return [" ".join(map(str, traffic_lights(length, r.numbers(n))))]


def _labyrinth(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    path = labyrinth([r.chars(m) for _ in range(n)])
    return ["NO"] if path is None else ["YES", str(len(path)), path]


def _flight_discount(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    return [str(flight_discount(n, r.tuples(m, 3)))]


def _coin_combinations(r: _Reader) -> list[str]:
    n, target = r.numbers(2)
    return [str(coin_combinations(r.numbers(n), target))]


def _removing_digits(r: _Reader) -> list[str]:
    return [str(removing_digits(r.number()))]


def _range_update_queries(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    values = r.numbers(n)
    queries = []
    for _ in range(q):
        kind = r.number()
        queries.append((kind, *r.numbers(3 if kind == 1 else 1)))
    return [str(value) for value in range_update_queries(values, queries)]


def _count_routes(r: _Reader) -> list[str]:
    n, m = r.numbers(2)
    return [str(count_routes(n, r.tuples(m, 2)))]


def _exponentiation(r: _Reader) -> list[str]:
    return [str(exponentiation(*triple)) for triple in r.tuples(r.number(), 3)]


def _array_description(r: _Reader) -> list[str]:
    n, upper = r.numbers(2)
    return [str(array_description(r.numbers(n), upper))]


def _planet_queries(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    teleporters = r.numbers(n)
    return [str(planet) for planet in planet_queries(teleporters, r.tuples(q, 2))]


def _pizzeria_queries(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    prices = r.numbers(n)
    queries = []
    for _ in range(q):
        kind, k = r.numbers(2)
        queries.append((kind, k, r.number()) if kind == 1 else (kind, k))
    return [str(cost) for cost in pizzeria_queries(prices, queries)]


def _superbull(r: _Reader) -> list[str]:
    return [str(superbull(r.numbers(r.number())))]


def _quantum_superposition(r: _Reader) -> list[str]:
    na, nb, ma, mb = r.numbers(4)
    edges_a = r.tuples(ma, 2)
    edges_b = r.tuples(mb, 2)
    queries = r.numbers(r.number())
    answers = quantum_superposition(na, nb, edges_a, edges_b, queries)
    return ["Yes" if answer else "No" for answer in answers]


def _inner_count(r: _Reader) -> list[str]:
    return [str(inner_count(p)) for p in r.numbers(r.number())]


def _crossing(r: _Reader) -> list[str]:
    a, b = r.numbers(2)
    lanes = [r.numbers(r.number()) for _ in range(a + b)]
    return [str(crossing(a, b, lanes))]


def _haybale(r: _Reader) -> list[str]:
    n, k = r.numbers(2)
    return [str(haybale_median(n, r.tuples(k, 2)))]


def _cross_country_skiing(r: _Reader) -> list[str]:
    m, n = r.numbers(2)
    elevations = [r.numbers(n) for _ in range(m)]
    waypoints = [r.numbers(n) for _ in range(m)]
    return [str(cross_country_skiing(elevations, waypoints))]


def _hoof_paper_scissors(r: _Reader) -> list[str]:
    n, k = r.numbers(2)
    return [str(hoof_paper_scissors(r.chars(n), k))]


def _mootube(r: _Reader) -> list[str]:
    n, q = r.numbers(2)
    edges = r.tuples(n - 1, 3)
    return [str(count) for count in mootube(n, edges, r.tuples(q, 2))]


def _perimeter(r: _Reader) -> list[str]:
    n = r.number()
    area, edge = perimeter([r.chars(n) for _ in range(n)])
    return [f"{area} {edge}"]


_PROBLEMS: dict[str, Solver] = {
    "cf-2107A": _split_max,
    "cf-2107B": _apple_game,
    "cf-687C": _subset_sums,
    "cf-gym102694C": _walk_towards,
    "cses-1073": _increasing_subsequence,
    "cses-1081": _common_divisors,
    "cses-1091": _concert_tickets,
    "cses-1137": _subtree_queries,
    "cses-1142": _advertisement,
    "cses-1158": _book_shop,
    "cses-1163": _traffic_lights,
    "cses-1193": _labyrinth,
    "cses-1195": _flight_discount,
    "cses-1636": _coin_combinations,
    "cses-1637": _removing_digits,
    "cses-1651": _range_update_queries,
    "cses-1681": _count_routes,
    "cses-1712": _exponentiation,
    "cses-1746": _array_description,
    "cses-1750": _planet_queries,
    "cses-2206": _pizzeria_queries,
    "cses-531": _superbull,
    "kattis-quantumsuperposition": _quantum_superposition,
    "putka-plocevinke-v-pravokotniku": _inner_count,
    "putka-preckanje": _crossing,
    "spoj-haybale": _haybale,
    "usaco-380": _cross_country_skiing,
    "usaco-694": _hoof_paper_scissors,
    "usaco-788": _mootube,
    "usaco-895": _perimeter,
}


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input, solve it and write the answer lines."""
    parser = argparse.ArgumentParser(
        prog="cpsolve", description="Solve a contest problem from its text input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument(
        "--io",
        metavar="NAME",
        help="read NAME.in and write NAME.out instead of the standard streams",
    )
    args = parser.parse_args(argv)

    text = Path(f"{args.io}.in").read_text() if args.io else sys.stdin.read()
    try:
        lines = _PROBLEMS[args.problem](_Reader(text))
    except ValueError as exc:
        print(f"cpsolve: {exc}", file=sys.stderr)
        return 1

    output = "".join(f"{line}\n" for line in lines)
    if args.io:
        Path(f"{args.io}.out").write_text(output)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())