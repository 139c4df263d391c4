"""Prime sieving, divisor search and modular exponentiation."""

from __future__ import annotations

import math
from collections.abc import Iterable

MOD = 10**9 + 7
INNER_LIMIT = 10**7


def primes_below(limit: int) -> list[int]:
    """All primes strictly below ``limit``, in increasing order."""
    if limit <= 2:
        return []
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def common_divisors(values: Iterable[int]) -> int:
    """Largest number that divides at least two of ``values``; 1 if none does."""
    values = list(values)
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    if not values:
        return 1
    top = max(values)
    counts = [0] * (top + 1)
    for value in values:
        counts[value] += 1
    for divisor in range(top, 1, -1):
        multiples = 0
        for multiple in range(divisor, top + 1, divisor):
            multiples += counts[multiple]
            if multiples >= 2:
                return divisor
    return 1


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` reduced modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def exponentiation(a: int, b: int, c: int) -> int:
    """``a ** (b ** c)`` modulo ``MOD``, reducing the exponent by Fermat."""
    exponent = mod_pow(b, c, MOD - 1)
    return mod_pow(a, exponent, MOD)


def inner_count(p: int) -> int:
    """Most inner cans of a rectangle of ``p`` cans, each side at least 3.

    A rectangle ``i`` by ``j`` has ``(i - 2) * (j - 2)`` cans not on its border;
    0 when no such rectangle exists.
    """
    if not 0 <= p <= INNER_LIMIT:
        raise ValueError(f"p must lie between 0 and {INNER_LIMIT}")
    best = 0
    for i in range(3, math.isqrt(p) + 1):
        if p % i == 0:
            best = max(best, (i - 2) * (p // i - 2))
    return best