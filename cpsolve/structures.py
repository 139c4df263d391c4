"""Fenwick trees and a minimum segment tree over integer arrays."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _lowbit(x: int) -> int:
    """Least significant set bit of ``x``."""
    return x & -x


class FenwickTree:
    """Zero-indexed point-update, range-sum tree that remembers each value."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * (n + 1)
        self._values = [0] * n

    def __len__(self) -> int:
        return len(self._values)

    def _check(self, k: int) -> None:
        if not 0 <= k < len(self._values):
            raise IndexError(f"position {k} out of range")

    def prefix_sum(self, k: int) -> int:
        """Sum of positions ``0..k`` inclusive; ``k == -1`` gives 0."""
        if not -1 <= k < len(self._values):
            raise IndexError(f"position {k} out of range")
        total = 0
        k += 1
        while k:
            total += self._tree[k]
            k -= _lowbit(k)
        return total

    def range_sum(self, a: int, b: int) -> int:
        """Sum of positions ``a..b`` inclusive."""
        return self.prefix_sum(b) - self.prefix_sum(a - 1)

    def add(self, k: int, v: int) -> None:
        """Add ``v`` to position ``k``."""
        self._check(k)
        self._values[k] += v
        k += 1
        while k < len(self._tree):
            self._tree[k] += v
            k += _lowbit(k)

    def set(self, k: int, v: int) -> None:
        """Replace the value at position ``k`` with ``v``."""
        self._check(k)
        self.add(k, v - self._values[k])


class RangeFenwick:
    """One-indexed Fenwick tree over positions ``1..m``."""

    def __init__(self, m: int) -> None:
        if m < 0:
            raise ValueError("size must be non-negative")
        self._ft = [0] * (m + 1)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> RangeFenwick:
        """Build in linear time; ``values[0]`` is ignored, ``values[i]`` sits at ``i``."""
        values = list(values)
        m = max(len(values) - 1, 0)
        tree = cls(m)
        ft = tree._ft
        for i, value in enumerate(values[1:], start=1):
            ft[i] += value
            parent = i + _lowbit(i)
            if parent <= m:
                ft[parent] += ft[i]
        return tree

    @property
    def size(self) -> int:
        return len(self._ft) - 1

    def rsq(self, j: int) -> int:
        """Sum of positions ``1..j``; ``j == 0`` gives 0."""
        if not 0 <= j <= self.size:
            raise IndexError(f"position {j} out of range")
        total = 0
        while j:
            total += self._ft[j]
            j -= _lowbit(j)
        return total

    def range_rsq(self, i: int, j: int) -> int:
        """Sum of positions ``i..j`` inclusive."""
        return self.rsq(j) - self.rsq(i - 1)

    def update(self, i: int, v: int) -> None:
        """Add ``v`` at position ``i``; positions past the end are ignored."""
        if i < 1:
            raise IndexError(f"position {i} out of range")
        while i < len(self._ft):
            self._ft[i] += v
            i += _lowbit(i)


class RangeUpdatePointQuery:
    """Add to a range of positions ``1..m`` and read single positions."""

    def __init__(self, m: int) -> None:
        self._tree = RangeFenwick(m)

    def update(self, i: int, j: int, v: int) -> None:
        """Add ``v`` to every position in ``i..j``."""
        self._tree.update(i, v)
        self._tree.update(j + 1, -v)

    def query(self, i: int) -> int:
        """Current value at position ``i``."""
        return self._tree.rsq(i)


class RangeUpdateRangeQuery:
    """Add to a range of positions ``1..m`` and sum over ranges."""

    def __init__(self, m: int) -> None:
        self._points = RangeUpdatePointQuery(m)
        self._corrections = RangeFenwick(m)

    def update(self, i: int, j: int, v: int) -> None:
        """Add ``v`` to every position in ``i..j``."""
        self._points.update(i, j, v)
        self._corrections.update(i, v * (i - 1))
        self._corrections.update(j + 1, -v * j)

    def prefix_sum(self, j: int) -> int:
        """Sum of positions ``1..j``."""
        return self._points.query(j) * j - self._corrections.rsq(j)

    def range_sum(self, i: int, j: int) -> int:
        """Sum of positions ``i..j`` inclusive."""
        return self.prefix_sum(j) - self.prefix_sum(i - 1)


class PrefixFenwick:
    """Zero-indexed Fenwick tree with half-open prefix sums and a prefix search."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._s = [0] * n

    def __len__(self) -> int:
        return len(self._s)

    def update(self, pos: int, dif: int) -> None:
        """Add ``dif`` at ``pos``; positions past the end are ignored."""
        if pos < 0:
            raise IndexError(f"position {pos} out of range")
        n = len(self._s)
        while pos < n:
            self._s[pos] += dif
            pos |= pos + 1

    def query(self, pos: int) -> int:
        """Sum of positions in ``[0, pos)``."""
        if not 0 <= pos <= len(self._s):
            raise IndexError(f"position {pos} out of range")
        total = 0
        while pos > 0:
            total += self._s[pos - 1]
            pos &= pos - 1
        return total

    def lower_bound(self, total: int) -> int:
        """Smallest ``pos`` with sum of ``[0, pos]`` at least ``total``.

        Returns -1 when ``total`` is not positive and ``len(self)`` when no
        prefix reaches it. Values must be non-negative.
        """
        if total <= 0:
            return -1
        n = len(self._s)
        pos = 0
        step = 1 << n.bit_length()
        while step:
            if pos + step <= n and self._s[pos + step - 1] < total:
                pos += step
                total -= self._s[pos - 1]
            step >>= 1
        return pos


class MinSegmentTree:
    """Zero-indexed minimum tree; empty ranges give ``math.inf``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._n = n
        self._s: list[float] = [math.inf] * (2 * n)

    def __len__(self) -> int:
        return self._n

    def update(self, pos: int, val: int) -> None:
        """Set position ``pos`` to ``val``."""
        if not 0 <= pos < self._n:
            raise IndexError(f"position {pos} out of range")
        pos += self._n
        self._s[pos] = val
        pos //= 2
        while pos:
            self._s[pos] = min(self._s[2 * pos], self._s[2 * pos + 1])
            pos //= 2

    def query(self, b: int, e: int) -> float:
        """Minimum over ``[b, e)``."""
        if b < 0 or e > self._n:
            raise IndexError(f"range [{b}, {e}) out of bounds")
        left = right = math.inf
        b += self._n
        e += self._n
        while b < e:
            if b % 2:
                left = min(left, self._s[b])
                b += 1
            if e % 2:
                e -= 1
                right = min(self._s[e], right)
            b //= 2
            e //= 2
        return min(left, right)