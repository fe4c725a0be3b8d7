"""Small statistics and integer helpers used by the benchmarking code."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def avg(values: Iterable[float]) -> float:
    """Arithmetic mean; NaN for an empty input."""
    items = [float(v) for v in values]
    if not items:
        return math.nan
    return sum(items) / len(items)


def med(values: Iterable[float]) -> float:
    """Median of the values.

    Even-length samples average the element at the midpoint with the one
    after it, falling back to the last element for two-element samples.
    """
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return float(ordered[mid])
    upper = ordered[min(mid + 1, len(ordered) - 1)]
    return (ordered[mid] + upper) / 2.0


def var(values: Iterable[float]) -> float:
    """Population variance; NaN for an empty input."""
    items = [float(v) for v in values]
    if not items:
        return math.nan
    mean = avg(items)
    return sum((v - mean) ** 2 for v in items) / len(items)


def stddev(values: Iterable[float]) -> float:
    """Population standard deviation."""
    return math.sqrt(var(values))


def corr(a: Sequence[float], b: Sequence[float]) -> float:
    """Pearson correlation of two equally sized samples, clamped to [-1, 1]."""
    a = [float(v) for v in a]
    b = [float(v) for v in b]
    if len(a) != len(b):
        raise ValueError("vectors must be same size")
    if not a:
        return 0.0

    a_bar, b_bar = avg(a), avg(b)
    a_s, b_s = stddev(a), stddev(b)
    acc = sum((x - a_bar) * (y - b_bar) for x, y in zip(a, b))
    denom = len(a) * a_s * b_s
    if denom == 0:
        return math.nan
    c = acc / denom
    if c < -1.01:
        raise ValueError(
            f"corr={c} < -1: aBar={a_bar} bBar={b_bar} stddev(a)={a_s} stddev(b)={b_s}"
        )
    if c > 1.01:
        raise ValueError(
            f"corr={c} > 1: aBar={a_bar} bBar={b_bar} stddev(a)={a_s} stddev(b)={b_s}"
        )
    return max(-1.0, min(1.0, c))


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, largest first."""
    result: list[int] = []
    if n == 0:
        return result
    while n % 2 == 0:
        result.append(2)
        n //= 2
    i = 3
    while i * i <= n:
        while n % i == 0:
            result.append(i)
            n //= i
        i += 2
    if n > 2:
        result.append(n)
    result.sort(reverse=True)
    return result


def round_up(n: int, step: int) -> int:
    """Smallest multiple of ``step`` that is not less than ``n``."""
    return (n + step - 1) // step * step