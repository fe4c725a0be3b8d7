"""Tests for whether a series of measurements looks random."""

from __future__ import annotations

import math
from collections.abc import Iterable

from tenzing.numeric import med


def runs_test(values: Iterable[float]) -> bool:
    """Wald-Wolfowitz runs test around the median.

    Returns True when the series should be rejected as non-random
    (alpha = 0.05), and also when either side of the median has fewer
    than ten samples, so that the test does not apply.
    """
    items = list(values)
    median = med(items)
    deltas = [v >= median for v in items]
    n1 = sum(deltas)
    n2 = len(deltas) - n1

    if n1 < 10 or n2 < 10:
        return True

    n_runs = 1 + sum(a != b for a, b in zip(deltas, deltas[1:]))

    r_bar = 2 * n1 * n2 / (n1 + n2) + 1
    s = math.sqrt(
        2 * n1 * n2 * (2 * n1 * n2 - n1 - n2)
        / ((n1 + n2) * (n1 + n2) * (n1 + n2 - 1))
    )
    z = abs((n_runs - r_bar) / s)
    return z > 1.96


def compound_test(values: Iterable[float]) -> bool:
    """True if any randomness test rejects the series."""
    return runs_test(values)