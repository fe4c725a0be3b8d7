"""Empirical timing of an operation sequence."""

from __future__ import annotations

import math
import sys
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from tenzing.numeric import stddev
from tenzing.randomness import compound_test


@dataclass(frozen=True)
class BenchmarkResult:
    """Percentiles and spread of a set of timings, in seconds."""

    pct01: float
    pct10: float
    pct50: float
    pct90: float
    pct99: float
    stddev: float


@dataclass(frozen=True)
class Measurement:
    """One measurement: how many samples it took and the time per sample."""

    n_samples: int
    time: float


def summarize(times: Iterable[float]) -> BenchmarkResult:
    """Percentiles (by index into the sorted times) and standard deviation."""
    ordered = sorted(times)
    if not ordered:
        raise ValueError("no timings to summarize")
    n = len(ordered)
    return BenchmarkResult(
        pct01=ordered[n * 1 // 100],
        pct10=ordered[n * 10 // 100],
        pct50=ordered[n * 50 // 100],
        pct90=ordered[n * 90 // 100],
        pct99=ordered[n * 99 // 100],
        stddev=stddev(ordered),
    )


def measure(
    run: Callable[[], object],
    n_samples_hint: float = 1,
    target_secs: float = 0.01,
    clock: Callable[[], float] = time.perf_counter,
) -> Measurement:
    """Run ``run`` repeatedly until one batch takes at least ``target_secs``."""
    n_samples = int(n_samples_hint)
    if n_samples < 1:
        raise ValueError("at least one sample is required")

    while True:
        start = clock()
        for _ in range(n_samples):
            run()
        elapsed = clock() - start

        if elapsed >= target_secs:
            return Measurement(n_samples, elapsed / n_samples)

        per_sample = elapsed / n_samples
        if per_sample <= 0:
            n_samples *= 2
            continue
        # aim a little past the target, moving halfway there
        est_samples = target_secs / per_sample * 1.1
        n_samples += math.ceil((est_samples - n_samples) * 0.5)


def benchmark(
    run: Callable[[], object],
    n_iters: int,
    max_retries: int,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchmarkResult:
    """Time ``run`` ``n_iters`` times, retrying while the timings look non-random.

    A ``max_retries`` of 0 retries until the timings pass.
    """
    times: list[float] = []
    retries = max_retries
    while max_retries == 0 or retries > 0:
        hint = measure(run, 1, clock=clock).n_samples

        times = []
        for _ in range(n_iters):
            mmt = measure(run, hint, clock=clock)
            hint = max(mmt.n_samples, hint)
            times.append(mmt.time)

        if compound_test(times):
            print(f"failed randomness test ({retries - 1} left)", file=sys.stderr)
            retries -= 1
            continue
        break

    return summarize(times)