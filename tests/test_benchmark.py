import random

import pytest

from tenzing.benchmark import BenchmarkResult, Measurement, benchmark, measure, summarize
from tenzing.numeric import stddev

LOW, HIGH = 1.0, 2.0
RANDOM_LOOKING = (
    [LOW] * 5 + [HIGH] * 2 + [LOW] + [HIGH] * 2 + [LOW] + [HIGH] * 2
    + [LOW] + [HIGH] * 2 + [LOW] + [HIGH] * 2 + [LOW]
)


class FakeClock:
    def __init__(self, steps):
        self.now = 0.0
        self.steps = iter(steps)
        self.calls = 0

    def __call__(self):
        return self.now

    def tick(self):
        self.now += next(self.steps)
        self.calls += 1


def constant(step):
    while True:
        yield step


def test_summarize_percentiles_by_index():
    times = [float(i) for i in range(100)]
    random.Random(3).shuffle(times)
    result = summarize(times)
    assert result.pct01 == 1.0
    assert result.pct10 == 10.0
    assert result.pct50 == 50.0
    assert result.pct90 == 90.0
    assert result.pct99 == 99.0
    assert result.stddev == pytest.approx(stddev(times))


def test_summarize_single_value():
    assert summarize([0.5]) == BenchmarkResult(0.5, 0.5, 0.5, 0.5, 0.5, 0.0)


def test_summarize_empty_raises():
    with pytest.raises(ValueError):
        summarize([])


def test_measure_grows_until_target():
    clock = FakeClock(constant(0.25))
    mmt = measure(clock.tick, 1, target_secs=2.0, clock=clock)
    assert mmt.time == 0.25
    assert mmt.n_samples * 0.25 >= 2.0


def test_measure_with_sufficient_hint_runs_once():
    clock = FakeClock(constant(0.25))
    mmt = measure(clock.tick, 16, target_secs=2.0, clock=clock)
    assert mmt == Measurement(16, 0.25)
    assert clock.calls == 16


def test_measure_rejects_zero_hint():
    clock = FakeClock(constant(0.25))
    with pytest.raises(ValueError):
        measure(clock.tick, 0, clock=clock)


def test_benchmark_accepts_random_looking_times(capsys):
    clock = FakeClock([LOW] + RANDOM_LOOKING)
    result = benchmark(clock.tick, len(RANDOM_LOOKING), 1, clock=clock)
    assert result.pct01 == LOW
    assert result.pct99 == HIGH
    assert result.stddev == pytest.approx(stddev(RANDOM_LOOKING))
    assert capsys.readouterr().err == ""


def test_benchmark_exhausts_retries_on_constant_times(capsys):
    clock = FakeClock(constant(0.25))
    result = benchmark(clock.tick, 5, 3, clock=clock)
    assert result.pct50 == 0.25
    assert result.stddev == 0.0
    assert capsys.readouterr().err.count("failed randomness test") == 3