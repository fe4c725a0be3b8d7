# tenzing

Pure-Python building blocks for measuring and reasoning about schedules of
operations. The package has no runtime dependencies.

## Modules

- `tenzing.numeric` – statistics helpers `avg`, `med`, `var`, `stddev`
  (population variance and deviation) and `corr` (Pearson correlation,
  clamped to [-1, 1]), plus integer helpers `prime_factors` (with
  multiplicity, largest first) and `round_up`.
- `tenzing.randomness` – `runs_test`, a Wald–Wolfowitz runs test around
  the median at alpha = 0.05, and `compound_test`. Both return `True` when
  a series should be rejected as non-random; they also return `True` when
  either side of the median holds fewer than ten samples.
- `tenzing.benchmark` – timing of a Python callable:
  - `measure(run, n_samples_hint, target_secs, clock)` calls `run` in
    batches, growing the batch until one batch takes at least
    `target_secs` (default 0.01 s), and returns a `Measurement` with
    `n_samples` and the per-sample `time`.
  - `benchmark(run, n_iters, max_retries, clock)` takes `n_iters`
    measurements, repeating the whole set while `compound_test` rejects
    it. A `max_retries` of 0 repeats until the timings pass.
  - `summarize(times)` returns a `BenchmarkResult` with `pct01`, `pct10`,
    `pct50`, `pct90`, `pct99` (indexed into the sorted times) and `stddev`.
- `tenzing.platform` – `Stream` and `Event` handles (ordered, hashable,
  with `to_json` / `from_json`), and `Equivalence`, which records a
  one-to-one mapping of streams and of events between two schedules.
- `tenzing.dim` – `Dim3`, an immutable (x, y, z) triple with `+`, unary
  `-` and the string form `<x,y,z>`.
- `tenzing.spmv.coo` – `CooMat`, a list of `CooEntry` (row `i`, column
  `j`, value `e`) with `append`, `sort`, `remove_duplicates` and `nnz`.
- `tenzing.spmv.csr` – `CsrMat` (`from_coo`, `num_rows`, `nnz`, `copy`,
  `retain_rows`) and the generators `random_matrix` and
  `random_band_matrix`, which place ones at distinct random positions.

## Examples

Statistics and randomness:

```python
from tenzing.numeric import prime_factors, stddev
from tenzing.randomness import runs_test

times = [0.011, 0.010, 0.012, 0.010, 0.013]
print(stddev(times))
print(prime_factors(60))   # [5, 3, 2, 2]
print(runs_test(times))    # True: too few samples for the test to apply
```

Timing a callable:

```python
from tenzing.benchmark import benchmark

result = benchmark(lambda: sum(range(1000)), n_iters=50, max_retries=3)
print(result.pct50, result.stddev)
```

With fewer than 20 iterations the runs test always rejects the timings,
so pair a small `n_iters` with a non-zero `max_retries`.

Resource equivalence:

```python
from tenzing.platform import Equivalence, Stream

eq = Equivalence(True)
assert eq.check_or_insert(Stream(1), Stream(2))
assert not eq.check_or_insert(Stream(1), Stream(3))
```

Sparse matrices:

```python
import random

from tenzing.spmv.csr import random_matrix

m = random_matrix(10, 10, 30, random.Random(0))
block = m.copy()
block.retain_rows(2, 5)    # rows 2..4, renumbered from 0
print(block.num_rows(), block.nnz())
```

## What the package does not do

It has no command-line program. Benchmarks run a Python callable in a
single process; nothing here drives GPU streams or events, talks to other
processes, or takes the maximum of timings across them. There is no
partitioning of a matrix among processes and no splitting of a row block
into local and remote parts.