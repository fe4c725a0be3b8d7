"""Statistics, randomness tests, timing, resource equivalence and sparse matrices."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "dim",
    "numeric",
    "platform",
    "randomness",
    "spmv",
]