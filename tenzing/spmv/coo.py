"""Coordinate-format sparse matrices."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class CooEntry:
    """One non-zero: row ``i``, column ``j`` and value ``e``."""

    i: int
    j: int
    e: float

    @property
    def ij(self) -> tuple[int, int]:
        return (self.i, self.j)


class CooMat:
    """A sparse matrix stored as a list of (row, column, value) entries."""

    def __init__(self, num_rows: int, num_cols: int) -> None:
        self.num_rows = num_rows
        self.num_cols = num_cols
        self.entries: list[CooEntry] = []

    def append(self, i: int, j: int, e: float) -> None:
        self.entries.append(CooEntry(i, j, e))

    def sort(self) -> None:
        """Sort entries by row, then column."""
        self.entries.sort(key=lambda entry: entry.ij)

    def remove_duplicates(self) -> None:
        """Sort, then keep only the first entry for each (row, column)."""
        self.sort()
        unique: list[CooEntry] = []
        for entry in self.entries:
            if not unique or unique[-1].ij != entry.ij:
                unique.append(entry)
        self.entries = unique

    def nnz(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CooEntry]:
        return iter(self.entries)