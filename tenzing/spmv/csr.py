"""Compressed sparse row matrices and random matrix generators."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from tenzing.spmv.coo import CooMat


@dataclass
class CsrMat:
    """A sparse matrix in compressed sparse row form."""

    row_ptr: list[int] = field(default_factory=list)
    col_ind: list[int] = field(default_factory=list)
    val: list[float] = field(default_factory=list)
    num_cols: int = 0

    @classmethod
    def from_coo(cls, coo: CooMat) -> "CsrMat":
        """Build from a COO matrix whose entries are sorted by row."""
        row_ptr: list[int] = []
        col_ind: list[int] = []
        val: list[float] = []
        for entry in coo:
            while len(row_ptr) <= entry.i:
                row_ptr.append(len(col_ind))
            col_ind.append(entry.j)
            val.append(entry.e)
        while len(row_ptr) < coo.num_rows + 1:
            row_ptr.append(len(col_ind))
        return cls(row_ptr, col_ind, val, coo.num_cols)

    def num_rows(self) -> int:
        return 0 if len(self.row_ptr) <= 1 else len(self.row_ptr) - 1

    def nnz(self) -> int:
        if len(self.col_ind) != len(self.val):
            raise ValueError("bad invariant: column and value counts differ")
        return len(self.col_ind)

    def copy(self) -> "CsrMat":
        return CsrMat(list(self.row_ptr), list(self.col_ind), list(self.val), self.num_cols)

    def retain_rows(self, row_start: int, row_end: int) -> None:
        """Keep only rows in ``[row_start, row_end)``, renumbered from 0."""
        if row_end == 0:
            raise ValueError("retaining rows up to row 0 is not supported")
        if not 0 <= row_start <= row_end <= self.num_rows():
            raise ValueError(
                f"row range [{row_start}, {row_end}) outside 0..{self.num_rows()}"
            )
        ptr = self.row_ptr[: row_end + 1]
        last = ptr[-1]
        ptr = ptr[row_start:]
        off = ptr[0]
        self.col_ind = self.col_ind[off:last]
        self.val = self.val[off:last]
        self.row_ptr = [p - off for p in ptr]


def _finish(coo: CooMat) -> CsrMat:
    coo.sort()
    return CsrMat.from_coo(coo)


def random_matrix(
    m: int, n: int, nnz: int, rng: random.Random | None = None
) -> CsrMat:
    """An ``m`` x ``n`` matrix with ``nnz`` ones at random distinct positions."""
    if m * n < nnz:
        raise ValueError(f"cannot place {nnz} non-zeros in a {m}x{n} matrix")
    rng = rng if rng is not None else random.Random()
    coo = CooMat(m, n)
    while coo.nnz() < nnz:
        for _ in range(nnz - coo.nnz()):
            coo.append(rng.randrange(m), rng.randrange(n), 1.0)
        coo.remove_duplicates()
    return _finish(coo)


def _band_capacity(n: int, bw: int) -> int:
    return sum(min(n - 1, r + bw) - max(0, r - bw) + 1 for r in range(n))


def random_band_matrix(
    n: int, bw: int, nnz: int, rng: random.Random | None = None
) -> CsrMat:
    """An ``n`` x ``n`` matrix with ``nnz`` ones within ``bw`` of the diagonal."""
    if bw < 0:
        raise ValueError("bandwidth must not be negative")
    if nnz > _band_capacity(n, bw):
        raise ValueError(f"cannot place {nnz} non-zeros in band {bw} of size {n}")
    rng = rng if rng is not None else random.Random()
    coo = CooMat(n, n)
    while coo.nnz() < nnz:
        for _ in range(nnz - coo.nnz()):
            r = rng.randrange(n)
            lb, ub = r - bw, r + bw + 1
            c = rng.randrange(ub - lb) + lb
            if c < 0 or c >= n:
                # retry rather than over-weight the edge columns
                continue
            coo.append(r, c, 1.0)
        coo.remove_duplicates()
    return _finish(coo)