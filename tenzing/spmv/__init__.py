"""Sparse matrices in COO and CSR form and random matrix generators."""

__all__ = ["coo", "csr"]