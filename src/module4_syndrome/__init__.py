"""
Module 4: Syndrome Table

Syndrome computation and the reduced standard array used by the decoder.

Public API:
    - compute_syndrome(vector, parity_check) -> np.ndarray
    - syndrome_key(syndrome) -> int
    - iter_vectors_by_weight(n) -> Iterator[int]
    - build_syndrome_table(n, k, parity_check, max_n=20, timeout=None) -> SyndromeTable
"""

from .syndrome import compute_syndrome, syndrome_key, column_keys
from .table import SyndromeTable, build_syndrome_table, iter_vectors_by_weight, DEFAULT_MAX_N

__all__ = [
    "compute_syndrome",
    "syndrome_key",
    "column_keys",
    "SyndromeTable",
    "build_syndrome_table",
    "iter_vectors_by_weight",
    "DEFAULT_MAX_N",
]
