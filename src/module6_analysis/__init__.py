"""
Module 6: Error Analysis

Hamming distance, mismatch positions and bit-error-rate helpers used for
diagnostics around the channel and the decoder.

Public API:
    - count_errors(sent, received) -> int
    - error_positions(sent, received) -> List[int]
    - compute_ber(sent, received) -> float
    - summarize_transmission(sent, received) -> dict
    - summarize_batch(sent_chunks, received_chunks) -> dict
"""

from .metrics import (
    count_errors,
    error_positions,
    compute_ber,
    summarize_transmission,
    summarize_batch,
)

__all__ = [
    "count_errors",
    "error_positions",
    "compute_ber",
    "summarize_transmission",
    "summarize_batch",
]
