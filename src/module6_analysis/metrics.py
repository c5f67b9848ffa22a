# file: src/module6_analysis/metrics.py

"""
Transmission diagnostics.

count_errors() and error_positions() keep a soft fallback: vectors of
different length (or a missing or ragged vector) yield 0 / [] instead of an
exception, and the mismatch is logged. compute_ber() is strict.
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


def _comparable(a, b) -> Optional[tuple]:
    if a is None or b is None:
        logger.warning("Error count requested with a missing vector; reporting no errors")
        return None

    try:
        left = np.asarray(a)
        right = np.asarray(b)
    except ValueError as e:
        logger.warning("Vectors are not rectangular (%s); reporting no errors", e)
        return None
    if left.dtype == object or right.dtype == object:
        logger.warning("Vectors are not rectangular; reporting no errors")
        return None

    left = left.ravel()
    right = right.ravel()
    if left.shape[0] != right.shape[0]:
        logger.warning(
            "Length mismatch (%d vs %d); reporting no errors", left.shape[0], right.shape[0]
        )
        return None
    return left, right


def count_errors(sent, received) -> int:
    """
    Hamming distance between two vectors.

    Returns:
        Number of differing positions, or 0 if the lengths differ

    Example:
        >>> count_errors([1, 0, 1, 1], [1, 1, 1, 0])
        2
        >>> count_errors([1, 0], [1, 0, 1])
        0
    """
    pair = _comparable(sent, received)
    if pair is None:
        return 0
    left, right = pair
    return int(np.count_nonzero(left != right))


def error_positions(sent, received) -> List[int]:
    """
    Ascending indices where the two vectors differ.

    Returns:
        List of positions, or [] if the lengths differ
    """
    pair = _comparable(sent, received)
    if pair is None:
        return []
    left, right = pair
    return np.flatnonzero(left != right).tolist()


def compute_ber(sent, received) -> float:
    """
    Bit Error Rate between two bit vectors.

    BER = (number of bit errors) / (total number of bits)

    Raises:
        ValueError: If inputs have different lengths
    """
    left = np.asarray(sent).ravel()
    right = np.asarray(received).ravel()
    if left.shape[0] != right.shape[0]:
        raise ValueError(
            f"Length mismatch: sent={left.shape[0]}, received={right.shape[0]}"
        )

    if left.shape[0] == 0:
        return 0.0

    return int(np.count_nonzero(left != right)) / left.shape[0]


def summarize_transmission(sent, received) -> Dict[str, Any]:
    """
    Collect error diagnostics for one transmitted vector.

    Returns:
        Dictionary with:
            - error_count: Hamming distance (0 on length mismatch)
            - error_positions: Differing indices ([] on length mismatch)
            - ber: Bit error rate (None on length mismatch)
    """
    errors = count_errors(sent, received)
    positions = error_positions(sent, received)

    try:
        ber = compute_ber(sent, received)
    except ValueError:
        ber = None

    return {
        'error_count': errors,
        'error_positions': positions,
        'ber': ber,
    }


def summarize_batch(sent_chunks, received_chunks) -> Dict[str, Any]:
    """
    Aggregate error statistics over a batch of chunks.

    Args:
        sent_chunks: Vectors before transmission (or expected messages)
        received_chunks: Vectors after transmission (or decoded messages)

    Returns:
        Dictionary with:
            - total_bits: Bits compared
            - bit_errors: Total Hamming distance
            - ber: bit_errors / total_bits
            - chunks_with_errors: Number of chunks with at least one error
            - chunk_error_rate: chunks_with_errors / number of chunks
    """
    if len(sent_chunks) != len(received_chunks):
        raise ValueError(
            f"Chunk count mismatch: sent={len(sent_chunks)}, received={len(received_chunks)}"
        )

    total_bits = 0
    bit_errors = 0
    chunks_with_errors = 0
    for sent, received in zip(sent_chunks, received_chunks):
        errors = count_errors(sent, received)
        total_bits += len(sent)
        bit_errors += errors
        if errors > 0:
            chunks_with_errors += 1

    num_chunks = len(sent_chunks)
    return {
        'total_bits': total_bits,
        'bit_errors': bit_errors,
        'ber': bit_errors / total_bits if total_bits > 0 else 0.0,
        'chunks_with_errors': chunks_with_errors,
        'chunk_error_rate': chunks_with_errors / num_chunks if num_chunks > 0 else 0.0,
    }
