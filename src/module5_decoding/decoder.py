# file: src/module5_decoding/decoder.py

"""
Syndrome-guided bit-flip decoding.

The syndrome table stores only coset-leader weights, not the leaders, so
the correction pattern cannot be read off directly. Instead the decoder
makes one greedy pass over the bit positions:

    1. w = weight(syndrome(r)); if w == 0, r is returned unchanged.
    2. For i = 0 .. n-1: flip bit i and look up the new weight w'.
       - w' == 0: stop and return the vector with this flip applied
       - w' <  w: keep the flip permanently, w = w'
       - else:    undo the flip
    3. If the pass ends without reaching syndrome 0 the vector is
       returned as-is.

Accepted flips are never revisited, so the pass can settle in a local
minimum even when a low-weight correction exists.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from module1_code_construction import (
    ValidationError,
    as_bit_matrix,
    as_bit_vector,
)
from module4_syndrome import SyndromeTable, build_syndrome_table, column_keys

logger = logging.getLogger(__name__)


def _check_table(table: SyndromeTable, H: np.ndarray) -> None:
    if not isinstance(table, SyndromeTable):
        raise ValidationError(f"table must be a SyndromeTable, got {type(table).__name__}")
    if table.n != H.shape[1] or table.syndrome_length != H.shape[0]:
        raise ValidationError(
            f"({table.n}, {table.k}) syndrome table does not match "
            f"{H.shape[0]}x{H.shape[1]} parity-check matrix"
        )
    if not table.is_complete():
        logger.warning("Decoding with an incomplete syndrome table (%d entries)", len(table))


def _decode(r: np.ndarray, keys: list, table: SyndromeTable) -> np.ndarray:
    # Syndromes are updated incrementally: flipping bit i XORs column i's key
    current = r.copy()
    key = 0
    for position, bit in enumerate(current):
        if bit:
            key ^= keys[position]

    weight = table.lookup(key)
    if weight == 0:
        return current

    for i in range(current.shape[0]):
        current[i] ^= 1
        candidate_key = key ^ keys[i]
        candidate_weight = table.lookup(candidate_key)

        if candidate_weight == 0:
            logger.debug("Reached zero syndrome after flipping bit %d", i)
            return current
        elif candidate_weight < weight:
            key = candidate_key
            weight = candidate_weight
        else:
            current[i] ^= 1

    logger.debug("Decode pass ended with non-zero syndrome (leader weight %d)", weight)
    return current


def decode_vector(received, parity_check, table: SyndromeTable) -> np.ndarray:
    """
    Correct a received vector with the greedy syndrome-weight descent.

    Args:
        received: Length-n binary vector (not mutated)
        parity_check: (n-k) x n parity-check matrix
        table: Syndrome table built from the same H

    Returns:
        Corrected length-n vector. Its syndrome is zero unless the single
        pass got stuck, in which case the best-effort vector is returned.

    Raises:
        ValidationError: If shapes of r, H and the table disagree
        InternalInvariantError: If a syndrome is missing from the table
    """
    H = as_bit_matrix(parity_check, "parity-check matrix")
    r = as_bit_vector(received, "received vector", length=H.shape[1])
    _check_table(table, H)

    return _decode(r, column_keys(H), table)


def get_primary_vector(k: int, vector) -> np.ndarray:
    """
    Extract the message from a codeword of a standard-form code.

    With G = [I_k | A], m G = (m | m A), so the first k bits are m.
    """
    v = as_bit_vector(vector, "vector")
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or not 0 < k <= v.shape[0]:
        raise ValidationError(f"k must be an integer in [1, {v.shape[0]}], got {k}")
    return v[:k].copy()


def decode_chunks(
    chunks: Sequence,
    parity_check,
    table: Optional[SyndromeTable] = None,
    **table_options
) -> List[np.ndarray]:
    """
    Decode a batch of received vectors sharing one code.

    The syndrome table is built once for the batch when not supplied.

    Args:
        chunks: Sequence of length-n received vectors
        parity_check: (n-k) x n parity-check matrix
        table: Prebuilt syndrome table (optional)
        **table_options: Passed to build_syndrome_table (max_n, timeout)

    Returns:
        List of corrected vectors, in input order
    """
    if chunks is None:
        raise ValidationError("chunks are missing")

    H = as_bit_matrix(parity_check, "parity-check matrix")
    n = H.shape[1]
    if table is None:
        table = build_syndrome_table(n, n - H.shape[0], H, **table_options)
    _check_table(table, H)

    keys = column_keys(H)
    decoded = []
    for index, chunk in enumerate(chunks):
        r = as_bit_vector(chunk, f"chunk {index}", length=n)
        decoded.append(_decode(r, keys, table))

    return decoded


def get_primary_chunks(k: int, chunks: Sequence, remaining_bits=None) -> List[np.ndarray]:
    """
    Extract the message part of every decoded chunk.

    Trailing bits that did not fill a whole k-bit chunk were sent
    uncoded; they are appended unchanged as the final element.
    """
    if chunks is None:
        raise ValidationError("chunks are missing")

    primary = [get_primary_vector(k, chunk) for chunk in chunks]

    if remaining_bits is not None and len(remaining_bits) > 0:
        primary.append(as_bit_vector(remaining_bits, "remaining bits"))

    return primary
