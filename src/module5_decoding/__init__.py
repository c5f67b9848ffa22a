"""
Module 5: Decoding

Greedy syndrome-weight-descent correction of received vectors and
message extraction for standard-form codes.

Public API:
    - decode_vector(received, parity_check, table) -> np.ndarray
    - get_primary_vector(k, vector) -> np.ndarray
    - decode_chunks(chunks, parity_check, table=None) -> List[np.ndarray]
    - get_primary_chunks(k, chunks, remaining_bits=None) -> List[np.ndarray]
"""

from .decoder import decode_vector, get_primary_vector, decode_chunks, get_primary_chunks

__all__ = [
    "decode_vector",
    "get_primary_vector",
    "decode_chunks",
    "get_primary_chunks",
]
