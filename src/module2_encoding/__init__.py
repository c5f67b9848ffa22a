"""
Module 2: Encoding

Maps k-bit messages to n-bit codewords through a generator matrix.

Public API:
    - encode_vector(message, generator) -> np.ndarray
    - encode_chunks(chunks, generator) -> List[np.ndarray]
"""

from .encoder import encode_vector, encode_chunks

__all__ = [
    "encode_vector",
    "encode_chunks",
]
