# file: src/module2_encoding/encoder.py

"""
Linear block encoding: c = m G (mod 2).
"""

from typing import List, Sequence

import numpy as np

from module1_code_construction import ValidationError, as_bit_matrix, as_bit_vector, mod2_matmul


def encode_vector(message, generator) -> np.ndarray:
    """
    Encode a k-bit message into an n-bit codeword.

    Args:
        message: Length-k binary vector
        generator: k x n binary generator matrix

    Returns:
        Length-n uint8 codeword

    Raises:
        ValidationError: If the message is not binary or its length
            differs from the number of rows of G

    Example:
        >>> G = [[1, 0, 0, 0, 1, 1, 0],
        ...      [0, 1, 0, 0, 1, 0, 1],
        ...      [0, 0, 1, 0, 0, 1, 1],
        ...      [0, 0, 0, 1, 1, 1, 1]]
        >>> encode_vector([1, 0, 1, 1], G).tolist()
        [1, 0, 1, 1, 0, 1, 0]
    """
    G = as_bit_matrix(generator, "generator matrix")
    k = G.shape[0]
    m = as_bit_vector(message, "message", length=k)

    return mod2_matmul(m, G)


def encode_chunks(chunks: Sequence, generator) -> List[np.ndarray]:
    """
    Encode a batch of k-bit chunks with the same generator matrix.

    Args:
        chunks: Sequence of length-k binary vectors
        generator: k x n binary generator matrix

    Returns:
        List of length-n codewords, in input order
    """
    if chunks is None:
        raise ValidationError("chunks are missing")

    G = as_bit_matrix(generator, "generator matrix")
    k = G.shape[0]

    encoded = []
    for index, chunk in enumerate(chunks):
        m = as_bit_vector(chunk, f"chunk {index}", length=k)
        encoded.append(mod2_matmul(m, G))

    return encoded
