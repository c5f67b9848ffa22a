"""
Syndrome computation and integer packing.
"""

import numpy as np

from module1_code_construction import as_bit_matrix, as_bit_vector, mod2_matmul


def compute_syndrome(vector, parity_check) -> np.ndarray:
    """
    Compute s = H v^T (mod 2).

    Args:
        vector: Length-n binary vector
        parity_check: (n-k) x n binary matrix

    Returns:
        Length-(n-k) uint8 syndrome; all zeros iff vector is a codeword
    """
    H = as_bit_matrix(parity_check, "parity-check matrix")
    v = as_bit_vector(vector, "vector", length=H.shape[1])
    return mod2_matmul(H, v)


def syndrome_key(syndrome) -> int:
    """
    Pack syndrome bits into an integer, row 0 as the most significant bit.

    The empty syndrome (k == n) packs to 0.
    """
    key = 0
    for bit in syndrome:
        key = (key << 1) | int(bit)
    return key


def column_keys(parity_check: np.ndarray) -> list:
    """
    Packed syndrome of each unit vector e_j, one per column of H.

    The syndrome of any vector is the XOR of the keys of its set positions.
    """
    return [syndrome_key(parity_check[:, j]) for j in range(parity_check.shape[1])]
