# file: src/module1_code_construction/generator.py

"""
Generator and parity-check matrix construction.

Codes are built in standard form G = [I_k | A] and the parity-check
matrix is derived as H = [A^T | I_(n-k)]. Over GF(2) the usual -A^T
equals A^T, so no sign flip is applied.
"""

import logging
from typing import Optional

import numpy as np

from .errors import ConfigurationError, ValidationError
from .gf2 import BIT_DTYPE, as_bit_matrix, check_code_parameters, mod2_matmul

logger = logging.getLogger(__name__)


def generate_generator_matrix(
    n: int,
    k: int,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Generate a random generator matrix in standard form [I_k | A].

    Every entry of the k x (n-k) block A is drawn independently and
    uniformly from {0, 1}.

    Args:
        n: Codeword length
        k: Message length (0 < k <= n)
        rng: Random source for A. A fresh entropy-seeded generator is used
             when omitted.

    Returns:
        k x n uint8 matrix

    Raises:
        ValidationError: If n, k are not integers with 0 < k <= n

    Example:
        >>> G = generate_generator_matrix(7, 4, np.random.default_rng(0))
        >>> G.shape
        (4, 7)
    """
    check_code_parameters(n, k)
    if rng is None:
        rng = np.random.default_rng()

    identity = np.eye(k, dtype=BIT_DTYPE)
    parity_block = rng.integers(0, 2, size=(k, n - k), dtype=BIT_DTYPE)
    generator = np.concatenate([identity, parity_block], axis=1)

    logger.debug("Generated %dx%d generator matrix", k, n)
    return generator


def is_standard_form(generator) -> bool:
    """Return True if the left k x k block of G is the identity."""
    G = as_bit_matrix(generator, "generator matrix")
    k, n = G.shape
    if k > n:
        return False
    return bool(np.array_equal(G[:, :k], np.eye(k, dtype=BIT_DTYPE)))


def generate_parity_check_matrix(generator) -> np.ndarray:
    """
    Derive the parity-check matrix H = [A^T | I_(n-k)] from G = [I_k | A].

    n and k are inferred from the shape of G. The result is only a valid
    parity-check matrix when G follows the identity-prefix convention, so
    any other G is rejected rather than silently producing a wrong H.

    Args:
        generator: k x n binary matrix in standard form

    Returns:
        (n-k) x n uint8 matrix

    Raises:
        ValidationError: If G is missing, ragged, non-binary or has k > n
        ConfigurationError: If G is not of the form [I_k | A]
    """
    G = as_bit_matrix(generator, "generator matrix")
    k, n = G.shape

    if k == 0:
        raise ValidationError("generator matrix must have at least one row")
    if k > n:
        raise ValidationError(f"generator matrix has more rows ({k}) than columns ({n})")
    if not np.array_equal(G[:, :k], np.eye(k, dtype=BIT_DTYPE)):
        raise ConfigurationError(
            "generator matrix is not in standard form [I_k | A]; "
            "cannot derive the parity-check matrix"
        )

    parity_block = G[:, k:]
    H = np.concatenate([parity_block.T, np.eye(n - k, dtype=BIT_DTYPE)], axis=1)

    logger.debug("Derived %dx%d parity-check matrix", n - k, n)
    return H.astype(BIT_DTYPE)


def check_null_space(generator, parity_check) -> bool:
    """
    Check that every row of G lies in the null space of H.

    Returns:
        True iff G @ H^T == 0 (mod 2)
    """
    G = as_bit_matrix(generator, "generator matrix")
    H = as_bit_matrix(parity_check, "parity-check matrix")
    if G.shape[1] != H.shape[1]:
        raise ValidationError(
            f"generator matrix has {G.shape[1]} columns, parity-check matrix has {H.shape[1]}"
        )
    return not np.any(mod2_matmul(G, H.T))
