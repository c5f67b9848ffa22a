"""
GF(2) vector and matrix helpers.

Everything in the engine is stored as numpy uint8 arrays holding only 0/1.
Inputs may be any nested integer sequence; they are validated and copied here
so that downstream code can assume well-formed arrays.
"""

import numbers

import numpy as np

from .errors import ValidationError

BIT_DTYPE = np.uint8


def _to_integer_array(values, name: str) -> np.ndarray:
    if values is None:
        raise ValidationError(f"{name} is missing")
    if isinstance(values, (str, bytes)):
        raise ValidationError(f"{name} must be a sequence of 0/1 integers, got {type(values).__name__}")

    try:
        array = np.array(values)
    except ValueError as e:
        # Ragged nested lists
        raise ValidationError(f"{name} is not rectangular: {e}") from e

    if array.dtype == object:
        raise ValidationError(f"{name} is not rectangular")
    if array.dtype == bool:
        array = array.astype(BIT_DTYPE)
    if not (np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)):
        raise ValidationError(f"{name} must contain integers, got dtype {array.dtype}")

    if array.size and np.issubdtype(array.dtype, np.floating):
        if not np.all(np.isfinite(array)) or not np.all(array == np.round(array)):
            raise ValidationError(f"{name} must contain integers")

    return array


def as_bit_vector(values, name: str = "vector", length: int = None) -> np.ndarray:
    """
    Validate and copy a bit vector.

    Args:
        values: 1-D sequence of 0/1 integers
        name: Argument name used in error messages
        length: Required length (optional)

    Returns:
        New uint8 array of shape (len,)

    Raises:
        ValidationError: If the input is missing, not 1-D, non-binary,
            or has the wrong length
    """
    array = _to_integer_array(values, name)

    if array.ndim != 1:
        raise ValidationError(f"{name} must be 1-D, got shape {array.shape}")
    if array.size and not np.all((array == 0) | (array == 1)):
        raise ValidationError(f"{name} must be binary (contain only 0 and 1)")
    if length is not None and array.shape[0] != length:
        raise ValidationError(f"{name} length should be exactly {length}, got {array.shape[0]}")

    return array.astype(BIT_DTYPE)


def as_bit_matrix(values, name: str = "matrix") -> np.ndarray:
    """
    Validate and copy a binary matrix.

    Raises:
        ValidationError: If the input is missing, empty, ragged or non-binary
    """
    array = _to_integer_array(values, name)

    if array.ndim != 2:
        raise ValidationError(f"{name} must be 2-D, got shape {array.shape}")
    if array.shape[1] == 0:
        raise ValidationError(f"{name} must have at least one column")
    if array.size and not np.all((array == 0) | (array == 1)):
        raise ValidationError(f"{name} must be binary (contain only 0 and 1)")

    return array.astype(BIT_DTYPE)


def check_code_parameters(n, k) -> None:
    """Require integers with 0 < k <= n."""
    for name, value in (("n", n), ("k", k)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if k <= 0:
        raise ValidationError(f"k must be > 0, got {k}")
    if k > n:
        raise ValidationError(f"k={k} must not exceed n={n}")


def mod2_matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Matrix product over GF(2)."""
    # int64 accumulation avoids uint8 overflow for wide rows
    product = a.astype(np.int64) @ b.astype(np.int64)
    return (product % 2).astype(BIT_DTYPE)
