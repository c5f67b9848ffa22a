"""
Module 1: Code Construction

Builds linear block codes over GF(2) in standard form and provides the
bit-level helpers and exception hierarchy shared by the later stages.

Public API:
    - generate_generator_matrix(n, k, rng=None) -> np.ndarray
    - generate_parity_check_matrix(generator) -> np.ndarray
    - is_standard_form(generator) -> bool
    - check_null_space(generator, parity_check) -> bool
"""

from .generator import (
    generate_generator_matrix,
    generate_parity_check_matrix,
    is_standard_form,
    check_null_space,
)
from .gf2 import (
    as_bit_vector,
    as_bit_matrix,
    check_code_parameters,
    mod2_matmul,
)
from .errors import (
    CodingError,
    ValidationError,
    ConfigurationError,
    InternalInvariantError,
    TableBuildTimeoutError,
)

__version__ = "1.0.0"

__all__ = [
    "generate_generator_matrix",
    "generate_parity_check_matrix",
    "is_standard_form",
    "check_null_space",
    "as_bit_vector",
    "as_bit_matrix",
    "check_code_parameters",
    "mod2_matmul",
    "CodingError",
    "ValidationError",
    "ConfigurationError",
    "InternalInvariantError",
    "TableBuildTimeoutError",
]
