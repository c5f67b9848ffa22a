# file: src/module1_code_construction/errors.py

"""
Exception hierarchy for the GF(2) coding engine.

All exceptions inherit from CodingError for unified handling.
"""


class CodingError(Exception):
    """Base exception for all coding-engine errors."""
    pass


class ValidationError(CodingError):
    """Raised when caller input has bad dimensions, non-binary entries or is missing."""
    pass


class ConfigurationError(CodingError):
    """Raised when a matrix or configuration does not have the expected form."""
    pass


class InternalInvariantError(CodingError):
    """Raised when an internal invariant is violated (a bug, never retryable)."""
    pass


class TableBuildTimeoutError(CodingError):
    """Raised when syndrome table construction exceeds its deadline."""

    def __init__(self, message: str, elapsed: float = None, timeout: float = None):
        super().__init__(message)
        self.elapsed = elapsed
        self.timeout = timeout
