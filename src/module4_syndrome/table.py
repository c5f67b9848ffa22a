# file: src/module4_syndrome/table.py

"""
Reduced standard array: syndrome -> coset-leader weight.

All 2^n vectors are visited in order of Hamming weight, ties broken by
their numeric index (bit j of index i is (i >> (n-1-j)) & 1). The first
vector seen for each syndrome is its coset leader; only the leader's
weight is kept. Construction stops once all 2^(n-k) syndromes are found.

Vectors are produced from their index on demand, so memory stays at
O(2^(n-k)) even though the walk is O(2^n * n) in the worst case.
"""

import logging
import time
from typing import Dict, Iterator, Optional

import numpy as np

from module1_code_construction import (
    ConfigurationError,
    InternalInvariantError,
    TableBuildTimeoutError,
    ValidationError,
    as_bit_matrix,
    check_code_parameters,
)
from .syndrome import column_keys, syndrome_key

logger = logging.getLogger(__name__)

DEFAULT_MAX_N = 20

# Deadline is polled once per this many vectors
_TIMEOUT_CHECK_INTERVAL = 4096


class SyndromeTable:
    """
    Mapping from packed syndrome to minimum Hamming weight in its coset.

    Invariants:
        - exactly 2^(n-k) entries once built
        - the zero syndrome maps to weight 0
    """

    def __init__(self, n: int, k: int, weights: Dict[int, int]):
        self.n = n
        self.k = k
        self._weights = dict(weights)

    @property
    def syndrome_length(self) -> int:
        return self.n - self.k

    def lookup(self, syndrome) -> int:
        """
        Weight of the coset leader for a syndrome.

        Args:
            syndrome: Packed integer key or a sequence of syndrome bits

        Raises:
            InternalInvariantError: If the syndrome is not in the table
        """
        key = syndrome if isinstance(syndrome, (int, np.integer)) else syndrome_key(syndrome)
        try:
            return self._weights[int(key)]
        except KeyError:
            raise InternalInvariantError(
                f"syndrome {int(key):0{max(self.syndrome_length, 1)}b} missing from "
                f"({self.n}, {self.k}) syndrome table"
            ) from None

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, syndrome) -> bool:
        key = syndrome if isinstance(syndrome, (int, np.integer)) else syndrome_key(syndrome)
        return int(key) in self._weights

    def items(self):
        """(packed syndrome, weight) pairs in discovery order."""
        return self._weights.items()

    def is_complete(self) -> bool:
        return len(self._weights) == (1 << self.syndrome_length) and self._weights.get(0) == 0

    def max_weight(self) -> int:
        """Largest coset-leader weight (the covering radius of the code)."""
        return max(self._weights.values())

    def __repr__(self) -> str:
        return f"SyndromeTable(n={self.n}, k={self.k}, entries={len(self)})"


def iter_vectors_by_weight(n: int) -> Iterator[int]:
    """
    Yield every index in [0, 2^n) ordered by popcount, then by value.

    Within one weight class the next index is produced with Gosper's
    next-combination step, so no list of 2^n vectors is ever built.
    """
    if n < 0:
        raise ValidationError(f"n must be >= 0, got {n}")

    limit = 1 << n
    yield 0
    for weight in range(1, n + 1):
        index = (1 << weight) - 1
        while index < limit:
            yield index
            lowest = index & -index
            ripple = index + lowest
            index = (((ripple ^ index) >> 2) // lowest) | ripple


def build_syndrome_table(
    n: int,
    k: int,
    parity_check,
    max_n: int = DEFAULT_MAX_N,
    timeout: Optional[float] = None
) -> SyndromeTable:
    """
    Build the syndrome -> coset-leader weight table for an (n, k) code.

    Args:
        n: Codeword length
        k: Message length
        parity_check: (n-k) x n binary parity-check matrix
        max_n: Largest n accepted; the walk is exponential in n
        timeout: Optional wall-clock limit in seconds

    Returns:
        SyndromeTable with 2^(n-k) entries

    Raises:
        ValidationError: If n, k are invalid or n exceeds max_n
        ConfigurationError: If H has the wrong shape or not full row rank
        TableBuildTimeoutError: If the timeout is exceeded
    """
    check_code_parameters(n, k)
    if n > max_n:
        raise ValidationError(
            f"n={n} exceeds the configured maximum of {max_n} for syndrome table construction"
        )

    H = as_bit_matrix(parity_check, "parity-check matrix")
    if H.shape != (n - k, n):
        raise ConfigurationError(
            f"parity-check matrix shape {H.shape} does not match ({n - k}, {n})"
        )

    expected = 1 << (n - k)
    keys = column_keys(H)
    weights: Dict[int, int] = {}
    started = time.monotonic()
    visited = 0

    for index in iter_vectors_by_weight(n):
        visited += 1
        if timeout is not None and visited % _TIMEOUT_CHECK_INTERVAL == 0:
            elapsed = time.monotonic() - started
            if elapsed > timeout:
                raise TableBuildTimeoutError(
                    f"syndrome table for ({n}, {k}) not finished after {elapsed:.2f}s",
                    elapsed=elapsed,
                    timeout=timeout
                )

        key = 0
        weight = 0
        remaining = index
        position = n - 1
        while remaining:
            if remaining & 1:
                key ^= keys[position]
                weight += 1
            remaining >>= 1
            position -= 1

        if key not in weights:
            weights[key] = weight
            if len(weights) == expected:
                break
    else:
        raise ConfigurationError(
            f"parity-check matrix has rank below {n - k}: only {len(weights)} of "
            f"{expected} syndromes are reachable"
        )

    logger.debug(
        "Built (%d, %d) syndrome table: %d entries after %d vectors in %.3fs",
        n, k, len(weights), visited, time.monotonic() - started
    )
    return SyndromeTable(n, k, weights)
