# file: src/module3_channel/bsc.py

"""
Binary symmetric channel simulation.

Each transmitted bit is flipped independently when a uniform draw from
[0, 1) is <= pe. The random source is always supplied by the caller so
that a batch of chunks shares one stream and tests can fix a seed.
"""

import math
import numbers
from typing import List, Optional, Sequence

import numpy as np

from module1_code_construction import ValidationError, as_bit_vector


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the random source for channel simulation.

    Args:
        seed: Fixed seed for reproducible runs. None draws fresh OS entropy.
    """
    return np.random.default_rng(seed)


def _check_error_probability(pe) -> float:
    if isinstance(pe, bool) or not isinstance(pe, numbers.Real):
        raise ValidationError(f"error probability must be a number, got {type(pe).__name__}")
    pe = float(pe)
    if not math.isfinite(pe) or not 0.0 <= pe <= 1.0:
        raise ValidationError(f"error probability must be in [0, 1], got {pe}")
    return pe


def _check_rng(rng) -> None:
    if not isinstance(rng, np.random.Generator):
        raise ValidationError(
            f"rng must be a numpy.random.Generator, got {type(rng).__name__}"
        )


def transmit(codeword, pe: float, rng: np.random.Generator) -> np.ndarray:
    """
    Send a vector through the binary symmetric channel.

    Args:
        codeword: Binary vector to transmit (not mutated)
        pe: Bit error probability in [0, 1]
        rng: Random source; one draw is consumed per bit

    Returns:
        New received vector of the same length
    """
    c = as_bit_vector(codeword, "codeword")
    pe = _check_error_probability(pe)
    _check_rng(rng)

    flips = rng.random(c.shape[0]) <= pe
    return c ^ flips.astype(c.dtype)


def transmit_chunks(chunks: Sequence, pe: float, rng: np.random.Generator) -> List[np.ndarray]:
    """
    Send a batch of vectors through the channel using one random stream.

    Chunks are transmitted in order, so the same seed reproduces the same
    error pattern for the whole batch.
    """
    if chunks is None:
        raise ValidationError("chunks are missing")
    pe = _check_error_probability(pe)
    _check_rng(rng)

    return [transmit(chunk, pe, rng) for chunk in chunks]


class BinarySymmetricChannel:
    """
    Binary symmetric channel bound to a fixed error probability and stream.

    Parameters:
        pe (float): Bit error probability in [0, 1]
        rng (np.random.Generator): Random source shared by every call
    """

    def __init__(self, pe: float, rng: np.random.Generator):
        self.pe = _check_error_probability(pe)
        _check_rng(rng)
        self.rng = rng

    def transmit(self, codeword) -> np.ndarray:
        return transmit(codeword, self.pe, self.rng)

    def transmit_chunks(self, chunks: Sequence) -> List[np.ndarray]:
        return transmit_chunks(chunks, self.pe, self.rng)

    def get_capacity(self) -> float:
        """
        Shannon capacity of the channel in bits per use.

        Returns:
            1 - H2(pe)
        """
        if self.pe in (0.0, 1.0):
            return 1.0
        p = self.pe
        return 1.0 + p * math.log2(p) + (1.0 - p) * math.log2(1.0 - p)
