"""
Module 3: Channel Simulation

Binary symmetric channel with an explicit, caller-controlled random source.

Public API:
    - transmit(codeword, pe, rng) -> np.ndarray
    - transmit_chunks(chunks, pe, rng) -> List[np.ndarray]
    - make_rng(seed=None) -> np.random.Generator
    - BinarySymmetricChannel(pe, rng)
"""

from .bsc import transmit, transmit_chunks, make_rng, BinarySymmetricChannel

__all__ = [
    "transmit",
    "transmit_chunks",
    "make_rng",
    "BinarySymmetricChannel",
]
