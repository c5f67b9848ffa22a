"""Shared fixtures: the (7, 4) Hamming code used throughout the tests."""

import numpy as np
import pytest


HAMMING_G = [
    [1, 0, 0, 0, 1, 1, 0],
    [0, 1, 0, 0, 1, 0, 1],
    [0, 0, 1, 0, 0, 1, 1],
    [0, 0, 0, 1, 1, 1, 1],
]

# [A^T | I_3] for the generator above
HAMMING_H = [
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 1, 0, 1, 0],
    [0, 1, 1, 1, 0, 0, 1],
]


@pytest.fixture
def hamming_g():
    return np.array(HAMMING_G, dtype=np.uint8)


@pytest.fixture
def hamming_h():
    return np.array(HAMMING_H, dtype=np.uint8)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)
