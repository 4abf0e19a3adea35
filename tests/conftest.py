import random

import numpy as np
import pytest


@pytest.fixture
def rgb_grid() -> np.ndarray:
    """Every RGB color whose channels are multiples of 17 (0, 17, ..., 255): 4096 colors."""
    steps = np.arange(0, 256, 17)
    r, g, b = np.meshgrid(steps, steps, steps, indexing="ij")
    return np.stack([r, g, b], axis=-1).reshape(-1, 3)


@pytest.fixture
def coarse_rgb():
    """A small RGB grid for scalar (per-color) loops."""
    steps = range(0, 256, 51)
    return [(r, g, b) for r in steps for g in steps for b in steps]


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
