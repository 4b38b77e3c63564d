"""Shared test fixtures for heightmap tests."""

import numpy as np
import pytest

from heightmap.config import GenerationParameters
from heightmap.noise import PerlinNoise


@pytest.fixture
def small_params() -> GenerationParameters:
    """32x32 grid with a few octaves and the default five bumps."""
    return GenerationParameters(width=32, height=32, noise_scale=8.0, octave_count=3)


@pytest.fixture
def flat_params() -> GenerationParameters:
    """32x32 grid with no octaves and no bumps: every cell is 0 before normalizing."""
    return GenerationParameters(width=32, height=32, octave_count=0, bump_count=0)


@pytest.fixture
def zero_table_noise() -> PerlinNoise:
    """Perlin noise whose every corner hashes to gradient (1, 1).

    Its raw value inside the first cell is x + y - fade(x) - fade(y), which
    makes expected outputs computable by hand.
    """
    return PerlinNoise(permutation=np.zeros(256, dtype=np.int64))
