"""Procedural terrain heightmap generation.

This package synthesizes normalized height grids from octave Perlin noise,
a handful of randomly placed radial bumps, and an affine rescale into a range
derived from the configured elevation bounds.
"""

from .config import GenerationParameters, HeightmapConfig, Offset
from .exceptions import HeightmapError, InvalidParametersError
from .generator import generate, regenerate
from .noise import PerlinNoise
from .persistence import load_grid, save_grid
from .types import HeightGrid
from .validation import ValidationResult, validate_parameters

__all__ = [
    "GenerationParameters",
    "HeightGrid",
    "HeightmapConfig",
    "HeightmapError",
    "InvalidParametersError",
    "Offset",
    "PerlinNoise",
    "ValidationResult",
    "generate",
    "load_grid",
    "regenerate",
    "save_grid",
    "validate_parameters",
]
