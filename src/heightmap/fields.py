"""Base elevation field: octave-summed coherent noise."""

import numpy as np
from numpy.typing import NDArray

from .config import GenerationParameters
from .noise import CoherentNoise


def sample_coordinates(
    params: GenerationParameters,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Compute first-octave sample coordinates for every cell.

    Args:
        params: Generation parameters.

    Returns:
        Tuple of (sample_x, sample_z) arrays, each of shape (width, height)
        and indexed [x, z].
    """
    xs = (np.arange(params.width, dtype=np.float64) + params.offset.x) / params.noise_scale
    zs = (np.arange(params.height, dtype=np.float64) + params.offset.y) / params.noise_scale
    sample_x, sample_z = np.meshgrid(xs, zs, indexing="ij")
    return sample_x, sample_z


def make_base_field(
    params: GenerationParameters,
    noise: CoherentNoise,
) -> NDArray[np.float64]:
    """Generate the clamped octave-noise elevation field.

    Each octave samples the noise at ``frequency`` times the base sample
    coordinates, remaps it from [0, 1] to [-1, 1] and adds it weighted by
    ``amplitude``. Frequency grows by lacunarity and amplitude by persistence
    between octaves.

    Args:
        params: Generation parameters.
        noise: Coherent noise source.

    Returns:
        2D elevation array of shape (width, height), clamped to
        [min_elevation, max_elevation].
    """
    sample_x, sample_z = sample_coordinates(params)
    field = np.zeros((params.width, params.height), dtype=np.float64)

    frequency = 1.0
    amplitude = 1.0
    for _ in range(params.octave_count):
        octave = noise.sample(sample_x * frequency, sample_z * frequency) * 2.0 - 1.0
        field += octave * amplitude
        frequency *= params.lacunarity
        amplitude *= params.persistence

    return np.clip(field, params.min_elevation, params.max_elevation)
