"""Main heightmap generation orchestration."""

import logging

import numpy as np

from .config import GenerationParameters
from .features import apply_bumps, sample_bumps
from .fields import make_base_field
from .noise import CoherentNoise, PerlinNoise
from .normalize import normalization_bounds, normalize
from .types import HeightGrid, grid_stats
from .validation import require_valid

logger = logging.getLogger(__name__)


def generate(
    params: GenerationParameters,
    rng: np.random.Generator | int | None = None,
    noise: CoherentNoise | None = None,
) -> HeightGrid:
    """Generate a normalized heightmap from parameters.

    Runs the base noise field, the feature overlay and the normalizer in
    sequence. Parameters are validated before anything is allocated.

    Args:
        params: Generation parameters.
        rng: Feature placement random source. A Generator is used as-is,
            an int seeds a new one, None draws fresh OS entropy.
        noise: Coherent noise source. Defaults to Perlin noise seeded with
            ``params.noise_seed``.

    Returns:
        HeightGrid of shape (width, height).

    Raises:
        InvalidParametersError: If the parameters violate their contract.
    """
    require_valid(params)

    rng = np.random.default_rng(rng)
    if noise is None:
        noise = PerlinNoise(seed=params.noise_seed)

    logger.info(
        f"Generating heightmap {params.width}x{params.height} "
        f"with {params.octave_count} octaves"
    )

    # Stage A: Base noise field
    logger.debug("Stage A: Summing noise octaves...")
    field = make_base_field(params, noise)

    # Stage B: Feature overlay
    logger.debug("Stage B: Applying feature bumps...")
    bumps = sample_bumps(params.width, params.height, rng, params.bump_count)
    for bump in bumps:
        logger.debug(
            f"  bump at ({bump.center_x}, {bump.center_z}) "
            f"r={bump.radius:.2f} h={bump.height_offset:.2f}"
        )
    field = apply_bumps(field, bumps)

    # Stage C: Normalization
    logger.debug("Stage C: Normalizing...")
    values = normalize(field, params.min_elevation, params.max_elevation)
    norm_min, norm_max = normalization_bounds(params.min_elevation, params.max_elevation)

    # Anchors are reported at the stored precision so every value lies within them
    norm_min = np.float32(norm_min)
    norm_max = np.float32(norm_max)
    values = np.clip(values.astype(np.float32), norm_min, norm_max)

    grid = HeightGrid(
        values=values,
        normalized_min=float(norm_min),
        normalized_max=float(norm_max),
        max_elevation=params.max_elevation,
    )

    stats = grid_stats(grid)
    logger.info(
        f"Heightmap range [{stats.min:.4f}, {stats.max:.4f}], "
        f"mean {stats.mean:.4f}, std {stats.std:.4f}"
    )
    return grid


def regenerate(
    params: GenerationParameters,
    rng: np.random.Generator | int | None = None,
    noise: CoherentNoise | None = None,
) -> HeightGrid:
    """Re-run the full pipeline; identical in contract to ``generate``."""
    logger.info("Regenerating heightmap")
    return generate(params, rng=rng, noise=noise)
