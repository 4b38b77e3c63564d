"""Feature overlay: randomly placed radial elevation bumps."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

DEFAULT_BUMP_COUNT = 5
HEIGHT_OFFSET_MIN = 2.0
HEIGHT_OFFSET_MAX = 5.0


@dataclass(frozen=True)
class FeatureBump:
    """A cone-shaped bump: full height at the center, zero at the radius."""

    center_x: int
    center_z: int
    radius: float
    height_offset: float


def sample_bumps(
    width: int,
    height: int,
    rng: np.random.Generator,
    count: int = DEFAULT_BUMP_COUNT,
) -> list[FeatureBump]:
    """Sample independent feature bumps inside the inner half of the grid.

    Each bump draws, in order, its center x in [width//4, 3*width//4), its
    center z in [height//4, 3*height//4) (both integer, upper bound
    excluded), its radius in [width/16, width/8] and its height offset in
    [2, 5]. Grids too small to have an inner half place every center on the
    lower bound.

    Args:
        width: Grid width in cells.
        height: Grid height in cells.
        rng: Random number generator.
        count: Number of bumps to sample.

    Returns:
        List of sampled bumps.
    """
    bumps: list[FeatureBump] = []
    for _ in range(count):
        center_x = _inner_index(width, rng)
        center_z = _inner_index(height, rng)
        radius = float(rng.uniform(width / 16, width / 8))
        height_offset = float(rng.uniform(HEIGHT_OFFSET_MIN, HEIGHT_OFFSET_MAX))
        bumps.append(FeatureBump(center_x, center_z, radius, height_offset))
    return bumps


def _inner_index(extent: int, rng: np.random.Generator) -> int:
    """Draw an index from [extent//4, 3*extent//4), or extent//4 if that is empty."""
    low = extent // 4
    high = max(3 * extent // 4, low + 1)
    return int(rng.integers(low, high))


def bump_weight(
    bump: FeatureBump,
    width: int,
    height: int,
) -> NDArray[np.float64]:
    """Compute a bump's linear falloff weight for every cell.

    Args:
        bump: The bump to evaluate.
        width: Grid width in cells.
        height: Grid height in cells.

    Returns:
        Weights of shape (width, height) in [0, 1]: 1 at the center,
        0 at and beyond the radius.
    """
    if bump.radius <= 0:
        return np.zeros((width, height), dtype=np.float64)

    xs = np.arange(width, dtype=np.float64) - bump.center_x
    zs = np.arange(height, dtype=np.float64) - bump.center_z
    distance = np.sqrt(xs[:, np.newaxis] ** 2 + zs[np.newaxis, :] ** 2)
    return np.clip((bump.radius - distance) / bump.radius, 0.0, 1.0)


def apply_bumps(
    field: NDArray[np.float64],
    bumps: list[FeatureBump],
) -> NDArray[np.float64]:
    """Add each bump's weighted height offset to the field in place.

    Args:
        field: Elevation field of shape (width, height), modified in place.
        bumps: Bumps to apply.

    Returns:
        The same field array, for chaining.
    """
    width, height = field.shape
    for bump in bumps:
        field += bump_weight(bump, width, height) * bump.height_offset
    return field
