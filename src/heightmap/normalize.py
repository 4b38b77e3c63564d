"""Rescale elevations from [min_elevation, max_elevation] to the output range."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import InvalidParametersError


def inverse_lerp(a: float, b: float, value: ArrayLike) -> NDArray[np.float64]:
    """Fractional position of ``value`` within [a, b], clamped to [0, 1]."""
    if a == b:
        raise InvalidParametersError([f"inverse_lerp range is empty: [{a}, {b}]"])
    return np.clip((np.asarray(value, dtype=np.float64) - a) / (b - a), 0.0, 1.0)


def lerp(a: float, b: float, t: ArrayLike) -> NDArray[np.float64]:
    """Linear interpolation between a and b by fraction t."""
    return a + np.asarray(t, dtype=np.float64) * (b - a)


def normalization_bounds(min_elevation: float, max_elevation: float) -> tuple[float, float]:
    """Output range anchors: the fractions that 0 and max_elevation represent.

    Args:
        min_elevation: Lower elevation bound.
        max_elevation: Upper elevation bound.

    Returns:
        Tuple of (normalized_min, normalized_max).
    """
    norm_min = float(inverse_lerp(min_elevation, max_elevation, 0.0))
    norm_max = float(inverse_lerp(min_elevation, max_elevation, max_elevation))
    return norm_min, norm_max


def normalize(
    field: NDArray[np.float64],
    min_elevation: float,
    max_elevation: float,
) -> NDArray[np.float64]:
    """Affinely remap every cell into [normalized_min, normalized_max].

    Order-preserving; each cell is mapped independently.

    Args:
        field: Elevation field.
        min_elevation: Lower elevation bound.
        max_elevation: Upper elevation bound.

    Returns:
        New array of normalized values.

    Raises:
        InvalidParametersError: If min_elevation >= max_elevation.
    """
    if min_elevation >= max_elevation:
        raise InvalidParametersError(
            [
                f"min_elevation ({min_elevation}) must be less than "
                f"max_elevation ({max_elevation})"
            ]
        )
    norm_min, norm_max = normalization_bounds(min_elevation, max_elevation)
    t = inverse_lerp(min_elevation, max_elevation, field)
    # Guard the range against rounding in lerp
    return np.clip(lerp(norm_min, norm_max, t), norm_min, norm_max)
