"""Coherent noise for heightmap generation.

Provides Ken Perlin's improved gradient noise evaluated on the z = 0 plane,
vectorized over numpy coordinate arrays.
"""

from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

PERMUTATION_SIZE = 256


class CoherentNoise(Protocol):
    """Anything that maps 2D sample coordinates to smooth values in [0, 1]."""

    def sample(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]: ...


class PerlinNoise:
    """Seeded 2D Perlin gradient noise.

    The permutation table is drawn from ``numpy.random.default_rng(seed)``
    unless one is supplied directly. Output is zero (0.5 after remapping)
    on every integer lattice point.
    """

    def __init__(self, seed: int = 0, permutation: ArrayLike | None = None) -> None:
        if permutation is None:
            permutation = np.random.default_rng(seed).permutation(PERMUTATION_SIZE)

        table = np.asarray(permutation, dtype=np.int64)
        if table.shape != (PERMUTATION_SIZE,):
            raise ValueError(
                f"Permutation table must have {PERMUTATION_SIZE} entries, "
                f"got shape {table.shape}"
            )
        if table.min() < 0 or table.max() >= PERMUTATION_SIZE:
            raise ValueError("Permutation entries must lie in [0, 255]")

        self.seed = seed
        # Doubled so corner lookups never need a second wrap
        self._perm = np.concatenate([table, table])

    def raw(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Sample noise in its native signed range, roughly [-1, 1].

        Args:
            x: Sample x coordinates (scalar or array).
            y: Sample y coordinates, broadcastable against ``x``.

        Returns:
            Noise values with the broadcast shape of the inputs.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        x0 = np.floor(x)
        y0 = np.floor(y)
        xf = x - x0
        yf = y - y0
        xi = x0.astype(np.int64) & 255
        yi = y0.astype(np.int64) & 255

        u = _fade(xf)
        v = _fade(yf)

        # Hash the four cell corners
        p = self._perm
        a = p[xi] + yi
        b = p[xi + 1] + yi

        x1 = _lerp(_grad(p[a], xf, yf), _grad(p[b], xf - 1, yf), u)
        x2 = _lerp(_grad(p[a + 1], xf, yf - 1), _grad(p[b + 1], xf - 1, yf - 1), u)
        return _lerp(x1, x2, v)

    def sample(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Sample noise remapped to [0, 1]."""
        return np.clip(self.raw(x, y) * 0.5 + 0.5, 0.0, 1.0)


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: NDArray[np.float64], b: NDArray[np.float64], t: NDArray[np.float64]) -> NDArray[np.float64]:
    return a + t * (b - a)


def _grad(hash_value: NDArray[np.int64], x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
    """Dot product of the hashed gradient with the corner offset.

    Uses the twelve cube-edge gradients of improved noise with z = 0.
    """
    h = hash_value & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, 0.0))
    return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)
