"""Output value types for heightmap generation."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass
class HeightGrid:
    """A generated heightmap, owned by the caller.

    ``values`` has shape (width, height), is indexed [x, z] and holds
    normalized heights in [normalized_min, normalized_max].
    """

    values: NDArray[np.float32]
    normalized_min: float
    normalized_max: float
    max_elevation: float

    @property
    def width(self) -> int:
        return int(self.values.shape[0])

    @property
    def height(self) -> int:
        return int(self.values.shape[1])

    @property
    def heightmap_resolution(self) -> int:
        """Vertex resolution a host terrain should allocate (one past width)."""
        return self.width + 1

    @property
    def terrain_size(self) -> tuple[float, float, float]:
        """Physical (width, max elevation, height) of the host terrain."""
        return (float(self.width), float(self.max_elevation), float(self.height))

    def to_elevations(self) -> NDArray[np.float32]:
        """Map normalized values to world units on a terrain of ``terrain_size``."""
        return (self.values * np.float32(self.max_elevation)).astype(np.float32)


@dataclass(frozen=True)
class GridStats:
    """Summary statistics of a height grid."""

    min: float
    max: float
    mean: float
    std: float


def grid_stats(grid: HeightGrid) -> GridStats:
    """Compute summary statistics of a grid's normalized values."""
    values = grid.values
    return GridStats(
        min=float(values.min()),
        max=float(values.max()),
        mean=float(values.mean()),
        std=float(values.std()),
    )
