"""Grid persistence: save and load generated heightmaps."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from .config import GenerationParameters
from .types import HeightGrid

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def save_grid(
    path: Path,
    grid: HeightGrid,
    params: GenerationParameters,
) -> Path:
    """Save a generated grid to disk.

    Uses numpy's compressed .npz format for efficient storage. numpy appends
    ".npz" to paths without that suffix, and the returned path reflects it.

    Args:
        path: Output path.
        grid: Generated height grid.
        params: Parameters the grid was generated with.

    Returns:
        Path the archive was written to.
    """
    if path.suffix != ".npz":
        path = path.with_name(path.name + ".npz")

    metadata = {
        "version": FORMAT_VERSION,
        "parameters": params.model_dump(),
        "normalized_min": grid.normalized_min,
        "normalized_max": grid.normalized_max,
        "max_elevation": grid.max_elevation,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    np.savez_compressed(
        path,
        heights=grid.values,
        metadata=json.dumps(metadata).encode("utf-8"),
    )

    file_size = path.stat().st_size / 1024
    logger.info(f"Saved heightmap to {path} ({file_size:.1f} KB)")
    return path


def load_grid(path: Path) -> tuple[HeightGrid, dict]:
    """Load a grid from disk.

    Args:
        path: Path to .npz file.

    Returns:
        Tuple of (HeightGrid, metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Heightmap file not found: {path}")

    with np.load(path) as data:
        if "heights" not in data:
            raise ValueError("Invalid heightmap file: missing 'heights' array")
        heights = data["heights"].astype(np.float32)
        if heights.ndim != 2:
            raise ValueError(f"Invalid heightmap file: expected 2D heights, got {heights.ndim}D")

        if "metadata" not in data:
            raise ValueError("Invalid heightmap file: missing 'metadata'")
        metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))

    grid = HeightGrid(
        values=heights,
        normalized_min=metadata["normalized_min"],
        normalized_max=metadata["normalized_max"],
        max_elevation=metadata["max_elevation"],
    )

    logger.info(f"Loaded heightmap from {path}: {grid.width}x{grid.height}")
    return grid, metadata
