"""Grayscale preview images of generated heightmaps."""

from pathlib import Path

import numpy as np
from PIL import Image

from .types import HeightGrid


def render_preview(grid: HeightGrid) -> Image.Image:
    """Render a grid as an 8-bit grayscale image.

    Values are stretched over [normalized_min, normalized_max] so the lowest
    possible height is black and the highest is white. Image rows follow z
    and columns follow x.

    Args:
        grid: Height grid to render.

    Returns:
        PIL image in "L" mode, size (width, height).
    """
    span = grid.normalized_max - grid.normalized_min
    if span > 0:
        scaled = (grid.values - grid.normalized_min) / span
    else:
        scaled = np.zeros_like(grid.values)

    pixels = (np.clip(scaled, 0.0, 1.0) * 255).round().astype(np.uint8)
    # Image arrays are (rows, cols) = (z, x)
    return Image.fromarray(np.ascontiguousarray(pixels.T))


def save_preview(path: Path, grid: HeightGrid) -> None:
    """Render a grid and save it as an image (format from the suffix)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    render_preview(grid).save(path)
