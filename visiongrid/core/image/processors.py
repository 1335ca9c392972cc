"""
Image geometry operations.

Handles grid manipulation tasks:
- Resizing (nearest-neighbor)
- Cropping (rectangular region extraction)

Both work on any PixelGrid regardless of sample type or channel count.
"""

import logging
from typing import Tuple

import numpy as np

from visiongrid.core.exceptions import IndexOutOfBound
from visiongrid.core.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)


def resize(grid: PixelGrid, width: int, height: int) -> PixelGrid:
    """
    Resize grid using nearest-neighbor sampling.

    Destination (x, y) samples source (x * src_width // width,
    y * src_height // height). Upscaling repeats pixels, downscaling drops
    them; there is no averaging.

    Args:
        grid: Source grid
        width: Target width
        height: Target height

    Returns:
        New grid of size width x height
    """
    if width < 0 or height < 0:
        raise ValueError(f"Invalid target size: {width}x{height}")

    resized = np.zeros((height, width, grid.channels), dtype=grid.dtype)
    source = grid.pixels

    old_y = np.arange(height, dtype=np.int64) * grid.height // max(height, 1)
    old_x = np.arange(width, dtype=np.int64) * grid.width // max(width, 1)

    # Destination cells whose source coordinate is missing keep the default
    rows = np.nonzero(old_y < min(grid.height, source.shape[0]))[0]
    cols = np.nonzero(old_x < min(grid.width, source.shape[1]))[0]
    if rows.size and cols.size:
        resized[np.ix_(rows, cols)] = source[np.ix_(old_y[rows], old_x[cols])]

    logger.debug(f"Resized grid {grid.width}x{grid.height} -> {width}x{height}")
    return PixelGrid(width, height, resized)


def crop(grid: PixelGrid, point1: Tuple[int, int], point2: Tuple[int, int]) -> PixelGrid:
    """
    Extract the rectangle between two points.

    Args:
        grid: Source grid
        point1: Inclusive top-left (x0, y0)
        point2: Exclusive bottom-right (x1, y1)

    Returns:
        New grid of size (x1 - x0) x (y1 - y0)

    Raises:
        IndexOutOfBound: Unless 0 <= x0 < x1 <= width and 0 <= y0 < y1 <= height
    """
    x0, y0 = point1
    x1, y1 = point2

    if not (0 <= x0 < x1 <= grid.width and 0 <= y0 < y1 <= grid.height):
        raise IndexOutOfBound.for_region((x0, y0), (x1, y1), grid.width, grid.height)

    cropped = grid.pixels[y0:y1, x0:x1].copy()

    logger.debug(f"Cropped grid ({x0}, {y0})-({x1}, {y1}) from {grid.width}x{grid.height}")
    return PixelGrid(x1 - x0, y1 - y0, cropped)
