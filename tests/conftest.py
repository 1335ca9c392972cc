"""
Pytest configuration and fixtures for VisionGrid tests
"""

import numpy as np
import pytest

from visiongrid.core.image.formats import (
    Grayscale,
    Grayscale16,
    GrayscaleAlpha,
    GrayscaleAlpha16,
    Hsv,
    Rgb,
    Rgb16,
    Rgba,
    Rgba16,
)
from visiongrid.core.pixel_grid import PixelGrid
from visiongrid.services.image_service import ImageService


def make_grid(rows, dtype=np.uint8) -> PixelGrid:
    """Build a grid from nested rows of pixel tuples ([y][x][channel])"""
    pixels = np.array(rows, dtype=dtype)
    height, width = pixels.shape[:2]
    return PixelGrid(width, height, pixels)


@pytest.fixture
def rgb_image():
    """Create a 4x3 RGB test image"""
    return Rgb(
        make_grid(
            [
                [[255, 0, 0], [0, 255, 0], [0, 0, 255], [255, 255, 255]],
                [[0, 0, 0], [128, 128, 128], [255, 255, 0], [255, 0, 255]],
                [[12, 200, 77], [250, 128, 3], [64, 32, 16], [1, 2, 3]],
            ]
        )
    )


@pytest.fixture
def gradient_grid():
    """Create a 10x8 two-channel grid where pixel (x, y) holds [x, y]"""
    pixels = np.zeros((8, 10, 2), dtype=np.uint8)
    for y in range(8):
        for x in range(10):
            pixels[y, x] = [x, y]
    return PixelGrid(10, 8, pixels)


@pytest.fixture
def all_formats():
    """One small image per pixel format"""
    return [
        Grayscale(make_grid([[[0], [128]], [[200], [255]]])),
        GrayscaleAlpha(make_grid([[[0, 255], [128, 10]], [[200, 0], [255, 255]]])),
        Rgb(make_grid([[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [10, 20, 30]]])),
        Rgba(make_grid([[[255, 0, 0, 1], [0, 255, 0, 2]], [[0, 0, 255, 3], [10, 20, 30, 4]]])),
        Grayscale16(make_grid([[[0], [32768]], [[65535], [1000]]], dtype=np.uint16)),
        GrayscaleAlpha16(
            make_grid([[[0, 1], [32768, 2]], [[65535, 3], [1000, 4]]], dtype=np.uint16)
        ),
        Rgb16(
            make_grid(
                [[[65535, 0, 0], [0, 65535, 0]], [[0, 0, 65535], [1000, 2000, 3000]]],
                dtype=np.uint16,
            )
        ),
        Rgba16(
            make_grid(
                [[[65535, 0, 0, 9], [0, 65535, 0, 9]], [[0, 0, 65535, 9], [1, 2, 3, 9]]],
                dtype=np.uint16,
            )
        ),
        Hsv(make_grid([[[0, 1, 1], [120, 1, 1]], [[240, 0.5, 0.5], [0, 0, 0]]], dtype=np.float32)),
    ]


@pytest.fixture
def image_service():
    """Create ImageService instance for testing"""
    return ImageService()


@pytest.fixture
def grid_from_rows():
    """Factory building a PixelGrid from nested [y][x][channel] rows"""
    return make_grid
