"""
Pixel grid - dense 2D storage of fixed-size pixel tuples.

A PixelGrid owns a NumPy array of shape (height, width, channels). The
sample type is the array dtype (uint8, uint16 or float32) and the channel
count is the size of the last axis, so one class serves every pixel shape.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from visiongrid.core.exceptions import IndexOutOfBound

logger = logging.getLogger(__name__)

Sample = Union[int, float]


class PixelGrid:
    """
    Row-major grid of pixels indexed as [y][x].

    The declared width/height are stored separately from the backing array
    and are not validated against it. Callers that replace the pixels or
    change a dimension must keep the three consistent.
    """

    def __init__(self, width: int, height: int, pixels: np.ndarray):
        """
        Initialize PixelGrid

        Args:
            width: Number of columns
            height: Number of rows
            pixels: Array of shape (height, width, channels)
        """
        self._width = width
        self._height = height
        self._pixels = pixels

    @classmethod
    def filled(
        cls,
        width: int,
        height: int,
        value: Union[Sample, Sequence[Sample]],
        dtype=np.uint8,
    ) -> "PixelGrid":
        """
        Create a grid with every cell set to the same pixel.

        Args:
            width: Number of columns
            height: Number of rows
            value: Pixel tuple (or a scalar for single-channel grids)
            dtype: Sample type

        Returns:
            New PixelGrid
        """
        pixel = np.atleast_1d(np.asarray(value, dtype=dtype))
        pixels = np.empty((height, width, pixel.shape[0]), dtype=dtype)
        pixels[...] = pixel
        return cls(width, height, pixels)

    @classmethod
    def zeros(cls, width: int, height: int, channels: int, dtype=np.uint8) -> "PixelGrid":
        """Create a grid of default (zero) pixels."""
        return cls(width, height, np.zeros((height, width, channels), dtype=dtype))

    # Getters / setters

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, width: int) -> None:
        self._width = width

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, height: int) -> None:
        self._height = height

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @pixels.setter
    def pixels(self, pixels: np.ndarray) -> None:
        self._pixels = pixels

    @property
    def channels(self) -> int:
        return self._pixels.shape[2]

    @property
    def dtype(self) -> np.dtype:
        return self._pixels.dtype

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return (self._width, self._height)

    # Pixel manipulators

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Optional[Tuple[Sample, ...]]:
        """
        Get pixel at column x, row y.

        Returns:
            Channel tuple, or None if the coordinate is outside the grid
        """
        if not self.in_bounds(x, y):
            return None
        return tuple(self._pixels[y, x].tolist())

    def set(self, x: int, y: int, value: Union[Sample, Sequence[Sample]]) -> None:
        """
        Set pixel at column x, row y.

        Raises:
            IndexOutOfBound: If the coordinate is outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexOutOfBound.for_point(x, y, self._width, self._height)
        self._pixels[y, x] = value

    def flatten(self) -> np.ndarray:
        """
        Flatten pixels in (y, x, channel) order.

        Returns:
            1-D array of samples, length height * width * channels
        """
        return np.ascontiguousarray(self._pixels).reshape(-1).copy()

    def copy(self) -> "PixelGrid":
        return PixelGrid(self._width, self._height, self._pixels.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._pixels.dtype == other._pixels.dtype
            and np.array_equal(self._pixels, other._pixels)
        )

    def __repr__(self) -> str:
        return (
            f"PixelGrid(width={self._width}, height={self._height}, "
            f"channels={self.channels}, dtype={self.dtype})"
        )
