"""
Tests for PixelGrid module
"""

import numpy as np
import pytest

from visiongrid.core.exceptions import IndexOutOfBound
from visiongrid.core.pixel_grid import PixelGrid


class TestPixelGrid:
    """Test PixelGrid functionality"""

    @pytest.fixture
    def grid(self):
        """Create a 3x2 RGB grid filled with one color"""
        return PixelGrid.filled(3, 2, [1, 2, 3])

    def test_initialization(self, grid):
        """Test grid dimensions and backing array"""
        assert grid.width == 3
        assert grid.height == 2
        assert grid.channels == 3
        assert grid.dtype == np.uint8
        assert grid.pixels.shape == (2, 3, 3)
        assert grid.size == (3, 2)

    def test_filled_scalar_value(self):
        """Test single-channel grid from a scalar"""
        grid = PixelGrid.filled(2, 2, 7, dtype=np.uint16)
        assert grid.channels == 1
        assert grid.get(1, 1) == (7,)
        assert grid.dtype == np.uint16

    def test_zeros(self):
        """Test default pixels are zero"""
        grid = PixelGrid.zeros(4, 3, 2)
        assert grid.get(3, 2) == (0, 0)

    def test_get_in_bounds(self, grid):
        """Test reading a pixel"""
        assert grid.get(0, 0) == (1, 2, 3)
        assert grid.get(2, 1) == (1, 2, 3)

    @pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (3, 2), (100, 100), (-1, 0), (0, -1)])
    def test_get_out_of_bounds(self, grid, x, y):
        """Test out-of-range coordinates return None"""
        assert grid.get(x, y) is None

    def test_get_is_column_row(self):
        """Test get(x, y) reads column x of row y"""
        pixels = np.array([[[1], [2], [3]], [[4], [5], [6]]], dtype=np.uint8)
        grid = PixelGrid(3, 2, pixels)

        assert grid.get(2, 0) == (3,)
        assert grid.get(0, 1) == (4,)

    def test_set_in_bounds(self, grid):
        """Test writing a pixel in place"""
        grid.set(1, 1, [9, 8, 7])

        assert grid.get(1, 1) == (9, 8, 7)
        assert grid.get(0, 1) == (1, 2, 3)

    def test_set_out_of_bounds(self, grid):
        """Test writing outside the grid fails and leaves it unmodified"""
        before = grid.copy()

        with pytest.raises(IndexOutOfBound) as exc_info:
            grid.set(3, 1, [9, 9, 9])

        assert exc_info.value.point == (3, 1)
        assert exc_info.value.size == (3, 2)
        assert "(3, 1) for size (3, 2)" in str(exc_info.value)
        assert grid == before

    @pytest.mark.parametrize("x, y", [(0, 2), (-1, 0), (5, 5)])
    def test_set_rejects_same_coordinates_as_get(self, grid, x, y):
        """Test set fails wherever get returns None"""
        assert grid.get(x, y) is None
        with pytest.raises(IndexOutOfBound):
            grid.set(x, y, [0, 0, 0])

    def test_flatten_order(self):
        """Test flatten emits (y, x, channel) order"""
        pixels = np.array(
            [[[1, 2], [3, 4]], [[5, 6], [7, 8]]],
            dtype=np.uint8,
        )
        grid = PixelGrid(2, 2, pixels)

        flat = grid.flatten()

        assert flat.tolist() == [1, 2, 3, 4, 5, 6, 7, 8]
        assert flat.dtype == np.uint8

    def test_flatten_is_a_copy(self, grid):
        """Test flattened samples are independent of the grid"""
        flat = grid.flatten()
        flat[0] = 200

        assert grid.get(0, 0) == (1, 2, 3)

    def test_flatten_length(self):
        """Test flatten length is height * width * channels"""
        grid = PixelGrid.zeros(5, 4, 3, dtype=np.uint16)
        assert len(grid.flatten()) == 60

    def test_dimension_setters_are_independent(self, grid):
        """Test width/height setters do not touch the pixels"""
        grid.width = 1
        grid.height = 1

        assert grid.pixels.shape == (2, 3, 3)
        assert grid.get(1, 0) is None

    def test_pixels_setter(self, grid):
        """Test replacing the backing array"""
        grid.pixels = np.zeros((2, 3, 3), dtype=np.uint8)
        assert grid.get(0, 0) == (0, 0, 0)

    def test_equality(self, grid):
        """Test value equality"""
        assert grid == PixelGrid.filled(3, 2, [1, 2, 3])
        assert grid != PixelGrid.filled(3, 2, [1, 2, 4])
        assert grid != PixelGrid.filled(3, 2, [1, 2, 3], dtype=np.uint16)

    def test_copy_is_independent(self, grid):
        """Test copy does not share pixels"""
        copied = grid.copy()
        copied.set(0, 0, [0, 0, 0])

        assert grid.get(0, 0) == (1, 2, 3)
