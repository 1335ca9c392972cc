"""
Pixel format variants.

Each supported (colorspace, sample depth) pair is its own Image subclass
wrapping a PixelGrid of the matching dtype and channel count:

- Grayscale, GrayscaleAlpha, Rgb, Rgba (8-bit)
- Grayscale16, GrayscaleAlpha16, Rgb16, Rgba16 (16-bit)
- Hsv (32-bit float, hue in degrees)

Conversions and geometry transforms always build a new grid; the grid
wrapped by a variant is never shared with another variant.
"""

import logging
from typing import ClassVar, Dict, Sequence, Tuple, Type

import numpy as np

from visiongrid.core.enums import PixelFormat
from visiongrid.core.exceptions import InsufficientBufferSize, InvalidImageDepthSize
from visiongrid.core.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)


class Image:
    """Base class of the closed set of pixel formats."""

    format: ClassVar[PixelFormat]
    dtype: ClassVar[type]
    channels: ClassVar[int]

    def __init__(self, grid: PixelGrid):
        if grid.dtype != np.dtype(self.dtype) or grid.channels != self.channels:
            raise InvalidImageDepthSize(
                f"{self.name} image requires {self.channels} channel(s) of "
                f"{np.dtype(self.dtype).name}, got {grid.channels} of {grid.dtype.name}"
            )
        self.grid = grid

    @property
    def name(self) -> str:
        return self.format.value

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @classmethod
    def from_buffer(cls, width: int, height: int, samples: Sequence) -> "Image":
        """
        Wrap a decoded flat sample buffer.

        Args:
            width: Image width
            height: Image height
            samples: Row-major samples, `channels` per pixel

        Returns:
            New image of this format

        Raises:
            InsufficientBufferSize: If the buffer length does not match
        """
        data = np.asarray(samples, dtype=cls.dtype)
        expected = width * height * cls.channels
        if data.size != expected:
            raise InsufficientBufferSize(
                f"{cls.format.value} buffer holds {data.size} samples, "
                f"expected {expected} for size ({width}, {height})",
                expected=expected,
                actual=data.size,
            )
        pixels = data.reshape((height, width, cls.channels)).copy()
        return cls(PixelGrid(width, height, pixels))

    def flatten(self) -> np.ndarray:
        return self.grid.flatten()

    def copy(self) -> "Image":
        return type(self)(self.grid.copy())

    # Colorspace

    def grayscale(self) -> "Grayscale":
        from visiongrid.core.image.converters import ColorConverters

        return ColorConverters.grayscale(self)

    def rgb(self) -> "Rgb":
        from visiongrid.core.image.converters import ColorConverters

        return ColorConverters.rgb(self)

    def hsv(self) -> "Hsv":
        from visiongrid.core.image.converters import ColorConverters

        return ColorConverters.hsv(self)

    # Geometry

    def resize(self, width: int, height: int) -> "Image":
        from visiongrid.core.image.processors import resize

        return type(self)(resize(self.grid, width, height))

    def crop(self, point1: Tuple[int, int], point2: Tuple[int, int]) -> "Image":
        from visiongrid.core.image.processors import crop

        return type(self)(crop(self.grid, point1, point2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return type(self) is type(other) and self.grid == other.grid

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}x{self.height})"


class Grayscale(Image):
    format = PixelFormat.GRAYSCALE
    dtype = np.uint8
    channels = 1


class GrayscaleAlpha(Image):
    format = PixelFormat.GRAYSCALE_ALPHA
    dtype = np.uint8
    channels = 2


class Rgb(Image):
    format = PixelFormat.RGB
    dtype = np.uint8
    channels = 3


class Rgba(Image):
    format = PixelFormat.RGBA
    dtype = np.uint8
    channels = 4


class Grayscale16(Image):
    format = PixelFormat.GRAYSCALE16
    dtype = np.uint16
    channels = 1


class GrayscaleAlpha16(Image):
    format = PixelFormat.GRAYSCALE_ALPHA16
    dtype = np.uint16
    channels = 2


class Rgb16(Image):
    format = PixelFormat.RGB16
    dtype = np.uint16
    channels = 3


class Rgba16(Image):
    format = PixelFormat.RGBA16
    dtype = np.uint16
    channels = 4


class Hsv(Image):
    """HSV image: hue in degrees [0, 360), saturation and value in [0, 1]."""

    format = PixelFormat.HSV
    dtype = np.float32
    channels = 3


IMAGE_TYPES: Dict[PixelFormat, Type[Image]] = {
    cls.format: cls
    for cls in (
        Grayscale,
        GrayscaleAlpha,
        Rgb,
        Rgba,
        Grayscale16,
        GrayscaleAlpha16,
        Rgb16,
        Rgba16,
        Hsv,
    )
}


def image_type(pixel_format: PixelFormat) -> Type[Image]:
    """Get the Image subclass for a pixel format."""
    return IMAGE_TYPES[PixelFormat(pixel_format)]
