"""
Colorspace conversion utilities.

Handles conversions between pixel formats:
- Any format to 8-bit grayscale (luma)
- RGB family and HSV to 8-bit RGB
- RGB family to HSV
- 16-bit to 8-bit sample downcasting

All conversions are element-wise, vectorized with NumPy, and return a new
image backed by a freshly allocated grid.
"""

import logging
from typing import Union

import numpy as np

from visiongrid.core.constants import ColorConstants
from visiongrid.core.enums import ColorTarget, PixelFormat
from visiongrid.core.exceptions import InvalidColorType
from visiongrid.core.image.formats import (
    Grayscale,
    Grayscale16,
    GrayscaleAlpha,
    GrayscaleAlpha16,
    Hsv,
    Image,
    Rgb,
    Rgb16,
    Rgba,
    Rgba16,
)
from visiongrid.core.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)

_LUMA = np.array(ColorConstants.LUMA_WEIGHTS, dtype=np.float64)


def _round_half_up(values: np.ndarray) -> np.ndarray:
    # Samples are non-negative, so floor(v + 0.5) rounds half away from zero
    return np.floor(values + 0.5)


def _to_uint8(values: np.ndarray) -> np.ndarray:
    return np.clip(_round_half_up(values), 0, ColorConstants.MAX_8BIT).astype(np.uint8)


def _derived(image: Image, pixels: np.ndarray) -> PixelGrid:
    return PixelGrid(image.width, image.height, pixels)


class ColorConverters:
    """Utilities for converting images between pixel formats."""

    @staticmethod
    def downcast_8bit(sample: Union[int, np.ndarray]) -> Union[int, np.ndarray]:
        """
        Reduce 16-bit samples to 8-bit: round(sample / 65535 * 255).

        Args:
            sample: A single 16-bit value or an array of them

        Returns:
            8-bit value (int for scalar input, uint8 array otherwise)
        """
        scaled = np.asarray(sample, dtype=np.float64) / ColorConstants.MAX_16BIT
        result = _to_uint8(scaled * ColorConstants.MAX_8BIT)
        if result.ndim == 0:
            return int(result)
        return result

    @staticmethod
    def luma(rgb: np.ndarray) -> np.ndarray:
        """
        Weighted sum 0.299 R + 0.587 G + 0.114 B over the last axis.

        Args:
            rgb: Array of shape (..., 3) in the 8-bit range

        Returns:
            uint8 array of shape (..., 1)
        """
        weighted = np.asarray(rgb, dtype=np.float64) @ _LUMA
        return _to_uint8(weighted)[..., np.newaxis]

    @staticmethod
    def rgb_to_hsv(rgb: np.ndarray) -> np.ndarray:
        """
        Convert 8-bit RGB pixels to HSV.

        See https://en.wikipedia.org/wiki/HSL_and_HSV#From_RGB

        Args:
            rgb: Array of shape (..., 3), channels in [0, 255]

        Returns:
            float32 array of shape (..., 3): hue in degrees [0, 360),
            saturation and value in [0, 1]
        """
        normalized = np.asarray(rgb, dtype=np.float64) / ColorConstants.MAX_8BIT
        r = normalized[..., 0]
        g = normalized[..., 1]
        b = normalized[..., 2]

        c_max = normalized.max(axis=-1)
        c_min = normalized.min(axis=-1)
        delta = c_max - c_min

        # Achromatic pixels get hue 0; avoid dividing by zero for them
        safe_delta = np.where(delta == 0, 1.0, delta)
        sector = np.where(
            c_max == r,
            np.mod((g - b) / safe_delta, ColorConstants.HUE_SECTORS),
            np.where(c_max == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
        )
        hue = np.where(delta == 0, 0.0, sector * ColorConstants.HUE_SECTOR_DEGREES)
        hue = np.where(hue >= ColorConstants.HUE_MAX_DEGREES, 0.0, hue)

        saturation = np.where(c_max == 0, 0.0, delta / np.where(c_max == 0, 1.0, c_max))

        return np.stack([hue, saturation, c_max], axis=-1).astype(np.float32)

    @staticmethod
    def hsv_to_rgb(hsv: np.ndarray) -> np.ndarray:
        """
        Convert HSV pixels to 8-bit RGB.

        See https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB

        Hue outside [0, 360) (including negative hue) maps to black.

        Args:
            hsv: Array of shape (..., 3): hue in degrees, saturation and value in [0, 1]

        Returns:
            uint8 array of shape (..., 3)
        """
        hsv = np.asarray(hsv, dtype=np.float64)
        hue = hsv[..., 0]
        saturation = hsv[..., 1]
        value = hsv[..., 2]

        chroma = saturation * value
        h_prime = hue / ColorConstants.HUE_SECTOR_DEGREES
        x = chroma * (1.0 - np.abs(np.mod(h_prime, 2.0) - 1.0))
        m = value - chroma
        zero = np.zeros_like(chroma)

        valid = (hue >= 0.0) & (hue < ColorConstants.HUE_MAX_DEGREES)
        sector = np.where(valid, np.floor(h_prime), -1)
        conditions = [sector == i for i in range(ColorConstants.HUE_SECTORS)]

        r_prime = np.select(conditions, [chroma, x, zero, zero, x, chroma], default=0.0)
        g_prime = np.select(conditions, [x, chroma, chroma, x, zero, zero], default=0.0)
        b_prime = np.select(conditions, [zero, zero, x, chroma, chroma, x], default=0.0)

        rgb = np.stack([r_prime, g_prime, b_prime], axis=-1) + m[..., np.newaxis]
        rgb = np.where(valid[..., np.newaxis], rgb, 0.0)

        invalid_count = int(np.count_nonzero(~valid))
        if invalid_count:
            logger.warning(f"{invalid_count} pixel(s) with hue outside [0, 360) mapped to black")

        return _to_uint8(rgb * ColorConstants.MAX_8BIT)

    @staticmethod
    def grayscale(image: Image) -> Grayscale:
        """
        Convert an image of any format to 8-bit grayscale.

        Alpha channels are dropped, 16-bit samples are downcast first and
        RGB pixels are reduced to luma.

        Args:
            image: Source image

        Returns:
            New Grayscale image
        """
        pixels = image.grid.pixels

        if isinstance(image, Grayscale):
            gray = pixels.copy()
        elif isinstance(image, GrayscaleAlpha):
            gray = pixels[..., :1].copy()
        elif isinstance(image, (Grayscale16, GrayscaleAlpha16)):
            gray = ColorConverters.downcast_8bit(pixels[..., :1])
        elif isinstance(image, (Rgb, Rgba)):
            gray = ColorConverters.luma(pixels[..., :3])
        elif isinstance(image, (Rgb16, Rgba16)):
            gray = ColorConverters.luma(ColorConverters.downcast_8bit(pixels[..., :3]))
        elif isinstance(image, Hsv):
            # H, S and V are rescaled as if they were 16-bit samples
            rescaled = pixels.astype(np.float64) / ColorConstants.MAX_16BIT
            gray = ColorConverters.luma(rescaled * ColorConstants.MAX_8BIT)
        else:
            raise InvalidColorType(image.name, PixelFormat.GRAYSCALE.value)

        logger.debug(f"Converted {image.name} to grayscale ({image.width}x{image.height})")
        return Grayscale(_derived(image, gray))

    @staticmethod
    def rgb(image: Image) -> Rgb:
        """
        Convert an image to 8-bit RGB.

        Args:
            image: Rgb, Rgba, Rgb16, Rgba16 or Hsv image

        Returns:
            New Rgb image

        Raises:
            InvalidColorType: For grayscale sources
        """
        pixels = image.grid.pixels

        if isinstance(image, Rgb):
            rgb = pixels.copy()
        elif isinstance(image, Rgba):
            rgb = pixels[..., :3].copy()
        elif isinstance(image, (Rgb16, Rgba16)):
            rgb = ColorConverters.downcast_8bit(pixels[..., :3])
        elif isinstance(image, Hsv):
            rgb = ColorConverters.hsv_to_rgb(pixels)
        else:
            raise InvalidColorType(image.name, PixelFormat.RGB.value)

        logger.debug(f"Converted {image.name} to rgb ({image.width}x{image.height})")
        return Rgb(_derived(image, rgb))

    @staticmethod
    def hsv(image: Image) -> Hsv:
        """
        Convert an image to HSV.

        Args:
            image: Rgb, Rgba, Rgb16, Rgba16 or Hsv image

        Returns:
            New Hsv image

        Raises:
            InvalidColorType: For grayscale sources
        """
        pixels = image.grid.pixels

        if isinstance(image, Hsv):
            hsv = pixels.copy()
        elif isinstance(image, (Rgb, Rgba)):
            hsv = ColorConverters.rgb_to_hsv(pixels[..., :3])
        elif isinstance(image, (Rgb16, Rgba16)):
            hsv = ColorConverters.rgb_to_hsv(ColorConverters.downcast_8bit(pixels[..., :3]))
        else:
            raise InvalidColorType(image.name, PixelFormat.HSV.value)

        logger.debug(f"Converted {image.name} to hsv ({image.width}x{image.height})")
        return Hsv(_derived(image, hsv))

    @staticmethod
    def convert(image: Image, target: Union[ColorTarget, PixelFormat, str]) -> Image:
        """
        Convert an image to a target colorspace by name.

        Args:
            image: Source image
            target: "grayscale", "rgb" or "hsv"

        Returns:
            Converted image

        Raises:
            InvalidColorType: If the target is unknown or undefined for the source
        """
        name = getattr(target, "value", target)
        if name == PixelFormat.GRAYSCALE.value:
            return ColorConverters.grayscale(image)
        if name == PixelFormat.RGB.value:
            return ColorConverters.rgb(image)
        if name == PixelFormat.HSV.value:
            return ColorConverters.hsv(image)
        raise InvalidColorType(image.name, str(name))
