"""
Centralized enums for VisionGrid.
"""

from enum import Enum


class PixelFormat(str, Enum):
    """Supported pixel formats (colorspace x sample depth)."""

    GRAYSCALE = "grayscale"
    GRAYSCALE_ALPHA = "grayscale_alpha"
    RGB = "rgb"
    RGBA = "rgba"
    GRAYSCALE16 = "grayscale16"
    GRAYSCALE_ALPHA16 = "grayscale_alpha16"
    RGB16 = "rgb16"
    RGBA16 = "rgba16"
    HSV = "hsv"


class ColorTarget(str, Enum):
    """Conversion targets that have a file encoding."""

    GRAYSCALE = "grayscale"
    RGB = "rgb"
