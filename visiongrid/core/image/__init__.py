"""
Image processing utilities - modular architecture.

This package provides the pixel formats and the transforms over them:
- formats: Pixel format variants wrapping a PixelGrid
- converters: Colorspace conversions (grayscale, RGB, HSV, bit depth)
- processors: Geometry operations (resize, crop)
"""

from visiongrid.core.image.converters import ColorConverters
from visiongrid.core.image.formats import (
    IMAGE_TYPES,
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
    image_type,
)
from visiongrid.core.image.processors import crop, resize

__all__ = [
    "ColorConverters",
    "IMAGE_TYPES",
    "Image",
    "Grayscale",
    "GrayscaleAlpha",
    "Rgb",
    "Rgba",
    "Grayscale16",
    "GrayscaleAlpha16",
    "Rgb16",
    "Rgba16",
    "Hsv",
    "image_type",
    "crop",
    "resize",
]
