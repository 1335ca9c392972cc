"""
Core modules for VisionGrid
"""

from .enums import ColorTarget, PixelFormat
from .exceptions import (
    IndexOutOfBound,
    InsufficientBufferSize,
    InvalidColorType,
    InvalidImageDepthSize,
    VisionGridError,
)
from .pixel_grid import PixelGrid

__all__ = [
    "PixelGrid",
    "PixelFormat",
    "ColorTarget",
    "VisionGridError",
    "IndexOutOfBound",
    "InvalidColorType",
    "InvalidImageDepthSize",
    "InsufficientBufferSize",
]
