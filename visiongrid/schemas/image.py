"""
Image processing API models.

This module contains models for image operations:
- Image info
- Colorspace conversion
- Resize and crop
"""

from typing import Optional

from pydantic import BaseModel, Field

from visiongrid.core.constants import ImageConstants
from visiongrid.core.enums import ColorTarget, PixelFormat

from .common import Point


class ImagePayload(BaseModel):
    """Base64 encoded image (PNG, JPEG, BMP, ...)"""

    image: str = Field(..., min_length=1, description="Base64 encoded image file")
    output_format: Optional[str] = Field(
        default=None, description="Response encoding (defaults to configured format)"
    )


class ConvertRequest(ImagePayload):
    """Request to convert an image to another colorspace"""

    target: ColorTarget


class ResizeRequest(ImagePayload):
    """Request to resize an image (nearest-neighbor)"""

    width: int = Field(..., ge=ImageConstants.MIN_RESIZE_DIMENSION)
    height: int = Field(..., ge=ImageConstants.MIN_RESIZE_DIMENSION)


class CropRequest(ImagePayload):
    """Request to crop an image between two points"""

    point1: Point = Field(..., description="Inclusive top-left corner")
    point2: Point = Field(..., description="Exclusive bottom-right corner")


class ImageInfo(BaseModel):
    """Pixel format and dimensions of an image"""

    format: PixelFormat
    width: int
    height: int
    channels: int


class ImageResponse(ImageInfo):
    """Transformed image with its pixel format"""

    image: str = Field(..., description="Base64 encoded image file")
