"""
Schemas Package

Pydantic schemas for data validation and serialization, shared by the API
and service layers.
"""

from .common import Point
from .image import (
    ConvertRequest,
    CropRequest,
    ImageInfo,
    ImagePayload,
    ImageResponse,
    ResizeRequest,
)

__all__ = [
    "Point",
    "ImagePayload",
    "ConvertRequest",
    "ResizeRequest",
    "CropRequest",
    "ImageInfo",
    "ImageResponse",
]
