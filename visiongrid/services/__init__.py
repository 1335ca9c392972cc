"""
Service layer for VisionGrid
"""

from .image_service import ImageService

__all__ = ["ImageService"]
