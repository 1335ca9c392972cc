"""
API Routers for VisionGrid
"""

from . import image, system

__all__ = ["image", "system"]
