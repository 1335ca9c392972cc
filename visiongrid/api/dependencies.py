"""
Shared FastAPI dependencies for VisionGrid.
"""

import logging

from fastapi import Depends, HTTPException, Request

from visiongrid.config import Settings, get_settings
from visiongrid.services.image_service import ImageService

logger = logging.getLogger(__name__)


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


def get_image_service(request: Request) -> ImageService:
    """
    Get ImageService instance from app state.

    Raises:
        HTTPException: If the service is not initialized
    """
    try:
        return request.app.state.image_service
    except AttributeError as e:
        logger.error(f"ImageService not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: ImageService not initialized"
        )


def get_max_resize_dimension(settings: Settings = Depends(get_app_settings)) -> int:
    return settings.image.max_resize_dimension
