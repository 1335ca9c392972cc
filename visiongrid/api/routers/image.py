"""
Image API Router - Colorspace and geometry operations
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from visiongrid.api.dependencies import get_image_service, get_max_resize_dimension
from visiongrid.api.exceptions import safe_endpoint
from visiongrid.core.constants import ImageConstants
from visiongrid.core.image.converters import ColorConverters
from visiongrid.core.image.formats import Image
from visiongrid.schemas import (
    ConvertRequest,
    CropRequest,
    ImageInfo,
    ImagePayload,
    ImageResponse,
    ResizeRequest,
)
from visiongrid.services.image_service import ImageService

logger = logging.getLogger(__name__)

router = APIRouter()


def _output_format(requested: Optional[str]) -> Optional[str]:
    if requested is None:
        return None
    output_format = requested.upper()
    if output_format == "JPG":
        output_format = "JPEG"
    if output_format not in ImageConstants.SUPPORTED_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported output format: {requested}")
    return output_format


def _info(image: Image) -> ImageInfo:
    return ImageInfo(
        format=image.format, width=image.width, height=image.height, channels=image.channels
    )


def _respond(
    image: Image, image_service: ImageService, output_format: Optional[str]
) -> ImageResponse:
    encoded = image_service.to_base64(image, format=_output_format(output_format))
    return ImageResponse(image=encoded, **_info(image).model_dump())


@router.post("/info")
@safe_endpoint
async def image_info(
    request: ImagePayload, image_service: ImageService = Depends(get_image_service)
) -> ImageInfo:
    """Get pixel format and dimensions of an image."""
    image = image_service.from_base64(request.image)
    return _info(image)


@router.post("/convert")
@safe_endpoint
async def convert_image(
    request: ConvertRequest, image_service: ImageService = Depends(get_image_service)
) -> ImageResponse:
    """
    Convert an image to grayscale or RGB.

    Grayscale sources cannot be converted to RGB and are rejected with 400.
    """
    image = image_service.from_base64(request.image)
    converted = ColorConverters.convert(image, request.target)

    logger.info(f"Converted {image.name} image to {converted.name}")
    return _respond(converted, image_service, request.output_format)


@router.post("/resize")
@safe_endpoint
async def resize_image(
    request: ResizeRequest,
    image_service: ImageService = Depends(get_image_service),
    max_dimension: int = Depends(get_max_resize_dimension),
) -> ImageResponse:
    """Resize an image with nearest-neighbor sampling."""
    if request.width > max_dimension or request.height > max_dimension:
        raise HTTPException(
            status_code=400,
            detail=f"Target size {request.width}x{request.height} exceeds {max_dimension}",
        )

    image = image_service.from_base64(request.image)
    resized = image.resize(request.width, request.height)

    logger.info(
        f"Resized {image.name} image {image.width}x{image.height} -> "
        f"{resized.width}x{resized.height}"
    )
    return _respond(resized, image_service, request.output_format)


@router.post("/crop")
@safe_endpoint
async def crop_image(
    request: CropRequest, image_service: ImageService = Depends(get_image_service)
) -> ImageResponse:
    """Crop the rectangle [point1, point2) out of an image."""
    image = image_service.from_base64(request.image)
    cropped = image.crop(request.point1.to_tuple(), request.point2.to_tuple())

    logger.info(
        f"Cropped {image.name} image at ({request.point1.x},{request.point1.y})-"
        f"({request.point2.x},{request.point2.y})"
    )
    return _respond(cropped, image_service, request.output_format)
