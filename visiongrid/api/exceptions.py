"""
Exception handling for the VisionGrid API.

Core errors are translated to HTTP responses by the handlers registered in
register_exception_handlers(); safe_endpoint wraps individual endpoints so
that malformed payloads become 400s and anything unexpected is logged and
reported as a 500.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from PIL import UnidentifiedImageError

from visiongrid.core.exceptions import (
    IndexOutOfBound,
    InsufficientBufferSize,
    InvalidColorType,
    InvalidImageDepthSize,
    VisionGridError,
)

logger = logging.getLogger(__name__)

# Core error -> HTTP status
ERROR_STATUS_CODES = {
    IndexOutOfBound: 400,
    InvalidColorType: 400,
    InvalidImageDepthSize: 415,
    InsufficientBufferSize: 500,
}


def status_code_for(error: VisionGridError) -> int:
    for error_cls, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_cls):
            return status_code
    return 500


async def vision_error_handler(request: Request, exc: VisionGridError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.warning(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register core exception handlers on the app"""
    app.add_exception_handler(VisionGridError, vision_error_handler)


def safe_endpoint(func):
    """
    Decorator for async endpoints.

    HTTPException and core errors pass through to their handlers, invalid
    image payloads become 400 and any other exception becomes 500.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except (HTTPException, VisionGridError):
            raise
        except (ValueError, UnidentifiedImageError) as e:
            logger.warning(f"Invalid request to {func.__name__}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.exception(f"Unexpected error in {func.__name__}: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")

    return wrapper
