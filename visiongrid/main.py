"""
VisionGrid - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visiongrid.api.exceptions import register_exception_handlers
from visiongrid.api.routers import image, system
from visiongrid.config import get_settings
from visiongrid.services.image_service import ImageService

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting VisionGrid server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    app.state.image_service = ImageService(
        default_format=settings.image.default_format,
        jpeg_quality=settings.image.jpeg_quality,
    )
    app.state.config = settings.to_dict()

    yield

    logger.info("VisionGrid server stopped")


app = FastAPI(
    title="VisionGrid",
    description="Pixel grid colorspace and geometry transforms",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(image.router, prefix="/api/image", tags=["Image"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {"name": "VisionGrid", "version": "0.1.0", "status": "running"}


def run() -> None:
    """Run the server with uvicorn"""
    uvicorn.run(
        "visiongrid.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level=settings.system.log_level.lower(),
    )


if __name__ == "__main__":
    run()
