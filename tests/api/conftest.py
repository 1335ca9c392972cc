"""
Pytest configuration for API integration tests
"""

import base64
import io

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image as PILImage


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with initialized app state.
    Each test gets a fresh service to avoid state contamination.
    """
    from visiongrid.config import Settings
    from visiongrid.main import app
    from visiongrid.services.image_service import ImageService

    app.state.image_service = ImageService(default_format="PNG")
    app.state.config = Settings().to_dict()

    # No context manager: lifespan would replace the state set above
    return TestClient(app, raise_server_exceptions=False)


def encode_png(pixels: np.ndarray) -> str:
    """Encode a pixel array as a base64 PNG"""
    buffer = io.BytesIO()
    PILImage.fromarray(pixels).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def decode_png(data: str) -> PILImage.Image:
    """Decode a base64 image returned by the API"""
    pil_image = PILImage.open(io.BytesIO(base64.b64decode(data)))
    pil_image.load()
    return pil_image


@pytest.fixture
def rgb_payload():
    """Base64 PNG of a 6x4 RGB image with a red top-left pixel"""
    pixels = np.full((4, 6, 3), 200, dtype=np.uint8)
    pixels[0, 0] = [255, 0, 0]
    return encode_png(pixels)


@pytest.fixture
def rgba_payload():
    """Base64 PNG of a 3x2 half-transparent RGBA image"""
    pixels = np.full((2, 3, 4), 128, dtype=np.uint8)
    return encode_png(pixels)


@pytest.fixture
def gray_payload():
    """Base64 PNG of a 5x5 grayscale image"""
    pixels = np.arange(25, dtype=np.uint8).reshape(5, 5)
    return encode_png(pixels)


@pytest.fixture
def png_decoder():
    """Decoder for base64 images in responses"""
    return decode_png
