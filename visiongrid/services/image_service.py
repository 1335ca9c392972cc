"""
Image Service - decode/encode boundary between files and pixel formats.

Pillow does the codec work; this service maps Pillow modes onto the
VisionGrid pixel formats and back. File-system and decoder errors raised by
Pillow propagate to the caller unchanged; a target format that cannot hold
the image mode is reported as InvalidColorType.
"""

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image as PILImage

from visiongrid.core.constants import ColorConstants, ImageConstants, PillowModes
from visiongrid.core.exceptions import (
    InsufficientBufferSize,
    InvalidColorType,
    InvalidImageDepthSize,
)
from visiongrid.core.image.converters import ColorConverters
from visiongrid.core.image.formats import (
    Grayscale,
    Grayscale16,
    GrayscaleAlpha,
    GrayscaleAlpha16,
    Hsv,
    Image,
    Rgb,
    Rgb16,
    Rgba,
    Rgba16,
)
from visiongrid.core.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)

# Pillow mode -> pixel format for decoding
DECODE_MODES = {
    PillowModes.GRAYSCALE: Grayscale,
    PillowModes.GRAYSCALE_ALPHA: GrayscaleAlpha,
    PillowModes.RGB: Rgb,
    PillowModes.RGBA: Rgba,
}

# Pillow modes expanded to a decodable mode before mapping
EXPANDED_MODES = {
    PillowModes.BILEVEL: PillowModes.GRAYSCALE,
    PillowModes.CMYK: PillowModes.RGB,
    PillowModes.PALETTE_ALPHA: PillowModes.RGBA,
}

# Pixel format -> Pillow mode for encoding
ENCODE_MODES = {
    Grayscale: PillowModes.GRAYSCALE,
    GrayscaleAlpha: PillowModes.GRAYSCALE_ALPHA,
    Rgb: PillowModes.RGB,
    Rgba: PillowModes.RGBA,
}

# 16-bit formats without a Pillow mode are written at 8-bit depth
DOWNCAST_ON_ENCODE = {
    GrayscaleAlpha16: GrayscaleAlpha,
    Rgb16: Rgb,
    Rgba16: Rgba,
}


class ImageService:
    """Service for reading, writing and transporting images"""

    def __init__(
        self,
        default_format: str = ImageConstants.DEFAULT_FORMAT,
        jpeg_quality: int = ImageConstants.DEFAULT_JPEG_QUALITY,
    ):
        """
        Initialize Image Service

        Args:
            default_format: Format used by to_base64 when none is given
            jpeg_quality: JPEG quality (1-100)
        """
        self.default_format = default_format.upper()
        self.jpeg_quality = jpeg_quality

    def decode(self, pil_image: PILImage.Image) -> Image:
        """
        Wrap a decoded Pillow image into a pixel format.

        Args:
            pil_image: Loaded Pillow image

        Returns:
            Image variant matching the Pillow mode

        Raises:
            InvalidImageDepthSize: If the mode has no matching pixel format

        Palette, bilevel and CMYK images are expanded to L, RGB or RGBA first.
        """
        mode = pil_image.mode
        width, height = pil_image.size

        if mode in PillowModes.GRAYSCALE16_VARIANTS:
            samples = np.asarray(pil_image, dtype=np.uint16)
            return Grayscale16(PixelGrid(width, height, samples.reshape(height, width, 1).copy()))

        if mode == PillowModes.INT32:
            # Older Pillow releases open 16-bit grayscale PNGs as 32-bit integers
            samples = np.asarray(pil_image)
            if samples.size and (samples.min() < 0 or samples.max() > ColorConstants.MAX_16BIT):
                raise InvalidImageDepthSize(
                    "32-bit integer samples exceed 16-bit range while reading image"
                )
            pixels = samples.astype(np.uint16).reshape(height, width, 1)
            return Grayscale16(PixelGrid(width, height, pixels))

        expanded = self._expanded_mode(pil_image)
        if expanded is not None:
            logger.debug(f"Expanding {mode} image to {expanded}")
            pil_image = pil_image.convert(expanded)

        image_cls = DECODE_MODES.get(pil_image.mode)
        if image_cls is None:
            raise InvalidImageDepthSize(f"Unsupported image mode '{mode}' while reading image")

        samples = np.asarray(pil_image, dtype=np.uint8)
        pixels = samples.reshape(height, width, image_cls.channels).copy()
        return image_cls(PixelGrid(width, height, pixels))

    def encode(self, image: Image) -> PILImage.Image:
        """
        Build a Pillow image from a pixel format.

        Args:
            image: Image to encode

        Returns:
            Pillow image

        Raises:
            InvalidColorType: For HSV images, which have no file encoding
            InsufficientBufferSize: If the flattened samples do not fill the image
        """
        if isinstance(image, Hsv):
            raise InvalidColorType(image.name, "file encoding")

        target_cls = DOWNCAST_ON_ENCODE.get(type(image))
        if target_cls is not None:
            logger.warning(f"Writing {image.name} image at 8-bit depth")
            downcast = ColorConverters.downcast_8bit(image.grid.pixels)
            image = target_cls(PixelGrid(image.width, image.height, downcast))

        samples = image.flatten()
        expected = image.width * image.height * image.channels
        if samples.size != expected:
            raise InsufficientBufferSize(
                f"writing {image.name} image data: {samples.size} samples "
                f"for size ({image.width}, {image.height})",
                expected=expected,
                actual=samples.size,
            )

        if isinstance(image, Grayscale16):
            data = samples.astype("<u2").tobytes()
            return PILImage.frombytes(PillowModes.GRAYSCALE16, (image.width, image.height), data)

        return PILImage.frombytes(
            ENCODE_MODES[type(image)], (image.width, image.height), samples.tobytes()
        )

    def read(self, path: Union[str, Path]) -> Image:
        """
        Read an image file.

        Args:
            path: File path

        Returns:
            Decoded image
        """
        with PILImage.open(path) as pil_image:
            pil_image.load()
            image = self.decode(pil_image)

        logger.info(f"Read {image.name} image {image.width}x{image.height} from {path}")
        return image

    def write(self, path: Union[str, Path], image: Image, format: Optional[str] = None) -> None:
        """
        Write an image file. The format follows the file extension unless given.

        Args:
            path: Destination path
            image: Image to write
            format: Optional Pillow format name

        Raises:
            ValueError: If the format cannot be derived from the extension
            InvalidColorType: If the format cannot store the image mode
        """
        data = self._serialize(image, format or self._format_for(path))
        Path(path).write_bytes(data)
        logger.info(f"Wrote {image.name} image {image.width}x{image.height} to {path}")

    def to_base64(self, image: Image, format: Optional[str] = None) -> str:
        """
        Encode image to a base64 string.

        Args:
            image: Image to encode
            format: Image format (PNG, JPEG, etc.)

        Returns:
            Base64 encoded string

        Raises:
            InvalidColorType: If the format cannot store the image mode
        """
        data = self._serialize(image, format or self.default_format)
        return base64.b64encode(data).decode("utf-8")

    def from_base64(self, data: str) -> Image:
        """
        Decode a base64 string to an image.

        Raises:
            ValueError: If the payload is not valid base64
            PIL.UnidentifiedImageError: If the bytes are not a known image format
        """
        try:
            image_bytes = base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 image payload: {e}") from e

        with PILImage.open(io.BytesIO(image_bytes)) as pil_image:
            pil_image.load()
            return self.decode(pil_image)

    def _serialize(self, image: Image, format: str) -> bytes:
        pil_image = self.encode(image)
        buffer = io.BytesIO()
        try:
            pil_image.save(buffer, **self._save_kwargs(format))
        except (OSError, KeyError) as e:
            # Pillow rejects modes the target format cannot hold (e.g. RGBA as JPEG)
            logger.warning(f"Cannot write {pil_image.mode} image as {format}: {e}")
            raise InvalidColorType(image.name, format) from e
        return buffer.getvalue()

    def _expanded_mode(self, pil_image: PILImage.Image) -> Optional[str]:
        if pil_image.mode == PillowModes.PALETTE:
            if "transparency" in pil_image.info:
                return PillowModes.RGBA
            return PillowModes.RGB
        return EXPANDED_MODES.get(pil_image.mode)

    def _format_for(self, path: Union[str, Path]) -> str:
        suffix = Path(path).suffix.lower()
        if not suffix:
            return self.default_format
        format = PILImage.registered_extensions().get(suffix)
        if format is None:
            raise ValueError(f"Unknown file extension: {suffix}")
        return format

    def _save_kwargs(self, format: Optional[str]) -> dict:
        save_kwargs = {"format": format}
        if format and format.upper() in ("JPEG", "JPG"):
            save_kwargs["format"] = "JPEG"
            save_kwargs["quality"] = self.jpeg_quality
            save_kwargs["optimize"] = True
        return save_kwargs
