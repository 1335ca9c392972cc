"""
Constants and configuration values for VisionGrid.
Centralizes all magic numbers used by the colorspace and geometry code.
"""


class ColorConstants:
    """Constants used by the colorspace converters."""

    # Sample maxima
    MAX_8BIT = 255
    MAX_16BIT = 65535

    # ITU-R BT.601 luma weights (R, G, B)
    LUMA_WEIGHTS = (0.299, 0.587, 0.114)

    # Hue is expressed in degrees
    HUE_SECTOR_DEGREES = 60.0
    HUE_MAX_DEGREES = 360.0
    HUE_SECTORS = 6


class ImageConstants:
    """Constants related to image encoding and transforms."""

    # Encoding
    DEFAULT_FORMAT = "PNG"
    DEFAULT_JPEG_QUALITY = 85
    SUPPORTED_FORMATS = ["PNG", "JPEG", "BMP", "TIFF"]

    # Resize limits (HTTP surface only)
    MAX_RESIZE_DIMENSION = 8192
    MIN_RESIZE_DIMENSION = 1


class PillowModes:
    """Pillow image modes understood by the decode/encode boundary."""

    GRAYSCALE = "L"
    GRAYSCALE_ALPHA = "LA"
    RGB = "RGB"
    RGBA = "RGBA"
    GRAYSCALE16 = "I;16"
    GRAYSCALE16_VARIANTS = ("I;16", "I;16L", "I;16B")
    INT32 = "I"
    PALETTE = "P"
    PALETTE_ALPHA = "PA"
    BILEVEL = "1"
    CMYK = "CMYK"
