"""
Exception hierarchy for the VisionGrid core.

Every failure raised by the pixel grid, the colorspace converters and the
geometry transforms derives from VisionGridError and carries enough context
(coordinates, sizes, format names) to build a user-facing message.
"""

from typing import Optional, Tuple


class VisionGridError(Exception):
    """Base class for all VisionGrid errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IndexOutOfBound(VisionGridError):
    """Coordinate or crop rectangle lies outside the grid."""

    def __init__(
        self,
        message: str,
        point: Optional[Tuple[int, int]] = None,
        point2: Optional[Tuple[int, int]] = None,
        size: Optional[Tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.point = point
        self.point2 = point2
        self.size = size

    @classmethod
    def for_point(cls, x: int, y: int, width: int, height: int) -> "IndexOutOfBound":
        return cls(
            f"({x}, {y}) for size ({width}, {height})",
            point=(x, y),
            size=(width, height),
        )

    @classmethod
    def for_region(
        cls, point1: Tuple[int, int], point2: Tuple[int, int], width: int, height: int
    ) -> "IndexOutOfBound":
        return cls(
            "cropping as given size fails condition for values: "
            f"Point1({point1[0]}, {point1[1]}) and Point2({point2[0]}, {point2[1]}) "
            f"for image size ({width}, {height})",
            point=tuple(point1),
            point2=tuple(point2),
            size=(width, height),
        )


class InvalidColorType(VisionGridError):
    """Requested conversion is undefined for the source format."""

    def __init__(self, source: str, target: str):
        super().__init__(f"cannot convert '{source}' image to '{target}'")
        self.source = source
        self.target = target


class InvalidImageDepthSize(VisionGridError):
    """Pixel depth or channel layout is not one of the supported formats."""


class InsufficientBufferSize(VisionGridError):
    """Sample buffer does not match the declared image dimensions."""

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
