"""
Common models - core data structures shared across layers.
"""

from typing import Tuple

from pydantic import BaseModel, Field


class Point(BaseModel):
    """Pixel coordinate (column x, row y)"""

    x: int = Field(..., ge=0, description="Column")
    y: int = Field(..., ge=0, description="Row")

    def to_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
