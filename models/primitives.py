"""
Shared primitive data types for the scene canvas.

This module provides the basic geometric and color types used throughout
the codebase: points for hit testing, vectors for collision math, colors
for flat fills and resolutions for surface sizes.
"""

import math
from typing import Tuple

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point in scene (bitmap) coordinates.

    Attributes:
        x: X coordinate (horizontal, grows to the right)
        y: Y coordinate (vertical, grows downwards)

    Examples:
        >>> click = Point2D(x=120.0, y=45.0)
        >>> click.as_tuple
        (120.0, 45.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @property
    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as an (x, y) tuple."""
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Vector(BaseModel):
    """Immutable 2D displacement used by the collision math.

    Vectors are cheap throwaway values: a fresh one is built for every
    distance query with Vector.between().

    Attributes:
        x: Horizontal component
        y: Vertical component

    Examples:
        >>> v = Vector.between(Point2D(x=0, y=0), Point2D(x=3, y=4))
        >>> v.magnitude
        5.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def between(cls, p1, p2) -> 'Vector':
        """Build the vector pointing from p1 to p2.

        Args:
            p1: Start point (anything with x and y attributes)
            p2: End point (anything with x and y attributes)

        Returns:
            Vector with components (p2.x - p1.x, p2.y - p1.y)
        """
        return cls(x=p2.x - p1.x, y=p2.y - p1.y)

    @computed_field
    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    @computed_field
    @property
    def angle(self) -> float:
        """Direction of the vector in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def clone(self) -> 'Vector':
        """Return a new vector with the same components."""
        return Vector(x=self.x, y=self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Vector(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Pixel dimensions of a drawing surface or display window.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> Resolution(width=1920, height=1080).aspect_ratio
        1.7777777777777777
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    @property
    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> red = Color(r=255, g=0, b=0)
        >>> red.as_tuple
        (255, 0, 0, 255)
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"
