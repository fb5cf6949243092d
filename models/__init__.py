"""
Shared value models for the scene canvas.

This package provides the Pydantic data models used across the system:
- Primitives: Point2D, Vector, Color, Resolution

Usage:
    >>> from models import Point2D, Vector
    >>> Vector.between(Point2D(x=0, y=0), Point2D(x=3, y=4)).magnitude
    5.0
"""

from .primitives import (
    Point2D,
    Vector,
    Resolution,
    Color,
)

__all__ = [
    "Point2D",
    "Vector",
    "Resolution",
    "Color",
]
