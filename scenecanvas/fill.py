"""
Fill descriptors for shape nodes.

A shape is painted either with a flat color or with a bitmap image. The
choice is made once, at construction, through make_fill().
"""
from dataclasses import dataclass
from typing import Union

import pygame

from models import Color
from scenecanvas.errors import TypeMismatch


@dataclass(frozen=True)
class ColorFill:
    """Flat color fill.

    Attributes:
        color: Color string ('red', '#f80', '#ff8800cc', ...) or Color model
    """
    color: Union[str, Color]


@dataclass(frozen=True)
class ImageFill:
    """Bitmap fill, scaled to the shape's bounding box when drawn.

    Attributes:
        image: Source bitmap
    """
    image: pygame.Surface


Fill = Union[ColorFill, ImageFill]


def make_fill(value) -> Fill:
    """Build the fill descriptor for a shape.

    Args:
        value: A color string, a Color, a pygame.Surface image, or an
            existing ColorFill/ImageFill

    Returns:
        ColorFill or ImageFill

    Raises:
        TypeMismatch: If value is none of the accepted kinds
    """
    if isinstance(value, (ColorFill, ImageFill)):
        return value
    if isinstance(value, pygame.Surface):
        return ImageFill(image=value)
    if isinstance(value, (str, Color)):
        return ColorFill(color=value)
    raise TypeMismatch(
        f"fill has to be a color string, a Color or a pygame.Surface image, got {value!r}"
    )
