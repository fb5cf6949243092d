"""Shape kinds, point coercion and pixel rounding shared across the package."""

import math
from enum import Enum
from typing import Any, Mapping

from pydantic import ValidationError

from models import Point2D
from scenecanvas.errors import TypeMismatch


class ShapeKind(Enum):
    """Variant tag used to pick a collision rule for a pair of shapes."""
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    ROTATED_RECTANGLE = "rotated_rectangle"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which would make centers and
    scaled pointer positions jump between neighbouring pixels.
    """
    return math.floor(value + 0.5)


def as_point(value: Any) -> Point2D:
    """Read a value as a Point2D.

    Accepts a Point2D, an (x, y) tuple or list, a mapping with 'x' and 'y'
    keys, or any object exposing x and y attributes (pygame.Vector2, nodes).

    Raises:
        TypeMismatch: If no x/y pair can be read from the value
    """
    if isinstance(value, Point2D):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        x, y = value
    elif isinstance(value, Mapping) and 'x' in value and 'y' in value:
        x, y = value['x'], value['y']
    elif hasattr(value, 'x') and hasattr(value, 'y'):
        x, y = value.x, value.y
    else:
        raise TypeMismatch(f"expected a point with x and y, got {value!r}")

    try:
        return Point2D(x=x, y=y)
    except ValidationError as e:
        raise TypeMismatch(f"point coordinates must be numbers, got {value!r}") from e
