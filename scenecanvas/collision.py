"""Collision detection between shape nodes.

Rules are looked up by the (kind, kind) pair of the two shapes. Only
circles and axis-aligned rectangles have rules; rotated rectangles never
collide, and any other pair raises UnsupportedOperand.
"""

from typing import Callable, Dict, Tuple, TYPE_CHECKING

from models import Point2D, Vector
from scenecanvas.errors import UnsupportedOperand
from scenecanvas.geometry import ShapeKind

if TYPE_CHECKING:
    from scenecanvas.nodes.circle import Circle
    from scenecanvas.nodes.rectangle import Rectangle


def circles_collide(a: 'Circle', b: 'Circle') -> bool:
    """Check if two circles touch or overlap.

    Args:
        a: First circle
        b: Second circle

    Returns:
        True if the distance between centers is at most the sum of radii
    """
    return Vector.between(a.mid, b.mid).magnitude <= a.radius + b.radius


def circle_rectangle_collide(circle: 'Circle', rect: 'Rectangle') -> bool:
    """Check if a circle touches or overlaps an axis-aligned rectangle.

    The circle hits the rectangle when any of these holds:
    - the rectangle covers the circle's center
    - the center is within the rectangle's x range and the circle's vertical
      extent reaches the rectangle (top/bottom edges)
    - the center is within the rectangle's y range and the circle's
      horizontal extent reaches the rectangle (left/right edges)
    - one of the rectangle's corners lies within the radius

    Args:
        circle: Circle to check
        rect: Rectangle to check against

    Returns:
        True if they collide
    """
    cx, cy, r = circle.x, circle.y, circle.radius
    left, top = rect.x, rect.y
    right, bottom = rect.x + rect.width, rect.y + rect.height

    if rect.covers(circle.mid):
        return True

    # Top and bottom edges
    if (left <= cx <= right and
            cy + r >= top and
            cy - r <= bottom):
        return True

    # Left and right edges
    if (top <= cy <= bottom and
            cx + r >= left and
            cx - r <= right):
        return True

    corners = (
        Point2D(x=left, y=top),
        Point2D(x=right, y=top),
        Point2D(x=left, y=bottom),
        Point2D(x=right, y=bottom),
    )
    return any(Vector.between(circle.mid, corner).magnitude <= r for corner in corners)


def rectangles_collide(a: 'Rectangle', b: 'Rectangle') -> bool:
    """Check if two axis-aligned rectangles touch or overlap."""
    return (
        b.x <= a.x + a.width and
        b.x >= a.x - b.width and
        b.y <= a.y + a.height and
        b.y >= a.y - b.height
    )


_RULES: Dict[Tuple[ShapeKind, ShapeKind], Callable[[object, object], bool]] = {
    (ShapeKind.CIRCLE, ShapeKind.CIRCLE): circles_collide,
    (ShapeKind.CIRCLE, ShapeKind.RECTANGLE): circle_rectangle_collide,
    (ShapeKind.RECTANGLE, ShapeKind.CIRCLE): lambda rect, circle: circle_rectangle_collide(circle, rect),
    (ShapeKind.RECTANGLE, ShapeKind.RECTANGLE): rectangles_collide,
}


def collide(node, other) -> bool:
    """Check if node collides with other.

    Args:
        node: Shape asking the question
        other: Shape to test against

    Returns:
        True if the shapes touch or overlap; always False when node is a
        rotated rectangle (rotated geometry is not implemented)

    Raises:
        UnsupportedOperand: If there is no rule for the pair
    """
    kind = getattr(node, 'kind', None)
    if kind is ShapeKind.ROTATED_RECTANGLE:
        return False

    rule = _RULES.get((kind, getattr(other, 'kind', None)))
    if rule is None:
        raise UnsupportedOperand(
            f"no collision rule for {type(node).__name__} and {type(other).__name__}"
        )
    return rule(node, other)
