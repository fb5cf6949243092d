"""
Box nodes: axis-aligned Rectangle and RotatedRectangle.

Both share the box data (top-left position, size, fill) through BoxNode.
RotatedRectangle is a separate variant rather than a Rectangle subclass:
its hit testing and collision are not implemented and always answer False,
while Rectangle has real geometry.
"""
from dataclasses import dataclass
from typing import Optional

from models import Point2D
from scenecanvas.collision import collide
from scenecanvas.fill import ColorFill, make_fill
from scenecanvas.geometry import ShapeKind, as_point
from scenecanvas.nodes.base import SceneNode


class BoxNode(SceneNode):
    """Box shape painted with a flat color or an image.

    Attributes:
        fill: ColorFill or ImageFill
    """

    def __init__(self, x: float = 0, y: float = 0, z: float = 0,
                 width: float = 1, height: float = 1,
                 is_visible: bool = False, fill=None):
        """Initialize the box.

        Args:
            x, y: Top-left corner
            z: z-index
            width, height: Size (normalized, see SceneNode)
            is_visible: Visibility flag
            fill: Color string, Color or pygame.Surface image

        Raises:
            TypeMismatch: If fill is missing or of an unsupported kind
        """
        super().__init__(x, y, z, width, height, is_visible)
        self.fill = make_fill(fill)

    def _paint(self, context, x: float, y: float) -> None:
        """Paint the box with its top-left corner at (x, y) of the current frame."""
        if isinstance(self.fill, ColorFill):
            context.fill_rect(self.fill.color, x, y, self.width, self.height)
        else:
            context.draw_image(self.fill.image, x, y, self.width, self.height)

    def draw(self, context) -> None:
        self._paint(context, self.x, self.y)


class Rectangle(BoxNode):
    """Axis-aligned rectangle.

    Examples:
        >>> wall = Rectangle(x=0, y=0, z=1, width=10, height=10, fill='#333')
        >>> wall.covers((10, 10))
        True
        >>> wall.mid
        Point2D(x=5.0, y=5.0)
    """

    kind = ShapeKind.RECTANGLE

    def covers(self, point) -> bool:
        """Check if the point lies inside the rectangle, edges included."""
        point = as_point(point)
        return (self.x <= point.x <= self.x + self.width and
                self.y <= point.y <= self.y + self.height)

    def collision(self, other) -> bool:
        """Check if this rectangle touches a Circle or a Rectangle.

        Raises:
            UnsupportedOperand: For any other kind of node
        """
        return collide(self, other)


@dataclass(frozen=True)
class Rotation:
    """Rotation of a box about a pivot.

    Attributes:
        pivot: Point the box turns around (scene coordinates)
        angle: Angle in radians, clockwise on screen
    """
    pivot: Point2D
    angle: float = 0.0


class RotatedRectangle(BoxNode):
    """Rectangle that can be drawn rotated about a pivot.

    Until rotate() is called the rectangle draws exactly like an
    axis-aligned Rectangle. Rotation only affects drawing: covers() and
    collision() are not implemented for rotated geometry and always
    return False.

    Attributes:
        rotation: Rotation, or None while the box has never been rotated
    """

    kind = ShapeKind.ROTATED_RECTANGLE

    def __init__(self, x: float = 0, y: float = 0, z: float = 0,
                 width: float = 1, height: float = 1,
                 is_visible: bool = False, fill=None):
        super().__init__(x, y, z, width, height, is_visible, fill)
        self.rotation: Optional[Rotation] = None

    @property
    def angle(self) -> float:
        return self.rotation.angle if self.rotation else 0.0

    @property
    def rotation_point(self) -> Optional[Point2D]:
        return self.rotation.pivot if self.rotation else None

    def rotate(self, pivot=None, angle: Optional[float] = None) -> None:
        """Set the rotation used for drawing.

        Args:
            pivot: Rotation center; defaults to the box's current center
            angle: Angle in radians; defaults to 0
        """
        if pivot is None:
            pivot = Point2D(x=self.x + self.width / 2, y=self.y + self.height / 2)
        self.rotation = Rotation(pivot=as_point(pivot), angle=angle or 0.0)

    def draw(self, context) -> None:
        if self.rotation is None:
            super().draw(context)
            return

        pivot = self.rotation.pivot
        context.translate(pivot.x, pivot.y)
        context.rotate(self.rotation.angle)
        try:
            self._paint(context, self.x - pivot.x, self.y - pivot.y)
        finally:
            context.rotate(-self.rotation.angle)
            context.translate(-pivot.x, -pivot.y)

    def covers(self, point) -> bool:
        # Not implemented for rotated geometry
        return False

    def collision(self, other) -> bool:
        # Not implemented for rotated geometry
        return False
