"""
Circle node.

Unlike the box shapes, a circle is anchored on its center: (x, y) is the
center and mid returns it unchanged.
"""
from models import Point2D, Vector
from scenecanvas.collision import collide
from scenecanvas.fill import ColorFill, make_fill
from scenecanvas.geometry import ShapeKind, as_point
from scenecanvas.nodes.base import SceneNode


class Circle(SceneNode):
    """Circle painted with a flat color or an image.

    Attributes:
        radius: Radius in pixels, equal to width and height (absolute value,
            a missing or zero radius becomes 1)
        fill: ColorFill or ImageFill

    Examples:
        >>> ball = Circle(x=50, y=50, z=1, radius=10, fill='orange')
        >>> ball.covers((55, 50))
        True
        >>> ball.covers((61, 50))
        False
    """

    kind = ShapeKind.CIRCLE

    def __init__(self, x: float = 0, y: float = 0, z: float = 0, radius: float = 1,
                 is_visible: bool = False, fill=None):
        """Initialize the circle.

        Args:
            x, y: Center position
            z: z-index
            radius: Radius, also used as the node's width and height;
                normalized like the node size (missing or 0 becomes 1)
            is_visible: Visibility flag
            fill: Color string, Color or pygame.Surface image

        Raises:
            TypeMismatch: If fill is missing or of an unsupported kind
        """
        super().__init__(x, y, z, radius, radius, is_visible)
        self.radius = self.width
        self.fill = make_fill(fill)

    @property
    def mid(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

    @mid.setter
    def mid(self, point) -> None:
        point = as_point(point)
        self.x = point.x
        self.y = point.y

    @property
    def upper_left_corner(self) -> Point2D:
        """Top-left corner of the circle's bounding square."""
        return Point2D(x=self.x - self.radius, y=self.y - self.radius)

    @upper_left_corner.setter
    def upper_left_corner(self, point) -> None:
        point = as_point(point)
        self.x = point.x + self.radius
        self.y = point.y + self.radius

    def covers(self, point) -> bool:
        """Check if the point lies inside or on the circle."""
        return Vector.between(self.mid, as_point(point)).magnitude <= self.radius

    def collision(self, other) -> bool:
        """Check if this circle touches a Circle or a Rectangle.

        Raises:
            UnsupportedOperand: For any other kind of node
        """
        return collide(self, other)

    def draw(self, context) -> None:
        if isinstance(self.fill, ColorFill):
            context.fill_circle(self.fill.color, self.x, self.y, self.radius)
        else:
            corner = self.upper_left_corner
            diameter = 2 * self.radius
            context.draw_image(self.fill.image, corner.x, corner.y, diameter, diameter)
