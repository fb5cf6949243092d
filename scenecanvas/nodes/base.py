"""
SceneNode - the common base of everything a Canvas can hold.

A node carries a position, a z-index, a bounding size and a visibility
flag, and takes part in the per-frame lifecycle:

    update(fps) -> bool   called every frame, True if a redraw is needed
    draw(context)         called on redraw, back to front by z
    on_click(event)       called on the topmost node under a pointer event
    covers(point) -> bool point containment used for hit testing
"""
from typing import Optional

from models import Point2D
from scenecanvas.geometry import ShapeKind, as_point, round_half_up


class SceneNode:
    """Base class for scene nodes.

    Subclasses override the lifecycle hooks they need; the defaults describe
    a static, invisible-to-hit-tests node that never asks for a redraw.

    Sizes are normalized rather than rejected: a missing or zero width/height
    becomes 1 and negative values are replaced by their absolute value.

    is_visible is informational: the canvas does not consult it when
    updating, drawing or hit testing. Nodes that want to hide themselves
    check it in their own draw().

    Attributes:
        x, y: Position (top-left for boxes, center for circles)
        z: Paint and hit-test order, higher is in front
        width, height: Bounding size
        is_visible: Visibility flag
    """

    kind: Optional[ShapeKind] = None

    def __init__(self, x: float = 0, y: float = 0, z: float = 0,
                 width: float = 1, height: float = 1, is_visible: bool = False):
        self.x = x or 0
        self.y = y or 0
        self.z = z or 0
        self.width = abs(width or 1)
        self.height = abs(height or 1)
        self.is_visible = bool(is_visible)

    @property
    def mid(self) -> Point2D:
        """Center of the node's bounding box (half sizes rounded half up)."""
        return Point2D(
            x=self.x + round_half_up(self.width / 2),
            y=self.y + round_half_up(self.height / 2),
        )

    @mid.setter
    def mid(self, point) -> None:
        """Move the node so that point becomes its center."""
        point = as_point(point)
        self.x = point.x - round_half_up(self.width / 2)
        self.y = point.y - round_half_up(self.height / 2)

    def toggle_visibility(self) -> None:
        self.is_visible = not self.is_visible

    def set_visible(self) -> None:
        self.is_visible = True

    def set_invisible(self) -> None:
        self.is_visible = False

    # =========================================================================
    # Lifecycle hooks
    # =========================================================================

    def update(self, fps: float) -> bool:
        """Advance the node by one frame.

        Args:
            fps: Current frames per second of the canvas

        Returns:
            True if the node's appearance changed and the canvas must redraw
        """
        return False

    def draw(self, context) -> None:
        """Paint the node onto a DrawContext. Must not change node state."""

    def on_click(self, event) -> None:
        """Handle a click or touch that hit this node."""

    def covers(self, point) -> bool:
        """Check whether the node covers a point."""
        return False

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(x={self.x}, y={self.y}, z={self.z}, "
                f"width={self.width}, height={self.height})")
