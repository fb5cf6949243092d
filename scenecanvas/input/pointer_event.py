"""
Pointer Event - a click or touch in scene coordinates.

Uses dataclass for immutability.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from models import Point2D
from scenecanvas.geometry import round_half_up


class PointerKind(Enum):
    """Device that produced a pointer event."""
    CLICK = "click"
    TOUCH = "touch"


@dataclass(frozen=True)
class PointerEvent:
    """Immutable pointer event from any source.

    Attributes:
        position: Where the event happened, in surface bitmap coordinates
        timestamp: Time when the event occurred (seconds, monotonic clock)
        kind: CLICK or TOUCH
        raw: Original backend event, forwarded untouched to the node
    """
    position: Point2D
    timestamp: float
    kind: PointerKind = PointerKind.CLICK
    raw: Optional[Any] = None

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"PointerEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, kind={self.kind.value})")


def to_bitmap_coordinates(
    pos: Sequence[float],
    display_size: Sequence[float],
    bitmap_size: Sequence[float],
    origin: Tuple[float, float] = (0, 0),
) -> Point2D:
    """Map a position on the displayed surface to bitmap pixels.

    The offset from the surface's on-screen origin is scaled per axis by
    bitmap size / displayed size and rounded to the nearest pixel.

    Args:
        pos: (x, y) position in display coordinates
        display_size: (width, height) the surface is shown at
        bitmap_size: (width, height) of the surface's pixel buffer
        origin: Display position of the surface's top-left corner

    Returns:
        Point2D in bitmap coordinates

    Examples:
        >>> to_bitmap_coordinates((50, 25), (100, 50), (200, 100))
        Point2D(x=100.0, y=50.0)
    """
    scale_x = bitmap_size[0] / display_size[0]
    scale_y = bitmap_size[1] / display_size[1]
    return Point2D(
        x=round_half_up((pos[0] - origin[0]) * scale_x),
        y=round_half_up((pos[1] - origin[1]) * scale_y),
    )
