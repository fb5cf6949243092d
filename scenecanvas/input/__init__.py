"""
Pointer input for the canvas.

Turns clicks and touches into PointerEvents in surface bitmap coordinates,
ready for Canvas.on_click().
"""

from scenecanvas.input.pointer_event import PointerEvent, PointerKind, to_bitmap_coordinates
from scenecanvas.input.sources import PointerSource, MousePointerSource

__all__ = [
    'PointerEvent',
    'PointerKind',
    'to_bitmap_coordinates',
    'PointerSource',
    'MousePointerSource',
]
