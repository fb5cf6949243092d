"""
Scene nodes.

Provides:
- SceneNode: base class with the update/draw/on_click/covers lifecycle
- Circle: center-anchored circle
- Rectangle: axis-aligned box
- RotatedRectangle: box drawn rotated about a pivot
"""

from scenecanvas.nodes.base import SceneNode
from scenecanvas.nodes.circle import Circle
from scenecanvas.nodes.rectangle import BoxNode, Rectangle, RotatedRectangle, Rotation

__all__ = [
    'SceneNode',
    'Circle',
    'BoxNode',
    'Rectangle',
    'RotatedRectangle',
    'Rotation',
]
