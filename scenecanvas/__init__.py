"""
Scene canvas - a small retained-mode 2D scene graph on pygame.

Provides:
- canvas: Canvas, the z-ordered node registry with hit testing and frame loop
- nodes: SceneNode, Circle, Rectangle, RotatedRectangle
- collision: shape-pair collision rules
- context: DrawContext, the pygame drawing backend handed to draw()
- scheduler: frame schedulers (pygame clock, manual stepping)
- input: pointer events and the pygame mouse/touch source
- fill: flat color and image fill descriptors
- errors: TypeMismatch, UnsupportedOperand
- logging: leveled per-module console logger
"""

from scenecanvas.errors import SceneCanvasError, TypeMismatch, UnsupportedOperand
from scenecanvas.geometry import ShapeKind, as_point
from scenecanvas.fill import ColorFill, ImageFill, make_fill
from scenecanvas.nodes import SceneNode, Circle, Rectangle, RotatedRectangle, Rotation
from scenecanvas.collision import collide
from scenecanvas.context import DrawContext, parse_color
from scenecanvas.scheduler import FrameScheduler, ManualFrameScheduler, PygameFrameScheduler
from scenecanvas.input import PointerEvent, PointerKind, PointerSource, MousePointerSource
from scenecanvas.canvas import Canvas

__version__ = "1.2.0"

__all__ = [
    'Canvas',
    'SceneNode',
    'Circle',
    'Rectangle',
    'RotatedRectangle',
    'Rotation',
    'ShapeKind',
    'collide',
    'ColorFill',
    'ImageFill',
    'make_fill',
    'DrawContext',
    'parse_color',
    'FrameScheduler',
    'ManualFrameScheduler',
    'PygameFrameScheduler',
    'PointerEvent',
    'PointerKind',
    'PointerSource',
    'MousePointerSource',
    'as_point',
    'SceneCanvasError',
    'TypeMismatch',
    'UnsupportedOperand',
]
