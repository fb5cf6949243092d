"""
Pointer source implementations.
"""

from scenecanvas.input.sources.base import PointerSource
from scenecanvas.input.sources.mouse import MousePointerSource

__all__ = ['PointerSource', 'MousePointerSource']
