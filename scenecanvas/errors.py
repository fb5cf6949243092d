"""Exceptions raised by the scene canvas."""


class SceneCanvasError(Exception):
    """Base class for scene canvas errors."""


class TypeMismatch(SceneCanvasError, TypeError):
    """A value lacks the capability the call requires.

    Raised for non-node values passed to the canvas, fills that are neither
    a color nor an image, and values that cannot be read as a point.
    """


class UnsupportedOperand(SceneCanvasError, TypeError):
    """collision() was asked about a shape pair it has no rule for."""
