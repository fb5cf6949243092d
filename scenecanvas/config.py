"""
Configuration constants for the scene canvas.

Contains surface defaults, frame timing and default colors.
"""

# Surface defaults (same as an unsized HTML canvas)
DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 150

# Frame timing
FPS = 60  # Target frame rate for the pygame scheduler
MS_PER_SECOND = 1000.0  # Frame timestamps are in milliseconds

# Colors (RGBA tuples)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)

# Color used by DrawContext.clear(); on surfaces without per-pixel alpha
# this ends up black
CLEAR_COLOR = TRANSPARENT

# Default color for Canvas.fill_all()
FILL_ALL_COLOR = "#fff"


class Colors:
    """Color constants for easy access in code."""
    BLACK = BLACK
    WHITE = WHITE
    TRANSPARENT = TRANSPARENT
    CLEAR = CLEAR_COLOR
