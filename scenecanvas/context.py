"""
Draw context - the drawing backend handed to SceneNode.draw().

Wraps a pygame.Surface with the handful of primitives the shapes need
(filled rects, filled circles, scaled images) and a rigid transform made of
one translation and one rotation. Shapes that rotate push the transform with
translate()/rotate() and pop it with the inverse calls.
"""
import math
from typing import Optional, Tuple

import pygame

from models import Color
from scenecanvas import config
from scenecanvas.geometry import round_half_up


def parse_color(value) -> pygame.Color:
    """Parse a color value to a pygame.Color.

    Accepts:
    - Color name string: 'red', 'steelblue', ...
    - Hex string: '#rgb', '#rgba', '#rrggbb', '#rrggbbaa'
    - Color model
    - RGB/RGBA tuple or list: (255, 215, 0) or (255, 215, 0, 128)
    - pygame.Color

    Raises:
        ValueError: If the value does not describe a color
    """
    if isinstance(value, pygame.Color):
        return pygame.Color(value)
    if isinstance(value, Color):
        return pygame.Color(*value.as_tuple)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        return pygame.Color(*value)
    if isinstance(value, str):
        text = value.strip()
        # Short hex form, expanded digit by digit
        if text.startswith('#') and len(text) in (4, 5):
            text = '#' + ''.join(ch * 2 for ch in text[1:])
        return pygame.Color(text)
    raise ValueError(f"invalid color value: {value!r}")


class DrawContext:
    """pygame drawing backend with a translate/rotate transform.

    Coordinates passed to the drawing methods are in the current frame:
    a point p lands on the surface at t + R(angle) * p, where t is the
    accumulated translation and R the rotation matrix. translate() moves
    the origin along the already rotated axes, like a 2D canvas does.

    Attributes:
        surface: Target pygame.Surface
    """

    def __init__(self, surface: pygame.Surface):
        self._surface = surface
        self._tx = 0.0
        self._ty = 0.0
        self._angle = 0.0

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    # =========================================================================
    # Transform
    # =========================================================================

    @property
    def transform(self) -> Tuple[float, float, float]:
        """Current transform as (translate_x, translate_y, angle)."""
        return (self._tx, self._ty, self._angle)

    @property
    def is_identity(self) -> bool:
        return self._tx == 0 and self._ty == 0 and self._angle == 0

    def translate(self, dx: float, dy: float) -> None:
        """Move the origin by (dx, dy) in the current (rotated) frame."""
        ox, oy = self._rotate_vector(dx, dy)
        self._tx += ox
        self._ty += oy

    def rotate(self, angle: float) -> None:
        """Rotate the frame by angle radians (clockwise on screen)."""
        self._angle += angle

    def reset_transform(self) -> None:
        self._tx = 0.0
        self._ty = 0.0
        self._angle = 0.0

    def to_surface(self, x: float, y: float) -> Tuple[float, float]:
        """Map a point of the current frame to surface pixels."""
        rx, ry = self._rotate_vector(x, y)
        return (self._tx + rx, self._ty + ry)

    def _rotate_vector(self, x: float, y: float) -> Tuple[float, float]:
        if self._angle == 0:
            return (x, y)
        cos_a = math.cos(self._angle)
        sin_a = math.sin(self._angle)
        return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)

    # =========================================================================
    # Drawing
    # =========================================================================

    def clear(self, rect: Optional[Tuple[int, int, int, int]] = None) -> None:
        """Reset a region (surface coordinates, default everything) to CLEAR_COLOR."""
        if rect is None:
            self._surface.fill(config.CLEAR_COLOR)
        else:
            self._surface.fill(config.CLEAR_COLOR, pygame.Rect(rect))

    def fill_all(self, color) -> None:
        """Paint the whole surface with a color, ignoring the transform."""
        self._surface.fill(parse_color(color))

    def fill_rect(self, color, x: float, y: float, width: float, height: float) -> None:
        """Paint a filled rectangle with its top-left corner at (x, y)."""
        color = parse_color(color)
        size = _pixel_size(width, height)

        if self._angle == 0:
            sx, sy = self.to_surface(x, y)
            rect = pygame.Rect(round_half_up(sx), round_half_up(sy), *size)
            pygame.draw.rect(self._surface, color, rect)
            return

        patch = pygame.Surface(size, pygame.SRCALPHA)
        patch.fill(color)
        self._blit_rotated(patch, x, y, width, height)

    def fill_circle(self, color, cx: float, cy: float, radius: float) -> None:
        """Paint a filled disc centered on (cx, cy)."""
        sx, sy = self.to_surface(cx, cy)
        pygame.draw.circle(
            self._surface,
            parse_color(color),
            (round_half_up(sx), round_half_up(sy)),
            round_half_up(radius),
        )

    def draw_image(self, image: pygame.Surface, x: float, y: float,
                   width: float, height: float) -> None:
        """Draw an image scaled into the box with top-left corner (x, y)."""
        size = _pixel_size(width, height)
        scaled = image if image.get_size() == size else pygame.transform.scale(image, size)

        if self._angle == 0:
            sx, sy = self.to_surface(x, y)
            self._surface.blit(scaled, (round_half_up(sx), round_half_up(sy)))
            return

        self._blit_rotated(scaled, x, y, width, height)

    def _blit_rotated(self, patch: pygame.Surface, x: float, y: float,
                      width: float, height: float) -> None:
        """Blit an axis-aligned patch rotated by the current angle.

        The patch is rotated around its own center, which is then placed on
        the transformed center of the (x, y, width, height) box.
        """
        cx, cy = self.to_surface(x + width / 2, y + height / 2)
        # pygame rotates counterclockwise for positive degrees
        rotated = pygame.transform.rotate(patch, -math.degrees(self._angle))
        rect = rotated.get_rect(center=(round_half_up(cx), round_half_up(cy)))
        self._surface.blit(rotated, rect)


def _pixel_size(width: float, height: float) -> Tuple[int, int]:
    return (max(0, round_half_up(width)), max(0, round_half_up(height)))
