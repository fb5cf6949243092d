"""
Tests for Rectangle.

Tests cover:
- Point containment with inclusive edges
- mid accessor
- Drawing with color and image fills
"""

import pygame
import pytest

from models import Point2D
from scenecanvas import DrawContext, Rectangle, ShapeKind, TypeMismatch


@pytest.fixture
def rect():
    """10x10 rectangle at the origin."""
    return Rectangle(x=0, y=0, z=1, width=10, height=10, fill='blue')


class TestRectangleConstruction:
    """Test Rectangle initialization."""

    def test_missing_fill_rejected(self):
        """A rectangle needs a color or an image."""
        with pytest.raises(TypeMismatch):
            Rectangle(x=0, y=0, z=0, width=5, height=5)

    def test_negative_size_normalized(self):
        """Negative sizes become positive."""
        rect = Rectangle(width=-8, height=-2, fill='blue')
        assert (rect.width, rect.height) == (8, 2)

    def test_kind(self):
        """Rectangles carry the RECTANGLE tag."""
        assert Rectangle(fill='blue').kind is ShapeKind.RECTANGLE


class TestRectangleCovers:
    """Test Rectangle point containment."""

    @pytest.mark.parametrize("point", [
        (0, 0), (10, 0), (0, 10), (10, 10),   # corners
        (5, 0), (0, 5), (10, 5), (5, 10),     # edges
        (5, 5), (0.5, 9.5),                   # inside
    ])
    def test_points_inside_or_on_edges(self, rect, point):
        """Points within the bounds, edges included, are covered."""
        assert rect.covers(Point2D(x=point[0], y=point[1]))

    @pytest.mark.parametrize("point", [
        (-1, 5), (11, 5), (5, -1), (5, 11), (-0.01, 0), (10.01, 10),
    ])
    def test_points_outside(self, rect, point):
        """Points strictly outside are not covered."""
        assert not rect.covers(Point2D(x=point[0], y=point[1]))

    def test_offset_rectangle(self):
        """Bounds follow the position."""
        rect = Rectangle(x=100, y=50, width=20, height=10, fill='blue')
        assert rect.covers((120, 60))
        assert not rect.covers((99, 55))


class TestRectangleMid:
    """Test the rectangle center accessor."""

    def test_mid(self, rect):
        """Center of a 10x10 box at the origin."""
        assert rect.mid == Point2D(x=5, y=5)

    def test_set_mid(self, rect):
        """Moving the center moves the top-left corner."""
        rect.mid = (50, 50)
        assert (rect.x, rect.y) == (45, 45)


class TestRectangleDraw:
    """Test Rectangle drawing."""

    def test_color_fill(self, rect, recorder):
        """Color fills paint the rect."""
        rect.draw(recorder)
        assert recorder.calls == [('fill_rect', 'blue', 0, 0, 10, 10, (0.0, 0.0, 0.0))]

    def test_image_fill(self, recorder):
        """Image fills are scaled to the rect."""
        image = pygame.Surface((3, 3))
        Rectangle(x=4, y=6, width=8, height=2, fill=image).draw(recorder)
        assert recorder.calls == [('draw_image', image, 4, 6, 8, 2, (0.0, 0.0, 0.0))]

    def test_draws_on_real_surface(self, surface):
        """Pixels inside the rect take the fill color."""
        Rectangle(x=10, y=10, width=20, height=20, fill='#00ff00').draw(DrawContext(surface))
        assert tuple(surface.get_at((15, 15)))[:3] == (0, 255, 0)
        assert surface.get_at((40, 40)).a == 0

    def test_image_on_real_surface(self, surface):
        """Image fills are blitted scaled into the rect."""
        image = pygame.Surface((2, 2))
        image.fill((0, 0, 255))
        Rectangle(x=10, y=10, width=20, height=20, fill=image).draw(DrawContext(surface))
        assert tuple(surface.get_at((29, 29)))[:3] == (0, 0, 255)
        assert surface.get_at((31, 31)).a == 0
