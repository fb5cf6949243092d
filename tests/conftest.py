"""Shared pytest fixtures for the scene canvas tests."""
import os

# Set headless mode and quiet logging before pygame/scenecanvas import
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('SCENECANVAS_LOG_LEVEL', 'WARNING')

import pygame
import pytest

from scenecanvas import Canvas, ManualFrameScheduler, SceneNode


class RecordingContext:
    """Stand-in DrawContext that records every call.

    Keeps the same transform bookkeeping as DrawContext so tests can check
    that shapes restore it.
    """

    def __init__(self, width: int = 100, height: int = 100):
        self.width = width
        self.height = height
        self.calls = []
        self.tx = 0.0
        self.ty = 0.0
        self.angle = 0.0

    @property
    def transform(self):
        return (self.tx, self.ty, self.angle)

    def clear(self, rect=None):
        self.calls.append(('clear', rect))

    def fill_all(self, color):
        self.calls.append(('fill_all', color))

    def fill_rect(self, color, x, y, width, height):
        self.calls.append(('fill_rect', color, x, y, width, height, self.transform))

    def fill_circle(self, color, cx, cy, radius):
        self.calls.append(('fill_circle', color, cx, cy, radius))

    def draw_image(self, image, x, y, width, height):
        self.calls.append(('draw_image', image, x, y, width, height, self.transform))

    def translate(self, dx, dy):
        self.calls.append(('translate', dx, dy))
        self.tx += dx
        self.ty += dy

    def rotate(self, angle):
        self.calls.append(('rotate', angle))
        self.angle += angle

    def names(self):
        return [call[0] for call in self.calls]


class SpyNode(SceneNode):
    """Node recording its lifecycle calls into a shared journal."""

    def __init__(self, name, journal=None, z=0, redraw=False, **kwargs):
        super().__init__(z=z, **kwargs)
        self.name = name
        self.journal = journal if journal is not None else []
        self.redraw = redraw
        self.fps_seen = []
        self.clicks = []

    def update(self, fps):
        self.fps_seen.append(fps)
        self.journal.append(('update', self.name))
        return self.redraw

    def draw(self, context):
        self.journal.append(('draw', self.name))

    def on_click(self, event):
        self.clicks.append(event)

    def covers(self, point):
        return (self.x <= point.x <= self.x + self.width and
                self.y <= point.y <= self.y + self.height)


@pytest.fixture
def surface():
    """Off-screen 100x100 surface with per-pixel alpha."""
    return pygame.Surface((100, 100), pygame.SRCALPHA)


@pytest.fixture
def canvas(surface):
    """Canvas drawing on the off-screen surface."""
    return Canvas(surface)


@pytest.fixture
def scheduler():
    """Manually stepped frame scheduler."""
    return ManualFrameScheduler()


@pytest.fixture
def recorder():
    """Recording draw context."""
    return RecordingContext()


@pytest.fixture
def journal():
    """Shared list SpyNodes write their calls into."""
    return []


@pytest.fixture
def pygame_display():
    """Initialize pygame with a dummy 200x100 window."""
    pygame.init()
    screen = pygame.display.set_mode((200, 100))
    yield screen
    pygame.quit()


@pytest.fixture
def make_spy(journal):
    """Factory for SpyNodes sharing the journal fixture."""
    def _make(name, z=0, redraw=False, **kwargs):
        return SpyNode(name, journal, z=z, redraw=redraw, **kwargs)
    return _make
