"""
Tests for MousePointerSource.

Tests cover:
- Converting left clicks and finger touches into PointerEvents
- Scaling from display to bitmap coordinates
- Reading the pygame event queue and re-posting other events
"""

import pygame
import pytest
from pydantic import ValidationError

from models import Point2D, Resolution
from scenecanvas import Canvas, ManualFrameScheduler, MousePointerSource, PointerKind, Rectangle


def mouse_down(pos, button=1, **extra):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button, **extra)


class TestHandleEvent:
    """Test conversion of single pygame events."""

    @pytest.fixture
    def source(self):
        """Canvas bitmap of 100x50 shown at 200x100."""
        return MousePointerSource(display_size=(200, 100), bitmap_size=(100, 50))

    def test_left_click(self, source):
        assert source.handle_event(mouse_down((50, 40))) is True
        events = source.poll_events()
        assert len(events) == 1
        assert events[0].position == Point2D(x=25, y=20)
        assert events[0].kind is PointerKind.CLICK

    def test_raw_event_kept(self, source):
        raw = mouse_down((0, 0))
        source.handle_event(raw)
        assert source.poll_events()[0].raw is raw

    @pytest.mark.parametrize("button", [2, 3, 4, 5])
    def test_other_buttons_ignored(self, source, button):
        assert source.handle_event(mouse_down((10, 10), button=button)) is False
        assert source.poll_events() == []

    def test_touch_synthesized_click_ignored(self, source):
        """Mouse events SDL emulates from touches are skipped."""
        assert source.handle_event(mouse_down((10, 10), touch=True)) is False

    def test_finger_down(self, source):
        """Normalized finger coordinates are scaled to the display first."""
        event = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.25, touch_id=0, finger_id=0)
        assert source.handle_event(event) is True
        touch = source.poll_events()[0]
        assert touch.kind is PointerKind.TOUCH
        assert touch.position == Point2D(x=50, y=13)

    def test_non_pointer_events_ignored(self, source):
        assert source.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) is False
        assert source.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(1, 1), button=1)) is False

    def test_poll_drains_queue(self, source):
        source.handle_event(mouse_down((1, 1)))
        source.handle_event(mouse_down((2, 2)))
        assert len(source.poll_events()) == 2
        assert source.poll_events() == []

    def test_clear(self, source):
        source.handle_event(mouse_down((1, 1)))
        source.clear()
        assert source.poll_events() == []

    def test_bitmap_defaults_to_display(self):
        source = MousePointerSource(display_size=(100, 100))
        source.handle_event(mouse_down((7, 9)))
        assert source.poll_events()[0].position == Point2D(x=7, y=9)

    def test_resolution_sizes(self):
        """Sizes can be given as Resolution models."""
        source = MousePointerSource(
            display_size=Resolution(width=400, height=200),
            bitmap_size=Resolution(width=100, height=50),
        )
        source.handle_event(mouse_down((200, 100)))
        assert source.poll_events()[0].position == Point2D(x=50, y=25)

    @pytest.mark.parametrize("size", [(0, 50), (100, -1)])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(ValidationError):
            MousePointerSource(bitmap_size=size)

    def test_no_sizes_at_all(self):
        """Without any size information positions pass through."""
        source = MousePointerSource()
        source.handle_event(mouse_down((7, 9)))
        assert source.poll_events()[0].position == Point2D(x=7, y=9)


class TestEventQueue:
    """Test reading the pygame event queue."""

    def test_collects_clicks_from_queue(self, pygame_display):
        source = MousePointerSource(bitmap_size=(100, 50))
        pygame.event.clear()
        pygame.event.post(mouse_down((100, 50)))

        source.update(0.0)

        events = source.poll_events()
        assert [e.position for e in events] == [Point2D(x=50, y=25)]

    def test_reposts_other_events(self, pygame_display):
        source = MousePointerSource()
        pygame.event.clear()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        pygame.event.post(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(1, 1), buttons=(0, 0, 0)))

        source.update(0.0)

        remaining = [e.type for e in pygame.event.get()]
        assert pygame.KEYDOWN in remaining
        assert pygame.MOUSEMOTION not in remaining
        assert source.poll_events() == []

    def test_click_reaches_canvas_node(self, pygame_display):
        """A click on the stretched window lands on the node under it."""
        canvas = Canvas(width=100, height=50)
        target = Rectangle(x=40, y=20, z=1, width=10, height=10, fill='red')
        clicks = []
        target.on_click = clicks.append
        canvas.add_node(target)
        canvas.bind_input(MousePointerSource(bitmap_size=(canvas.width, canvas.height)))

        scheduler = ManualFrameScheduler()
        canvas.start_interval(scheduler)
        pygame.event.clear()
        pygame.event.post(mouse_down((90, 50)))
        scheduler.step(0.0)

        assert len(clicks) == 1
        assert clicks[0].position == Point2D(x=45, y=25)
        canvas.stop_interval()
