"""
Mouse Pointer Source - Mouse clicks and touches from the pygame event queue.
"""
import time
from typing import List, Optional, Tuple, Union

import pygame

from models import Resolution
from scenecanvas.input.pointer_event import PointerEvent, PointerKind, to_bitmap_coordinates
from scenecanvas.input.sources.base import PointerSource
from scenecanvas.logging import get_logger

log = get_logger('input')

# Pointer events that are consumed without being re-posted
_POINTER_NOISE = (
    pygame.MOUSEMOTION,
    pygame.MOUSEBUTTONDOWN,
    pygame.MOUSEBUTTONUP,
    pygame.MOUSEWHEEL,
    pygame.FINGERDOWN,
    pygame.FINGERUP,
    pygame.FINGERMOTION,
)

SizeLike = Union[Resolution, Tuple[int, int]]


def _as_resolution(size: Optional[SizeLike]) -> Optional[Resolution]:
    """Read a (width, height) pair or a Resolution."""
    if size is None or isinstance(size, Resolution):
        return size
    width, height = size
    return Resolution(width=width, height=height)


class MousePointerSource(PointerSource):
    """Pointer source reading pygame mouse and finger events.

    Left-button MOUSEBUTTONDOWN becomes a CLICK, FINGERDOWN a TOUCH. Event
    positions are scaled from the window size to the canvas bitmap size, so
    a canvas shown stretched in a larger window still gets bitmap pixels.
    Non-pointer events are re-posted to the pygame event queue for the
    main loop.

    Args:
        display_size: Size the canvas is displayed at, as a Resolution or a
            (width, height) pair; defaults to the current display surface
            size, then to bitmap_size
        bitmap_size: Size of the canvas bitmap; defaults to display_size

    Raises:
        pydantic.ValidationError: If a size is not positive
    """

    def __init__(self, display_size: Optional[SizeLike] = None,
                 bitmap_size: Optional[SizeLike] = None):
        self._display_size = _as_resolution(display_size)
        self._bitmap_size = _as_resolution(bitmap_size)
        self._event_queue: List[PointerEvent] = []

    def _sizes(self) -> Tuple[Resolution, Resolution]:
        display = self._display_size
        if display is None and pygame.display.get_init():
            window = pygame.display.get_surface()
            if window is not None:
                display = _as_resolution(window.get_size())
        if display is None:
            display = self._bitmap_size
        if display is None:
            display = Resolution(width=1, height=1)
        bitmap = self._bitmap_size if self._bitmap_size is not None else display
        return display, bitmap

    def poll_events(self) -> List[PointerEvent]:
        """Get new pointer events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Convert one pygame event.

        Returns:
            True if the event was a pointer event and was queued
        """
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:  # Left mouse button only
                return False
            if getattr(event, 'touch', False):
                # SDL synthesizes mouse events from touches; FINGERDOWN covers those
                return False
            pos = event.pos
            kind = PointerKind.CLICK
        elif event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1]
            display, _ = self._sizes()
            pos = (event.x * display.width, event.y * display.height)
            kind = PointerKind.TOUCH
        else:
            return False

        display, bitmap = self._sizes()
        position = to_bitmap_coordinates(pos, display.as_tuple, bitmap.as_tuple)

        pointer_event = PointerEvent(
            position=position,
            timestamp=time.monotonic(),
            kind=kind,
            raw=event,
        )
        log.trace("Queued %s", pointer_event)
        self._event_queue.append(pointer_event)
        return True

    def update(self, dt: float) -> None:
        """Process pygame events and collect clicks and touches."""
        for event in pygame.event.get():
            if self.handle_event(event):
                continue
            if event.type not in _POINTER_NOISE:
                # Re-post non-pointer events for the main loop to handle
                pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
