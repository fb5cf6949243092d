"""
Frame schedulers - the host side of the canvas frame loop.

A scheduler calls a requested callback once, before the next paint, with a
monotonically increasing timestamp in milliseconds. The canvas re-requests
a frame at the end of every callback to keep its loop going.

Two implementations:
- PygameFrameScheduler: real-time loop driven by pygame.time.Clock
- ManualFrameScheduler: frames are stepped by the host (embedding, tests)
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

import pygame

from scenecanvas import config
from scenecanvas.logging import get_logger

log = get_logger('scheduler')

FrameCallback = Callable[[float], None]
EventHandler = Callable[[pygame.event.Event], None]


class FrameScheduler(ABC):
    """Abstract "call me back before the next frame" primitive.

    At most one callback is pending at a time; requesting a new one replaces
    the previous request. Hooks registered with before_frame() run before
    every frame callback, e.g. to deliver pointer input.
    """

    def __init__(self):
        self._pending: Optional[FrameCallback] = None
        self._hooks: List[Callable[[], None]] = []

    @property
    def pending(self) -> bool:
        """True if a frame callback is waiting to run."""
        return self._pending is not None

    def request_frame(self, callback: FrameCallback) -> None:
        """Schedule callback for the next frame."""
        self._pending = callback

    def cancel(self) -> None:
        """Drop the pending frame request, if any."""
        self._pending = None

    def before_frame(self, hook: Callable[[], None]) -> None:
        """Register a hook to run before every frame callback."""
        if hook not in self._hooks:
            self._hooks.append(hook)

    def remove_hook(self, hook: Callable[[], None]) -> None:
        if hook in self._hooks:
            self._hooks.remove(hook)

    def _run_frame(self, timestamp: float) -> bool:
        """Run hooks and the pending callback.

        Returns:
            False if no callback was pending
        """
        for hook in list(self._hooks):
            hook()

        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        callback(timestamp)
        return True

    @abstractmethod
    def now(self) -> float:
        """Current scheduler time in milliseconds."""
        pass


class ManualFrameScheduler(FrameScheduler):
    """Scheduler whose frames are stepped explicitly by the host.

    Usage:
        scheduler = ManualFrameScheduler()
        canvas.start_interval(scheduler)
        scheduler.step(0.0)     # bootstrap frame
        scheduler.step(16.0)    # first real update
    """

    def __init__(self):
        super().__init__()
        self._time = 0.0

    def now(self) -> float:
        return self._time

    def step(self, timestamp: Optional[float] = None) -> bool:
        """Run one frame.

        Args:
            timestamp: Frame time in milliseconds; defaults to the time of
                the previous step

        Returns:
            False if nothing was pending
        """
        if timestamp is not None:
            self._time = float(timestamp)
        return self._run_frame(self._time)


class PygameFrameScheduler(FrameScheduler):
    """Real-time scheduler using pygame's clock and event queue.

    Events still queued after a frame (pointer sources take theirs in a
    frame hook) are passed to event_handler, or dropped when there is none,
    so the queue never fills up. QUIT cancels the loop.

    Args:
        target_fps: Frame rate cap passed to Clock.tick()
        event_handler: Called with each leftover pygame event
    """

    def __init__(self, target_fps: int = config.FPS,
                 event_handler: Optional[EventHandler] = None):
        super().__init__()
        self.target_fps = target_fps
        self.event_handler = event_handler
        self._clock = pygame.time.Clock()
        self._frames = 0

    @property
    def frames(self) -> int:
        """Number of frame callbacks run so far."""
        return self._frames

    def now(self) -> float:
        return float(pygame.time.get_ticks())

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run frames until nothing is pending, the window closes or
        max_frames callbacks have run.

        Returns:
            Number of frames run by this call
        """
        log.info("Frame loop running at up to %d fps", self.target_fps)
        ran = 0
        while self.pending and (max_frames is None or ran < max_frames):
            self._clock.tick(self.target_fps)

            if pygame.display.get_init() and pygame.event.peek(pygame.QUIT):
                log.info("Window closed, stopping frame loop")
                self.cancel()
                break

            if self._run_frame(self.now()):
                ran += 1
                self._frames += 1

            if self._drain_events():
                log.info("Window closed, stopping frame loop")
                self.cancel()
                break

            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                pygame.display.flip()

        log.debug("Frame loop ran %d frames", ran)
        return ran

    def _drain_events(self) -> bool:
        """Empty the event queue after a frame.

        Pointer sources run as frame hooks and re-post what they do not
        consume; whatever is left is handed to event_handler or dropped.

        Returns:
            True if a QUIT event was seen
        """
        if not pygame.display.get_init():
            return False
        quit_seen = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_seen = True
            elif self.event_handler is not None:
                self.event_handler(event)
        return quit_seen
