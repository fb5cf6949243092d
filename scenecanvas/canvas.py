"""
Canvas - the scene node registry and its frame loop.

The canvas owns a list of SceneNodes kept sorted by z, answers hit-test
queries, forwards pointer events to the topmost node and runs the
update/redraw loop on a FrameScheduler:

    canvas = Canvas(width=640, height=480)
    canvas.add_node(Rectangle(x=0, y=0, z=1, width=640, height=20, fill='#333'))
    canvas.add_node(Circle(x=320, y=240, z=2, radius=8, fill='orange'))
    canvas.start_interval()          # pygame clock by default
    canvas.scheduler.run()

Each frame the canvas calls update(fps) on every node in z order. If any
node asks for it, the whole surface is cleared and every node is drawn,
back to front, so higher z paints over lower z.
"""
from typing import Callable, Iterator, List, Optional, Tuple

import pygame

from scenecanvas import config
from scenecanvas.context import DrawContext
from scenecanvas.errors import TypeMismatch
from scenecanvas.geometry import as_point, round_half_up
from scenecanvas.input import PointerEvent, PointerSource
from scenecanvas.logging import get_logger
from scenecanvas.nodes import SceneNode
from scenecanvas.scheduler import FrameScheduler, PygameFrameScheduler

log = get_logger('canvas')


class Canvas:
    """Registry of scene nodes drawn onto one pygame surface.

    Hit-testing rule: get_node_at() returns the covering node with the
    highest z. Among covering nodes sharing that z, the one added last wins.

    Args:
        surface: Existing surface to draw on; a new one of width x height
            is created when omitted
        width, height: Size of the created surface
    """

    def __init__(self, surface: Optional[pygame.Surface] = None,
                 width: int = config.DEFAULT_WIDTH, height: int = config.DEFAULT_HEIGHT):
        if surface is None:
            surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self.surface = surface
        self.context = DrawContext(surface)

        self._nodes: List[SceneNode] = []

        # Frame loop state
        self._scheduler: Optional[FrameScheduler] = None
        self._running = False
        self._fps_display: Optional[Callable[[int], None]] = None
        self._shown_fps: Optional[int] = None
        self._fps = 0.0
        self.start_time: Optional[float] = None
        self.last_frame_time: Optional[float] = None

        # Pointer input
        self._input_source: Optional[PointerSource] = None

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    # =========================================================================
    # Node management
    # =========================================================================

    def add_node(self, node: SceneNode) -> None:
        """Add a node, keeping the list sorted by z.

        Raises:
            TypeMismatch: If node is not a SceneNode
        """
        if not isinstance(node, SceneNode):
            raise TypeMismatch(f"add_node called without a SceneNode, got {node!r}")
        self._nodes.append(node)
        # list.sort is stable: equal z keeps insertion order
        self._nodes.sort(key=lambda n: n.z)
        log.debug("Added %r (%d nodes)", node, len(self._nodes))

    def remove_node(self, node: SceneNode) -> bool:
        """Remove a node by identity.

        Returns:
            True if the node was registered and has been removed

        Raises:
            TypeMismatch: If node is not a SceneNode
        """
        if not isinstance(node, SceneNode):
            raise TypeMismatch(f"remove_node called without a SceneNode, got {node!r}")
        for index, candidate in enumerate(self._nodes):
            if candidate is node:
                del self._nodes[index]
                log.debug("Removed %r (%d nodes)", node, len(self._nodes))
                return True
        return False

    @property
    def nodes(self) -> Tuple[SceneNode, ...]:
        """Snapshot of the nodes in z-ascending order."""
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(tuple(self._nodes))

    def __contains__(self, node) -> bool:
        return any(candidate is node for candidate in self._nodes)

    # =========================================================================
    # Hit testing
    # =========================================================================

    def is_node_at(self, point) -> bool:
        """Check if any node covers the point."""
        point = as_point(point)
        return any(node.covers(point) for node in self._nodes)

    def get_node_at(self, point) -> Optional[SceneNode]:
        """Get the topmost node covering the point.

        Returns:
            The covering node with the highest z (the last added on equal
            z), or None if no node covers the point
        """
        point = as_point(point)
        # Scanning back to front: the first hit is the highest z, and among
        # equal z the one added last
        for node in reversed(self._nodes):
            if node.covers(point):
                return node
        return None

    def on_click(self, event: PointerEvent) -> Optional[SceneNode]:
        """Forward a click or touch to the topmost node under it.

        Args:
            event: Pointer event with a position in bitmap coordinates

        Returns:
            The node that received the event, or None if nothing was hit
        """
        node = self.get_node_at(event.position)
        if node is None:
            return None
        log.debug("Pointer %s hit %r", event, node)
        node.on_click(event)
        return node

    def bind_input(self, source: Optional[PointerSource]) -> None:
        """Attach a pointer source polled by process_input()."""
        self._input_source = source
        if self._scheduler is not None:
            if source is None:
                self._scheduler.remove_hook(self.process_input)
            else:
                self._scheduler.before_frame(self.process_input)

    def process_input(self) -> int:
        """Poll the bound pointer source and dispatch its events.

        Returns:
            Number of events dispatched
        """
        if self._input_source is None:
            return 0
        self._input_source.update(0.0)
        events = self._input_source.poll_events()
        for event in events:
            self.on_click(event)
        return len(events)

    # =========================================================================
    # Frame loop
    # =========================================================================

    @property
    def scheduler(self) -> Optional[FrameScheduler]:
        return self._scheduler

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def fps(self) -> float:
        """Frames per second measured on the last frame (0 before any)."""
        return self._fps

    @fps.setter
    def fps(self, fps: float) -> None:
        self._fps = fps
        shown = round_half_up(fps)
        if self._fps_display is not None and shown != self._shown_fps:
            self._shown_fps = shown
            self._fps_display(shown)

    def start_interval(self, scheduler: Optional[FrameScheduler] = None,
                       fps_display: Optional[Callable[[int], None]] = None) -> FrameScheduler:
        """Start updating and drawing the nodes.

        The first frame only draws; node updates start on the second frame.

        Args:
            scheduler: Frame source; a PygameFrameScheduler by default
            fps_display: Called with the rounded fps whenever it changes

        Returns:
            The scheduler driving the loop
        """
        if self._running:
            self.stop_interval()

        self._scheduler = scheduler or PygameFrameScheduler()
        self._fps_display = fps_display
        self._shown_fps = None
        self.start_time = None
        self.last_frame_time = None
        self._running = True

        if self._input_source is not None:
            self._scheduler.before_frame(self.process_input)

        log.info("Frame loop started with %d nodes", len(self._nodes))
        self._scheduler.request_frame(self.update)
        return self._scheduler

    def stop_interval(self) -> None:
        """Stop the frame loop; the pending frame is cancelled."""
        if not self._running:
            return
        self._running = False
        if self._scheduler is not None:
            self._scheduler.cancel()
            self._scheduler.remove_hook(self.process_input)
        log.info("Frame loop stopped")

    def update(self, timestamp: float) -> None:
        """Run one frame.

        Args:
            timestamp: Frame time in milliseconds
        """
        try:
            redraw = self._update_nodes(timestamp)
            if redraw:
                log.trace("Redrawing %d nodes at %.1f ms", len(self._nodes), timestamp)
                self.redraw()
        except Exception:
            log.exception("Frame at %.1f ms aborted", timestamp)
            self.stop_interval()
            raise

        self.last_frame_time = timestamp

        if self._running and self._scheduler is not None:
            self._scheduler.request_frame(self.update)

    def _update_nodes(self, timestamp: float) -> bool:
        """Call update(fps) on every node.

        Returns:
            True if a redraw is needed
        """
        # Bootstrap frame: draw once, no updates
        if self.start_time is None:
            self.start_time = timestamp
            return True

        delta = timestamp - self.last_frame_time
        if delta > 0:
            self.fps = config.MS_PER_SECOND / delta
        else:
            log.warning("Non-positive frame delta %.3f ms, keeping %.1f fps", delta, self._fps)

        redraw = False
        # Iterate over a snapshot: nodes may remove themselves while updating
        for node in tuple(self._nodes):
            if node.update(self._fps):
                redraw = True
        return redraw

    def redraw(self) -> None:
        """Clear the surface and draw every node back to front."""
        self.context.clear()
        for node in tuple(self._nodes):
            node.draw(self.context)

    # =========================================================================
    # Drawing helpers
    # =========================================================================

    def fill_all(self, color=config.FILL_ALL_COLOR) -> None:
        """Fill the whole surface with a color."""
        self.context.fill_all(color)
