"""
Base Pointer Source - Abstract interface for pointer input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from scenecanvas.input.pointer_event import PointerEvent


class PointerSource(ABC):
    """Abstract base class for pointer sources.

    All input backends must convert their events into PointerEvents whose
    positions are already in surface bitmap coordinates.
    """

    @abstractmethod
    def poll_events(self) -> List[PointerEvent]:
        """Poll for new pointer events.

        Returns:
            List of PointerEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the pointer source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass
