"""
Abstract base class for input sources.

This module defines the InputSource interface that all input sources must
implement, so the game can take key input from the keyboard, a test harness
or a replay without changing game logic.
"""

from abc import ABC, abstractmethod
from typing import List

from games.BugCrossing.input.input_event import KeyEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Subclasses must implement:
        - poll_events(): Return new key events since last poll
        - update(dt): Update source state for time-based processing

    Examples:
        >>> class MyInputSource(InputSource):
        ...     def poll_events(self) -> List[KeyEvent]:
        ...         return []
        ...     def update(self, dt: float) -> None:
        ...         pass
    """

    @abstractmethod
    def poll_events(self) -> List[KeyEvent]:
        """Get new key events since last poll.

        Returns all events that have occurred since the last call, then
        clears the internal event queue.

        Returns:
            List of KeyEvent objects, empty list if no events
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state (for time-based processing).

        Args:
            dt: Delta time in seconds since last update
        """
        pass
