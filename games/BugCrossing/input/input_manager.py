"""
Input manager for the Bug Crossing game.

This module provides the InputManager class that manages the active input
source and gives the game engine one place to collect key events from.
"""

from typing import List, Optional

from games.BugCrossing.input.input_event import KeyEvent
from games.BugCrossing.input.sources.base import InputSource


class InputManager:
    """Manages the active input source and provides unified event access.

    Only one input source can be active at a time; it can be swapped at
    runtime (keyboard for play, a scripted source for tests or replays).

    Attributes:
        _source: The currently active input source

    Examples:
        >>> from games.BugCrossing.input.sources.keyboard import KeyboardInputSource
        >>> manager = InputManager(KeyboardInputSource())
        >>> manager.update(0.016)
        >>> manager.get_events()
        []
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize the input manager with an optional input source.

        Args:
            source: The initial input source, or None to start with no source
        """
        self._source: Optional[InputSource] = source

    def set_source(self, source: InputSource) -> None:
        """Set or change the active input source.

        Args:
            source: The new input source to use

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source, or None."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active.

        Examples:
            >>> manager = InputManager()
            >>> manager.has_source()
            False
        """
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source. Safe to call with no source.

        Args:
            dt: Delta time in seconds since last update
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[KeyEvent]:
        """Get new key events from the active source.

        Returns:
            List of KeyEvent objects, empty if no source or no events
        """
        if self._source is None:
            return []
        return self._source.poll_events()

    def clear_events(self) -> None:
        """Discard pending events, e.g. across a restart."""
        if self._source is not None:
            # Poll and discard events to clear the queue
            self._source.poll_events()
