"""
Keyboard input source for the Bug Crossing game.

This module provides a concrete implementation of InputSource that
converts pygame key releases into KeyEvent models.
"""

import time
from typing import Dict, List, Optional

import pygame

from arcadekit.logging import get_logger
from models import InputKey
from games.BugCrossing.input.input_event import KeyEvent
from games.BugCrossing.input.sources.base import InputSource

log = get_logger('keyboard')

# pygame key code -> game input symbol
KEY_MAP: Dict[int, InputKey] = {
    pygame.K_LEFT: InputKey.LEFT,
    pygame.K_UP: InputKey.UP,
    pygame.K_RIGHT: InputKey.RIGHT,
    pygame.K_DOWN: InputKey.DOWN,
    pygame.K_a: InputKey.A,
    pygame.K_b: InputKey.B,
    pygame.K_c: InputKey.C,
}


def translate_key(key_code: int) -> Optional[InputKey]:
    """Translate a pygame key code, None for keys the game does not use."""
    return KEY_MAP.get(key_code)


class KeyboardInputSource(InputSource):
    """Keyboard input source fed from the engine's pygame event loop.

    The engine owns the pygame event queue (it also needs QUIT and the
    restart keys), so it hands every event to handle_event(). Only key
    releases become KeyEvents; unmapped keys produce a KeyEvent with no
    key, which the session logs and ignores.

    Attributes:
        _event_queue: Internal queue of events collected since last poll

    Examples:
        >>> source = KeyboardInputSource()
        >>> source.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP))
        True
        >>> [e.key for e in source.poll_events()]
        [<InputKey.UP: 'up'>]
    """

    def __init__(self):
        """Initialize the keyboard input source."""
        self._event_queue: List[KeyEvent] = []

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Queue a KeyEvent for a key release.

        Args:
            event: Any pygame event

        Returns:
            True if the event was a key release and was queued
        """
        if event.type != pygame.KEYUP:
            return False

        key = translate_key(event.key)
        if key is None:
            log.trace("Unmapped key code %s", event.key)
        self._event_queue.append(KeyEvent(key=key, timestamp=time.monotonic()))
        return True

    def poll_events(self) -> List[KeyEvent]:
        """Get queued key events and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Nothing time-based to do for the keyboard."""
        pass
