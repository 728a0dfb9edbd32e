"""
Tests for the KeyEvent model and the keyboard input source.
"""

import pygame
import pytest
from pydantic import ValidationError

from models import InputKey
from games.BugCrossing.input.input_event import KeyEvent
from games.BugCrossing.input.sources.keyboard import KeyboardInputSource, translate_key


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


class TestKeyEvent:
    """Tests for the KeyEvent model."""

    def test_creation(self):
        event = KeyEvent(key=InputKey.LEFT, timestamp=1.5)
        assert event.key == InputKey.LEFT
        assert event.timestamp == 1.5

    def test_unknown_key(self):
        assert KeyEvent(key=None, timestamp=0.0).key is None

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            KeyEvent(key=InputKey.UP, timestamp=-1.0)
        assert "non-negative" in str(exc_info.value)

    def test_is_frozen(self):
        event = KeyEvent(key=InputKey.UP, timestamp=0.0)
        with pytest.raises(ValidationError):
            event.key = InputKey.DOWN

    def test_str(self):
        assert str(KeyEvent(key=InputKey.A, timestamp=2.0)) == "KeyEvent(key=a, t=2.000)"


class TestKeyboardInputSource:
    """Tests for translating pygame key releases."""

    @pytest.mark.parametrize("code, key", [
        (pygame.K_LEFT, InputKey.LEFT),
        (pygame.K_UP, InputKey.UP),
        (pygame.K_RIGHT, InputKey.RIGHT),
        (pygame.K_DOWN, InputKey.DOWN),
        (pygame.K_a, InputKey.A),
        (pygame.K_b, InputKey.B),
        (pygame.K_c, InputKey.C),
    ])
    def test_translate_key(self, code, key):
        assert translate_key(code) == key

    def test_unmapped_key_is_none(self):
        assert translate_key(pygame.K_z) is None

    def test_key_release_is_queued(self):
        source = KeyboardInputSource()
        assert source.handle_event(key_up(pygame.K_UP))
        events = source.poll_events()
        assert [e.key for e in events] == [InputKey.UP]

    def test_unmapped_release_is_queued_as_none(self):
        source = KeyboardInputSource()
        source.handle_event(key_up(pygame.K_q))
        assert [e.key for e in source.poll_events()] == [None]

    def test_key_press_is_ignored(self):
        source = KeyboardInputSource()
        assert not source.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        assert source.poll_events() == []

    def test_poll_clears_queue(self):
        source = KeyboardInputSource()
        source.handle_event(key_up(pygame.K_LEFT))
        source.poll_events()
        assert source.poll_events() == []

    def test_events_keep_order(self):
        source = KeyboardInputSource()
        for code in (pygame.K_UP, pygame.K_UP, pygame.K_RIGHT):
            source.handle_event(key_up(code))
        assert [e.key for e in source.poll_events()] == [InputKey.UP, InputKey.UP, InputKey.RIGHT]
