"""Input source implementations."""

from games.BugCrossing.input.sources.base import InputSource
from games.BugCrossing.input.sources.keyboard import KeyboardInputSource

__all__ = [
    'InputSource',
    'KeyboardInputSource',
]
