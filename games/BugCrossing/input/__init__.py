"""Bug Crossing Input Module."""
from games.BugCrossing.input.input_event import KeyEvent
from games.BugCrossing.input.input_manager import InputManager
from games.BugCrossing.input.sources import InputSource, KeyboardInputSource

__all__ = [
    'KeyEvent',
    'InputManager',
    'InputSource',
    'KeyboardInputSource',
]
