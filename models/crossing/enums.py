"""
Bug Crossing enumerations.

These enums define the session states, the discrete input symbols and the
audio cues of the game.
"""

from enum import Enum

from arcadekit.game_state import GameState


class SessionStatus(str, Enum):
    """Overall status of a game session.

    PLAYING is the only non-terminal status; WON and LOST stay in place
    until the player restarts.

    Attributes:
        PLAYING: Active gameplay
        WON: Final level reached
        LOST: All lives used up
    """
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    def to_game_state(self) -> GameState:
        """Convert session status to common GameState."""
        mapping = {
            SessionStatus.PLAYING: GameState.PLAYING,
            SessionStatus.WON: GameState.WON,
            SessionStatus.LOST: GameState.GAME_OVER,
        }
        return mapping[self]


class InputKey(str, Enum):
    """Discrete input symbols delivered once per key release.

    Attributes:
        LEFT, UP, RIGHT, DOWN: Step the player one tile
        A: Toggle audio
        B: Toggle the bounding box / freeze overlay
        C: Cycle the player character
    """
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    A = "a"
    B = "b"
    C = "c"

    @property
    def is_movement(self) -> bool:
        """True for the four direction keys."""
        return self in (InputKey.LEFT, InputKey.UP, InputKey.RIGHT, InputKey.DOWN)


class AudioCue(str, Enum):
    """Sounds the session asks the sound board to play."""
    BACKGROUND = "background"
    JUMP = "jump"
    COLLISION = "collision"
    PRIZE = "prize"
    LEVEL_DONE = "level_done"
    LOSE_GAME = "lose_game"
