"""
Player avatar for Bug Crossing.

The player moves one tile per key release and can never leave the board.
Reaching the water row with every prize collected completes the level.
"""

from typing import Sequence

from arcadekit.logging import get_logger
from models import CrossingConfig, EntityData, InputKey
from games.BugCrossing.game.actor import Actor, FrameContext

log = get_logger('player')


class Player(Actor):
    """The player-controlled character.

    Examples:
        >>> player = Player.spawn(CrossingConfig())
        >>> (player.x, player.y)
        (202.0, 405.0)
        >>> player.handle_input(InputKey.UP)
        True
        >>> player.y
        322.0
    """

    def __init__(self, data: EntityData, config: CrossingConfig):
        super().__init__(data)
        self._config = config

    @classmethod
    def spawn(cls, config: CrossingConfig, character_index: int = 0) -> 'Player':
        """Create the player on the start tile with the given character sprite."""
        data = EntityData(
            name="player",
            x=config.column_to_x(config.player.start_column),
            y=config.row_to_y(config.player.start_row, config.player.draw_y_offset),
            bounds=config.player.bounds,
            sprite=config.player.characters[character_index],
        )
        return cls(data, config)

    @property
    def row(self) -> int:
        """Board row the player is on."""
        return int((self._data.y + self._config.player.draw_y_offset)
                   // self._config.board.row_height)

    def update(self, dt: float, context: FrameContext) -> bool:
        """Check whether the player has completed the level.

        Args:
            dt: Time delta in seconds since last frame
            context: Read-only session state for this frame

        Returns:
            True when the player is on the top row, the session is not
            frozen and every prize has been collected. The session reacts
            by starting the level transition.
        """
        if self.row <= 0 and not context.frozen:
            return self.has_all_prizes_collected(context.prizes)
        return False

    @staticmethod
    def has_all_prizes_collected(prizes: Sequence) -> bool:
        """True if no prize is still visible (also true with no prizes)."""
        return not any(prize.is_visible for prize in prizes)

    def handle_input(self, key: InputKey, frozen: bool = False) -> bool:
        """Step one tile in the key's direction.

        Steps that would leave the board are ignored, and so is every
        movement while the session is frozen.

        Args:
            key: Input symbol; non-movement keys are ignored here
            frozen: Whether the session is frozen

        Returns:
            True if the player moved
        """
        if not key.is_movement:
            return False
        if frozen:
            log.debug("Movement key %s while frozen", key.value)
            return False

        board = self._config.board
        dx, dy = {
            InputKey.LEFT: (-board.tile_width, 0),
            InputKey.UP: (0, -board.row_height),
            InputKey.RIGHT: (board.tile_width, 0),
            InputKey.DOWN: (0, board.row_height),
        }[key]

        new_x = self._data.x + dx
        new_y = self._data.y + dy
        if not self._is_on_board(new_x, new_y):
            return False

        self._data.set_location(new_x, new_y)
        return True

    def set_character(self, sprite: str) -> None:
        """Switch to another character sprite."""
        log.debug("%s setting sprite to %s", self.name, sprite)
        self._data.sprite = sprite

    def _is_on_board(self, x: float, y: float) -> bool:
        offset = self._config.player.draw_y_offset
        top = self._config.row_to_y(0, offset)
        bottom = self._config.row_to_y(self._config.board.rows - 1, offset)
        return 0 <= x <= self._config.board.max_x and top <= y <= bottom
