"""
Enemy bugs for Bug Crossing.

Enemies crawl left to right along the stone rows. An enemy that runs off
the right edge wraps back to column 0 on a freshly chosen row with a new
speed. An enemy that catches up with another one on its row waits behind
it instead of driving through.
"""

import random
from typing import Sequence

from models import CrossingConfig, EntityData
from games.BugCrossing.game.actor import Actor, FrameContext


class Enemy(Actor):
    """A bug moving horizontally at a constant speed.

    Attributes:
        speed: Horizontal speed in pixels per second

    Examples:
        >>> import random
        >>> cfg = CrossingConfig()
        >>> enemy = Enemy.spawn("enemy0", cfg, random.Random(1))
        >>> cfg.enemy.speed_low <= enemy.speed <= cfg.enemy.speed_high
        True
        >>> enemy.row in (1, 2, 3)
        True
    """

    def __init__(self, data: EntityData, speed: float, config: CrossingConfig,
                 rng: random.Random):
        """Initialize an enemy.

        Args:
            data: Entity data (position, bounds, sprite)
            speed: Horizontal speed in pixels per second
            config: Game configuration (board and enemy settings)
            rng: Random source used when the enemy respawns
        """
        super().__init__(data)
        self.speed = speed
        self._config = config
        self._rng = rng

    @classmethod
    def spawn(cls, name: str, config: CrossingConfig, rng: random.Random) -> 'Enemy':
        """Create an enemy on a random column and row with a random speed."""
        column = rng.randint(0, config.board.columns - 1)
        row = rng.randint(config.enemy.row_min, config.enemy.row_max)
        data = EntityData(
            name=name,
            x=config.column_to_x(column),
            y=config.row_to_y(row, config.enemy.draw_y_offset),
            bounds=config.enemy.bounds,
            sprite=config.enemy.sprite,
        )
        return cls(data, cls._random_speed(config, rng), config, rng)

    @staticmethod
    def _random_speed(config: CrossingConfig, rng: random.Random) -> float:
        return float(rng.randint(config.enemy.speed_low, config.enemy.speed_high))

    @property
    def row(self) -> int:
        """Board row the enemy is on."""
        return int((self._data.y + self._config.enemy.draw_y_offset)
                   // self._config.board.row_height)

    def update(self, dt: float, context: FrameContext) -> None:
        """Move the enemy, wrapping it around when it leaves the board.

        Nothing happens while the session is paused. An enemy bumping into
        the one ahead of it keeps its position for this frame.

        Args:
            dt: Time delta in seconds since last frame
            context: Read-only session state for this frame
        """
        if context.paused:
            return

        if not self.is_bumping_any_other(context.enemies):
            self._data.set_location(self._data.x + self.speed * dt, self._data.y)

        if self.is_offscreen_x(self._data.x):
            self._respawn()

    def is_offscreen_x(self, x: float) -> bool:
        """True if x is left of column 0 or right of the last column."""
        return x < 0 or x > self._config.board.max_x

    def is_bumping_behind(self, other: 'Enemy') -> bool:
        """True if this enemy touches other and is the one behind.

        Only the enemy with the smaller left edge stops, so two touching
        enemies never both stall. Left edges are compared before pixel
        truncation so enemies within the same pixel still order.
        """
        return (self.has_collided_with(other) and
                self._left_edge() < other._left_edge())

    def _left_edge(self) -> float:
        return self._data.x + self._data.bounds.x

    def is_bumping_any_other(self, enemies: Sequence['Enemy']) -> bool:
        """True if this enemy is bumping behind any other enemy."""
        return any(
            other.name != self.name and self.is_bumping_behind(other)
            for other in enemies
        )

    def _respawn(self) -> None:
        """Wrap to column 0 on a new random row with a new speed."""
        row = self._rng.randint(self._config.enemy.row_min, self._config.enemy.row_max)
        self._data.set_location(0, self._config.row_to_y(row, self._config.enemy.draw_y_offset))
        self.speed = self._random_speed(self._config, self._rng)
