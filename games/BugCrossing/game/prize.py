"""
Gems for Bug Crossing.

Prizes sit still on a stone tile until the player walks over them. A
collected prize stays hidden for the rest of the level.
"""

import random

import pygame

from models import CrossingConfig, EntityData
from games.BugCrossing.game.actor import Actor, FrameContext, ImageSource


class Prize(Actor):
    """A collectible gem.

    Attributes:
        value: Points awarded when collected
        is_visible: False once the prize has been collected

    Examples:
        >>> import random
        >>> prize = Prize.spawn(1, CrossingConfig(), random.Random(3))
        >>> prize.value
        200
        >>> prize.is_visible
        True
    """

    def __init__(self, data: EntityData, value: int):
        super().__init__(data)
        self.value = value
        self.is_visible = True

    @classmethod
    def spawn(cls, index: int, config: CrossingConfig, rng: random.Random) -> 'Prize':
        """Create the index-th prize of a level on a random stone tile.

        Later prizes are worth more: prize ``index`` is worth
        ``(index + 1) * value_step``.
        """
        row = rng.randint(config.prize.row_min, config.prize.row_max)
        column = rng.randint(0, config.board.columns - 1)
        sprites = config.prize.sprites
        data = EntityData(
            name=f"prize{index}",
            x=config.column_to_x(column),
            y=config.row_to_y(row, config.prize.draw_y_offset),
            bounds=config.prize.bounds,
            sprite=sprites[index % len(sprites)],
        )
        return cls(data, (index + 1) * config.prize.value_step)

    def update(self, dt: float, context: FrameContext) -> None:
        """Prizes do not move."""
        pass

    def collect(self) -> None:
        """Hide the prize for the rest of the level."""
        self.is_visible = False

    def render(self, screen: pygame.Surface, images: ImageSource,
               show_bounds: bool = False) -> None:
        """Draw the prize unless it has been collected."""
        if self.is_visible:
            super().render(screen, images, show_bounds)
