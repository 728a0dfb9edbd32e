"""
Actor interface for Bug Crossing entities.

Enemies, prizes and the player each hold an EntityData and implement this
interface. Variants only mutate their own EntityData; effects that cross
entities (score, lives, prize visibility) are applied by the Session.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple, Optional, Protocol, Sequence

import pygame

from models import EntityData
from games.BugCrossing.config import Colors


class ImageSource(Protocol):
    """Anything that can look up a sprite surface by URL (ResourceLoader)."""

    def get(self, url: str) -> Optional[pygame.Surface]:
        ...


class FrameContext(NamedTuple):
    """Read-only view of the session handed to actors each frame.

    Attributes:
        frozen: Session is frozen (level transition or game over)
        paused: Enemy motion is suspended (frozen, or debug overlay shown)
        enemies: Current enemy collection
        prizes: Current prize collection
    """
    frozen: bool
    paused: bool
    enemies: Sequence['Actor']
    prizes: Sequence['Actor']


class Actor(ABC):
    """Abstract base for everything drawn on the board.

    Attributes:
        data: The actor's EntityData (position, bounds, sprite)
    """

    def __init__(self, data: EntityData):
        self._data = data

    @property
    def data(self) -> EntityData:
        """Get the underlying EntityData."""
        return self._data

    @property
    def name(self) -> str:
        return self._data.name

    @property
    def x(self) -> float:
        return self._data.x

    @property
    def y(self) -> float:
        return self._data.y

    def has_collided_with(self, other: 'Actor') -> bool:
        """Check if this actor's bounding box overlaps the other's."""
        return self._data.has_collided_with(other.data)

    @abstractmethod
    def update(self, dt: float, context: FrameContext) -> None:
        """Advance the actor by dt seconds.

        Args:
            dt: Time delta in seconds since last frame
            context: Read-only session state for this frame
        """
        pass

    def render(self, screen: pygame.Surface, images: ImageSource,
               show_bounds: bool = False) -> None:
        """Draw the sprite at the tile origin.

        Args:
            screen: Pygame surface to draw on
            images: Sprite lookup (usually the ResourceLoader)
            show_bounds: Outline the absolute bounding box for debugging
        """
        sprite = images.get(self._data.sprite)
        if sprite is not None:
            screen.blit(sprite, (int(self._data.x), int(self._data.y)))

        if show_bounds:
            box = self._data.absolute_bounds()
            pygame.draw.rect(
                screen,
                Colors.BOUNDING_BOX,
                pygame.Rect(box.x, box.y, box.width, box.height),
                1  # Line width
            )

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"{type(self).__name__}({self._data})"

    def __repr__(self) -> str:
        return self.__str__()
