"""
Bug Crossing entity data.

Every on-screen actor (enemy, prize, player) owns one EntityData holding
its name, draw position, bounding box offset and sprite.
"""

from pydantic import BaseModel

from ..primitives import Rectangle, overlaps


class EntityData(BaseModel):
    """Mutable state shared by every entity variant.

    ``x`` and ``y`` are the canvas coordinates of the top-left corner of the
    entity's tile, where its sprite is drawn. ``bounds`` is an offset
    rectangle inside that tile; adding ``(x, y)`` gives the collision box
    in canvas space.

    Attributes:
        name: Entity name, unique within its collection
        x: Tile origin x (canvas pixels)
        y: Tile origin y (canvas pixels)
        bounds: Bounding box offset and extent within the tile
        sprite: Resource URL of the sprite image

    Examples:
        >>> data = EntityData(
        ...     name="player",
        ...     x=202, y=405,
        ...     bounds=Rectangle(x=17, y=65, width=68, height=75),
        ...     sprite="images/char-boy.png"
        ... )
        >>> data.absolute_bounds().left
        219
    """
    name: str
    x: float
    y: float
    bounds: Rectangle = Rectangle(x=0, y=0, width=0, height=0)
    sprite: str = ""

    def set_location(self, x: float, y: float) -> None:
        """Move the tile origin. No validation is performed."""
        self.x = x
        self.y = y

    def set_bounds(self, x: int, y: int, w: int, h: int) -> None:
        """Replace the bounding box offset and extent."""
        self.bounds = Rectangle(x=x, y=y, width=w, height=h)

    def absolute_bounds(self) -> Rectangle:
        """Bounding box in canvas coordinates."""
        return self.bounds.translated(self.x, self.y)

    def has_collided_with(self, other: 'EntityData') -> bool:
        """Check if the two entities' absolute bounding boxes overlap."""
        return overlaps(self.absolute_bounds(), other.absolute_bounds())

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"EntityData({self.name}, x={self.x:.1f}, y={self.y:.1f}, bounds={self.bounds})"
