"""
Shared primitive data types for the game.

This module provides the basic geometric type used for bounding boxes and
the axis-aligned overlap test every entity collision goes through.
"""

from pydantic import BaseModel, field_validator, computed_field, ConfigDict


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by position and dimensions.

    Used for entity bounding boxes. Position is at the top-left corner
    (pygame convention). For entities the rectangle usually holds an
    *offset* relative to the entity's tile origin; see
    ``EntityData.absolute_bounds()``.

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be non-negative)
        height: Height of rectangle (must be non-negative)

    Examples:
        >>> rect = Rectangle(x=17, y=65, width=68, height=75)
        >>> rect.right
        85
        >>> rect.translated(202, 405).top
        470
    """
    x: int
    y: int
    width: int
    height: int

    @field_validator('width', 'height')
    @classmethod
    def validate_non_negative_dimensions(cls, v: int) -> int:
        """Validate dimensions are non-negative."""
        if v < 0:
            raise ValueError(f'Rectangle dimensions must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def left(self) -> int:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> int:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> int:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> int:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def translated(self, dx: float, dy: float) -> 'Rectangle':
        """Return a copy of this rectangle moved by (dx, dy).

        Entity positions are floats while they move, so the translated
        origin is truncated to whole pixels.

        Args:
            dx: Horizontal offset
            dy: Vertical offset

        Returns:
            New Rectangle with the same dimensions
        """
        return Rectangle(
            x=int(self.x + dx),
            y=int(self.y + dy),
            width=self.width,
            height=self.height
        )

    def overlaps(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another rectangle.

        See ``overlaps()``.
        """
        return overlaps(self, other)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x}, y={self.y}, w={self.width}, h={self.height})"


def overlaps(a: Rectangle, b: Rectangle) -> bool:
    """Check if two rectangles overlap.

    Comparisons are strict on both axes, so rectangles that only touch
    along an edge or at a corner do not overlap.

    Args:
        a: First rectangle (absolute coordinates)
        b: Second rectangle (absolute coordinates)

    Returns:
        True if the rectangles share interior area

    Examples:
        >>> a = Rectangle(x=0, y=0, width=10, height=10)
        >>> overlaps(a, Rectangle(x=5, y=5, width=10, height=10))
        True
        >>> overlaps(a, Rectangle(x=10, y=0, width=10, height=10))
        False
    """
    return (a.left < b.right and
            a.right > b.left and
            a.top < b.bottom and
            a.bottom > b.top)
