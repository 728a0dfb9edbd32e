"""
Input event model for the Bug Crossing game.

This module defines the KeyEvent Pydantic model that represents one
released key, already translated to the game's input symbols.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from models import InputKey


class KeyEvent(BaseModel):
    """Immutable key release from any source.

    Attributes:
        key: The input symbol, or None if the key has no meaning in the game
        timestamp: Time when the key was released (seconds, monotonic clock)

    Examples:
        >>> event = KeyEvent(key=InputKey.UP, timestamp=12.5)
        >>> print(event)
        KeyEvent(key=up, t=12.500)
        >>> KeyEvent(key=None, timestamp=0.0).key is None
        True
    """
    key: Optional[InputKey]
    timestamp: float

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative.

        Raises:
            ValueError: If timestamp is negative
        """
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        key = self.key.value if self.key is not None else "unknown"
        return f"KeyEvent(key={key}, t={self.timestamp:.3f})"
