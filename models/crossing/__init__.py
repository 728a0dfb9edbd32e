"""
Bug Crossing models package.

This package contains all data models specific to the Bug Crossing game,
including enums, entity data and configuration models.
"""

from .enums import (
    SessionStatus,
    InputKey,
    AudioCue,
    GameState,  # Re-exported from arcadekit.game_state
)

from .models import EntityData

from .game_config import (
    CrossingConfig,
    BoardConfig,
    EnemyConfig,
    PrizeConfig,
    PlayerConfig,
    RulesConfig,
)

__all__ = [
    # Enums
    "SessionStatus",
    "InputKey",
    "AudioCue",
    "GameState",
    # Entity data
    "EntityData",
    # Configuration models
    "CrossingConfig",
    "BoardConfig",
    "EnemyConfig",
    "PrizeConfig",
    "PlayerConfig",
    "RulesConfig",
]
