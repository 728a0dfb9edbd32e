"""
Unified models library for the arcade games.

This package provides all Pydantic data models used across the system:
- Primitives: Basic geometric types (Rectangle) and the overlap test
- Crossing: Game-specific models for Bug Crossing

Usage:
    >>> from models import Rectangle, overlaps
    >>> from models.crossing import EntityData, CrossingConfig
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Rectangle,
    overlaps,
)

# ============================================================================
# Bug Crossing models
# ============================================================================
from .crossing import (
    SessionStatus,
    InputKey,
    AudioCue,
    GameState,
    EntityData,
    CrossingConfig,
    BoardConfig,
    EnemyConfig,
    PrizeConfig,
    PlayerConfig,
    RulesConfig,
)

# Top-level exports - most commonly used models
__all__ = [
    # Primitives
    "Rectangle",
    "overlaps",
    # Bug Crossing
    "SessionStatus",
    "InputKey",
    "AudioCue",
    "GameState",
    "EntityData",
    "CrossingConfig",
    "BoardConfig",
    "EnemyConfig",
    "PrizeConfig",
    "PlayerConfig",
    "RulesConfig",
]
