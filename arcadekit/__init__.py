"""
Arcade kit.

Platform pieces shared by the games in this repository:
- logging: per-module loggers configured from code or the environment
- game_state: Standard GameState enum for platform compatibility
- resources: load-once image/audio cache with a readiness signal
"""

from arcadekit.game_state import GameState

__all__ = ['GameState']
