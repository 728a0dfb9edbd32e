"""
Tests for the Player actor.

Tests cover:
- Start position and character
- Tile-by-tile movement clamped to the board
- Frozen sessions rejecting movement
- Level completion check
"""

import random

import pytest

from models import CrossingConfig, InputKey
from games.BugCrossing.game.actor import FrameContext
from games.BugCrossing.game.player import Player
from games.BugCrossing.game.prize import Prize


@pytest.fixture
def cfg():
    return CrossingConfig()


@pytest.fixture
def player(cfg):
    return Player.spawn(cfg)


def context(prizes=(), frozen=False):
    return FrameContext(frozen=frozen, paused=frozen, enemies=(), prizes=tuple(prizes))


# ============================================================================
# Movement Tests
# ============================================================================


class TestPlayerMovement:
    """Tests for Player.handle_input()."""

    def test_start_tile(self, player):
        assert (player.x, player.y) == (202, 405)
        assert player.row == 5
        assert player.data.sprite == "images/char-boy.png"

    @pytest.mark.parametrize("key, expected", [
        (InputKey.LEFT, (101, 405)),
        (InputKey.RIGHT, (303, 405)),
        (InputKey.UP, (202, 322)),
    ])
    def test_single_step(self, player, key, expected):
        assert player.handle_input(key)
        assert (player.x, player.y) == expected

    def test_cannot_leave_bottom(self, player):
        assert not player.handle_input(InputKey.DOWN)
        assert player.y == 405

    def test_cannot_leave_sides(self, player):
        for _ in range(5):
            player.handle_input(InputKey.LEFT)
        assert player.x == 0
        for _ in range(10):
            player.handle_input(InputKey.RIGHT)
        assert player.x == 404

    def test_cannot_leave_top(self, player):
        for _ in range(8):
            player.handle_input(InputKey.UP)
        assert player.y == -10
        assert player.row == 0

    def test_frozen_rejects_movement(self, player):
        assert not player.handle_input(InputKey.UP, frozen=True)
        assert (player.x, player.y) == (202, 405)

    def test_non_movement_key_ignored(self, player):
        assert not player.handle_input(InputKey.A)
        assert (player.x, player.y) == (202, 405)

    def test_set_character(self, player):
        player.set_character("images/char-cat-girl.png")
        assert player.data.sprite == "images/char-cat-girl.png"


# ============================================================================
# Level Completion Tests
# ============================================================================


class TestPlayerLevelCompletion:
    """Tests for Player.update() and has_all_prizes_collected()."""

    def test_no_prizes_counts_as_all_collected(self):
        assert Player.has_all_prizes_collected([])

    def test_visible_prize_blocks_completion(self, cfg):
        prize = Prize.spawn(0, cfg, random.Random(2))
        assert not Player.has_all_prizes_collected([prize])
        prize.collect()
        assert Player.has_all_prizes_collected([prize])

    def test_completion_on_top_row(self, player):
        player.data.set_location(202, -10)
        assert player.update(0.016, context())

    def test_no_completion_below_top_row(self, player):
        assert not player.update(0.016, context())

    def test_no_completion_while_frozen(self, player):
        player.data.set_location(202, -10)
        assert not player.update(0.016, context(frozen=True))

    def test_no_completion_with_prizes_left(self, cfg, player):
        player.data.set_location(202, -10)
        prize = Prize.spawn(0, cfg, random.Random(2))
        assert not player.update(0.016, context([prize]))
