"""
Tests for the Bug Crossing data models.

Tests cover:
- Rectangle validation, edges and translation
- The overlap test (symmetry, edge contact, containment)
- EntityData positioning and collision
- CrossingConfig defaults, overrides and validation
- SessionStatus / InputKey enums
"""

import pytest
from pydantic import ValidationError

from models import (
    Rectangle,
    overlaps,
    EntityData,
    CrossingConfig,
    SessionStatus,
    InputKey,
    GameState,
)


# ============================================================================
# Rectangle Tests
# ============================================================================


class TestRectangle:
    """Test suite for the Rectangle model."""

    def test_edges(self):
        rect = Rectangle(x=10, y=20, width=30, height=40)
        assert rect.left == 10
        assert rect.right == 40
        assert rect.top == 20
        assert rect.bottom == 60

    def test_zero_size_allowed(self):
        rect = Rectangle(x=0, y=0, width=0, height=0)
        assert rect.right == 0

    def test_negative_width_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Rectangle(x=0, y=0, width=-1, height=10)
        assert "non-negative" in str(exc_info.value)

    def test_negative_height_rejected(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=10, height=-5)

    def test_is_frozen(self):
        rect = Rectangle(x=0, y=0, width=10, height=10)
        with pytest.raises(ValidationError):
            rect.x = 5

    def test_translated_truncates_to_pixels(self):
        rect = Rectangle(x=1, y=77, width=99, height=65).translated(100.9, 231.5)
        assert rect.x == 101
        assert rect.y == 308
        assert rect.width == 99
        assert rect.height == 65


# ============================================================================
# Overlap Tests
# ============================================================================


class TestOverlaps:
    """Test suite for the axis-aligned overlap test."""

    def test_partial_overlap(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        b = Rectangle(x=5, y=5, width=10, height=10)
        assert overlaps(a, b)

    def test_symmetric(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        b = Rectangle(x=9, y=3, width=4, height=4)
        c = Rectangle(x=50, y=50, width=4, height=4)
        assert overlaps(a, b) == overlaps(b, a)
        assert overlaps(a, c) == overlaps(c, a)

    def test_self_overlap_with_area(self):
        a = Rectangle(x=3, y=4, width=5, height=6)
        assert overlaps(a, a)

    def test_edge_contact_is_not_overlap(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        right = Rectangle(x=10, y=0, width=10, height=10)
        below = Rectangle(x=0, y=10, width=10, height=10)
        corner = Rectangle(x=10, y=10, width=10, height=10)
        assert not overlaps(a, right)
        assert not overlaps(a, below)
        assert not overlaps(a, corner)

    def test_containment(self):
        outer = Rectangle(x=0, y=0, width=100, height=100)
        inner = Rectangle(x=40, y=40, width=5, height=5)
        assert overlaps(outer, inner)
        assert overlaps(inner, outer)

    def test_separated(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        b = Rectangle(x=200, y=0, width=10, height=10)
        assert not overlaps(a, b)

    def test_method_matches_function(self):
        a = Rectangle(x=0, y=0, width=10, height=10)
        b = Rectangle(x=5, y=5, width=10, height=10)
        assert a.overlaps(b) == overlaps(a, b)


# ============================================================================
# EntityData Tests
# ============================================================================


class TestEntityData:
    """Test suite for the EntityData model."""

    def make_player_data(self, x=202.0, y=405.0):
        return EntityData(
            name="player",
            x=x, y=y,
            bounds=Rectangle(x=17, y=65, width=68, height=75),
            sprite="images/char-boy.png",
        )

    def test_absolute_bounds(self):
        box = self.make_player_data().absolute_bounds()
        assert (box.x, box.y, box.width, box.height) == (219, 470, 68, 75)

    def test_set_location(self):
        data = self.make_player_data()
        data.set_location(101.0, 322.0)
        assert (data.x, data.y) == (101.0, 322.0)

    def test_set_bounds(self):
        data = self.make_player_data()
        data.set_bounds(0, 60, 101, 83)
        assert data.bounds == Rectangle(x=0, y=60, width=101, height=83)

    def test_default_bounds_never_collide(self):
        a = EntityData(name="a", x=0, y=0)
        b = EntityData(name="b", x=0, y=0)
        assert not a.has_collided_with(b)

    def test_collision_on_same_tile(self):
        player = self.make_player_data()
        enemy = EntityData(
            name="enemy0",
            x=202.0, y=397.0,
            bounds=Rectangle(x=1, y=77, width=99, height=65),
        )
        assert player.has_collided_with(enemy)
        assert enemy.has_collided_with(player)

    def test_no_collision_on_adjacent_column(self):
        player = self.make_player_data()
        enemy = EntityData(
            name="enemy0",
            x=303.0, y=397.0,
            bounds=Rectangle(x=1, y=77, width=99, height=65),
        )
        assert not player.has_collided_with(enemy)


# ============================================================================
# CrossingConfig Tests
# ============================================================================


class TestCrossingConfig:
    """Test suite for the configuration models."""

    def test_defaults(self):
        cfg = CrossingConfig()
        assert cfg.name == "Classic"
        assert cfg.board.columns == 5
        assert cfg.board.rows == 6
        assert cfg.board.max_x == 404
        assert cfg.rules.starting_lives == 5
        assert cfg.rules.max_level == 4
        assert cfg.rules.level_countdown == 5
        assert cfg.player.max_character == 3

    def test_default_offsets(self):
        cfg = CrossingConfig()
        assert cfg.enemy.bounds == Rectangle(x=1, y=77, width=99, height=65)
        assert cfg.player.bounds == Rectangle(x=17, y=65, width=68, height=75)
        assert cfg.prize.bounds == Rectangle(x=0, y=60, width=101, height=83)

    def test_pixel_helpers(self):
        cfg = CrossingConfig()
        assert cfg.column_to_x(2) == 202
        assert cfg.row_to_y(5, cfg.player.draw_y_offset) == 405
        assert cfg.row_to_y(1, cfg.enemy.draw_y_offset) == 65

    def test_partial_override(self):
        cfg = CrossingConfig(rules={"starting_lives": 2}, enemy={"speed_low": 10, "speed_high": 20})
        assert cfg.rules.starting_lives == 2
        assert cfg.rules.max_level == 4
        assert cfg.enemy.speed_high == 20

    def test_empty_speed_range_rejected(self):
        with pytest.raises(ValidationError):
            CrossingConfig(enemy={"speed_low": 300, "speed_high": 200})

    def test_rows_off_board_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CrossingConfig(enemy={"row_max": 9})
        assert "off the board" in str(exc_info.value)

    def test_start_column_off_board_rejected(self):
        with pytest.raises(ValidationError):
            CrossingConfig(player={"start_column": 5})

    def test_zero_lives_rejected(self):
        with pytest.raises(ValidationError):
            CrossingConfig(rules={"starting_lives": 0})


# ============================================================================
# Enum Tests
# ============================================================================


class TestEnums:
    """Test suite for the game enums."""

    def test_status_maps_to_game_state(self):
        assert SessionStatus.PLAYING.to_game_state() == GameState.PLAYING
        assert SessionStatus.WON.to_game_state() == GameState.WON
        assert SessionStatus.LOST.to_game_state() == GameState.GAME_OVER

    def test_movement_keys(self):
        movement = {key for key in InputKey if key.is_movement}
        assert movement == {InputKey.LEFT, InputKey.UP, InputKey.RIGHT, InputKey.DOWN}
