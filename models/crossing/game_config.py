"""
Pydantic v2 models for Bug Crossing configuration.

These models validate the YAML configuration files that override board
geometry, enemy and prize placement, player movement and the game rules.
Every field defaults to the value in games/BugCrossing/config.py, so an
empty YAML file yields the classic game.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator

from games.BugCrossing import config
from ..primitives import Rectangle


class BoardConfig(BaseModel):
    """
    Board geometry.

    The board is a grid of ``columns`` x ``rows`` tiles. Sprites are drawn
    in ``tile_width`` x ``tile_height`` tiles stepped ``row_height`` apart.
    """
    model_config = {"frozen": True}

    columns: int = Field(default=config.BOARD_COLUMNS, ge=1)
    rows: int = Field(default=config.BOARD_ROWS, ge=2)
    tile_width: int = Field(default=config.TILE_WIDTH, gt=0)
    tile_height: int = Field(default=config.TILE_HEIGHT, gt=0)
    row_height: int = Field(default=config.ROW_HEIGHT, gt=0)

    @property
    def max_x(self) -> int:
        """Left edge of the rightmost column."""
        return self.tile_width * (self.columns - 1)


class EnemyConfig(BaseModel):
    """
    Enemy placement and movement.

    Enemies travel left to right along rows ``row_min``..``row_max`` at a
    whole-number speed drawn from ``speed_low``..``speed_high``.
    """
    model_config = {"frozen": True}

    sprite: str = config.ENEMY_URL
    speed_low: int = Field(default=config.ENEMY_SPEED_LOW, ge=0)
    speed_high: int = Field(default=config.ENEMY_SPEED_HIGH, ge=0)
    row_min: int = Field(default=config.ENEMY_ROW_MIN, ge=0)
    row_max: int = Field(default=config.ENEMY_ROW_MAX, ge=0)
    draw_y_offset: int = config.ENEMY_DRAW_Y_OFFSET
    bounds: Rectangle = Rectangle(
        x=config.ENEMY_BOUND_LEFT_OFFSET,
        y=config.ENEMY_BOUND_TOP_OFFSET,
        width=config.ENEMY_BOUND_WIDTH,
        height=config.ENEMY_BOUND_HEIGHT,
    )

    @model_validator(mode='after')
    def validate_ranges(self) -> 'EnemyConfig':
        """Ensure the speed and row ranges are not empty."""
        if self.speed_low > self.speed_high:
            raise ValueError("speed_low must not exceed speed_high")
        if self.row_min > self.row_max:
            raise ValueError("row_min must not exceed row_max")
        return self


class PrizeConfig(BaseModel):
    """
    Prize placement and value.

    Prize ``n`` of a level (counting from 0) is worth
    ``(n + 1) * value_step`` and uses ``sprites[n % len(sprites)]``.
    """
    model_config = {"frozen": True}

    sprites: List[str] = Field(default_factory=lambda: list(config.PRIZE_URLS), min_length=1)
    row_min: int = Field(default=config.PRIZE_ROW_MIN, ge=0)
    row_max: int = Field(default=config.PRIZE_ROW_MAX, ge=0)
    draw_y_offset: int = config.PRIZE_DRAW_Y_OFFSET
    value_step: int = Field(default=config.PRIZE_VALUE_STEP, ge=0)
    bounds: Rectangle = Rectangle(
        x=config.PRIZE_BOUND_LEFT_OFFSET,
        y=config.PRIZE_BOUND_TOP_OFFSET,
        width=config.PRIZE_BOUND_WIDTH,
        height=config.PRIZE_BOUND_HEIGHT,
    )

    @model_validator(mode='after')
    def validate_rows(self) -> 'PrizeConfig':
        """Ensure the row range is not empty."""
        if self.row_min > self.row_max:
            raise ValueError("row_min must not exceed row_max")
        return self


class PlayerConfig(BaseModel):
    """
    Player start tile, bounding box and selectable characters.
    """
    model_config = {"frozen": True}

    start_column: int = Field(default=config.PLAYER_START_COLUMN, ge=0)
    start_row: int = Field(default=config.PLAYER_START_ROW, ge=0)
    draw_y_offset: int = config.PLAYER_DRAW_Y_OFFSET
    characters: List[str] = Field(default_factory=lambda: list(config.CHARACTER_URLS), min_length=1)
    bounds: Rectangle = Rectangle(
        x=config.PLAYER_BOUND_LEFT_OFFSET,
        y=config.PLAYER_BOUND_TOP_OFFSET,
        width=config.PLAYER_BOUND_WIDTH,
        height=config.PLAYER_BOUND_HEIGHT,
    )

    @property
    def max_character(self) -> int:
        """Index of the last selectable character."""
        return len(self.characters) - 1


class RulesConfig(BaseModel):
    """
    Game rules: lives, level progression and countdown timing.
    """
    model_config = {"frozen": True}

    starting_lives: int = Field(default=config.STARTING_LIVES, ge=1)
    max_level: int = Field(
        default=config.MAX_LEVEL,
        ge=1,
        description="Level number that wins the game when reached"
    )
    timer_interval: float = Field(default=config.TIMER_INTERVAL, gt=0.0)
    level_countdown: int = Field(
        default=config.LEVEL_COUNTDOWN,
        ge=1,
        description="Timer ticks between reaching the water and the next level"
    )


class CrossingConfig(BaseModel):
    """
    Complete game configuration.

    Examples:
        >>> cfg = CrossingConfig()
        >>> cfg.rules.starting_lives
        5
        >>> cfg.board.max_x
        404
        >>> CrossingConfig(rules={"starting_lives": 3}).rules.starting_lives
        3
    """
    model_config = {"frozen": True}

    name: str = "Classic"
    description: str = ""
    board: BoardConfig = Field(default_factory=BoardConfig)
    enemy: EnemyConfig = Field(default_factory=EnemyConfig)
    prize: PrizeConfig = Field(default_factory=PrizeConfig)
    player: PlayerConfig = Field(default_factory=PlayerConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)

    @model_validator(mode='after')
    def validate_fits_board(self) -> 'CrossingConfig':
        """Ensure every configured row and column lies on the board."""
        last_row = self.board.rows - 1
        if self.enemy.row_max > last_row:
            raise ValueError(f"enemy.row_max {self.enemy.row_max} is off the board (last row {last_row})")
        if self.prize.row_max > last_row:
            raise ValueError(f"prize.row_max {self.prize.row_max} is off the board (last row {last_row})")
        if self.player.start_row > last_row:
            raise ValueError(f"player.start_row {self.player.start_row} is off the board (last row {last_row})")
        if self.player.start_column >= self.board.columns:
            raise ValueError(
                f"player.start_column {self.player.start_column} is off the board "
                f"({self.board.columns} columns)"
            )
        return self

    # Pixel helpers used by the entities

    def row_to_y(self, row: int, draw_y_offset: int) -> int:
        """Tile origin y of a sprite drawn on the given row."""
        return row * self.board.row_height - draw_y_offset

    def column_to_x(self, column: int) -> int:
        """Tile origin x of the given column."""
        return column * self.board.tile_width
