"""
Configuration file for Bug Crossing game.

Contains all game constants: board geometry, entity offsets, speeds, asset
URLs, colors and gameplay parameters. The pydantic CrossingConfig model uses
these values as its defaults.
"""

# Board Geometry
TILE_WIDTH = 101  # Every sprite sits in a transparent 101x171 tile
TILE_HEIGHT = 171
ROW_HEIGHT = 83  # Vertical step between board rows
BOARD_COLUMNS = 5
BOARD_ROWS = 6

# Screen and Display Settings
SCREEN_WIDTH = TILE_WIDTH * BOARD_COLUMNS  # 505
SCREEN_HEIGHT = 606
FPS = 60  # Target frame rate

# Rows drawn top to bottom
ROW_IMAGE_URLS = [
    "images/water-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/grass-block.png",
    "images/grass-block.png",
]

# Enemy Settings
ENEMY_URL = "images/enemy-bug.png"
ENEMY_DRAW_Y_OFFSET = 18
ENEMY_ROW_MIN = 1  # Enemies patrol the stone rows
ENEMY_ROW_MAX = 3
ENEMY_SPEED_LOW = 150  # Pixels per second
ENEMY_SPEED_HIGH = 200
ENEMY_BOUND_TOP_OFFSET = 77
ENEMY_BOUND_BOTTOM_OFFSET = 29
ENEMY_BOUND_LEFT_OFFSET = 1
ENEMY_BOUND_RIGHT_OFFSET = 1
ENEMY_BOUND_WIDTH = TILE_WIDTH - ENEMY_BOUND_LEFT_OFFSET - ENEMY_BOUND_RIGHT_OFFSET
ENEMY_BOUND_HEIGHT = TILE_HEIGHT - ENEMY_BOUND_TOP_OFFSET - ENEMY_BOUND_BOTTOM_OFFSET

# Player Settings
PLAYER_START_COLUMN = 2
PLAYER_START_ROW = 5
PLAYER_DRAW_Y_OFFSET = 10
PLAYER_BOUND_TOP_OFFSET = 65
PLAYER_BOUND_BOTTOM_OFFSET = 31
PLAYER_BOUND_LEFT_OFFSET = 17
PLAYER_BOUND_RIGHT_OFFSET = 16
PLAYER_BOUND_WIDTH = TILE_WIDTH - PLAYER_BOUND_LEFT_OFFSET - PLAYER_BOUND_RIGHT_OFFSET
PLAYER_BOUND_HEIGHT = TILE_HEIGHT - PLAYER_BOUND_TOP_OFFSET - PLAYER_BOUND_BOTTOM_OFFSET

CHARACTER_URLS = [
    "images/char-boy.png",
    "images/char-cat-girl.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
]
MAX_CHAR_NUM = len(CHARACTER_URLS) - 1

# Prize Settings
PRIZE_URLS = [
    "images/Gem-Blue.png",
    "images/Gem-Green.png",
    "images/Gem-Orange.png",
]
PRIZE_DRAW_Y_OFFSET = 10
PRIZE_ROW_MIN = 1
PRIZE_ROW_MAX = 3
PRIZE_BOUND_LEFT_OFFSET = 0
PRIZE_BOUND_TOP_OFFSET = 60
PRIZE_BOUND_WIDTH = TILE_WIDTH
PRIZE_BOUND_HEIGHT = ROW_HEIGHT
PRIZE_VALUE_STEP = 100  # Prize n is worth (n + 1) * 100

# Rules
STARTING_LIVES = 5
MAX_LEVEL = 4  # Reaching this level wins the game
TIMER_INTERVAL = 1.0  # Seconds per countdown tick
LEVEL_COUNTDOWN = 5  # Ticks between reaching the water and the next level

# Audio Settings
AUDIO_URLS = {
    "background": "audio/background.mp3",
    "jump": "audio/jump.mp3",
    "collision": "audio/collision.mp3",
    "prize": "audio/getprize.mp3",
    "level_done": "audio/leveldone.mp3",
    "lose_game": "audio/losegame.mp3",
}
AUDIO_ENABLED = True
MASTER_VOLUME = 0.7  # 0.0 to 1.0
SFX_VOLUME = 0.8
MUSIC_VOLUME = 0.5

# Colors (RGB tuples)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (200, 40, 40)
GREEN = (40, 180, 60)
BLUE = (0, 0, 255)
YELLOW = (255, 215, 0)
DARK_GRAY = (40, 40, 40)

BACKGROUND_COLOR = WHITE
ROW_FALLBACK_COLORS = {
    "images/water-block.png": (66, 135, 245),
    "images/stone-block.png": (150, 150, 150),
    "images/grass-block.png": (80, 170, 70),
}


class Colors:
    """Color constants for easy access in code."""
    BLACK = BLACK
    WHITE = WHITE
    RED = RED
    GREEN = GREEN
    BLUE = BLUE
    YELLOW = YELLOW
    DARK_GRAY = DARK_GRAY
    BACKGROUND = BACKGROUND_COLOR
    BOUNDING_BOX = BLUE
    HUD_TEXT = BLACK
    HUD_BACKGROUND = WHITE
    BANNER_WON = GREEN
    BANNER_LOST = RED
    BANNER_COUNTDOWN = YELLOW


# UI Settings
FONT_SIZE_SMALL = 24
FONT_SIZE_LARGE = 48
FONT_SIZE_HUGE = 72


class Fonts:
    """Font size constants for easy access in code."""
    SMALL = FONT_SIZE_SMALL
    LARGE = FONT_SIZE_LARGE
    HUGE = FONT_SIZE_HUGE
    HUD_SIZE = FONT_SIZE_SMALL


# Debug Settings
SHOW_BOUNDING_BOXES = False  # Initial state of the "b" overlay
