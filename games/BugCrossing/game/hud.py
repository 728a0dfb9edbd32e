"""
Board and heads-up display rendering for Bug Crossing.

Draws the row tiles under the entities and the score / lives / level line
plus the countdown and win / loss banners on top of them.
"""

from typing import Optional

import pygame

from arcadekit.resources import ResourceLoader
from models import SessionStatus
from games.BugCrossing import config
from games.BugCrossing.config import Colors, Fonts


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def render_board(screen: pygame.Surface, images: ResourceLoader, session) -> None:
    """Draw the row tiles, top row first.

    Rows whose image is missing are filled with a flat colour.
    """
    board = session.config.board
    for row in range(board.rows):
        url = config.ROW_IMAGE_URLS[min(row, len(config.ROW_IMAGE_URLS) - 1)]
        image = images.get(url)
        for column in range(board.columns):
            x = column * board.tile_width
            y = row * board.row_height
            if image is not None and not images.is_placeholder(url):
                screen.blit(image, (x, y))
            else:
                # Tile art leaves ~50px of transparent headroom above the row
                color = config.ROW_FALLBACK_COLORS.get(url, Colors.DARK_GRAY)
                pygame.draw.rect(
                    screen, color,
                    pygame.Rect(x, y + 50, board.tile_width, board.row_height)
                )


def render_hud(screen: pygame.Surface, session) -> None:
    """Draw score, lives and level across the top of the screen."""
    font = _font(Fonts.HUD_SIZE)
    text = f"Score: {session.score}   Lives: {session.lives}   Level: {session.level}"
    surface = font.render(text, True, Colors.HUD_TEXT, Colors.HUD_BACKGROUND)
    screen.blit(surface, (8, 8))

    if session.show_bounds:
        debug = font.render("DEBUG (enemies frozen)", True, Colors.BLUE, Colors.HUD_BACKGROUND)
        screen.blit(debug, (8, 8 + Fonts.HUD_SIZE))


def render_banner(screen: pygame.Surface, session) -> None:
    """Draw the countdown or the final won / lost banner, if any."""
    message: Optional[str] = None
    color = Colors.BANNER_COUNTDOWN

    if session.status == SessionStatus.WON:
        message, color = "YOU WIN!", Colors.BANNER_WON
    elif session.status == SessionStatus.LOST:
        message, color = "GAME OVER", Colors.BANNER_LOST
    elif session.countdown > 0:
        message = f"Next level in {session.countdown}"

    if message is None:
        return

    width, height = screen.get_size()
    big = _font(Fonts.LARGE)
    surface = big.render(message, True, color)
    rect = surface.get_rect(center=(width // 2, height // 2))

    backdrop = pygame.Surface((rect.width + 40, rect.height + 20), pygame.SRCALPHA)
    backdrop.fill((0, 0, 0, 160))
    screen.blit(backdrop, backdrop.get_rect(center=rect.center))
    screen.blit(surface, rect)

    if session.status != SessionStatus.PLAYING:
        small = _font(Fonts.SMALL)
        hint = small.render("Press R to play again", True, Colors.WHITE)
        screen.blit(hint, hint.get_rect(center=(width // 2, rect.bottom + 30)))
