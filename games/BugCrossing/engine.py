"""
Main game engine for Bug Crossing.

This module provides the core game loop, pygame initialization, asset
loading and frame timing. Gameplay itself lives in the Session; the
engine only feeds it time and key releases and draws what it holds.
"""

from pathlib import Path
from typing import Optional, Union

import pygame

from arcadekit.logging import get_logger
from arcadekit.resources import ResourceLoader
from models import CrossingConfig, GameState
from games.BugCrossing import config
from games.BugCrossing.game import hud
from games.BugCrossing.game.session import Session
from games.BugCrossing.game.sound_board import SoundBoard
from games.BugCrossing.input.input_manager import InputManager
from games.BugCrossing.input.sources.keyboard import KeyboardInputSource

log = get_logger('engine')

RESTART_KEYS = (pygame.K_r, pygame.K_RETURN)


class GameEngine:
    """Main game engine managing the game loop and pygame state.

    The Session is created only once every image and sound has been
    loaded; until then the loop just shows a loading screen.

    Attributes:
        config: Game configuration the session is built from
        screen: Pygame display surface
        clock: Pygame clock for frame timing
        running: Whether the game loop should continue
        resources: Image and sound cache
        input_manager: Input manager collecting key releases
        session: The running game, None while assets are loading

    Examples:
        >>> engine = GameEngine(CrossingConfig(), seed=1)  # doctest: +SKIP
        >>> engine.run()  # doctest: +SKIP
    """

    def __init__(
        self,
        game_config: Optional[CrossingConfig] = None,
        seed: Optional[int] = None,
        mute: bool = False,
        assets_dir: Optional[Union[str, Path]] = None,
    ):
        """Initialize pygame, the display and start loading assets.

        Args:
            game_config: Game configuration (default: CrossingConfig())
            seed: Seed for the session's random source
            mute: Skip audio entirely
            assets_dir: Directory holding images/ and audio/
        """
        self.config = game_config if game_config is not None else CrossingConfig()
        self.seed = seed
        self.mute = mute

        pygame.init()
        if not mute:
            self._init_mixer()

        board = self.config.board
        width = board.columns * board.tile_width
        height = board.rows * board.row_height + (
            config.SCREEN_HEIGHT - config.BOARD_ROWS * config.ROW_HEIGHT
        )
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(f"Bug Crossing - {self.config.name}")

        self.clock = pygame.time.Clock()
        self.running = True

        self.input_manager = InputManager(KeyboardInputSource())
        self.session: Optional[Session] = None

        self.resources = ResourceLoader(
            assets_dir=assets_dir,
            image_size=(board.tile_width, board.tile_height),
        )
        self.resources.load(self._image_urls())
        if not mute:
            self.resources.load_audio(list(config.AUDIO_URLS.values()))
        self.resources.on_ready(self._start_session)

    def _init_mixer(self) -> None:
        """Start the mixer; audio is muted if no device is available."""
        try:
            pygame.mixer.init()
        except pygame.error as e:
            log.warning("Audio unavailable, running muted: %s", e)
            self.mute = True

    def _image_urls(self) -> list:
        urls = list(config.ROW_IMAGE_URLS)
        urls.append(self.config.enemy.sprite)
        urls.extend(self.config.player.characters)
        urls.extend(self.config.prize.sprites)
        # Keep order, drop duplicates
        return list(dict.fromkeys(urls))

    def _start_session(self) -> None:
        """Build the session once all assets are available."""
        sound = SoundBoard(self.resources, enabled=not self.mute)
        self.session = Session(self.config, sound=sound, seed=self.seed)
        self.session.show_bounds = config.SHOW_BOUNDING_BOXES
        if self.session.audio_on:
            sound.start_background()
        log.info("Session started: %s", self.config.name)

    @property
    def state(self) -> Optional[GameState]:
        """Platform game state, None while loading."""
        if self.session is None:
            return None
        return self.session.state

    def handle_events(self) -> None:
        """Process pygame events.

        Handles quit and restart directly and routes every key release
        through the input manager into the session.
        """
        source = self.input_manager.get_source()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                if event.key in RESTART_KEYS and self.session is not None:
                    self.session.restart()
                    self.input_manager.clear_events()
                continue

            if isinstance(source, KeyboardInputSource):
                source.handle_event(event)

        self.input_manager.update(0.0)
        key_events = self.input_manager.get_events()
        if self.session is None:
            return
        for key_event in key_events:
            self.session.handle_input(key_event.key)

    def update(self, dt: float) -> None:
        """Advance the session by dt seconds.

        Args:
            dt: Delta time since last frame in seconds
        """
        if self.session is not None:
            self.session.update(dt)

    def render(self) -> None:
        """Render the current frame.

        Board first, then enemies, the player and the prizes, then the HUD
        and any banner on top.
        """
        self.screen.fill(config.BACKGROUND_COLOR)

        if self.session is None:
            self._render_loading()
        else:
            session = self.session
            hud.render_board(self.screen, self.resources, session)
            for enemy in session.enemies:
                enemy.render(self.screen, self.resources, session.show_bounds)
            session.player.render(self.screen, self.resources, session.show_bounds)
            for prize in session.prizes:
                prize.render(self.screen, self.resources, session.show_bounds)
            hud.render_hud(self.screen, session)
            hud.render_banner(self.screen, session)

        pygame.display.flip()

    def _render_loading(self) -> None:
        font = pygame.font.Font(None, config.Fonts.LARGE)
        text = font.render("Loading...", True, config.Colors.BLACK)
        self.screen.blit(text, text.get_rect(center=self.screen.get_rect().center))

    def run(self) -> None:
        """Run the main game loop until the window is closed.

        1. Handle events
        2. Update game state
        3. Render frame
        4. Maintain target FPS
        """
        while self.running:
            # Calculate delta time in seconds
            dt = self.clock.tick(config.FPS) / 1000.0

            self.handle_events()
            self.update(dt)
            self.render()

    def quit(self) -> None:
        """Stop audio and shut down pygame."""
        if self.session is not None:
            self.session.sound.stop()
        pygame.quit()
