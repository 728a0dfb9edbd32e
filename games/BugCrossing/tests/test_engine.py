"""
Unit tests for the GameEngine class.

Runs on SDL's dummy video driver with audio muted and an empty assets
directory, so every sprite is a generated placeholder.

Tests cover:
- Initialization and asset loading
- Session creation once assets are ready
- Key releases reaching the session
- Restart and quit keys
- Rendering every state without errors
"""

import pygame
import pytest

from models import CrossingConfig, GameState, SessionStatus
from games.BugCrossing import config
from games.BugCrossing.engine import GameEngine
from games.BugCrossing.input.input_manager import InputManager


@pytest.fixture
def engine(tmp_path):
    engine = GameEngine(seed=11, mute=True, assets_dir=tmp_path)
    pygame.event.clear()
    yield engine
    engine.quit()


class TestGameEngine:
    """Tests for GameEngine initialization and the frame loop pieces."""

    def test_initialization(self, engine):
        assert pygame.get_init()
        assert engine.screen.get_width() == config.SCREEN_WIDTH
        assert engine.screen.get_height() == config.SCREEN_HEIGHT
        assert engine.running
        assert isinstance(engine.input_manager, InputManager)

    def test_session_starts_when_assets_ready(self, engine):
        assert engine.resources.is_ready()
        assert engine.session is not None
        assert engine.state == GameState.PLAYING
        assert engine.session.config.name == "Classic"

    def test_custom_config(self, tmp_path):
        cfg = CrossingConfig(name="Tiny", rules={"starting_lives": 2})
        engine = GameEngine(cfg, mute=True, assets_dir=tmp_path)
        try:
            assert engine.session.lives == 2
        finally:
            engine.quit()

    def test_key_release_moves_player(self, engine):
        pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP))
        engine.handle_events()
        assert engine.session.player.y == 322

    def test_restart_key(self, engine):
        engine.session.score = 500
        engine.session.status = SessionStatus.LOST
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
        engine.handle_events()
        assert engine.session.score == 0
        assert engine.session.status == SessionStatus.PLAYING

    def test_escape_quits(self, engine):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        engine.handle_events()
        assert not engine.running

    def test_quit_event_stops_loop(self, engine):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        engine.run()
        assert not engine.running

    def test_update_advances_session(self, engine):
        enemy = engine.session.enemies[0]
        before = enemy.x
        engine.update(0.01)
        assert enemy.x != before

    @pytest.mark.parametrize("status", [SessionStatus.PLAYING, SessionStatus.WON, SessionStatus.LOST])
    def test_render_every_status(self, engine, status):
        engine.session.status = status
        engine.session.show_bounds = True
        engine.render()

    def test_render_countdown(self, engine):
        engine.session.countdown = 3
        engine.render()
