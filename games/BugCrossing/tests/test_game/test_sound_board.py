"""
Tests for the SoundBoard.

pygame sounds are replaced by mocks so no audio device is needed.
"""

from unittest.mock import Mock

import pytest

from models import AudioCue
from games.BugCrossing import config
from games.BugCrossing.game.sound_board import SoundBoard


@pytest.fixture
def sounds():
    """One mock sound per cue URL."""
    return {url: Mock(name=cue) for cue, url in config.AUDIO_URLS.items()}


@pytest.fixture
def loader(sounds):
    mock_loader = Mock()
    mock_loader.get_audio.side_effect = sounds.get
    return mock_loader


@pytest.fixture
def board(loader):
    return SoundBoard(loader)


def sound_for(sounds, cue):
    return sounds[config.AUDIO_URLS[cue.value]]


class TestSoundBoard:
    """Tests for one-shot cues and the background loop."""

    def test_without_loader_is_silent(self):
        board = SoundBoard()
        assert not board.enabled
        board.play(AudioCue.JUMP)
        board.start_background()
        board.pause_background()
        board.stop()
        assert not board.background_playing

    def test_disabled_board_plays_nothing(self, loader, sounds):
        board = SoundBoard(loader, enabled=False)
        board.play(AudioCue.PRIZE)
        sound_for(sounds, AudioCue.PRIZE).play.assert_not_called()

    def test_play_restarts_cue(self, board, sounds):
        board.play(AudioCue.JUMP)
        jump = sound_for(sounds, AudioCue.JUMP)
        jump.stop.assert_called_once()
        jump.play.assert_called_once_with()

    def test_missing_sound_is_skipped(self, loader):
        loader.get_audio.side_effect = None
        loader.get_audio.return_value = None
        board = SoundBoard(loader)
        board.play(AudioCue.COLLISION)

    def test_background_loops(self, board, sounds):
        board.start_background()
        background = sound_for(sounds, AudioCue.BACKGROUND)
        background.play.assert_called_once_with(loops=-1)
        assert board.background_playing

    def test_pause_and_resume_background(self, board, sounds):
        board.start_background()
        channel = sound_for(sounds, AudioCue.BACKGROUND).play.return_value

        board.pause_background()
        channel.pause.assert_called_once()
        assert not board.background_playing

        board.start_background()
        channel.unpause.assert_called_once()
        assert board.background_playing
        assert sound_for(sounds, AudioCue.BACKGROUND).play.call_count == 1

    def test_start_twice_does_not_restart(self, board, sounds):
        board.start_background()
        board.start_background()
        assert sound_for(sounds, AudioCue.BACKGROUND).play.call_count == 1

    def test_stop(self, board, sounds):
        board.start_background()
        channel = sound_for(sounds, AudioCue.BACKGROUND).play.return_value
        board.stop()
        channel.stop.assert_called_once()
        assert not board.background_playing
