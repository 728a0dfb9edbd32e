"""
Audio cues for Bug Crossing.

The SoundBoard maps AudioCue values to sounds held by the ResourceLoader
and owns the looping background track. Without a loader, or with audio
disabled, every method is a silent no-op so the session can run headless.

Classes:
    SoundBoard: Plays one-shot cues and the background loop
"""

from typing import Dict, Optional

import pygame

from arcadekit.logging import get_logger
from arcadekit.resources import ResourceLoader
from models import AudioCue
from games.BugCrossing import config

log = get_logger('sound_board')


class SoundBoard:
    """Plays the game's audio cues.

    Attributes:
        enabled: Whether any sound is played at all
        urls: Mapping of cue name to audio resource URL

    Examples:
        >>> board = SoundBoard(enabled=False)
        >>> board.play(AudioCue.JUMP)  # Silent no-op
        >>> board.background_playing
        False
    """

    def __init__(self, loader: Optional[ResourceLoader] = None, enabled: bool = True,
                 urls: Optional[Dict[str, str]] = None):
        """Initialize the sound board.

        Args:
            loader: Resource loader holding the audio; None means silent
            enabled: Whether to play audio (default: True)
            urls: Cue name -> URL mapping (default: config.AUDIO_URLS)
        """
        self._loader = loader
        self.enabled = enabled and config.AUDIO_ENABLED and loader is not None
        self.urls = dict(urls if urls is not None else config.AUDIO_URLS)
        self._background_channel: Optional[pygame.mixer.Channel] = None
        self._background_paused = False

    @property
    def background_playing(self) -> bool:
        """True while the background loop is audible."""
        return bool(self._background_channel is not None
                    and not self._background_paused
                    and self._background_channel.get_busy())

    def _sound(self, cue: AudioCue) -> Optional[pygame.mixer.Sound]:
        if not self.enabled:
            return None
        url = self.urls.get(cue.value)
        if url is None:
            return None
        return self._loader.get_audio(url)

    def play(self, cue: AudioCue) -> None:
        """Play a one-shot cue from the start."""
        sound = self._sound(cue)
        if sound is None:
            return
        log.trace("play %s", cue.value)
        sound.stop()
        sound.set_volume(config.SFX_VOLUME * config.MASTER_VOLUME)
        sound.play()

    def start_background(self) -> None:
        """Start the background loop, or resume it if paused."""
        if self._background_channel is not None and self._background_paused:
            self._background_channel.unpause()
            self._background_paused = False
            log.debug("Background audio resumed")
            return

        if self.background_playing:
            return

        sound = self._sound(AudioCue.BACKGROUND)
        if sound is None:
            return
        sound.set_volume(config.MUSIC_VOLUME * config.MASTER_VOLUME)
        self._background_channel = sound.play(loops=-1)
        self._background_paused = False
        log.debug("Background audio started")

    def pause_background(self) -> None:
        """Pause the background loop, keeping its position."""
        if self._background_channel is None or self._background_paused:
            return
        self._background_channel.pause()
        self._background_paused = True
        log.debug("Background audio paused")

    def stop(self) -> None:
        """Stop all audio."""
        if self._background_channel is not None:
            self._background_channel.stop()
        self._background_channel = None
        self._background_paused = False
