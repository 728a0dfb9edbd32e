"""
Resource loader for images and audio.

Loads each asset URL once and caches it. Every requested URL is pending
until it has been loaded; once nothing is pending the ``ready`` future is
resolved and the callbacks registered with ``on_ready()`` run.

Missing or unreadable files never stop the game: images fall back to a
flat placeholder surface and sounds to a short generated tone, so the game
can run from a checkout without any asset files.

Examples:
    >>> loader = ResourceLoader(assets_dir="assets")
    >>> loader.load(["images/enemy-bug.png", "images/char-boy.png"])
    >>> loader.load_audio("audio/jump.mp3")
    >>> loader.on_ready(lambda: print("ready"))
    ready
    >>> loader.get("images/enemy-bug.png")  # doctest: +SKIP
    <Surface(101x171x32 SW)>
"""

import hashlib
from concurrent.futures import Future
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
import pygame

from arcadekit.logging import get_logger

log = get_logger('resources')

UrlOrUrls = Union[str, Iterable[str]]

_PENDING = object()

PLACEHOLDER_SIZE = (101, 171)
TONE_SAMPLE_RATE = 22050


def _as_url_list(url_or_urls: UrlOrUrls) -> list:
    if isinstance(url_or_urls, str):
        return [url_or_urls]
    return list(url_or_urls)


def _placeholder_color(url: str) -> Tuple[int, int, int]:
    """Stable colour derived from the URL, so placeholders are distinguishable."""
    digest = hashlib.md5(url.encode('utf-8')).digest()
    return (64 + digest[0] % 160, 64 + digest[1] % 160, 64 + digest[2] % 160)


def make_placeholder_image(url: str, size: Tuple[int, int] = PLACEHOLDER_SIZE) -> pygame.Surface:
    """Create a transparent tile with a coloured block in its lower half."""
    surface = pygame.Surface(size, pygame.SRCALPHA)
    width, height = size
    block = pygame.Rect(width // 8, height // 3, width - width // 4, height // 2)
    pygame.draw.rect(surface, _placeholder_color(url), block, border_radius=8)
    return surface


def make_placeholder_tone(url: str, duration: float = 0.12) -> Optional[pygame.mixer.Sound]:
    """Generate a short sine tone whose pitch is derived from the URL.

    Returns:
        pygame.mixer.Sound, or None if the mixer is not initialized
    """
    mixer_settings = pygame.mixer.get_init()
    if not mixer_settings:
        return None

    _, _, channels = mixer_settings
    digest = hashlib.md5(url.encode('utf-8')).digest()
    frequency = 330.0 + (digest[0] % 24) * 20.0
    num_samples = int(TONE_SAMPLE_RATE * duration)

    t = np.linspace(0, duration, num_samples, False)
    wave = np.sin(2.0 * np.pi * frequency * t)

    # Fade out to avoid a click at the end
    envelope = np.linspace(1.0, 0.0, num_samples)
    wave = (wave * envelope * 32767 * 0.25).astype(np.int16)

    if channels > 1:
        wave = np.column_stack([wave] * channels)
    return pygame.sndarray.make_sound(wave)


class ResourceLoader:
    """Load-once cache of images and sounds with a readiness signal.

    Attributes:
        assets_dir: Directory asset URLs are resolved against
        ready: Future resolved once every requested asset has loaded
    """

    def __init__(self, assets_dir: Optional[Union[str, Path]] = None,
                 image_size: Tuple[int, int] = PLACEHOLDER_SIZE):
        self.assets_dir = Path(assets_dir) if assets_dir is not None else Path.cwd()
        self._image_size = image_size
        self._images: Dict[str, object] = {}
        self._audio: Dict[str, object] = {}
        self._placeholders: set = set()
        self.ready: Future = Future()
        self._callbacks: List[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self, url_or_urls: UrlOrUrls) -> None:
        """Load one image URL or a list of them."""
        urls = _as_url_list(url_or_urls)
        self._begin(urls, self._images)
        for url in urls:
            if self._images.get(url) is _PENDING:
                self._images[url] = self._load_image(url)
        self._check_ready()

    def load_audio(self, url_or_urls: UrlOrUrls) -> None:
        """Load one audio URL or a list of them."""
        urls = _as_url_list(url_or_urls)
        self._begin(urls, self._audio)
        for url in urls:
            if self._audio.get(url) is _PENDING:
                self._audio[url] = self._load_sound(url)
        self._check_ready()

    def get(self, url: str) -> Optional[pygame.Surface]:
        """Get a loaded image, or None if it was never loaded."""
        image = self._images.get(url)
        return None if image is _PENDING else image

    def get_audio(self, url: str) -> Optional[pygame.mixer.Sound]:
        """Get a loaded sound, or None if it was never loaded or audio is off."""
        sound = self._audio.get(url)
        return None if sound is _PENDING else sound

    def on_ready(self, callback: Callable[[], None]) -> None:
        """Run callback once every requested asset has loaded.

        If the loader is already ready the callback runs immediately.
        Callbacks run on the caller's stack, so an exception raised by a
        callback propagates out of on_ready(), load() or load_audio().
        """
        if self.ready.done():
            callback()
        else:
            self._callbacks.append(callback)

    def is_placeholder(self, url: str) -> bool:
        """True if the image for url was generated instead of loaded."""
        return url in self._placeholders

    def is_ready(self) -> bool:
        """True when no requested image or sound is still pending."""
        return all(
            value is not _PENDING
            for cache in (self._images, self._audio)
            for value in cache.values()
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _begin(self, urls: list, cache: Dict[str, object]) -> None:
        """Mark new URLs pending; a resolved future is replaced for the new batch."""
        new_urls = [url for url in urls if url not in cache]
        if not new_urls:
            return
        if self.ready.done():
            self.ready = Future()
        for url in new_urls:
            cache[url] = _PENDING

    def _check_ready(self) -> None:
        if self.is_ready() and not self.ready.done():
            log.debug("All %d images and %d sounds loaded",
                      len(self._images), len(self._audio))
            self.ready.set_result(True)
            callbacks, self._callbacks = self._callbacks, []
            for callback in callbacks:
                callback()

    def _placeholder_image(self, url: str) -> pygame.Surface:
        self._placeholders.add(url)
        return make_placeholder_image(url, self._image_size)

    def _load_image(self, url: str) -> pygame.Surface:
        path = self.assets_dir / url
        if not path.exists():
            log.debug("Image %s not found, using placeholder", url)
            return self._placeholder_image(url)
        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            log.warning("Could not load image %s: %s", url, e)
            return self._placeholder_image(url)
        # convert_alpha only if display initialized
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def _load_sound(self, url: str) -> Optional[pygame.mixer.Sound]:
        if not pygame.mixer.get_init():
            log.debug("Mixer not initialized, %s will be silent", url)
            return None
        path = self.assets_dir / url
        if not path.exists():
            log.debug("Sound %s not found, using generated tone", url)
            return make_placeholder_tone(url)
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as e:
            log.warning("Could not load sound %s: %s", url, e)
            return make_placeholder_tone(url)
