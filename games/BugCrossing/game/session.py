"""
Game session for Bug Crossing.

The Session owns every piece of mutable game state: the enemy and prize
collections, the player, score, lives, level and the freeze / countdown
timers. Each frame it advances the coarse one-second timer, updates the
entities and resolves collisions. Entities only move themselves; the
session applies every effect that crosses entities.

Level layout:
    level 0  -> 1 enemy, 0 prizes
    level 1  -> 1 enemy, 1 prize
    level N  -> N enemies, N prizes (N >= 2)

Examples:
    >>> session = Session(seed=42)
    >>> session.status
    <SessionStatus.PLAYING: 'playing'>
    >>> len(session.enemies), len(session.prizes)
    (1, 0)
    >>> session.update(1 / 60)
"""

import random
from typing import List, Optional

from arcadekit.game_state import GameState
from arcadekit.logging import get_logger
from models import AudioCue, CrossingConfig, InputKey, SessionStatus
from games.BugCrossing.game.actor import FrameContext
from games.BugCrossing.game.enemy import Enemy
from games.BugCrossing.game.player import Player
from games.BugCrossing.game.prize import Prize
from games.BugCrossing.game.sound_board import SoundBoard

log = get_logger('session')


class Session:
    """All state of one game, from first level to win or loss.

    Attributes:
        config: Game configuration
        sound: Sound board used for audio cues
        score: Points collected from prizes
        level: Current level (starts at 0)
        lives: Remaining lives
        frozen: Player movement and enemy motion are suspended
        countdown: Timer ticks left before the next level starts
        timer: Seconds left until the next timer tick
        status: PLAYING, WON or LOST
        audio_on: Whether the background loop should play
        character_index: Index of the player's character sprite
        show_bounds: Debug overlay showing bounding boxes (also stops enemies)
        enemies: Current enemies, replaced on every reset
        prizes: Current prizes, replaced on every reset
        player: The single player instance
    """

    def __init__(
        self,
        config: Optional[CrossingConfig] = None,
        sound: Optional[SoundBoard] = None,
        seed: Optional[int] = None,
    ):
        """Initialize a new session and lay out level 0.

        Args:
            config: Game configuration (default: CrossingConfig())
            sound: Sound board for audio cues (default: silent)
            seed: Seed for the session's random source (None = unseeded)
        """
        self.config = config if config is not None else CrossingConfig()
        self.sound = sound if sound is not None else SoundBoard(enabled=False)
        self._rng = random.Random(seed)

        self.score = 0
        self.level = 0
        self.lives = self.config.rules.starting_lives
        self.frozen = False
        self.countdown = 0
        self.timer = 0.0
        self.status = SessionStatus.PLAYING
        self.audio_on = True
        self.character_index = 0
        self.show_bounds = False

        self.enemies: List[Enemy] = []
        self.prizes: List[Prize] = []
        self.player: Player = Player.spawn(self.config, self.character_index)

        log.debug("***** GAME START *****")
        self.reset()

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        """Platform game state for the session status."""
        return self.status.to_game_state()

    @property
    def paused(self) -> bool:
        """True while enemies should hold still."""
        return self.frozen or self.show_bounds

    def visible_prize_count(self) -> int:
        """Number of prizes not yet collected this level."""
        return sum(1 for prize in self.prizes if prize.is_visible)

    def has_all_prizes_collected(self) -> bool:
        """True if every prize of this level has been collected."""
        return Player.has_all_prizes_collected(self.prizes)

    def frame_context(self) -> FrameContext:
        """Read-only snapshot handed to the entities for this frame."""
        return FrameContext(
            frozen=self.frozen,
            paused=self.paused,
            enemies=tuple(self.enemies),
            prizes=tuple(self.prizes),
        )

    # ------------------------------------------------------------------
    # Resets
    # ------------------------------------------------------------------

    def _level_counts(self) -> tuple:
        """(enemies, prizes) for the current level."""
        if self.level == 0:
            return 1, 0
        if self.level == 1:
            return 1, 1
        return self.level, self.level

    def reset(self) -> None:
        """Lay out the current level from scratch.

        Enemies, prizes and the player are recreated; score, lives and
        level are kept. Clears the freeze and the countdown.
        """
        num_enemies, num_prizes = self._level_counts()
        log.debug("Game reset: level %d, %d enemies, %d prizes",
                  self.level, num_enemies, num_prizes)

        self.enemies = [
            Enemy.spawn(f"enemy{i}", self.config, self._rng)
            for i in range(num_enemies)
        ]
        self.prizes = [
            Prize.spawn(j, self.config, self._rng)
            for j in range(num_prizes)
        ]
        self.player = Player.spawn(self.config, self.character_index)
        self.frozen = False
        self.countdown = 0

    def restart(self) -> None:
        """Start a new game from level 0 with full lives."""
        log.info("User restart")
        self.level = 0
        self.score = 0
        self.lives = self.config.rules.starting_lives
        self.countdown = 0
        self.frozen = False
        self.status = SessionStatus.PLAYING
        self.timer = 0.0
        self.reset()
        if self.audio_on:
            self.sound.start_background()

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """Advance the session by one frame.

        Does nothing once the game is won or lost.

        Args:
            dt: Time delta in seconds since last frame
        """
        if self.status != SessionStatus.PLAYING:
            return

        self.update_timer(dt)
        if self.status != SessionStatus.PLAYING:
            return

        self.update_entities(dt)
        self.resolve_collisions()

    def update_timer(self, dt: float) -> None:
        """Run down the coarse timer, calling tick() each time it lapses."""
        self.timer -= dt
        if self.timer <= 0:
            self.tick()
            self.timer = self.config.rules.timer_interval

    def tick(self) -> None:
        """Handle one timer tick of the level-transition countdown.

        When the countdown reaches zero the next level begins: level 0
        always advances, later levels advance only when no prize is left
        visible. Reaching the configured final level wins the game;
        otherwise the board is reset for the new level.
        """
        log.trace("timer tick. countdown = %d - frozen = %s", self.countdown, self.frozen)
        if self.countdown == 0:
            return

        self.countdown -= 1
        if self.countdown != 0:
            return

        if self.audio_on:
            self.sound.start_background()

        if self.level == 0:
            self.level += 1
        elif self.visible_prize_count() == 0:
            self.level += 1
        log.info("Level %d", self.level)

        if self.level >= self.config.rules.max_level:
            self.frozen = True
            self.status = SessionStatus.WON
            log.info("Game won with score %d", self.score)

        if self.status == SessionStatus.PLAYING:
            self.reset()

    def update_entities(self, dt: float) -> None:
        """Update every enemy, then the player.

        Starts the level transition when the player reports that the level
        is complete.
        """
        context = self.frame_context()
        for enemy in self.enemies:
            enemy.update(dt, context)

        if self.player.update(dt, context):
            self._begin_level_transition()

    def _begin_level_transition(self) -> None:
        log.info("Level %d complete", self.level)
        self.frozen = True
        self.sound.pause_background()
        self.sound.play(AudioCue.LEVEL_DONE)
        self.countdown = self.config.rules.level_countdown

    def resolve_collisions(self) -> None:
        """Apply the effects of the player touching enemies and prizes.

        Touching an enemy costs a life and resets the level, or ends the
        game when no lives remain. Touching a visible prize adds its value
        to the score and hides it.
        """
        for enemy in self.enemies:
            if enemy.has_collided_with(self.player):
                self._lose_life(enemy)
                return

        for prize in self.prizes:
            if prize.is_visible and prize.has_collided_with(self.player):
                self.sound.play(AudioCue.PRIZE)
                self.score += prize.value
                prize.collect()
                log.debug("Collected %s for %d points (score %d)",
                          prize.name, prize.value, self.score)

    def _lose_life(self, enemy: Enemy) -> None:
        self.sound.play(AudioCue.COLLISION)
        self.lives -= 1
        log.info("Hit by %s, %d lives left", enemy.name, self.lives)

        if self.lives > 0:
            self.reset()
        else:
            self.frozen = True
            self.status = SessionStatus.LOST
            self.sound.pause_background()
            self.sound.play(AudioCue.LOSE_GAME)
            log.info("Game lost with score %d", self.score)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, key: Optional[InputKey]) -> None:
        """Process one key release.

        Movement keys go to the player; ``a`` toggles audio, ``b`` toggles
        the bounding box overlay and ``c`` cycles the character. Anything
        else is logged and ignored. Every key is ignored while frozen.

        Args:
            key: Input symbol, or None for an unrecognized key
        """
        if self.frozen:
            log.debug("key while frozen")
            return

        if key is None:
            log.debug("Unrecognized key ignored")
            return

        if key.is_movement:
            if self.player.handle_input(key, frozen=self.frozen):
                self.sound.play(AudioCue.JUMP)
        elif key == InputKey.A:
            self.toggle_audio()
        elif key == InputKey.B:
            self.toggle_bounds()
        elif key == InputKey.C:
            self.switch_character()

    def toggle_audio(self) -> None:
        """Pause or resume the background loop."""
        if self.audio_on:
            self.sound.pause_background()
            self.audio_on = False
        else:
            self.sound.start_background()
            self.audio_on = True
        log.debug("Audio %s", "on" if self.audio_on else "off")

    def toggle_bounds(self) -> None:
        """Show or hide bounding boxes; enemies hold still while shown."""
        self.show_bounds = not self.show_bounds
        log.debug("Bounding boxes %s", "shown" if self.show_bounds else "hidden")

    def switch_character(self) -> None:
        """Cycle to the next character sprite, wrapping to the first."""
        self.character_index += 1
        if self.character_index > self.config.player.max_character:
            self.character_index = 0
        self.player.set_character(self.config.player.characters[self.character_index])
