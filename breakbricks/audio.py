"""
Audio for Break the Bricks.

The SoundBoard owns every clip the game plays. Clips are generated
procedurally with numpy so the game needs no audio files on disk.

One-shot effects are fire-and-forget: ``play()`` starts the clip on any free
mixer channel and drops the returned channel, so a playing effect can be
neither awaited nor cancelled. Background music is the only tracked channel,
because it must pause, rewind and loop.

Classes:
    SoundBoard: Generates, plays and controls all game audio
"""

from typing import Dict, List, Optional

import numpy as np
import pygame

from . import config
from .logging import get_logger

log = get_logger('audio')

# Effect names used by the game
PADDLE_HIT = 'paddle_hit'
BRICK_BREAK = 'brick_break'
LIFE_LOST = 'life_lost'
GAME_LOST = 'game_lost'
GAME_WON = 'game_won'

# Note frequencies (Hz)
_C4, _E4, _G4, _A4 = 261.63, 329.63, 392.00, 440.00
_C5, _E5, _G5 = 523.25, 659.25, 783.99


class SoundBoard:
    """Plays sound effects and the looping background music.

    Safe to use with audio disabled or unavailable: every method becomes a
    no-op and the game runs silently.

    Attributes:
        sounds: Dictionary of effect name -> sound (None if generation failed)
        music: Background music clip, or None
        audio_enabled: Whether audio is enabled

    Examples:
        >>> board = SoundBoard(audio_enabled=False)
        >>> board.play(BRICK_BREAK)   # silently ignored
        >>> board.music_playing
        False
    """

    def __init__(self, audio_enabled: bool = True, volume: float = config.MASTER_VOLUME):
        """Initialize the SoundBoard and, if enabled, generate all clips.

        Args:
            audio_enabled: Whether to enable audio (default: True)
            volume: Volume for all clips, 0.0 - 1.0
        """
        self.audio_enabled = audio_enabled
        self.volume = volume
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self.music: Optional[pygame.mixer.Sound] = None

        self._music_channel: Optional[pygame.mixer.Channel] = None
        self._music_playing = False
        self._music_paused = False

        if self.audio_enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        """Initialize pygame mixer and generate every clip.

        If the mixer cannot be initialized, audio is disabled for the
        rest of the session.
        """
        try:
            pygame.mixer.init(frequency=config.SAMPLE_RATE, size=-16, channels=2, buffer=512)

            self.sounds[PADDLE_HIT] = self._make_sweep(_G4, _C5, 0.08, 0.35)
            self.sounds[BRICK_BREAK] = self._make_sweep(_C5, _G5, 0.12, 0.3)
            self.sounds[LIFE_LOST] = self._make_sweep(_G4, _C4, 0.35, 0.3)
            self.sounds[GAME_LOST] = self._make_sequence([_E4, _C4, _A4 / 2], 0.9, 0.3)
            self.sounds[GAME_WON] = self._make_sequence([_C5, _E5, _G5, _C5 * 2], 0.9, 0.3)
            self.music = self._make_sequence(
                [_C4, _E4, _G4, _E4, _A4, _G4, _E4, _G4], 4.0, 0.12
            )

            for sound in list(self.sounds.values()) + [self.music]:
                if sound is not None:
                    sound.set_volume(self.volume)

        except Exception as e:
            log.warning("Audio initialization failed: %s", e)
            self.audio_enabled = False
            self.sounds = {}
            self.music = None

    @staticmethod
    def _to_sound(wave: np.ndarray, amplitude: float) -> pygame.mixer.Sound:
        """Scale a [-1, 1] mono wave to 16-bit stereo and wrap it as a Sound."""
        samples = (wave * 32767 * amplitude).astype(np.int16)
        stereo = np.column_stack((samples, samples))
        return pygame.sndarray.make_sound(stereo)

    @staticmethod
    def _envelope(num_samples: int, fade: float = 0.1) -> np.ndarray:
        """Linear fade in/out envelope to avoid clicks."""
        envelope = np.ones(num_samples)
        fade_samples = max(1, int(num_samples * fade))
        envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
        envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
        return envelope

    def _make_sweep(
        self,
        frequency_start: float,
        frequency_end: float,
        duration: float,
        amplitude: float,
    ) -> Optional[pygame.mixer.Sound]:
        """Generate a tone sweeping from one frequency to another.

        Returns:
            pygame.mixer.Sound or None if generation fails
        """
        try:
            sample_rate = config.SAMPLE_RATE
            num_samples = int(sample_rate * duration)

            frequencies = np.linspace(frequency_start, frequency_end, num_samples)
            phase = np.cumsum(2.0 * np.pi * frequencies / sample_rate)
            wave = np.sin(phase) * self._envelope(num_samples)

            return self._to_sound(wave, amplitude)
        except Exception as e:
            log.warning("Could not generate sweep %.0f-%.0f Hz: %s", frequency_start, frequency_end, e)
            return None

    def _make_sequence(
        self,
        frequencies: List[float],
        duration: float,
        amplitude: float,
    ) -> Optional[pygame.mixer.Sound]:
        """Generate notes played one after another, equally spaced.

        Returns:
            pygame.mixer.Sound or None if generation fails
        """
        try:
            sample_rate = config.SAMPLE_RATE
            samples_per_note = int(sample_rate * duration) // len(frequencies)

            notes = []
            for freq in frequencies:
                t = np.linspace(0, samples_per_note / sample_rate, samples_per_note, False)
                note = np.sin(2.0 * np.pi * freq * t) * self._envelope(samples_per_note, 0.05)
                notes.append(note)

            return self._to_sound(np.concatenate(notes), amplitude)
        except Exception as e:
            log.warning("Could not generate note sequence: %s", e)
            return None

    # --- One-shot effects ---

    def play(self, name: str) -> None:
        """Start a one-shot effect and detach from it.

        Safe to call even if audio is disabled or the clip failed to generate.

        Args:
            name: Effect name (PADDLE_HIT, BRICK_BREAK, ...)
        """
        if not self.audio_enabled:
            return

        sound = self.sounds.get(name)
        if sound is None:
            return

        try:
            sound.play()
        except Exception as e:
            log.warning("Could not play %s sound: %s", name, e)

    # --- Background music ---

    @property
    def music_playing(self) -> bool:
        """True while music is playing (not paused, not stopped)."""
        return self._music_playing

    def play_music(self, loop: bool = True) -> None:
        """Start or resume the background music.

        Resumes from the paused position if paused; does nothing if the
        music is already playing.

        Args:
            loop: Repeat the music indefinitely
        """
        if self._music_playing:
            return
        self._music_playing = True

        if self._music_paused and self._music_channel is not None:
            self._music_paused = False
            self._music_channel.unpause()
            return

        self._music_paused = False
        if self.audio_enabled and self.music is not None:
            self._music_channel = self.music.play(loops=-1 if loop else 0)

    def pause_music(self) -> None:
        """Pause the background music, keeping its position."""
        if not self._music_playing:
            return
        self._music_playing = False
        self._music_paused = True
        if self._music_channel is not None:
            self._music_channel.pause()

    def rewind_music(self) -> None:
        """Move the music back to the beginning."""
        self._music_paused = False
        if self._music_channel is not None:
            self._music_channel.stop()
            self._music_channel = None
        if self._music_playing:
            self._music_playing = False
            self.play_music()

    def stop_music(self) -> None:
        """Pause and rewind the background music."""
        self.pause_music()
        self.rewind_music()
