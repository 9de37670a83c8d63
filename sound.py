"""Synthesised sound cues.

The mixer is only opened by ``resume()``, which the game calls when the
player starts a game. Until then, and whenever the audio device cannot be
opened, every cue is a silent no-op.
"""
import logging
from typing import Dict, Iterable

import numpy as np
import pygame
from pygame import mixer

from settings import MASTER_VOLUME, SAMPLE_RATE
from simulation import EventKind, GameEvent

logger = logging.getLogger(__name__)

MAX_AMPLITUDE = 32767


def ramp(start: float, end: float, num_samples: int, kind: str = "exponential") -> np.ndarray:
    """Values moving from start to end over num_samples, linearly or exponentially."""
    t = np.arange(num_samples) / max(num_samples, 1)
    if kind == "linear":
        return start + (end - start) * t
    return start * (end / start) ** t


def oscillator(frequencies: np.ndarray, wave: str, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Render a waveform in [-1, 1] whose pitch follows frequencies sample by sample."""
    phase = 2.0 * np.pi * np.cumsum(frequencies) / sample_rate
    if wave == "square":
        return np.where(np.sin(phase) >= 0, 1.0, -1.0)
    if wave == "sawtooth":
        return 2.0 * ((phase / (2.0 * np.pi)) % 1.0) - 1.0
    return np.sin(phase)


def tone(duration: float, wave: str, freq_start: float, freq_end: float, gain_start: float,
         freq_ramp: str = "exponential", gain_ramp: str = "exponential",
         sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    num_samples = int(duration * sample_rate)
    frequencies = ramp(freq_start, freq_end, num_samples, freq_ramp)
    gain = ramp(gain_start, 0.01, num_samples, gain_ramp)
    return oscillator(frequencies, wave, sample_rate) * gain


def to_pcm(samples: np.ndarray, channels: int = 2, volume: float = MASTER_VOLUME) -> bytes:
    """Convert float samples to interleaved signed 16-bit PCM."""
    pcm = np.clip(samples * volume * MAX_AMPLITUDE, -32768, 32767).astype(np.int16)
    return np.repeat(pcm, channels).tobytes()


CUES = {
    "shoot": dict(duration=0.1, wave="square", freq_start=880.0, freq_end=110.0, gain_start=0.5),
    "thrust": dict(duration=0.1, wave="sawtooth", freq_start=100.0, freq_end=50.0, gain_start=0.3,
                   freq_ramp="linear", gain_ramp="linear"),
    "explosion_large": dict(duration=0.4, wave="sawtooth", freq_start=100.0, freq_end=10.0, gain_start=1.0),
    "explosion_small": dict(duration=0.2, wave="sawtooth", freq_start=100.0, freq_end=10.0, gain_start=1.0),
}


class SoundEffects:
    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.sounds: Dict[str, mixer.Sound] = {}

    @property
    def ready(self) -> bool:
        return bool(self.sounds)

    def resume(self) -> None:
        if self.ready or not self.enabled:
            return
        try:
            if not mixer.get_init():
                mixer.init(SAMPLE_RATE, -16, 2, 1024)
            self._create_sounds()
        except pygame.error as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            self.enabled = False
            self.sounds = {}

    def _create_sounds(self) -> None:
        sample_rate, _, channels = mixer.get_init()
        for name, params in CUES.items():
            samples = tone(sample_rate=sample_rate, **params)
            self.sounds[name] = mixer.Sound(buffer=to_pcm(samples, channels))

    def play(self, sound_name: str) -> None:
        sound = self.sounds.get(sound_name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.warning("Could not play %s: %s", sound_name, exc)

    def shoot(self) -> None:
        self.play("shoot")

    def thrust(self) -> None:
        self.play("thrust")

    def explosion(self, size: str = "small") -> None:
        self.play(f"explosion_{size}")

    def handle_events(self, events: Iterable[GameEvent]) -> None:
        for event in events:
            if event.kind is EventKind.SHOT:
                self.shoot()
            elif event.kind is EventKind.THRUST:
                self.thrust()
            elif event.kind is EventKind.EXPLOSION:
                self.explosion(event.size or "small")

    def stop_all(self) -> None:
        if mixer.get_init():
            mixer.stop()
