"""Synthesized sound cues for eating, crashing and pausing."""

import logging
import math
from array import array

import pygame

from .config import SAMPLE_RATE

logger = logging.getLogger(__name__)

# name: (start Hz, duration ms, volume, end Hz, attack ms, release ms)
CUES = {
    "eat": (720, 95, 0.26, 520, 6, 70),
    "game_over": (420, 420, 0.2, 110, 16, 220),
    "pause_toggle": (560, 38, 0.16, 500, 4, 24),
}


def _ms_to_samples(ms):
    return int(SAMPLE_RATE * ms / 1000.0)


def chirp_samples(start_hz, duration_ms, volume, end_hz, attack_ms, release_ms):
    """Return 16-bit mono samples for a frequency sweep with a soft envelope."""
    count = max(1, _ms_to_samples(duration_ms))
    peak = int(32767 * max(0.0, min(volume, 1.0)))
    attack = _ms_to_samples(attack_ms)
    release = _ms_to_samples(release_ms)

    samples = array("h")
    phase = 0.0
    for i in range(count):
        freq = start_hz + (end_hz - start_hz) * (i / max(1, count - 1))
        phase += 2.0 * math.pi * freq / SAMPLE_RATE
        gain = 1.0
        if i < attack:
            gain = i / attack
        remaining = count - i
        if release and remaining <= release:
            gain *= remaining / release
        samples.append(int(peak * gain * math.sin(phase)))
    return samples


class SoundCues:
    """Plays named cues; does nothing when sound is off or the mixer is missing."""

    def __init__(self, enabled=True):
        self.sounds = {}
        self.enabled = enabled and self._load()

    def _load(self):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            for name, params in CUES.items():
                self.sounds[name] = pygame.mixer.Sound(buffer=chirp_samples(*params).tobytes())
        except pygame.error as e:
            logger.info("Sound disabled: %s", e)
            self.sounds = {}
            return False
        return True

    def play(self, name):
        if self.enabled and name in self.sounds:
            self.sounds[name].play()
