# pong_audio.py
import logging

import numpy as np
import pygame

from pong_sim import EventKind
from pong_world import Side

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# (freq Hz, duration s, waveform, gain) per sound event
TONES = {
    (EventKind.WALL_BOUNCE, None): (900, 0.03, "triangle", 0.02),
    (EventKind.PADDLE_HIT, Side.LEFT): (1600, 0.04, "sine", 0.04),
    (EventKind.PADDLE_HIT, Side.RIGHT): (1200, 0.04, "sine", 0.04),
    (EventKind.SCORE, Side.RIGHT): (220, 0.12, "sawtooth", 0.06),
    (EventKind.SCORE, Side.LEFT): (440, 0.12, "sawtooth", 0.06),
}


def synth_tone(freq, duration, wave="sine", gain=0.03, sample_rate=SAMPLE_RATE):
    """Return a stereo int16 beep with an exponential fade-out."""
    n = int(sample_rate * duration)
    t = np.arange(n, dtype=np.float64) / sample_rate
    phase = (freq * t) % 1.0
    if wave == "sine":
        val = np.sin(2 * np.pi * phase)
    elif wave == "triangle":
        val = 4 * np.abs(phase - 0.5) - 1
    elif wave == "sawtooth":
        val = 2 * phase - 1
    elif wave == "square":
        val = np.where(phase < 0.5, 1.0, -1.0)
    else:
        raise ValueError(f"unknown waveform: {wave!r}")
    # ramp down to ~1e-4 of the start level by the end of the beep
    env = np.exp(np.log(1e-4) * t / duration) if n else t
    mono = (val * env * gain * 32767).astype(np.int16)
    return np.column_stack((mono, mono))


class SoundBank:
    """Procedural beeps for game events; silent if the mixer is unavailable."""

    def __init__(self):
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            self.enabled = True
        except pygame.error as e:
            logger.warning("Sound init failed: %s", e)
            self.enabled = False
            return

        self.sounds = {}
        for key, (freq, duration, wave, gain) in TONES.items():
            samples = synth_tone(freq, duration, wave, gain)
            self.sounds[key] = pygame.mixer.Sound(buffer=samples.tobytes())

    def play(self, event):
        if not self.enabled:
            return
        key = (event.kind, None if event.kind is EventKind.WALL_BOUNCE else event.side)
        sound = self.sounds.get(key)
        if sound is not None:
            sound.play()
