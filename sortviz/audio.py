"""Tone generation for the bar being touched by the sort."""

from __future__ import annotations

import math

from sortviz.config import MAX_FREQ, MIN_FREQ

__all__ = ["tone_for", "SineGenerator"]

_MIN_GAIN = 0.2
_BASE_GAIN = 1.5


def tone_for(value: int, list_size: int) -> tuple[float, float]:
    """Return ``(frequency, gain)`` for a bar of height ``value``.

    Higher bars give higher tones. Low tones are louder, high tones softer,
    with the gain never below 0.2.
    """
    if list_size < 2:
        raise ValueError("list_size must be at least 2")
    t = value / (list_size - 1)
    t = t * t * t
    gain = max(_BASE_GAIN - t, _MIN_GAIN)
    freq = MIN_FREQ + t * (MAX_FREQ - MIN_FREQ)
    return freq, gain


class SineGenerator:
    """Produces successive chunks of a sine wave with a wrapping sample counter."""

    def __init__(self, sample_rate: int = 8000, wrap: int = 500) -> None:
        if sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        if wrap <= 0:
            raise ValueError("wrap must be positive")
        self.sample_rate = sample_rate
        self.wrap = wrap
        self.position = 0

    def samples(self, freq: float, gain: float, count: int = 512) -> list[float]:
        """Return the next ``count`` samples of a sine at ``freq`` scaled by ``gain``."""
        if count < 0:
            raise ValueError("count must not be negative")
        chunk = []
        for _ in range(count):
            phase = self.position * freq / self.sample_rate
            chunk.append(math.sin(phase * 2 * math.pi) * gain)
            self.position += 1
        # Wrapping keeps the phase small and avoids floating-point drift.
        self.position %= self.wrap
        return chunk