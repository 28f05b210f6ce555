"""Sine-wave bobbing animation for UI elements."""

from __future__ import annotations

import math
from typing import Any, Protocol


class Positioned2D(Protocol):
    """Anything with a settable two-dimensional ``(x, y)`` position."""

    position: tuple[float, float]


class WaveAnimator:
    """Moves a transform up and down along a sine wave around a base height."""

    def __init__(self) -> None:
        self.base_y = 0.0
        self.amplitude = 10.0
        self.frequency = 1.0
        self.time = 0.0

    def setup(self, base_y: float, amplitude: float, frequency: float) -> None:
        self.base_y = base_y
        self.amplitude = amplitude
        self.frequency = frequency

    def update(self, owner: Any, transform: Positioned2D, delta_time: float) -> None:
        """Advance the wave and set the transform's height; x is left alone."""
        self.time += delta_time
        offset_y = math.sin(self.time * self.frequency) * self.amplitude
        x, _ = transform.position
        transform.position = (x, self.base_y + offset_y)