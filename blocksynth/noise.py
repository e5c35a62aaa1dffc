"""Sample-and-hold noise source."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass
class NoiseGenerator:
    """Holds a random value and draws a new one ``frequency`` times a second."""

    sample_rate: int = 44100
    frequency: float = 10.0
    accumulator: float = 0.0
    value: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def next_value(self) -> float:
        """Advance one sample and return the current held value."""
        self.accumulator += self.frequency
        if self.accumulator >= self.sample_rate:
            self.value = 1.0 - 2.0 * self.rng.random()
            self.accumulator = 0.0
        return self.value