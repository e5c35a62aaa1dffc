"""Random integers that avoid repeating the previous pick."""

from __future__ import annotations

import random


class UniqueRandom:
    """Draws integers from a range, keeping the last pick out of the next draw."""

    def __init__(
        self,
        minimum: int,
        maximum: int,
        cooldown: int,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.set_size(minimum, maximum, cooldown)

    def set_size(self, minimum: int, maximum: int, cooldown: int) -> None:
        """Reset the pool to the integers from ``minimum`` to ``maximum``."""
        if cooldown < 0:
            raise ValueError("cooldown must not be negative")
        size = maximum - minimum + 1
        if size < 1:
            raise ValueError("maximum must not be below minimum")
        border = size - 1 - cooldown
        if border < 1:
            raise ValueError("range is too small for the requested cooldown")
        self._numbers = list(range(minimum, maximum + 1))
        self._cooldown = cooldown
        self._border = border

    def next(self) -> int:
        """Return the next value."""
        index = self._rng.randrange(self._border)
        slot = self._border
        value = self._numbers[index]
        self._numbers[index] = self._numbers[slot]
        self._numbers[slot] = value
        return value

    def __iter__(self) -> UniqueRandom:
        return self

    def __next__(self) -> int:
        return self.next()