"""Tempo-synced note durations."""

from __future__ import annotations

from enum import IntEnum

DURATION_STRINGS = (
    "8",
    "4",
    "2",
    "1",
    "1/2",
    "1/4",
    "1/8",
    "1/16",
    "1/32",
    "1/64",
)

_BAR = 240.0


class Duration(IntEnum):
    """Musical durations from eight bars down to a sixty-fourth note."""

    EIGHT_BARS = 0
    FOUR_BARS = 1
    TWO_BARS = 2
    ONE_BAR = 3
    HALF = 4
    QUARTER = 5
    EIGHTH = 6
    SIXTEENTH = 7
    THIRTY_SECOND = 8
    SIXTY_FOURTH = 9

    @property
    def label(self) -> str:
        """Display text for this duration."""
        return DURATION_STRINGS[self]


def index_to_hertz(duration: Duration | int, bpm: float) -> float:
    """Return the frequency in hertz of one ``duration`` at tempo ``bpm``."""
    duration = Duration(duration)
    period = _BAR * 2.0 ** (Duration.ONE_BAR - duration)
    return bpm / period