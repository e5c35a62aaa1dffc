"""Tables of single-cycle waveforms chosen by playback frequency."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Waveform:
    """One cycle of samples; ``data`` repeats the first sample at the end."""

    top_frequency: float
    data: tuple[float, ...]
    length: int


class WaveTable:
    """An ordered set of waveforms, each usable below its top frequency."""

    def __init__(self) -> None:
        self._waveforms: list[Waveform] = []

    def add_waveform(self, samples: Sequence[float], top_frequency: float) -> Waveform:
        """Append a waveform made from ``samples`` and return it."""
        values = [float(sample) for sample in samples]
        if not values:
            raise ValueError("a waveform needs at least one sample")
        waveform = Waveform(top_frequency, tuple(values + [values[0]]), len(values))
        self._waveforms.append(waveform)
        return waveform

    def get_waveform(self, phase_increment: float) -> Waveform:
        """Return the first waveform whose top frequency exceeds ``phase_increment``."""
        if not self._waveforms:
            raise IndexError("wave table is empty")
        return next(
            (w for w in self._waveforms if phase_increment < w.top_frequency),
            self._waveforms[-1],
        )

    def __len__(self) -> int:
        return len(self._waveforms)

    def __iter__(self) -> Iterator[Waveform]:
        return iter(self._waveforms)