"""The synth's built-in wave tables: band-limited and LFO shapes."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence
from enum import Enum

from blocksynth.wavetable import WaveTable

LFO_ARRAY_LENGTH = 100
_REFERENCE_RATE = 44100
_NORMALISED_PEAK = 0.999


class WaveTableType(Enum):
    BANDLIMITED_SAWTOOTH = "bandlimited_sawtooth"
    BANDLIMITED_SQUARE = "bandlimited_square"
    BANDLIMITED_TRIANGLE = "bandlimited_triangle"
    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"


def fft(real: Sequence[float], imaginary: Sequence[float]) -> tuple[list[float], list[float]]:
    """Forward radix-2 FFT; returns the real and imaginary parts of the result."""
    length = len(real)
    if len(imaginary) != length:
        raise ValueError("real and imaginary parts differ in length")
    if length < 1 or length & (length - 1):
        raise ValueError("length must be a power of two")

    data = [complex(r, i) for r, i in zip(real, imaginary)]

    j = 0
    for i in range(1, length):
        bit = length >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            data[i], data[j] = data[j], data[i]

    size = 2
    while size <= length:
        half = size // 2
        for offset in range(half):
            twiddle = cmath.exp(complex(0.0, -math.pi * offset / half))
            for i in range(offset, length, size):
                other = data[i + half] * twiddle
                data[i + half] = data[i] - other
                data[i] = data[i] + other
        size *= 2

    return [z.real for z in data], [z.imag for z in data]


def normalize_waveform(samples: Sequence[float]) -> list[float]:
    """Scale ``samples`` so the largest magnitude is just under 1."""
    peak = max((abs(sample) for sample in samples), default=0.0)
    if peak == 0.0:
        raise ValueError("cannot normalise a silent waveform")
    scale = 1.0 / peak * _NORMALISED_PEAK
    return [sample * scale for sample in samples]


def _sine_harmonics(length: int) -> list[float]:
    values = [0.0] * length
    values[1] = -1.0
    return values


def _sawtooth_harmonics(length: int, harmonics: int) -> list[float]:
    values = [0.0] * length
    for number in range(1, min(length // 2, harmonics) + 1):
        values[number] = 1.0 / number
        values[length - number] = -1.0 / number
    return values


def _square_harmonics(length: int, harmonics: int) -> list[float]:
    values = [0.0] * length
    for number in range(1, harmonics + 1):
        amplitude = 1.0 / number if number % 2 else 0.0
        values[number] = -amplitude
        values[length - number] = amplitude
    return values


def _triangle_harmonics(length: int, harmonics: int) -> list[float]:
    values = [0.0] * length
    sign = 1.0
    for number in range(1, harmonics + 1):
        if number % 2:
            sign = -sign
            amplitude = 1.0 / (number * number) * sign
        else:
            amplitude = 0.0
        values[number] = -amplitude
        values[length - number] = amplitude
    return values


class WaveTableBank:
    """Holds one wave table of each type, built by ``load``."""

    def __init__(self, base_frequency: float = 5.0) -> None:
        if base_frequency <= 0:
            raise ValueError("base frequency must be positive")
        self.base_frequency = base_frequency
        self._tables = {table_type: WaveTable() for table_type in WaveTableType}
        self.test_wave = WaveTable()

    def get(self, table_type: WaveTableType) -> WaveTable:
        return self._tables[WaveTableType(table_type)]

    def load(self, sample_rate: int) -> None:
        """Build every table for playback at ``sample_rate``."""
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self._tables = {table_type: WaveTable() for table_type in WaveTableType}
        self.test_wave = WaveTable()
        self._load_bandlimited(sample_rate)
        self._setup_lfo_shapes()
        self.test_wave.add_waveform([0.1, 0.2, 0.3], 1)

    def _load_bandlimited(self, sample_rate: int) -> None:
        # Harmonics up to where the highest one at the base frequency meets
        # the lowest alias an octave up.
        harmonics = int(_REFERENCE_RATE / (3.0 * self.base_frequency) + 0.5)
        if harmonics < 1:
            raise ValueError("base frequency leaves no harmonics")
        table_length = (1 << (harmonics - 1).bit_length()) * 4
        top_frequency = self.base_frequency * 2.0 / sample_rate

        silence = [0.0] * table_length
        _, sine = fft(_sine_harmonics(table_length), silence)
        self._tables[WaveTableType.SINE].add_waveform(normalize_waveform(sine), 1)

        shapes = (
            (WaveTableType.BANDLIMITED_SAWTOOTH, _sawtooth_harmonics),
            (WaveTableType.BANDLIMITED_SQUARE, _square_harmonics),
            (WaveTableType.BANDLIMITED_TRIANGLE, _triangle_harmonics),
        )
        while harmonics >= 1:
            for table_type, fill in shapes:
                _, waveform = fft(fill(table_length, harmonics), silence)
                self._tables[table_type].add_waveform(normalize_waveform(waveform), top_frequency)
            top_frequency *= 2
            harmonics //= 2

    def _setup_lfo_shapes(self) -> None:
        length = LFO_ARRAY_LENGTH
        ramp = [i / (length - 1.0) * 2.0 - 1.0 for i in range(length)]
        square = [1.0 if i < length / 2.0 else -1.0 for i in range(length)]
        triangle = [2.0 * abs(value) - 1.0 for value in ramp]
        self._tables[WaveTableType.SQUARE].add_waveform(square, 1)
        self._tables[WaveTableType.TRIANGLE].add_waveform(triangle, 1)
        self._tables[WaveTableType.SAWTOOTH].add_waveform(ramp, 1)