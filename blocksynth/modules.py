"""The concrete synth modules: sources, effects and modulators."""

from __future__ import annotations

import math
from enum import IntEnum

from blocksynth.module import (
    ADSR,
    DELAY,
    DRIVE,
    FILTER,
    LFO,
    MIXER,
    OSC,
    REVERB,
    WAVEFORMS,
    Block,
    Category,
    Module,
)
from blocksynth.note_helper import DURATION_STRINGS
from blocksynth.parameters import NormalisableRange

SYNC_CHOICES_DELAY = ("ms", "tempo", "dotted", "triplets")
SYNC_CHOICES_LFO = ("hz", "tempo", "dotted", "triplets")
FILTER_TYPES = ("LP4", "LP2", "HP2", "HP4", "BP2", "BP4")
DRIVE_TYPES = ("soft", "hard")
LFO_MODES = ("sync", "retrigger")


def _jmap(value: float, source_start: float, source_end: float, target_start: float, target_end: float) -> float:
    return target_start + (target_end - target_start) * (value - source_start) / (source_end - source_start)


def _duration_text(mapped: float) -> str:
    return DURATION_STRINGS[int(mapped)]


def _percentage_text(value: float) -> str:
    scaled = value * 100 * 100
    rounded = math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 100
    return f"{rounded:.2f}"


class OscillatorModule(Block):
    """A wavetable oscillator."""

    class Parameters(IntEnum):
        WAVE = 0
        TRANSPOSE = 1
        TUNE = 2
        UNISON = 3
        SPREAD = 4
        GAIN = 5
        PAN = 6

    def __init__(self, number: int, wave_index: int = 0) -> None:
        super().__init__(OSC, number, Category.SOURCE)
        self.wave_index = wave_index
        self.create_choice_parameter("wave", WAVEFORMS, wave_index)
        self.create_int_parameter("transpose", -48, 48, 0)
        self.create_float_parameter(
            "tune", 0.0, text_from_value=_percentage_text, range=NormalisableRange(-1.0, 1.0, 0.0001)
        )
        self.create_int_parameter("unison", 1, 8, 1)
        self.create_float_parameter("spread", 0.005, text_from_value=_percentage_text)
        self.create_float_parameter("gain", 0.5, text_from_value=_percentage_text)
        self.create_float_parameter(
            "pan", 0.0, text_from_value=_percentage_text, range=NormalisableRange(-1.0, 1.0, 0.0001)
        )


class FilterModule(Block):
    """A multimode filter."""

    class Parameters(IntEnum):
        TYPE = 0
        FREQUENCY = 1
        Q = 2

    def __init__(self, number: int) -> None:
        super().__init__(FILTER, number, Category.EFFECT)
        self.create_choice_parameter("type", FILTER_TYPES, 0)
        self.create_float_parameter(
            "cutoff",
            440.0,
            range=NormalisableRange(20.0, 20480.0, 0.01),
            value_suffix="hz",
            skew=0.35,
        )
        self.create_float_parameter("q", 0.0)


class ReverbModule(Block):
    """A reverb effect."""

    class Parameters(IntEnum):
        SIZE = 0
        DAMPING = 1
        WIDTH = 2
        MIX = 3

    def __init__(self, number: int) -> None:
        super().__init__(REVERB, number, Category.EFFECT)
        self.create_float_parameter("size", 0.5)
        self.create_float_parameter("damping", 0.5)
        self.create_float_parameter("width", 0.5)
        self.create_float_parameter("mix", 0.3)


class DelayModule(Block):
    """A delay line, free-running in milliseconds or synced to tempo."""

    class Parameters(IntEnum):
        FEEDBACK = 0
        SYNC = 1
        TIME = 2
        MIX = 3

    def __init__(self, number: int) -> None:
        super().__init__(DELAY, number, Category.EFFECT)
        self.create_float_parameter("feedback", 0.3)
        sync = self.create_choice_parameter("sync", SYNC_CHOICES_DELAY, 0)
        time_range = NormalisableRange(1.0, 5000.0, 0.01)

        def time_text(value: float) -> str:
            if sync.audio_parameter.value == 0:
                return f"{value:g}ms"
            return _duration_text(_jmap(value, time_range.start, time_range.end, 9.0, 0.0))

        self.create_float_parameter("time", 0.0, text_from_value=time_text, range=time_range, skew=0.75)
        self.create_float_parameter("mix", 0.4)


class DriveModule(Block):
    """A soft or hard clipping distortion."""

    class Parameters(IntEnum):
        TYPE = 0
        DRIVE = 1

    def __init__(self, number: int) -> None:
        super().__init__(DRIVE, number, Category.EFFECT)
        self.create_choice_parameter("type", DRIVE_TYPES, 0)
        self.create_float_parameter("drive", 0.0, range=NormalisableRange(0.0, 1.0, 0.01))


class MixerModule(Block):
    """Gain and stereo panning."""

    class Parameters(IntEnum):
        GAIN = 0
        PAN = 1

    def __init__(self, number: int) -> None:
        super().__init__(MIXER, number, Category.EFFECT)
        self.create_float_parameter("gain", 0.0)
        self.create_float_parameter("pan", 0.0, range=NormalisableRange(-1.0, 1.0, 0.0001))


class LFOModule(Module):
    """A low-frequency oscillator, free-running in hertz or synced to tempo."""

    class Parameters(IntEnum):
        WAVEFORM = 0
        SYNCED = 1
        RATE = 2
        MODE = 3

    def __init__(self, number: int) -> None:
        super().__init__(LFO, number, Category.MODULATOR)
        self.create_choice_parameter("wave", WAVEFORMS, 1)
        sync = self.create_choice_parameter("sync", SYNC_CHOICES_LFO, 0)
        rate_range = NormalisableRange(0.001, 100.0, 0.0001)

        def rate_text(value: float) -> str:
            if sync.audio_parameter.value == 0:
                return f"{value:.2f}"
            return _duration_text(_jmap(value, rate_range.start, rate_range.end, 0.0, 9.0))

        self.create_float_parameter(
            "rate", 1.0, text_from_value=rate_text, range=rate_range, value_suffix="hz", skew=0.2
        )
        self.create_choice_parameter("mode", LFO_MODES, 0)


class EnvelopeModule(Module):
    """An attack-decay-sustain-release envelope."""

    class Parameters(IntEnum):
        ATTACK = 0
        DECAY = 1
        SUSTAIN = 2
        RELEASE = 3

    def __init__(self, number: int) -> None:
        super().__init__(ADSR, number, Category.MODULATOR)

        def seconds() -> NormalisableRange:
            return NormalisableRange(0.0, 20.0, 0.0001)

        self.create_float_parameter("attack", 0.0, range=seconds(), skew=0.3)
        self.create_float_parameter("decay", 0.0, range=seconds(), skew=0.3)
        self.create_float_parameter("sustain", 1.0, skew=0.3)
        self.create_float_parameter("release", 1.0, range=seconds(), skew=0.3)