"""Construction of modules from their type names."""

from __future__ import annotations

from blocksynth.module import ADSR, DELAY, DRIVE, FILTER, LFO, MIXER, OSC, REVERB, Block, Module
from blocksynth.modules import (
    DelayModule,
    DriveModule,
    EnvelopeModule,
    FilterModule,
    LFOModule,
    MixerModule,
    OscillatorModule,
    ReverbModule,
)

_BLOCKS = {
    OSC: OscillatorModule,
    FILTER: FilterModule,
    REVERB: ReverbModule,
    DELAY: DelayModule,
    DRIVE: DriveModule,
    MIXER: MixerModule,
}

_MODULATORS = {
    LFO: LFOModule,
    ADSR: EnvelopeModule,
}


def create_block(module_type: str, number: int) -> Block:
    """Create a grid block of ``module_type``."""
    try:
        cls = _BLOCKS[module_type]
    except KeyError:
        raise ValueError(f"unknown block type {module_type!r}") from None
    return cls(number)


def create_modulator(module_type: str, number: int) -> Module:
    """Create a modulator of ``module_type``."""
    try:
        cls = _MODULATORS[module_type]
    except KeyError:
        raise ValueError(f"unknown modulator type {module_type!r}") from None
    return cls(number)