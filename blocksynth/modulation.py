"""Connections from a modulator to a target module's parameter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blocksynth.parameters import BoolParameter, FloatParameter, NormalisableRange

if TYPE_CHECKING:
    from blocksynth.module import Module

OSC_GAIN_PARAMETER = 5


class Modulation:
    """A modulation routing with its own magnitude and polarity parameters."""

    def __init__(
        self,
        number: int,
        source: Module | None = None,
        target: Module | None = None,
        parameter_index: int = 0,
        magnitude: float = 1.0,
        bipolar: bool = False,
    ) -> None:
        self.id = 0
        self.number = number
        self.name = f"modulation {number}"
        self.source = source
        self.target = target
        self.parameter_id = ""
        self.parameter_index = parameter_index
        magnitude_name = f"{self.name} magnitude"
        bipolar_name = f"{self.name} bipolar"
        self.magnitude_parameter = FloatParameter(
            magnitude_name, magnitude_name, NormalisableRange(-1.0, 1.0, 0.001), magnitude
        )
        self.bipolar_parameter = BoolParameter(bipolar_name, bipolar_name, bipolar)

    def __repr__(self) -> str:
        return f"Modulation({self.name!r}, source={self.source!r}, target={self.target!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Modulation):
            return NotImplemented
        return (
            self.target is other.target
            and self.source is other.source
            and self.parameter_index == other.parameter_index
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def magnitude(self) -> float:
        parameter = self.magnitude_parameter
        return parameter.range.convert_from_0to1(parameter.value)

    @property
    def bipolar(self) -> bool:
        parameter = self.bipolar_parameter
        return parameter.range.convert_from_0to1(parameter.value) >= 0.5

    def reset(self) -> None:
        """Return to full magnitude, bipolar, with no source or target."""
        self.magnitude_parameter.value = 1.0
        self.bipolar_parameter.value = 1.0
        self.source = None
        self.target = None

    def set_magnitude(self, magnitude: float) -> None:
        parameter = self.magnitude_parameter
        parameter.value = parameter.range.convert_to_0to1(magnitude)

    def set_polarity(self, bipolar: bool) -> None:
        parameter = self.bipolar_parameter
        parameter.value = parameter.range.convert_to_0to1(float(bipolar))

    def is_osc_gain_envelope(self) -> bool:
        """Whether an envelope drives an oscillator's gain."""
        if self.source is None or self.target is None:
            return False
        return (
            self.source.is_envelope()
            and self.target.is_oscillator()
            and self.parameter_index == OSC_GAIN_PARAMETER
        )