"""Automatable parameters and the value ranges they move in."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class NormalisableRange:
    """A range of plain values that maps to and from the unit interval."""

    def __init__(self, start: float, end: float, interval: float = 0.0, skew: float = 1.0) -> None:
        if end <= start:
            raise ValueError("range end must be greater than its start")
        if interval < 0:
            raise ValueError("interval must not be negative")
        if skew <= 0:
            raise ValueError("skew must be positive")
        self.start = float(start)
        self.end = float(end)
        self.interval = float(interval)
        self.skew = float(skew)

    def __repr__(self) -> str:
        return (
            f"NormalisableRange({self.start}, {self.end}, "
            f"interval={self.interval}, skew={self.skew})"
        )

    def convert_to_0to1(self, value: float) -> float:
        """Map a plain value to a proportion between 0 and 1."""
        proportion = _clamp((value - self.start) / (self.end - self.start), 0.0, 1.0)
        if self.skew == 1.0:
            return proportion
        return proportion ** self.skew

    def convert_from_0to1(self, proportion: float) -> float:
        """Map a proportion between 0 and 1 to a plain value."""
        proportion = _clamp(proportion, 0.0, 1.0)
        if self.skew != 1.0 and proportion > 0.0:
            proportion = math.exp(math.log(proportion) / self.skew)
        return self.start + (self.end - self.start) * proportion

    def snap(self, value: float) -> float:
        """Round ``value`` to the nearest step of the interval, inside the range."""
        if self.interval > 0:
            value = self.start + self.interval * math.floor((value - self.start) / self.interval + 0.5)
        return _clamp(value, self.start, self.end)


class AudioParameter:
    """A host-facing parameter whose ``value`` is normalised to 0..1."""

    def __init__(self, parameter_id: str, name: str, value_range: NormalisableRange, default: float) -> None:
        self.parameter_id = parameter_id
        self.name = name
        self.range = value_range
        self._default = self._legalise(default)
        self._plain = self._default

    def _legalise(self, plain: float) -> Any:
        return _clamp(float(plain), self.range.start, self.range.end)

    @property
    def value(self) -> float:
        """The current value as a proportion between 0 and 1."""
        return self.range.convert_to_0to1(float(self._plain))

    @value.setter
    def value(self, proportion: float) -> None:
        self._plain = self._legalise(self.range.convert_from_0to1(proportion))

    @property
    def default_value(self) -> float:
        """The default value as a proportion between 0 and 1."""
        return self.range.convert_to_0to1(float(self._default))

    @property
    def plain_value(self) -> Any:
        """The current value in the parameter's own units."""
        return self._plain


class FloatParameter(AudioParameter):
    """A continuous parameter."""


class IntParameter(AudioParameter):
    """An integer parameter between ``minimum`` and ``maximum``."""

    def __init__(self, parameter_id: str, name: str, minimum: int, maximum: int, default: int) -> None:
        super().__init__(parameter_id, name, NormalisableRange(minimum, maximum, 1.0), default)

    def _legalise(self, plain: float) -> int:
        return int(math.floor(super()._legalise(plain) + 0.5))


class ChoiceParameter(IntParameter):
    """A parameter choosing one of a list of named options."""

    def __init__(self, parameter_id: str, name: str, choices: Sequence[str], default_index: int) -> None:
        self.choices = tuple(choices)
        if len(self.choices) < 2:
            raise ValueError("a choice parameter needs at least two choices")
        super().__init__(parameter_id, name, 0, len(self.choices) - 1, default_index)

    @property
    def index(self) -> int:
        return self._plain

    @property
    def current_choice(self) -> str:
        return self.choices[self._plain]


class BoolParameter(AudioParameter):
    """An on/off parameter."""

    def __init__(self, parameter_id: str, name: str, default: bool) -> None:
        super().__init__(parameter_id, name, NormalisableRange(0.0, 1.0, 1.0), float(default))

    def _legalise(self, plain: float) -> bool:
        return plain >= 0.5


@dataclass(eq=False)
class ModuleParameter:
    """A module's parameter together with the modulations aimed at it."""

    audio_parameter: AudioParameter
    id: str
    is_modulatable: bool = False
    skew: float = 1.0
    value_suffix: str = ""
    text_from_value: Callable[[float], str] | None = None
    value_from_text: Callable[[str], float] | None = None
    connections: list[Any] = field(default_factory=list)

    def normalized_value(self) -> float:
        """The current value in the parameter's own units."""
        parameter = self.audio_parameter
        return parameter.range.convert_from_0to1(parameter.value)

    def set_value(self, value: float) -> None:
        """Set the value from a plain number in the parameter's units."""
        parameter = self.audio_parameter
        parameter.value = parameter.range.convert_to_0to1(value)

    def text_for_value(self, value: float) -> str:
        """Display text for ``value``."""
        if self.text_from_value is not None:
            return self.text_from_value(value)
        return f"{value:g}{self.value_suffix}"

    def index_of_connection(self, connection: Any) -> int:
        """Position of ``connection`` among this parameter's connections."""
        for position, existing in enumerate(self.connections):
            if existing is connection:
                return position
        raise ValueError("connection is not attached to this parameter")

    def remove_connection(self, connection: Any) -> None:
        """Detach ``connection``; nothing happens if it is not attached."""
        self.connections = [item for item in self.connections if item is not connection]