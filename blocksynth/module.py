"""Synth modules: their identity, parameters and grid placement."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from blocksynth.index import Index
from blocksynth.parameters import (
    AudioParameter,
    ChoiceParameter,
    FloatParameter,
    IntParameter,
    ModuleParameter,
    NormalisableRange,
)
from blocksynth.theme import Colour, ModuleColour

if TYPE_CHECKING:
    from blocksynth.modulation import Modulation

LFO = "lfo"
ADSR = "adsr"
OSC = "osc"
FILTER = "filter"
REVERB = "reverb"
DELAY = "delay"
DRIVE = "drive"
MIXER = "mixer"
NOTE_TAB = "note"

ALL_TYPES = (OSC, LFO, ADSR, FILTER, REVERB, DELAY, DRIVE, MIXER)
MODULATOR_TYPES = (LFO, ADSR)
BLOCK_TYPES = (OSC, FILTER, REVERB, DELAY, DRIVE, MIXER)
TAB_TYPES = (NOTE_TAB,)

WAVEFORMS = ("saw", "sine", "square", "triangle", "noise")
MODULATORS = ("lfo", "envelope")
EFFECTS = ("filter", "reverb", "delay", "drive", "mixer")
TABS = ("oscillator", "modulator", "effect")
MAX_MODULES_PER_TYPE = 5

_INITIAL_COLOUR = Colour(237, 237, 237)
_RESET_COLOUR = Colour(204, 201, 184)


@dataclass(frozen=True)
class ModuleId:
    """A module's type and its number among modules of that type."""

    type: str
    number: int


class Category(Enum):
    SOURCE = "source"
    EFFECT = "effect"
    MODULATOR = "modulator"
    TAB = "tab"


@dataclass
class _FloatOptions:
    text_from_value: Callable[[float], str] | None = None
    range: NormalisableRange = field(default_factory=lambda: NormalisableRange(0.0, 1.0, 0.0001))
    value_suffix: str = ""
    skew: float = 1.0
    is_modulatable: bool = True


@dataclass
class _PlainOptions:
    is_modulatable: bool = True


class Module:
    """A named unit with a list of parameters."""

    def __init__(self, module_type: str, number: int, category: Category = Category.SOURCE) -> None:
        self.id = ModuleId(module_type, number)
        self.name = f"{module_type} {number}"
        self.category = category
        self.parameters: list[ModuleParameter] = []
        self.parameter_map: dict[str, ModuleParameter] = {}
        self.colour = ModuleColour(_INITIAL_COLOUR, -1)
        self.is_active = False
        self.is_child = False
        self.length = 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def __lt__(self, other: Module) -> bool:
        return self.id.number < other.id.number

    def is_modulator(self) -> bool:
        return self.category is Category.MODULATOR

    def is_envelope(self) -> bool:
        return self.id.type == ADSR

    def is_oscillator(self) -> bool:
        return self.id.type == OSC

    def reset(self) -> None:
        """Restore default values, drop connections and clear the module's state."""
        for parameter in self.parameters:
            audio = parameter.audio_parameter
            audio.value = audio.default_value
            parameter.connections.clear()
        self.is_active = False
        self.length = 1
        self.colour = ModuleColour(_RESET_COLOUR, -1)

    def remove_connection(self, connection: Modulation) -> None:
        self.parameter(connection.parameter_index).remove_connection(connection)

    def parameter(self, index: int) -> ModuleParameter:
        if index < 0:
            raise IndexError(f"no parameter at index {index}")
        return self.parameters[index]

    def create_float_parameter(self, name: str, default_value: float, **kwargs) -> ModuleParameter:
        """Add a continuous parameter. Options: text_from_value, range, value_suffix, skew, is_modulatable."""
        options = _FloatOptions(**kwargs)
        audio = FloatParameter(f"{self.name} {name}", name, options.range, default_value)
        return self._add_parameter(
            audio, name, options.is_modulatable, options.skew, options.value_suffix, options.text_from_value
        )

    def create_int_parameter(
        self, name: str, minimum: int, maximum: int, default_value: int, **kwargs
    ) -> ModuleParameter:
        """Add an integer parameter. Option: is_modulatable."""
        options = _PlainOptions(**kwargs)
        audio = IntParameter(f"{self.name} {name}", name, minimum, maximum, default_value)
        return self._add_parameter(audio, name, options.is_modulatable)

    def create_choice_parameter(
        self, name: str, choices: Sequence[str], default_index: int, **kwargs
    ) -> ModuleParameter:
        """Add a parameter choosing among ``choices``. Option: is_modulatable."""
        options = _PlainOptions(**kwargs)
        audio = ChoiceParameter(f"{self.name} {name}", name, choices, default_index)
        return self._add_parameter(audio, name, options.is_modulatable)

    def _add_parameter(
        self,
        audio: AudioParameter,
        name: str,
        is_modulatable: bool,
        skew: float = 1.0,
        value_suffix: str = "",
        text_from_value: Callable[[float], str] | None = None,
    ) -> ModuleParameter:
        parameter = ModuleParameter(audio, name, is_modulatable, skew, value_suffix, text_from_value)
        self.parameters.append(parameter)
        self.parameter_map[name] = parameter
        return parameter


class Block(Module):
    """A module that occupies cells of the block grid."""

    def __init__(self, module_type: str, number: int, category: Category = Category.SOURCE) -> None:
        super().__init__(module_type, number, category)
        self.index = Index(-1, -1)

    def reset(self) -> None:
        super().reset()
        self.index = Index(-1, -1)