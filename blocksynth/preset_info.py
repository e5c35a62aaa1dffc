"""Plain snapshots of a patch, independent of the live modules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from blocksynth.module import Block, Module, ModuleId
from blocksynth.modulation import Modulation


@dataclass(kw_only=True)
class ModuleInfo:
    """A module's identity and its parameter values, each normalised to 0..1."""

    id: ModuleId
    parameters: dict[str, float] = field(default_factory=dict)


@dataclass(kw_only=True)
class BlockInfo(ModuleInfo):
    length: int = 1
    index: tuple[int, int] = (-1, -1)


@dataclass(kw_only=True)
class ModulatorInfo(ModuleInfo):
    colour: int = -1


@dataclass(kw_only=True)
class ModulationInfo:
    source: str
    target: str
    parameter: str
    magnitude: float
    bipolar: bool
    number: int


def _parameter_values(module: Module) -> dict[str, float]:
    return {parameter.id: parameter.audio_parameter.value for parameter in module.parameters}


@dataclass
class PresetInfo:
    """A named patch: its blocks, modulators and modulations."""

    name: str = ""
    blocks: list[BlockInfo] = field(default_factory=list)
    modulators: list[ModulatorInfo] = field(default_factory=list)
    modulations: list[ModulationInfo] = field(default_factory=list)

    @staticmethod
    def create(
        name: str,
        blocks: Iterable[Block],
        modulators: Iterable[Module],
        modulations: Iterable[Modulation],
    ) -> PresetInfo:
        """Take a snapshot of live modules; child blocks are left out."""
        info = PresetInfo(name=name)
        for block in blocks:
            if block.is_child:
                continue
            info.blocks.append(
                BlockInfo(
                    id=block.id,
                    parameters=_parameter_values(block),
                    length=block.length,
                    index=(block.index.row, block.index.column),
                )
            )
        for modulator in modulators:
            info.modulators.append(
                ModulatorInfo(
                    id=modulator.id,
                    parameters=_parameter_values(modulator),
                    colour=modulator.colour.id,
                )
            )
        for modulation in modulations:
            if modulation.source is None or modulation.target is None:
                raise ValueError(f"{modulation.name} has no source or target")
            info.modulations.append(
                ModulationInfo(
                    source=modulation.source.name,
                    target=modulation.target.name,
                    parameter=modulation.target.parameter(modulation.parameter_index).id,
                    magnitude=modulation.magnitude_parameter.value,
                    bipolar=bool(modulation.bipolar_parameter.value),
                    number=modulation.number,
                )
            )
        return info