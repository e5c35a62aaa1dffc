"""The store of every module and modulation the synth can use."""

from __future__ import annotations

from typing import Protocol

from blocksynth.container import ModuleContainer
from blocksynth.factory import create_block, create_modulator
from blocksynth.module import BLOCK_TYPES, MODULATOR_TYPES, Block, Module
from blocksynth.modulation import Modulation
from blocksynth.theme import ModuleColour

MODULATION_COUNT = 40


class ColourSource(Protocol):
    """Hands out module colours by id and takes them back."""

    def get(self, colour_id: int) -> ModuleColour: ...

    def retire(self, colour_id: int) -> None: ...


class ModulePool:
    """Pre-built blocks, modulators and modulations, lent out and returned."""

    def __init__(self, colours: ColourSource | None = None) -> None:
        self.colours = colours
        self.blocks: ModuleContainer[Block] = ModuleContainer()
        self.modulators: ModuleContainer[Module] = ModuleContainer()
        self.blocks.spawn(BLOCK_TYPES, create_block)
        self.modulators.spawn(MODULATOR_TYPES, create_modulator)
        self.connections = [Modulation(number) for number in range(1, MODULATION_COUNT + 1)]
        self.all_modules: list[Module] = [*self.blocks.all_modules, *self.modulators.all_modules]

    def get_block(self, module_type: str, number: int = -1) -> Block | None:
        """Take a free block; None when none of that type is free."""
        return self.blocks.get(module_type, number)

    def get_modulator(self, module_type: str, number: int, colour_id: int) -> Module | None:
        """Take a free modulator and give it the colour with ``colour_id``."""
        modulator = self.modulators.get(module_type, number)
        if modulator is not None:
            if self.colours is not None:
                modulator.colour = self.colours.get(colour_id)
            else:
                modulator.colour = ModuleColour(modulator.colour.colour, colour_id)
        return modulator

    def get_modulation(self, number: int = -1) -> Modulation:
        """Take the free modulation with ``number``, else the first free one."""
        if not self.connections:
            raise LookupError("no free modulation left")
        for position, modulation in enumerate(self.connections):
            if modulation.number == number:
                return self.connections.pop(position)
        return self.connections.pop(0)

    def retire_block(self, block: Block) -> None:
        self.blocks.retire(block)

    def retire_modulator(self, modulator: Module) -> None:
        """Return the modulator's colour and the modulator itself."""
        if self.colours is not None:
            self.colours.retire(modulator.colour.id)
        self.modulators.retire(modulator)

    def retire_modulation(self, modulation: Modulation) -> None:
        modulation.reset()
        self.connections.append(modulation)