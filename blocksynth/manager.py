"""Placement of blocks on the grid, modulators, and the routings between them."""

from __future__ import annotations

from blocksynth.constants import COLUMNS, ROWS
from blocksynth.index import Index
from blocksynth.module import Block, Module
from blocksynth.modulation import Modulation
from blocksynth.pool import ModulePool


def _remove_identical(items: list, item: object) -> None:
    for position, existing in enumerate(items):
        if existing is item:
            del items[position]
            return
    raise ValueError(f"{item!r} is not in use")


class ModuleManager:
    """Owns the modules in use and lends them from, and returns them to, a pool."""

    def __init__(self, pool: ModulePool | None = None) -> None:
        self.pool = pool if pool is not None else ModulePool()
        self._grid: dict[Index, Block] = {}
        self._names: dict[str, Module] = {}
        self._connections: list[Modulation] = []
        self._blocks: list[Block] = []
        self._modulators: list[Module] = []

    @property
    def blocks(self) -> list[Block]:
        """The blocks in use, in the order they were added."""
        return list(self._blocks)

    @property
    def modulators(self) -> list[Module]:
        """The modulators in use, in the order they were added."""
        return list(self._modulators)

    @property
    def connections(self) -> list[Modulation]:
        """The modulations in use, in the order they were added."""
        return list(self._connections)

    @staticmethod
    def _check_index(index: Index) -> None:
        if not (0 <= index.row < ROWS and 0 <= index.column < COLUMNS):
            raise IndexError(f"{index} is outside the {ROWS}x{COLUMNS} grid")

    def add_block(self, module_type: str, index: Index, number: int = -1) -> Block | None:
        """Place a block of ``module_type`` at ``index``; None when none is free."""
        self._check_index(index)
        block = self.pool.get_block(module_type, number)
        if block is None:
            return None
        block.index = index
        self._names[block.name] = block
        self._grid[index] = block
        self._blocks.append(block)
        return block

    def get_block(self, index: Index) -> Block | None:
        """The block at ``index``, or None if the cell is empty."""
        self._check_index(index)
        return self._grid.get(index)

    def remove_block(self, block: Block) -> None:
        """Take ``block`` off the grid, drop routings into it and return it to the pool."""
        _remove_identical(self._blocks, block)
        for connection in self.connections_of_target(block):
            self.remove_connection(connection)
        self._names.pop(block.name, None)
        if self._grid.get(block.index) is block:
            del self._grid[block.index]
        self.pool.retire_block(block)

    def reposition_block(self, old_index: Index, new_index: Index) -> None:
        """Move the block at ``old_index`` to ``new_index``."""
        block = self.get_block(old_index)
        if block is None:
            raise LookupError(f"no block at {old_index}")
        self._check_index(new_index)
        block.index = new_index
        self._grid[new_index] = block
        if old_index != new_index:
            self._grid.pop(old_index, None)

    def add_modulator(self, module_type: str, number: int, colour_id: int) -> Module | None:
        """Take a modulator of ``module_type``; None when none is free."""
        modulator = self.pool.get_modulator(module_type, number, colour_id)
        if modulator is None:
            return None
        self._modulators.append(modulator)
        self._names[modulator.name] = modulator
        return modulator

    def get_modulator(self, index: int) -> Module:
        return self._modulators[index]

    def remove_modulator(self, index: int) -> None:
        """Remove the modulator at position ``index`` together with its routings."""
        modulator = self._modulators.pop(index)
        for connection in self.connections_of_source(modulator):
            self.remove_connection(connection)
        self.pool.retire_modulator(modulator)
        self._names.pop(modulator.name, None)

    def add_connection(
        self, source: Module, target: Module, parameter_index: int, number: int = -1
    ) -> Modulation | None:
        """Route ``source`` to a parameter of ``target``; None if that routing exists."""
        parameter = target.parameter(parameter_index)
        if self.connection_exists(parameter_index, source, target):
            return None
        connection = self.pool.get_modulation(number)
        connection.parameter_index = parameter_index
        connection.source = source
        connection.target = target
        self._connections.append(connection)
        parameter.connections.append(connection)
        return connection

    def get_connection(self, index: int) -> Modulation:
        return self._connections[index]

    def connection_exists(self, parameter_index: int, source: Module, target: Module) -> bool:
        return any(
            connection.target is target
            and connection.source is source
            and connection.parameter_index == parameter_index
            for connection in self._connections
        )

    def connections_of_source(self, source: Module) -> list[Modulation]:
        return [c for c in self._connections if c.source is source]

    def connections_of_target(self, target: Module) -> list[Modulation]:
        return [c for c in self._connections if c.target is target]

    def remove_connection(self, connection: Modulation) -> None:
        """Detach ``connection`` from its target and return it to the pool."""
        _remove_identical(self._connections, connection)
        self._release(connection)

    def remove_connection_at(self, index: int) -> None:
        """Remove the modulation at position ``index``."""
        self._release(self._connections.pop(index))

    def _release(self, connection: Modulation) -> None:
        if connection.target is not None:
            connection.target.remove_connection(connection)
        self.pool.retire_modulation(connection)

    def get_module(self, name: str) -> Module | None:
        """The module in use called ``name``, if any."""
        return self._names.get(name)

    def clear(self) -> None:
        """Return every block, modulation and modulator to the pool."""
        for block in reversed(self.blocks):
            self.remove_block(block)
        for position in reversed(range(len(self._connections))):
            self.remove_connection_at(position)
        for position in reversed(range(len(self._modulators))):
            self.remove_modulator(position)