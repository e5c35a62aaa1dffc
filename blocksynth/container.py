"""Pools of pre-built modules handed out and taken back by type."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from blocksynth.module import MAX_MODULES_PER_TYPE, Module

M = TypeVar("M", bound=Module)


class ModuleContainer(Generic[M]):
    """Holds the free modules of each type, kept ordered by number."""

    def __init__(self) -> None:
        self.available: dict[str, list[M]] = {}
        self.all_modules: list[M] = []

    def spawn(self, types: Iterable[str], spawner: Callable[[str, int], M]) -> None:
        """Build ``MAX_MODULES_PER_TYPE`` modules, numbered from 1, for each type."""
        for module_type in types:
            modules = [spawner(module_type, number) for number in range(1, MAX_MODULES_PER_TYPE + 1)]
            self.available[module_type] = modules
            self.all_modules.extend(modules)

    def retire(self, module: M) -> None:
        """Reset ``module`` and return it to the free modules of its type."""
        module.reset()
        modules = self.available.setdefault(module.id.type, [])
        modules.append(module)
        modules.sort(key=lambda item: item.id.number)

    def get(self, module_type: str, number: int = -1) -> M | None:
        """Take the free module with ``number``, else the lowest-numbered one.

        Returns None when no module of that type is free.
        """
        modules = self.available.get(module_type)
        if not modules:
            return None
        for position, module in enumerate(modules):
            if module.id.number == number:
                return modules.pop(position)
        return modules.pop(0)