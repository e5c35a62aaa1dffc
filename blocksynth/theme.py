"""Colour themes and the manager that switches between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol


@dataclass(frozen=True)
class Colour:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255


@dataclass
class ModuleColour:
    """A colour assigned to a module, with the pool id it came from."""

    colour: Colour
    id: int


@dataclass(frozen=True)
class Theme:
    """The palette of the interface."""

    background: Colour
    one: Colour
    two: Colour
    three: Colour
    dark: bool


class ThemeListener(Protocol):
    def theme_changed(self, theme: Theme) -> None: ...


DARK = Theme(Colour(40, 40, 40), Colour(64, 64, 64), Colour(110, 110, 110), Colour(218, 218, 218), True)
NAVY = Theme(Colour(28, 33, 40), Colour(47, 54, 63), Colour(109, 117, 125), Colour(218, 218, 218), True)
OREO = Theme(Colour(181, 181, 181), Colour(224, 224, 224), Colour(49, 49, 49), Colour(255, 255, 255), False)

THEMES = (DARK, NAVY, OREO)


class ThemeManager:
    """Keeps the current theme and tells listeners when it changes."""

    _instance: ClassVar[ThemeManager | None] = None

    def __init__(self) -> None:
        self.themes = list(THEMES)
        self.index = 0
        self.current = self.themes[0]
        self._listeners: list[ThemeListener] = []

    def next(self) -> int:
        """Switch to the following theme, wrapping around, and return its index."""
        self.index = (self.index + 1) % len(self.themes)
        self.current = self.themes[self.index]
        self._notify()
        return self.index

    def set(self, index: int) -> None:
        """Switch to the theme at ``index``."""
        if not 0 <= index < len(self.themes):
            raise IndexError(f"no theme at index {index}")
        self.index = index
        self.current = self.themes[index]
        self._notify()

    def add_listener(self, listener: ThemeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ThemeListener) -> None:
        self._listeners = [item for item in self._listeners if item is not listener]

    @staticmethod
    def shared() -> ThemeManager:
        """Return the process-wide theme manager."""
        if ThemeManager._instance is None:
            ThemeManager._instance = ThemeManager()
        return ThemeManager._instance

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener.theme_changed(self.current)