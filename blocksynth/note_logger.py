"""Tracking which notes start and stop between updates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


class NoteListener(Protocol):
    def notes_started(self, note_ids: list[int]) -> None: ...

    def notes_ended(self, note_ids: list[int]) -> None: ...


@dataclass(frozen=True)
class NoteChanges:
    """Notes that began and notes that stopped since the previous update."""

    started: list[int]
    ended: list[int]


class NoteLogger:
    """Compares each set of sounding notes with the previous one."""

    def __init__(self, listener: NoteListener | None = None) -> None:
        self.listener = listener
        self._active: dict[int, None] = {}

    @property
    def active_notes(self) -> list[int]:
        """The notes sounding after the last update, in the order they began."""
        return list(self._active)

    def log(self, note_ids: Iterable[int]) -> NoteChanges:
        """Record the notes now sounding and report what changed.

        The listener hears about started notes before ended ones, and only
        when there are any.
        """
        current = dict.fromkeys(note_ids)
        ended = [note for note in self._active if note not in current]
        for note in ended:
            del self._active[note]

        started = []
        for note in current:
            if note not in self._active:
                self._active[note] = None
                started.append(note)

        if self.listener is not None:
            if started:
                self.listener.notes_started(started)
            if ended:
                self.listener.notes_ended(ended)
        return NoteChanges(started, ended)