"""Grid positions of blocks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """A cell in the block grid, addressed by row and column."""

    row: int
    column: int

    def to_the_right(self, times: int) -> Index:
        """Return the cell ``times`` columns to the right on the same row."""
        return Index(self.row, self.column + times)