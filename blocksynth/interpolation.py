"""Linear interpolation between neighbouring samples."""

from __future__ import annotations

from collections.abc import Sequence


def decimal_subscript(values: Sequence[float], index: float) -> float:
    """Interpolate between the two samples around a fractional index.

    For example, index 0.5 of ``[5, 10]`` gives 7.5.
    """
    if index < 0:
        raise IndexError("index must not be negative")
    whole = int(index)
    fraction = index - whole
    first = values[whole]
    following = values[whole + 1]
    return first + (following - first) * fraction