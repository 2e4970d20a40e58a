"""RGB colors with components in the range [0, 1]."""

from __future__ import annotations

import random
from dataclasses import dataclass

_COLOR_MAX = 255
_WHITE_MIX = 1.0


@dataclass(slots=True)
class Color:
    """An RGB color; each component lies between 0 and 1."""

    r: float
    g: float
    b: float


def random_color(rng=None) -> Color:
    """Return a random pastel color, each component mixed halfway with white."""
    source = rng if rng is not None else random

    def component() -> float:
        value = source.randrange(_COLOR_MAX) / _COLOR_MAX
        return (value + _WHITE_MIX) / 2

    return Color(component(), component(), component())