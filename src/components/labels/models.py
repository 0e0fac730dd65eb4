"""
Label component models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

ValueFormatter = Callable[[float], str]


@dataclass(frozen=True)
class LabelStyle:
    """Colors shared by gridlines, axes and axis text."""

    grid_color: str
    axis_color: str
    text_color: str
    font_size: float = 12.0


@dataclass(frozen=True)
class CategoryTick:
    """A category label anchored on the category axis."""

    index: int
    position: float
    lines: tuple[str, ...]
