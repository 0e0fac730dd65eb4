"""
Bar layout component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Orientation = Literal["vertical", "horizontal"]


# --- Variant ---


@dataclass(frozen=True)
class SeriesSlot:
    """
    Placement of one series' bar inside a category slot.

    The bar's leading edge sits at
    ``slot_center + bar_factor * bar_size + gap_factor * gap``.
    """

    series: int
    bar_factor: float
    gap_factor: float


@dataclass(frozen=True)
class BarVariant:
    """Bar chart shape, resolved once from the dataset and options."""

    slots: tuple[SeriesSlot, ...]
    bar_ratio: float
    gap_ratio: float
    orientation: Orientation

    @property
    def grouped(self) -> bool:
        return len(self.slots) > 1


# --- Output ---


@dataclass(frozen=True)
class BarGeometry:
    """
    One laid-out bar.

    ``x/y/width/height`` is the final rectangle. ``tip`` is the pixel on the
    value axis where the bar ends, ``band_center`` the bar's center across the
    category axis; both are used to anchor value labels.
    """

    point_index: int
    series: int
    value: float
    x: float
    y: float
    width: float
    height: float
    tip: float
    band_center: float
    color: str
