"""
Pie component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SliceAngles:
    """Cumulative angles of one slice, in degrees."""

    start: float
    end: float

    @property
    def sweep(self) -> float:
        return self.end - self.start

    @property
    def mid(self) -> float:
        return (self.start + self.end) / 2


@dataclass(frozen=True)
class PieGeometry:
    """Center and outer radius of the pie, in absolute pixels."""

    cx: float
    cy: float
    radius: float
