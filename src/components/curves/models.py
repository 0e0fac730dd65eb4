"""
Curve component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.primitives import PathCommand

CurveKind = Literal["linear", "catmull_rom"]


@dataclass(frozen=True)
class CurvePoint:
    x: float
    y: float


@dataclass(frozen=True)
class SeriesPath:
    """Stroke and area outlines for one series."""

    series: int
    points: tuple[CurvePoint, ...]
    stroke: tuple[PathCommand, ...]
    area: tuple[PathCommand, ...]
