"""
Scale component models.

Scales are resolved once per chart and then applied per point, so the
per-point math carries no orientation branches.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import ValueDomain

# --- Value Axis ---


@dataclass(frozen=True)
class LinearScale:
    """
    Linear map from a value domain onto a pixel segment.

    ``start`` is the pixel for ``domain.min`` and ``end`` the pixel for
    ``domain.max``. A vertical chart axis runs from the baseline up to the
    plot top, so there ``start > end``.
    """

    domain: ValueDomain
    start: float
    end: float

    @property
    def length(self) -> float:
        return abs(self.end - self.start)

    @property
    def direction(self) -> float:
        """+1 when larger values move right/down in pixels, -1 otherwise."""
        return 1.0 if self.end >= self.start else -1.0

    def ratio(self, value: float) -> float:
        return (value - self.domain.min) / self.domain.span

    def to_pixel(self, value: float) -> float:
        # Weighted form keeps both domain ends exact (no add-then-subtract drift)
        r = self.ratio(value)
        return self.start * (1.0 - r) + self.end * r

    def to_value(self, pixel: float) -> float:
        if self.end == self.start:
            return self.domain.min
        r = (pixel - self.start) / (self.end - self.start)
        return self.domain.min + r * self.domain.span

    def extent(self, a: float, b: float) -> float:
        """Pixel distance between two values."""
        return abs(b - a) / self.domain.span * self.length


# --- Category Axes ---


@dataclass(frozen=True)
class BandScale:
    """Equal-width slots, one per category; positions are slot centers."""

    count: int
    start: float
    length: float

    @property
    def slot_size(self) -> float:
        return self.length / self.count

    def center(self, index: int) -> float:
        return self.start + (index + 0.5) * self.slot_size


@dataclass(frozen=True)
class PointScale:
    """Point-anchored positions: first and last sit on the plot edges."""

    count: int
    start: float
    length: float

    @property
    def step(self) -> float:
        return self.length / max(self.count - 1, 1)

    def position(self, index: int) -> float:
        return self.start + (index / max(self.count - 1, 1)) * self.length

    def nearest_index(self, pixel: float) -> int:
        if self.length == 0:
            return 0
        raw = round((pixel - self.start) / self.step)
        return max(0, min(self.count - 1, raw))
