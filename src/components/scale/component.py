"""
Scale component - Value and category to pixel mapping.

Maps a numeric value domain and a categorical index domain onto the plot
area of a viewport. Shared by the bar and line charts.

Invariants:
- map_value_to_y(domain.min) is exactly the plot baseline
- map_value_to_y(domain.max) is exactly the plot top
- A zero-span domain maps every value onto one flat line, never raises
- Bar categories are centered in equal slots; line points are anchored so
  the first and last land on the plot edges
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.entities import DataPoint, PlotArea, ValueDomain

from .models import BandScale, LinearScale, PointScale

# --- Domains ---


def has_second_series(points: Sequence[DataPoint]) -> bool:
    """Dual-series mode applies as soon as any point carries a second value."""
    return any(p.second_value is not None for p in points)


def collect_values(points: Sequence[DataPoint]) -> list[float]:
    """All plotted values; a missing second value counts as 0."""
    values: list[float] = []
    for p in points:
        values.append(p.value)
        values.append(p.second_value if p.second_value is not None else 0.0)
    return values


def bar_domain(points: Sequence[DataPoint]) -> ValueDomain:
    """Bar charts always start at zero; the max is floored at 1."""
    return ValueDomain(min=0.0, max=max([*collect_values(points), 1.0]))


def line_domain(points: Sequence[DataPoint]) -> ValueDomain:
    """Line charts extend below zero when the data does."""
    values = collect_values(points)
    return ValueDomain(min=min([*values, 0.0]), max=max([*values, 1.0]))


# --- Scale Builders ---


def vertical_scale(domain: ValueDomain, plot: PlotArea) -> LinearScale:
    """Value axis running up the plot: min on the baseline, max on the top edge."""
    return LinearScale(domain=domain, start=plot.baseline, end=plot.top)


def horizontal_scale(domain: ValueDomain, plot: PlotArea) -> LinearScale:
    """Value axis running right: min on the left edge, max on the right edge."""
    return LinearScale(domain=domain, start=plot.left, end=plot.right)


def band_scale(count: int, start: float, length: float) -> BandScale:
    return BandScale(count=count, start=start, length=length)


def point_scale(count: int, plot: PlotArea) -> PointScale:
    return PointScale(count=count, start=plot.left, length=plot.width)


# --- Contract Functions ---


def map_index_to_x(index: int, count: int, plot: PlotArea, *, anchored: bool = False) -> float:
    """
    Horizontal pixel of a category.

    Args:
        index: Position of the point in the dataset.
        count: Number of points (must be >= 1).
        plot: Plot area.
        anchored: False for bar slot centers, True for line points.

    Returns:
        Absolute x coordinate.
    """
    if anchored:
        return point_scale(count, plot).position(index)
    return band_scale(count, plot.left, plot.width).center(index)


def map_value_to_y(value: float, domain: ValueDomain, plot: PlotArea) -> float:
    """Vertical pixel of a value (higher value, smaller y)."""
    return vertical_scale(domain, plot).to_pixel(value)


def map_y_to_value(y: float, domain: ValueDomain, plot: PlotArea) -> float:
    """Inverse of map_value_to_y."""
    return vertical_scale(domain, plot).to_value(y)
