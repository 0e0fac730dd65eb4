"""
Chart component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from src.components.labels import ValueFormatter
from src.domain.entities import DataPoint, PieDataPoint, Viewport

# --- Validation Error ---


@dataclass(frozen=True)
class ChartValidationError:
    """Chart contract violation."""

    code: str
    message: str
    field_name: str | None = None


class ChartContractError(ValueError):
    """Raised for programmer-error inputs (bad viewport, non-list dataset)."""

    def __init__(self, errors: Sequence[ChartValidationError]):
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors))


# --- Options ---


@dataclass(frozen=True)
class ChartOptions:
    """
    Caller options shared by all chart families.

    Unset colors fall back to the theme. ``format_value`` is applied to every
    numeric label; the default rounds to an integer.
    """

    primary_color: str | None = None
    secondary_color: str | None = None
    show_grid: bool = True
    show_values: bool = True
    show_gradient: bool = True
    show_labels: bool = True
    show_legend: bool = True
    show_dots: bool = True
    curved: bool = True
    horizontal: bool = False
    format_value: ValueFormatter | None = None


# --- Input Models ---


@dataclass(frozen=True)
class BarChartInput:
    """Input for laying out a single or grouped bar chart."""

    points: Sequence[DataPoint]
    viewport: Viewport
    options: ChartOptions = field(default_factory=ChartOptions)


@dataclass(frozen=True)
class LineChartInput:
    """Input for laying out a one- or two-series line chart."""

    points: Sequence[DataPoint]
    viewport: Viewport
    options: ChartOptions = field(default_factory=ChartOptions)


@dataclass(frozen=True)
class PieChartInput:
    """Input for laying out a pie/donut chart. Percentages are pre-normalized."""

    items: Sequence[PieDataPoint]
    viewport: Viewport
    options: ChartOptions = field(default_factory=ChartOptions)


# --- Resolved Configuration ---


@dataclass(frozen=True)
class ChartConfig:
    """Options merged with theme defaults, resolved once per call."""

    primary_color: str
    secondary_color: str
    grid_color: str
    axis_color: str
    text_color: str
    background_color: str
    series_names: tuple[str, str]
    empty_message: str
    pie_radius_ratio: float
    format_value: ValueFormatter
