"""
Bar layout component - Single and grouped bar placement.

Positions one bar per category (single series) or a pair of bars per
category (grouped series) inside equal slots across the plot.

Invariants:
- Slot size is plot length / N
- Single bars take 0.6 of a slot; grouped bars 0.35 each with a 0.1 gap,
  the pair centered in the slot
- Bars grow from the zero baseline, never from the domain minimum
- A zero value yields a zero-height bar; it is kept, not dropped
- In grouped mode a point without a second value gets no second bar
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from src.components.scale import BandScale, LinearScale
from src.domain.entities import DataPoint
from src.domain.primitives import LinearGradient, RectPrimitive, TextPrimitive

from .models import BarGeometry, BarVariant, Orientation, SeriesSlot

# --- Layout Constants ---

SINGLE_BAR_RATIO = 0.6
GROUPED_BAR_RATIO = 0.35
GROUP_GAP_RATIO = 0.1

BAR_CORNER_RADIUS = 4.0
BAR_GRADIENT_OPACITY = (1.0, 0.7)
VALUE_LABEL_GAP = 8.0
VALUE_LABEL_FONT_SIZE = 12.0

_SINGLE_SLOTS = (SeriesSlot(series=0, bar_factor=-0.5, gap_factor=0.0),)
_GROUPED_SLOTS = (
    SeriesSlot(series=0, bar_factor=-1.0, gap_factor=-0.5),
    SeriesSlot(series=1, bar_factor=0.0, gap_factor=0.5),
)

# (leading edge, thickness, value-axis start, extent) -> (x, y, width, height)
RectBuilder = Callable[[float, float, float, float], tuple[float, float, float, float]]


def _vertical_rect(
    lead: float, thickness: float, value_start: float, extent: float
) -> tuple[float, float, float, float]:
    return lead, value_start, thickness, extent


def _horizontal_rect(
    lead: float, thickness: float, value_start: float, extent: float
) -> tuple[float, float, float, float]:
    return value_start, lead, extent, thickness


_RECT_BUILDERS: dict[Orientation, RectBuilder] = {
    "vertical": _vertical_rect,
    "horizontal": _horizontal_rect,
}


# --- Variant Resolution ---


def resolve_bar_variant(grouped: bool, horizontal: bool = False) -> BarVariant:
    """Pick slot placement and orientation once per chart."""
    return BarVariant(
        slots=_GROUPED_SLOTS if grouped else _SINGLE_SLOTS,
        bar_ratio=GROUPED_BAR_RATIO if grouped else SINGLE_BAR_RATIO,
        gap_ratio=GROUP_GAP_RATIO,
        orientation="horizontal" if horizontal else "vertical",
    )


# --- Layout ---


def _series_value(point: DataPoint, series: int) -> float | None:
    return point.value if series == 0 else point.second_value


def layout_bars(
    points: Sequence[DataPoint],
    variant: BarVariant,
    band: BandScale,
    value_scale: LinearScale,
    *,
    primary_color: str,
    secondary_color: str,
) -> tuple[BarGeometry, ...]:
    """
    Lay out every bar of the chart.

    Args:
        points: Dataset in category order.
        variant: Resolved bar variant.
        band: Category scale along the band axis.
        value_scale: Value scale along the value axis (domain min is 0).
        primary_color: Fill for first-series bars without their own color.
        secondary_color: Fill for second-series bars.

    Returns:
        Bars in drawing order (per category, first series then second).
    """
    if not points:
        return ()

    make_rect = _RECT_BUILDERS[variant.orientation]
    slot_size = band.slot_size
    bar_size = slot_size * variant.bar_ratio
    gap = slot_size * variant.gap_ratio
    zero_px = value_scale.to_pixel(0.0)

    bars: list[BarGeometry] = []
    for index, point in enumerate(points):
        center = band.center(index)
        for slot in variant.slots:
            value = _series_value(point, slot.series)
            if value is None:
                continue

            lead = center + slot.bar_factor * bar_size + slot.gap_factor * gap
            extent = value_scale.extent(0.0, value)
            grow = value_scale.direction if value >= 0 else -value_scale.direction
            tip = zero_px + grow * extent
            x, y, width, height = make_rect(lead, bar_size, min(zero_px, tip), extent)

            color = (point.color or primary_color) if slot.series == 0 else secondary_color
            bars.append(
                BarGeometry(
                    point_index=index,
                    series=slot.series,
                    value=value,
                    x=x,
                    y=y,
                    width=width,
                    height=height,
                    tip=tip,
                    band_center=lead + bar_size / 2,
                    color=color,
                )
            )
    return tuple(bars)


# --- Primitives ---


def bar_primitives(bars: Sequence[BarGeometry], *, gradient: bool) -> tuple[RectPrimitive, ...]:
    """Rectangles for laid-out bars, flat or with a top-to-bottom fade."""
    start_opacity, end_opacity = BAR_GRADIENT_OPACITY
    return tuple(
        RectPrimitive(
            x=bar.x,
            y=bar.y,
            width=bar.width,
            height=bar.height,
            fill=bar.color,
            gradient=LinearGradient(bar.color, start_opacity, end_opacity) if gradient else None,
            corner_radius=BAR_CORNER_RADIUS,
            role="bar",
        )
        for bar in bars
    )


def _vertical_value_label(bar: BarGeometry, text: str) -> TextPrimitive:
    if bar.value >= 0:
        y = bar.tip - VALUE_LABEL_GAP
    else:
        y = bar.tip + VALUE_LABEL_GAP + VALUE_LABEL_FONT_SIZE
    return TextPrimitive(
        x=bar.band_center,
        y=y,
        text=text,
        fill=bar.color,
        font_size=VALUE_LABEL_FONT_SIZE,
        anchor="middle",
        weight="semibold",
        role="bar-value",
    )


def _horizontal_value_label(bar: BarGeometry, text: str) -> TextPrimitive:
    positive = bar.value >= 0
    return TextPrimitive(
        x=bar.tip + VALUE_LABEL_GAP if positive else bar.tip - VALUE_LABEL_GAP,
        y=bar.band_center,
        text=text,
        fill=bar.color,
        font_size=VALUE_LABEL_FONT_SIZE,
        anchor="start" if positive else "end",
        middle_baseline=True,
        weight="semibold",
        role="bar-value",
    )


_VALUE_LABEL_BUILDERS: dict[Orientation, Callable[[BarGeometry, str], TextPrimitive]] = {
    "vertical": _vertical_value_label,
    "horizontal": _horizontal_value_label,
}


def bar_value_labels(
    bars: Sequence[BarGeometry],
    variant: BarVariant,
    format_value: Callable[[float], str],
) -> tuple[TextPrimitive, ...]:
    """Formatted value just beyond the end of each bar."""
    build = _VALUE_LABEL_BUILDERS[variant.orientation]
    return tuple(build(bar, format_value(bar.value)) for bar in bars)
