"""
Label component - Gridlines, value ticks and category labels.

Shared by all chart families. Produces axis decoration in absolute pixels
from a plot area, a value scale and the dataset labels.

Invariants:
- Exactly 5 gridlines and 6 value ticks (divisions 0..5 inclusive)
- Gridlines and ticks share positions, so every tick sits on a line
  (division 0 sits on the axis line)
- Bar charts label every category; line charts label every ceil(N/6)-th
  point plus the last point
- Category text thresholds are fixed: split on the first space past 8
  characters, otherwise truncate past 10 characters
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from src.components.scale import LinearScale
from src.domain.entities import PlotArea
from src.domain.primitives import LinePrimitive, TextPrimitive

from .models import CategoryTick, LabelStyle, ValueFormatter

# --- Constants ---

GRID_DIVISIONS = 5
GRID_DASH = (4.0, 4.0)
GRID_STROKE_WIDTH = 1.0
AXIS_STROKE_WIDTH = 2.0

SPLIT_THRESHOLD = 8
TRUNCATE_THRESHOLD = 10
ELLIPSIS = "…"

MAX_LINE_LABELS = 6
TICK_LABEL_OFFSET = 10.0
CATEGORY_LABEL_OFFSET = 20.0
CATEGORY_LINE_OFFSETS = (15.0, 28.0)
SIDE_LINE_OFFSETS = (-7.0, 7.0)


# --- Text Formatting ---


def format_fixed(value: float, decimals: int = 0) -> str:
    """
    Fixed-point text with halves rounded away from zero.

    Works on the exact binary value, so 2.5 -> "3" and 1.005 -> "1.00".
    Negative zero prints as "0".
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:.{decimals}f}"


def default_format_value(value: float) -> str:
    """Default numeric label: integer rounding."""
    return format_fixed(value, 0)


def format_category_label(label: str) -> tuple[str, ...]:
    """
    Fit a category label under its slot.

    Rules, in order:
    - longer than 8 characters and containing a space: two lines, the first
      word then the remaining words
    - longer than 10 characters: first 10 characters plus an ellipsis
    - otherwise unchanged

    Examples:
        >>> format_category_label("Conta de Luz")
        ('Conta', 'de Luz')
        >>> format_category_label("Supermercado")
        ('Supermerca…',)
    """
    words = label.split(" ")
    if len(label) > SPLIT_THRESHOLD and len(words) > 1:
        return (words[0], " ".join(words[1:]))
    if len(label) > TRUNCATE_THRESHOLD:
        return (label[:TRUNCATE_THRESHOLD] + ELLIPSIS,)
    return (label,)


# --- Value Axis ---


def tick_values(scale: LinearScale, divisions: int = GRID_DIVISIONS) -> tuple[float, ...]:
    """Evenly spaced values from domain min to max, divisions + 1 of them."""
    domain = scale.domain
    span = domain.span
    return tuple(domain.min + span * i / divisions for i in range(divisions + 1))


def _division_pixel(scale: LinearScale, i: int, divisions: int) -> float:
    r = i / divisions
    return scale.start * (1.0 - r) + scale.end * r


def gridlines(
    scale: LinearScale,
    plot: PlotArea,
    style: LabelStyle,
    *,
    vertical_axis: bool = True,
    divisions: int = GRID_DIVISIONS,
) -> tuple[LinePrimitive, ...]:
    """
    Dashed gridlines at divisions 1..N across the plot.

    ``vertical_axis`` is True when values run up the plot (lines are
    horizontal) and False when values run right (lines are vertical).
    """
    lines: list[LinePrimitive] = []
    for i in range(1, divisions + 1):
        pos = _division_pixel(scale, i, divisions)
        if vertical_axis:
            x1, y1, x2, y2 = plot.left, pos, plot.right, pos
        else:
            x1, y1, x2, y2 = pos, plot.top, pos, plot.baseline
        lines.append(
            LinePrimitive(
                x1=x1,
                y1=y1,
                x2=x2,
                y2=y2,
                stroke=style.grid_color,
                stroke_width=GRID_STROKE_WIDTH,
                dash=GRID_DASH,
                role="gridline",
            )
        )
    return tuple(lines)


def value_tick_labels(
    scale: LinearScale,
    plot: PlotArea,
    style: LabelStyle,
    format_value: ValueFormatter,
    *,
    vertical_axis: bool = True,
    divisions: int = GRID_DIVISIONS,
) -> tuple[TextPrimitive, ...]:
    """Formatted values at divisions 0..N, left of the plot or under it."""
    labels: list[TextPrimitive] = []
    for i, value in enumerate(tick_values(scale, divisions)):
        pos = _division_pixel(scale, i, divisions)
        if vertical_axis:
            labels.append(
                TextPrimitive(
                    x=plot.left - TICK_LABEL_OFFSET,
                    y=pos,
                    text=format_value(value),
                    fill=style.text_color,
                    font_size=style.font_size,
                    anchor="end",
                    middle_baseline=True,
                    role="value-tick",
                )
            )
        else:
            labels.append(
                TextPrimitive(
                    x=pos,
                    y=plot.baseline + CATEGORY_LABEL_OFFSET,
                    text=format_value(value),
                    fill=style.text_color,
                    font_size=style.font_size,
                    anchor="middle",
                    role="value-tick",
                )
            )
    return tuple(labels)


def axis_lines(plot: PlotArea, style: LabelStyle) -> tuple[LinePrimitive, ...]:
    """Solid x axis along the baseline and y axis along the left edge."""
    return (
        LinePrimitive(
            x1=plot.left,
            y1=plot.baseline,
            x2=plot.right,
            y2=plot.baseline,
            stroke=style.axis_color,
            stroke_width=AXIS_STROKE_WIDTH,
            role="axis",
        ),
        LinePrimitive(
            x1=plot.left,
            y1=plot.top,
            x2=plot.left,
            y2=plot.baseline,
            stroke=style.axis_color,
            stroke_width=AXIS_STROKE_WIDTH,
            role="axis",
        ),
    )


# --- Category Axis ---


def line_label_indices(count: int) -> tuple[int, ...]:
    """Every ceil(N/6)-th index, plus the final index unconditionally."""
    if count <= 0:
        return ()
    step = math.ceil(count / MAX_LINE_LABELS)
    return tuple(i for i in range(count) if i % step == 0 or i == count - 1)


def category_ticks(
    labels: Sequence[str],
    positions: Sequence[float],
    *,
    wrap: bool = True,
    indices: Sequence[int] | None = None,
) -> tuple[CategoryTick, ...]:
    """Pair labels with axis positions, optionally fitting the text."""
    chosen = range(len(labels)) if indices is None else indices
    return tuple(
        CategoryTick(
            index=i,
            position=positions[i],
            lines=format_category_label(labels[i]) if wrap else (labels[i],),
        )
        for i in chosen
    )


def bottom_category_labels(
    ticks: Sequence[CategoryTick], plot: PlotArea, style: LabelStyle
) -> tuple[TextPrimitive, ...]:
    """Category text under the baseline; two-line labels stack at +15/+28."""
    out: list[TextPrimitive] = []
    for tick in ticks:
        offsets = CATEGORY_LINE_OFFSETS if len(tick.lines) > 1 else (CATEGORY_LABEL_OFFSET,)
        for line, offset in zip(tick.lines, offsets):
            out.append(
                TextPrimitive(
                    x=tick.position,
                    y=plot.baseline + offset,
                    text=line,
                    fill=style.text_color,
                    font_size=style.font_size,
                    anchor="middle",
                    role="category-label",
                )
            )
    return tuple(out)


def side_category_labels(
    ticks: Sequence[CategoryTick], plot: PlotArea, style: LabelStyle
) -> tuple[TextPrimitive, ...]:
    """Category text left of the plot, right-aligned, for horizontal bars."""
    out: list[TextPrimitive] = []
    for tick in ticks:
        offsets = SIDE_LINE_OFFSETS if len(tick.lines) > 1 else (0.0,)
        for line, offset in zip(tick.lines, offsets):
            out.append(
                TextPrimitive(
                    x=plot.left - TICK_LABEL_OFFSET,
                    y=tick.position + offset,
                    text=line,
                    fill=style.text_color,
                    font_size=style.font_size,
                    anchor="end",
                    middle_baseline=True,
                    role="category-label",
                )
            )
    return tuple(out)
