"""
Pie component - Slice angles, wedge outlines and donut geometry.

Turns caller-supplied percentages into cumulative clockwise slices
starting at -90 degrees, in dataset order.

Invariants:
- Slice i starts exactly where slice i-1 ends
- Total sweep is 360 * sum(percentages) / 100; percentages are NOT
  renormalized (callers pre-normalize, see compute_percentages)
- Slices under 5 percent get no label
- The donut hole is emitted after every wedge
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.components.labels import format_fixed
from src.domain.entities import PieDataPoint, PlotArea
from src.domain.primitives import (
    CirclePrimitive,
    LegendEntry,
    PathCommand,
    TextPrimitive,
    WedgePrimitive,
)

from .models import PieGeometry, SliceAngles

# --- Constants ---

START_ANGLE = -90.0
FULL_TURN = 360.0
MIN_LABEL_PERCENTAGE = 5.0
LABEL_RADIUS_RATIO = 0.7
DONUT_HOLE_RATIO = 0.4
DEFAULT_RADIUS_RATIO = 1 / 3
SLICE_OPACITY = 0.9
LABEL_FONT_SIZE = 14.0


# --- Percentages (caller side) ---


def compute_percentages(values: Sequence[float]) -> list[float]:
    """
    Share of each value in the total, in percent.

    A zero total yields all zeros rather than dividing by zero.
    """
    total = sum(values)
    if total == 0:
        return [0.0 for _ in values]
    return [v / total * 100 for v in values]


# --- Angles ---


def slice_angles(percentages: Sequence[float], start: float = START_ANGLE) -> tuple[SliceAngles, ...]:
    """Cumulative start/end angles, clockwise from ``start``."""
    slices: list[SliceAngles] = []
    current = start
    for pct in percentages:
        end = current + pct * FULL_TURN / 100
        slices.append(SliceAngles(start=current, end=end))
        current = end
    return tuple(slices)


def polar_to_cartesian(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    """Screen point for an angle in degrees (y grows downward)."""
    rad = (angle - 90) * math.pi / 180
    return cx + radius * math.cos(rad), cy + radius * math.sin(rad)


def pie_geometry(plot: PlotArea, radius_ratio: float = DEFAULT_RADIUS_RATIO) -> PieGeometry:
    """Pie centered in the plot; radius scales with the shorter side."""
    return PieGeometry(
        cx=plot.center_x,
        cy=plot.center_y,
        radius=min(plot.width, plot.height) * radius_ratio,
    )


# --- Wedges ---


def is_large_arc(angles: SliceAngles) -> bool:
    return angles.sweep > 180


def wedge_commands(geometry: PieGeometry, angles: SliceAngles) -> tuple[PathCommand, ...]:
    """
    Closed outline: center, out to the arc start, clockwise arc, back.

    A slice covering the whole turn would start and end on the same point,
    which an SVG arc cannot draw; it is split into two half arcs.
    """
    cx, cy, r = geometry.cx, geometry.cy, geometry.radius
    sx, sy = polar_to_cartesian(cx, cy, r, angles.start)
    ex, ey = polar_to_cartesian(cx, cy, r, angles.end)

    if angles.sweep >= FULL_TURN:
        mx, my = polar_to_cartesian(cx, cy, r, angles.start + FULL_TURN / 2)
        return (
            PathCommand("M", (cx, cy)),
            PathCommand("L", (sx, sy)),
            PathCommand("A", (r, r, 0, 0, 1, mx, my)),
            PathCommand("A", (r, r, 0, 0, 1, sx, sy)),
            PathCommand("Z"),
        )

    large = 1 if is_large_arc(angles) else 0
    return (
        PathCommand("M", (cx, cy)),
        PathCommand("L", (sx, sy)),
        PathCommand("A", (r, r, 0, large, 1, ex, ey)),
        PathCommand("Z"),
    )


def should_label(percentage: float) -> bool:
    """Small slices stay unlabeled to keep text from overlapping."""
    return percentage >= MIN_LABEL_PERCENTAGE


def label_anchor(geometry: PieGeometry, angles: SliceAngles) -> tuple[float, float]:
    return polar_to_cartesian(
        geometry.cx, geometry.cy, geometry.radius * LABEL_RADIUS_RATIO, angles.mid
    )


# --- Primitives ---


def wedge_primitives(
    items: Sequence[PieDataPoint],
    angles: Sequence[SliceAngles],
    geometry: PieGeometry,
) -> tuple[WedgePrimitive, ...]:
    return tuple(
        WedgePrimitive(
            cx=geometry.cx,
            cy=geometry.cy,
            radius=geometry.radius,
            start_angle=a.start,
            end_angle=a.end,
            large_arc=is_large_arc(a),
            commands=wedge_commands(geometry, a),
            fill=item.color,
            opacity=SLICE_OPACITY,
            label=item.label,
        )
        for item, a in zip(items, angles)
    )


def slice_labels(
    items: Sequence[PieDataPoint],
    angles: Sequence[SliceAngles],
    geometry: PieGeometry,
    *,
    color: str,
) -> tuple[TextPrimitive, ...]:
    """Rounded percentage at 70% of the radius on each labeled slice's mid-angle."""
    labels: list[TextPrimitive] = []
    for item, a in zip(items, angles):
        if not should_label(item.percentage):
            continue
        x, y = label_anchor(geometry, a)
        labels.append(
            TextPrimitive(
                x=x,
                y=y,
                text=f"{format_fixed(item.percentage, 0)}%",
                fill=color,
                font_size=LABEL_FONT_SIZE,
                anchor="middle",
                middle_baseline=True,
                weight="bold",
                role="slice-label",
            )
        )
    return tuple(labels)


def donut_hole(geometry: PieGeometry, *, color: str) -> CirclePrimitive:
    return CirclePrimitive(
        cx=geometry.cx,
        cy=geometry.cy,
        r=geometry.radius * DONUT_HOLE_RATIO,
        fill=color,
        role="donut-hole",
    )


def pie_legend(items: Sequence[PieDataPoint]) -> tuple[LegendEntry, ...]:
    """One entry per slice, in dataset order, with a one-decimal percentage."""
    return tuple(
        LegendEntry(name=item.label, color=item.color, detail=f"{format_fixed(item.percentage, 1)}%")
        for item in items
    )
