"""
Curve component - Line and area path generation.

Connects scaled points with a poly-line or a Catmull-Rom spline expressed
as cubic Bezier segments, and closes the same outline down to the baseline
for gradient area fills.

Invariants:
- The spline interpolates: every input point is a segment endpoint
- Neighbours are clamped at both ends by reusing the boundary point
- Each series is built independently; no control point crosses series
- The area outline is only ever used as a fill, never as the stroke
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from src.components.scale import LinearScale, PointScale
from src.domain.entities import DataPoint
from src.domain.primitives import (
    CirclePrimitive,
    LinearGradient,
    PathCommand,
    PathPrimitive,
)

from .models import CurveKind, CurvePoint, SeriesPath

# --- Style Constants ---

STROKE_WIDTH = 3.0
AREA_GRADIENT_OPACITY = (0.3, 0.05)
DOT_RADIUS = 5.0
DOT_STROKE_WIDTH = 3.0
DOT_FILL = "#FFFFFF"

# Spline needs interior neighbours; with two points the clamped segment
# lies on its chord, so the poly-line is the same curve.
MIN_SPLINE_POINTS = 3


# --- Variant Resolution ---


def resolve_curve_kind(curved: bool, point_count: int) -> CurveKind:
    """Pick the path builder once per chart."""
    if curved and point_count >= MIN_SPLINE_POINTS:
        return "catmull_rom"
    return "linear"


# --- Path Builders ---


def linear_commands(points: Sequence[CurvePoint]) -> tuple[PathCommand, ...]:
    """Move to the first point, then straight segments to each following one."""
    if not points:
        return ()
    first, *rest = points
    return (
        PathCommand("M", (first.x, first.y)),
        *(PathCommand("L", (p.x, p.y)) for p in rest),
    )


def catmull_rom_commands(points: Sequence[CurvePoint]) -> tuple[PathCommand, ...]:
    """
    Catmull-Rom spline through every point as cubic Bezier segments.

    For segment i -> i+1:
        cp1 = p[i]   + (p[i+1] - p[i-1]) / 6
        cp2 = p[i+1] - (p[i+2] - p[i])   / 6
    with indices clamped to the sequence.
    """
    if not points:
        return ()
    n = len(points)
    commands = [PathCommand("M", (points[0].x, points[0].y))]
    for i in range(n - 1):
        p0 = points[max(i - 1, 0)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(i + 2, n - 1)]

        cp1x = p1.x + (p2.x - p0.x) / 6
        cp1y = p1.y + (p2.y - p0.y) / 6
        cp2x = p2.x - (p3.x - p1.x) / 6
        cp2y = p2.y - (p3.y - p1.y) / 6

        commands.append(PathCommand("C", (cp1x, cp1y, cp2x, cp2y, p2.x, p2.y)))
    return tuple(commands)


_PATH_BUILDERS: dict[CurveKind, Callable[[Sequence[CurvePoint]], tuple[PathCommand, ...]]] = {
    "linear": linear_commands,
    "catmull_rom": catmull_rom_commands,
}


def build_path(points: Sequence[CurvePoint], kind: CurveKind) -> tuple[PathCommand, ...]:
    return _PATH_BUILDERS[kind](points)


def area_commands(
    stroke: tuple[PathCommand, ...],
    points: Sequence[CurvePoint],
    baseline: float,
) -> tuple[PathCommand, ...]:
    """Close a stroke outline down to the baseline for gradient filling."""
    if not stroke:
        return ()
    return (
        *stroke,
        PathCommand("L", (points[-1].x, baseline)),
        PathCommand("L", (points[0].x, baseline)),
        PathCommand("Z"),
    )


# --- Series ---


def _series_value(point: DataPoint, series: int) -> float:
    # Second series falls back to the primary value where a point has none
    if series == 1 and point.second_value is not None:
        return point.second_value
    return point.value


def series_points(
    points: Sequence[DataPoint],
    series: int,
    x_scale: PointScale,
    y_scale: LinearScale,
) -> tuple[CurvePoint, ...]:
    return tuple(
        CurvePoint(x=x_scale.position(i), y=y_scale.to_pixel(_series_value(p, series)))
        for i, p in enumerate(points)
    )


def build_series(
    points: Sequence[DataPoint],
    series: int,
    kind: CurveKind,
    x_scale: PointScale,
    y_scale: LinearScale,
    baseline: float,
) -> SeriesPath:
    """Full pipeline for one series: scale, connect, close."""
    scaled = series_points(points, series, x_scale, y_scale)
    stroke = build_path(scaled, kind)
    return SeriesPath(
        series=series,
        points=scaled,
        stroke=stroke,
        area=area_commands(stroke, scaled, baseline),
    )


# --- Primitives ---


def stroke_primitive(path: SeriesPath, color: str) -> PathPrimitive:
    return PathPrimitive(
        commands=path.stroke,
        stroke=color,
        stroke_width=STROKE_WIDTH,
        fill=None,
        role="line",
    )


def area_primitive(path: SeriesPath, color: str) -> PathPrimitive:
    start_opacity, end_opacity = AREA_GRADIENT_OPACITY
    return PathPrimitive(
        commands=path.area,
        fill=color,
        gradient=LinearGradient(color, start_opacity, end_opacity),
        role="area",
    )


def dot_primitives(path: SeriesPath, color: str) -> tuple[CirclePrimitive, ...]:
    return tuple(
        CirclePrimitive(
            cx=p.x,
            cy=p.y,
            r=DOT_RADIUS,
            fill=DOT_FILL,
            stroke=color,
            stroke_width=DOT_STROKE_WIDTH,
            role="dot",
        )
        for p in path.points
    )
