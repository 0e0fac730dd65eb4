"""
Curve component - Line and area path generation.
"""

from .component import (
    AREA_GRADIENT_OPACITY,
    MIN_SPLINE_POINTS,
    STROKE_WIDTH,
    area_commands,
    area_primitive,
    build_path,
    build_series,
    catmull_rom_commands,
    dot_primitives,
    linear_commands,
    resolve_curve_kind,
    series_points,
    stroke_primitive,
)
from .models import CurveKind, CurvePoint, SeriesPath

__all__ = [
    # Builders
    "resolve_curve_kind",
    "linear_commands",
    "catmull_rom_commands",
    "build_path",
    "area_commands",
    "series_points",
    "build_series",
    # Primitives
    "stroke_primitive",
    "area_primitive",
    "dot_primitives",
    # Constants
    "STROKE_WIDTH",
    "AREA_GRADIENT_OPACITY",
    "MIN_SPLINE_POINTS",
    # Models
    "CurveKind",
    "CurvePoint",
    "SeriesPath",
]
