"""
Pie component - Slice angles, wedge outlines and donut geometry.
"""

from .component import (
    DONUT_HOLE_RATIO,
    LABEL_RADIUS_RATIO,
    MIN_LABEL_PERCENTAGE,
    START_ANGLE,
    compute_percentages,
    donut_hole,
    is_large_arc,
    label_anchor,
    pie_geometry,
    pie_legend,
    polar_to_cartesian,
    should_label,
    slice_angles,
    slice_labels,
    wedge_commands,
    wedge_primitives,
)
from .models import PieGeometry, SliceAngles

__all__ = [
    # Angles & geometry
    "slice_angles",
    "polar_to_cartesian",
    "pie_geometry",
    "is_large_arc",
    "wedge_commands",
    "should_label",
    "label_anchor",
    # Primitives
    "wedge_primitives",
    "slice_labels",
    "donut_hole",
    "pie_legend",
    # Caller helpers
    "compute_percentages",
    # Constants
    "START_ANGLE",
    "MIN_LABEL_PERCENTAGE",
    "LABEL_RADIUS_RATIO",
    "DONUT_HOLE_RATIO",
    # Models
    "PieGeometry",
    "SliceAngles",
]
