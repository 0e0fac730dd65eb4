"""
Label component - Gridlines, value ticks and category labels.
"""

from .component import (
    ELLIPSIS,
    GRID_DIVISIONS,
    axis_lines,
    bottom_category_labels,
    category_ticks,
    default_format_value,
    format_category_label,
    format_fixed,
    gridlines,
    line_label_indices,
    side_category_labels,
    tick_values,
    value_tick_labels,
)
from .models import CategoryTick, LabelStyle, ValueFormatter

__all__ = [
    # Text formatting
    "format_category_label",
    "format_fixed",
    "default_format_value",
    # Value axis
    "tick_values",
    "gridlines",
    "value_tick_labels",
    "axis_lines",
    # Category axis
    "line_label_indices",
    "category_ticks",
    "bottom_category_labels",
    "side_category_labels",
    # Constants
    "GRID_DIVISIONS",
    "ELLIPSIS",
    # Models
    "CategoryTick",
    "LabelStyle",
    "ValueFormatter",
]
