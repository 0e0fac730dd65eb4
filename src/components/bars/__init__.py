"""
Bar layout component - Single and grouped bar placement.
"""

from .component import (
    BAR_CORNER_RADIUS,
    BAR_GRADIENT_OPACITY,
    GROUP_GAP_RATIO,
    GROUPED_BAR_RATIO,
    SINGLE_BAR_RATIO,
    bar_primitives,
    bar_value_labels,
    layout_bars,
    resolve_bar_variant,
)
from .models import BarGeometry, BarVariant, Orientation, SeriesSlot

__all__ = [
    # Entry points
    "resolve_bar_variant",
    "layout_bars",
    "bar_primitives",
    "bar_value_labels",
    # Constants
    "SINGLE_BAR_RATIO",
    "GROUPED_BAR_RATIO",
    "GROUP_GAP_RATIO",
    "BAR_CORNER_RADIUS",
    "BAR_GRADIENT_OPACITY",
    # Models
    "BarGeometry",
    "BarVariant",
    "Orientation",
    "SeriesSlot",
]
