"""
Scale component - Value and category to pixel mapping.
"""

from .component import (
    band_scale,
    bar_domain,
    collect_values,
    has_second_series,
    horizontal_scale,
    line_domain,
    map_index_to_x,
    map_value_to_y,
    map_y_to_value,
    point_scale,
    vertical_scale,
)
from .models import BandScale, LinearScale, PointScale

__all__ = [
    # Contract functions
    "map_index_to_x",
    "map_value_to_y",
    "map_y_to_value",
    # Domains
    "bar_domain",
    "line_domain",
    "collect_values",
    "has_second_series",
    # Builders
    "vertical_scale",
    "horizontal_scale",
    "band_scale",
    "point_scale",
    # Models
    "LinearScale",
    "BandScale",
    "PointScale",
]
