"""
Chart component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class ChartRulesPort(Protocol):
    """Port for theme defaults and display text."""

    def get_theme_colors(self) -> dict[str, str]:
        """Get theme colors (primary, secondary, grid, axis, muted_text, background)."""
        ...

    def get_series_names(self, family: str) -> tuple[str, str]:
        """Get legend names for the first and second series of a chart family."""
        ...

    def get_empty_message(self) -> str:
        """Get the placeholder text shown when a chart has no data."""
        ...

    def get_pie_radius_ratio(self) -> float:
        """Get outer pie radius as a fraction of the shorter plot side."""
        ...

    def get_screen_margin(self) -> float:
        """Get horizontal margin between screen edge and chart, per side."""
        ...

    def get_viewport_preset(self, family: str) -> dict[str, Any]:
        """Get viewport preset: {"height": float | None, "padding": {top,right,bottom,left}}."""
        ...
