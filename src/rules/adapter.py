"""
Rules adapter for the chart components.
"""

from __future__ import annotations

from typing import Any

from src.rules.models import ChartRules


class RulesChartAdapter:
    """Serves a loaded ChartRules document through the chart rules port."""

    def __init__(self, rules: ChartRules):
        self.rules = rules

    def get_theme_colors(self) -> dict[str, str]:
        return self.rules.theme.model_dump()

    def get_series_names(self, family: str) -> tuple[str, str]:
        names = getattr(self.rules.series_names, family, None) or []
        first = names[0] if len(names) > 0 else "1"
        second = names[1] if len(names) > 1 else "2"
        return first, second

    def get_empty_message(self) -> str:
        return self.rules.empty_message

    def get_pie_radius_ratio(self) -> float:
        return self.rules.pie.radius_ratio

    def get_screen_margin(self) -> float:
        return self.rules.viewports.screen_margin

    def get_viewport_preset(self, family: str) -> dict[str, Any]:
        preset = getattr(self.rules.viewports, family)
        return preset.model_dump()


# Built-in defaults, used when no rules port is supplied
default_rules_adapter = RulesChartAdapter(ChartRules())
