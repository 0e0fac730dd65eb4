"""
Chart rules loading and adapter tests.

Verifies that the rules loader validates rules.yaml structure and that the
adapter feeds theme defaults into the chart entry points.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.components.charts import BarChartInput, run_bar_chart, viewport_for
from src.rules.adapter import RulesChartAdapter
from src.rules.loader import load_rules
from src.rules.models import ChartRules


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


class TestLoadRules:
    """Test rules file loading."""

    def test_project_rules_match_defaults(self, project_root: Path) -> None:
        rules = load_rules(project_root / "rules.yaml")
        assert rules == ChartRules()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("", encoding="utf-8")
        assert load_rules(path) == ChartRules()

    def test_partial_override(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("theme:\n  primary: '#000000'\n", encoding="utf-8")
        rules = load_rules(path)
        assert rules.theme.primary == "#000000"
        assert rules.theme.secondary == "#64748B"

    def test_fenced_block(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(
            "# Chart rules\n\n```yaml\nempty_message: 'Nada aqui'\n```\n\nTrailing notes.\n",
            encoding="utf-8",
        )
        assert load_rules(path).empty_message == "Nada aqui"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("theme: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("pie:\n  radius_ratio: 0.9\n", encoding="utf-8")
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(path)


class TestRulesAdapter:
    """Test the adapter seen by the chart entry points."""

    def test_series_names(self, rules_adapter) -> None:
        assert rules_adapter.get_series_names("bar") == ("Principal", "Comparação")
        assert rules_adapter.get_series_names("line") == ("Receitas", "Despesas")

    def test_series_names_fallback(self) -> None:
        rules = ChartRules.model_validate({"series_names": {"bar": ["Só um"]}})
        adapter = RulesChartAdapter(rules)
        assert adapter.get_series_names("bar") == ("Só um", "2")

    def test_theme_flows_into_plan(self, single_points, plain_viewport) -> None:
        rules = ChartRules.model_validate({"theme": {"primary": "#ABCDEF", "grid": "#010101"}})
        plan = run_bar_chart(
            BarChartInput(single_points, plain_viewport), rules=RulesChartAdapter(rules)
        )
        assert {b.fill for b in plan.by_role("bar")} == {"#ABCDEF"}
        assert {g.stroke for g in plan.by_role("gridline")} == {"#010101"}

    def test_empty_message(self, plain_viewport) -> None:
        rules = ChartRules.model_validate({"empty_message": "No data"})
        plan = run_bar_chart(BarChartInput([], plain_viewport), rules=RulesChartAdapter(rules))
        assert plan.empty_message == "No data"


class TestViewportFor:
    """Test viewport presets."""

    def test_bar(self, rules_adapter) -> None:
        viewport = viewport_for("bar", 400, rules=rules_adapter)
        assert (viewport.width, viewport.height) == (336, 280)
        assert viewport.padding.bottom == 60
        assert viewport.plot_area.width == 266

    def test_line(self) -> None:
        viewport = viewport_for("line", 400)
        assert (viewport.width, viewport.height) == (336, 250)
        assert viewport.padding.bottom == 40

    def test_pie_is_square(self) -> None:
        viewport = viewport_for("pie", 400)
        assert viewport.width == viewport.height == 336
