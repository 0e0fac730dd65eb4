"""
Tests for the line chart entry point.
"""

from __future__ import annotations

import pytest

from src.components.charts import ChartOptions, LineChartInput, run_line_chart
from src.domain.entities import DataPoint


def _roles(plan) -> list[str]:
    seen: list[str] = []
    for prim in plan.primitives:
        if prim.role not in seen:
            seen.append(prim.role)
    return seen


class TestLineChart:
    """Test line and area plans."""

    def test_single_series_plan(self, single_points, plain_viewport) -> None:
        plan = run_line_chart(LineChartInput(single_points, plain_viewport))

        assert plan.family == "line"
        assert _roles(plan) == [
            "gridline",
            "area",
            "line",
            "dot",
            "axis",
            "value-tick",
            "category-label",
        ]
        assert len(plan.by_role("line")) == 1
        assert len(plan.by_role("area")) == 1
        assert [(d.cx, d.cy) for d in plan.by_role("dot")] == [(0, 75), (150, 0), (300, 150)]
        assert plan.legend == ()

    def test_curved_by_default(self, single_points, plain_viewport) -> None:
        plan = run_line_chart(LineChartInput(single_points, plain_viewport))
        (line,) = plan.by_role("line")
        assert [c.op for c in line.commands] == ["M", "C", "C"]

    def test_straight(self, single_points, plain_viewport) -> None:
        options = ChartOptions(curved=False)
        plan = run_line_chart(LineChartInput(single_points, plain_viewport, options))
        (line,) = plan.by_role("line")
        assert line.d == "M 0 75 L 150 0 L 300 150"

    def test_area_closes_on_baseline(self, single_points, plain_viewport) -> None:
        plan = run_line_chart(LineChartInput(single_points, plain_viewport))
        (area,) = plan.by_role("area")
        assert area.d.endswith("L 300 150 L 0 150 Z")

    def test_two_points_curved_is_straight(self, plain_viewport) -> None:
        points = [DataPoint(label="a", value=5), DataPoint(label="b", value=10)]
        plan = run_line_chart(LineChartInput(points, plain_viewport))
        (line,) = plan.by_role("line")
        assert line.d == "M 0 75 L 300 0"

    def test_single_point(self, plain_viewport) -> None:
        plan = run_line_chart(LineChartInput([DataPoint(label="a", value=5)], plain_viewport))
        (line,) = plan.by_role("line")
        assert [c.op for c in line.commands] == ["M"]
        (dot,) = plan.by_role("dot")
        assert dot.cx == 0

    def test_dual_series(self, dual_points, plain_viewport) -> None:
        plan = run_line_chart(LineChartInput(dual_points, plain_viewport))

        lines = plan.by_role("line")
        assert [ln.stroke for ln in lines] == ["#2563EB", "#64748B"]
        assert len(plan.by_role("dot")) == 6
        assert [e.name for e in plan.legend] == ["Receitas", "Despesas"]

    def test_toggles(self, single_points, plain_viewport) -> None:
        options = ChartOptions(show_gradient=False, show_dots=False, show_grid=False)
        plan = run_line_chart(LineChartInput(single_points, plain_viewport, options))
        assert _roles(plan) == ["line", "axis", "value-tick", "category-label"]

    def test_negative_values_extend_domain(self, plain_viewport) -> None:
        points = [DataPoint(label="a", value=-10), DataPoint(label="b", value=10)]
        plan = run_line_chart(LineChartInput(points, plain_viewport))
        ticks = [t.text for t in plan.by_role("value-tick")]
        assert ticks == ["-10", "-6", "-2", "2", "6", "10"]
        dots = plan.by_role("dot")
        assert dots[0].cy == 150
        assert dots[1].cy == 0

    def test_labels_thinned_and_raw(self, plain_viewport) -> None:
        points = [DataPoint(label=f"Conta de Luz {i}", value=i) for i in range(12)]
        plan = run_line_chart(LineChartInput(points, plain_viewport))
        texts = [t.text for t in plan.by_role("category-label")]
        assert texts == [f"Conta de Luz {i}" for i in (0, 2, 4, 6, 8, 10, 11)]

    def test_flat_series(self, plain_viewport) -> None:
        points = [DataPoint(label="a", value=0), DataPoint(label="b", value=0)]
        plan = run_line_chart(LineChartInput(points, plain_viewport))
        assert all(d.cy == 150 for d in plan.by_role("dot"))

    def test_empty(self, plain_viewport) -> None:
        plan = run_line_chart(LineChartInput([], plain_viewport))
        assert plan.no_data is True
        assert plan.primitives == ()

    def test_dots_follow_padding(self, single_points, padded_viewport) -> None:
        plan = run_line_chart(LineChartInput(single_points, padded_viewport))
        dots = plan.by_role("dot")
        assert dots[0].cx == pytest.approx(50)
        assert dots[-1].cx == pytest.approx(380)
