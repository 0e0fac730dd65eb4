"""
Tests for the scale component.

Covers value domains, the exact endpoint mapping and category positions.
"""

from __future__ import annotations

import pytest

from src.components.scale import (
    BandScale,
    PointScale,
    bar_domain,
    collect_values,
    has_second_series,
    horizontal_scale,
    line_domain,
    map_index_to_x,
    map_value_to_y,
    map_y_to_value,
    vertical_scale,
)
from src.domain.entities import DataPoint, PlotArea, ValueDomain

PLOT = PlotArea(left=50, top=20, width=330, height=200)


# --- Domain Tests ---


class TestDomains:
    """Test value domain derivation."""

    def test_bar_domain_starts_at_zero(self) -> None:
        points = [DataPoint(label="a", value=5), DataPoint(label="b", value=12)]
        assert bar_domain(points) == ValueDomain(min=0, max=12)

    def test_bar_domain_max_floored_at_one(self) -> None:
        points = [DataPoint(label="a", value=0), DataPoint(label="b", value=0.5)]
        assert bar_domain(points).max == 1

    def test_bar_domain_includes_second_series(self) -> None:
        points = [DataPoint(label="a", value=5, second_value=40)]
        assert bar_domain(points).max == 40

    def test_line_domain_extends_below_zero(self) -> None:
        points = [DataPoint(label="a", value=-30), DataPoint(label="b", value=10)]
        assert line_domain(points) == ValueDomain(min=-30, max=10)

    def test_line_domain_all_positive_starts_at_zero(self) -> None:
        points = [DataPoint(label="a", value=100), DataPoint(label="b", value=200)]
        assert line_domain(points).min == 0

    def test_missing_second_value_counts_as_zero(self) -> None:
        points = [DataPoint(label="a", value=3, second_value=4), DataPoint(label="b", value=5)]
        assert collect_values(points) == [3, 4, 5, 0]

    def test_has_second_series(self) -> None:
        assert has_second_series([DataPoint(label="a", value=1)]) is False
        assert has_second_series(
            [DataPoint(label="a", value=1), DataPoint(label="b", value=1, second_value=0)]
        ) is True

    def test_zero_span_falls_back_to_one(self) -> None:
        assert ValueDomain(min=7, max=7).span == 1


# --- Value Mapping Tests ---


class TestValueMapping:
    """Test value to pixel mapping."""

    def test_min_maps_to_baseline_exactly(self) -> None:
        domain = ValueDomain(min=0, max=7)
        assert map_value_to_y(0, domain, PLOT) == PLOT.baseline

    def test_max_maps_to_top_exactly(self) -> None:
        domain = ValueDomain(min=-3.3, max=7.7)
        assert map_value_to_y(7.7, domain, PLOT) == PLOT.top

    def test_midpoint(self) -> None:
        domain = ValueDomain(min=0, max=100)
        assert map_value_to_y(50, domain, PLOT) == pytest.approx(120)

    def test_higher_value_smaller_y(self) -> None:
        domain = ValueDomain(min=0, max=100)
        assert map_value_to_y(80, domain, PLOT) < map_value_to_y(20, domain, PLOT)

    def test_zero_span_is_flat_and_finite(self) -> None:
        domain = ValueDomain(min=0, max=0)
        assert map_value_to_y(0, domain, PLOT) == PLOT.baseline

    def test_inverse_mapping(self) -> None:
        domain = ValueDomain(min=-50, max=150)
        y = map_value_to_y(42, domain, PLOT)
        assert map_y_to_value(y, domain, PLOT) == pytest.approx(42)

    def test_horizontal_scale_runs_right(self) -> None:
        scale = horizontal_scale(ValueDomain(min=0, max=10), PLOT)
        assert scale.to_pixel(0) == PLOT.left
        assert scale.to_pixel(10) == PLOT.right
        assert scale.direction == 1

    def test_vertical_scale_extent(self) -> None:
        scale = vertical_scale(ValueDomain(min=0, max=20), PLOT)
        assert scale.direction == -1
        assert scale.extent(0, 10) == pytest.approx(100)


# --- Category Mapping Tests ---


class TestCategoryMapping:
    """Test index to pixel mapping."""

    def test_band_centers(self) -> None:
        band = BandScale(count=3, start=0, length=300)
        assert [band.center(i) for i in range(3)] == [50, 150, 250]

    def test_point_positions_anchor_edges(self) -> None:
        scale = PointScale(count=4, start=50, length=330)
        assert scale.position(0) == 50
        assert scale.position(3) == 380

    def test_single_point_at_left_edge(self) -> None:
        assert PointScale(count=1, start=50, length=330).position(0) == 50

    def test_map_index_slot_center(self) -> None:
        assert map_index_to_x(0, 3, PLOT) == pytest.approx(50 + 55)

    def test_map_index_anchored(self) -> None:
        assert map_index_to_x(2, 3, PLOT, anchored=True) == pytest.approx(PLOT.right)

    def test_nearest_index_clamped(self) -> None:
        scale = PointScale(count=5, start=0, length=400)
        assert scale.nearest_index(-30) == 0
        assert scale.nearest_index(190) == 2
        assert scale.nearest_index(999) == 4
