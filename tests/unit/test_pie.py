"""
Tests for the pie component.
"""

from __future__ import annotations

import pytest

from src.components.pie import (
    PieGeometry,
    SliceAngles,
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
from src.domain.entities import PieDataPoint, PlotArea

GEOMETRY = PieGeometry(cx=150, cy=150, radius=100)


def _item(pct: float, label: str = "x") -> PieDataPoint:
    return PieDataPoint(label=label, value=pct, percentage=pct, color="#123456")


# --- Percentage Tests ---


class TestComputePercentages:
    """Test caller-side normalization."""

    def test_shares(self) -> None:
        assert compute_percentages([500, 300, 200]) == pytest.approx([50, 30, 20])

    def test_zero_total(self) -> None:
        assert compute_percentages([0, 0]) == [0, 0]

    def test_empty(self) -> None:
        assert compute_percentages([]) == []


# --- Angle Tests ---


class TestSliceAngles:
    """Test cumulative angle assignment."""

    def test_starts_at_minus_ninety(self) -> None:
        angles = slice_angles([50, 30, 20])
        assert [(a.start, a.end) for a in angles] == [(-90, 90), (90, 198), (198, 270)]

    def test_contiguous(self) -> None:
        angles = slice_angles([12.5, 7.25, 40, 40.25])
        for prev, nxt in zip(angles, angles[1:]):
            assert nxt.start == prev.end

    def test_dataset_order_kept(self) -> None:
        angles = slice_angles([10, 90])
        assert angles[0].sweep == pytest.approx(36)
        assert angles[1].sweep == pytest.approx(324)

    def test_under_hundred_leaves_gap(self) -> None:
        angles = slice_angles([40, 40])
        assert angles[-1].end == pytest.approx(198)

    def test_mid(self) -> None:
        assert SliceAngles(start=-90, end=90).mid == 0


class TestGeometry:
    """Test polar mapping and pie sizing."""

    def test_polar_zero_is_twelve_o_clock_offset(self) -> None:
        x, y = polar_to_cartesian(150, 150, 100, 90)
        assert (x, y) == pytest.approx((250, 150))

    def test_polar_angle_zero(self) -> None:
        x, y = polar_to_cartesian(150, 150, 100, 0)
        assert (x, y) == pytest.approx((150, 50))

    def test_pie_geometry_uses_shorter_side(self) -> None:
        geometry = pie_geometry(PlotArea(left=0, top=0, width=400, height=300), 1 / 3)
        assert (geometry.cx, geometry.cy) == (200, 150)
        assert geometry.radius == pytest.approx(100)

    def test_large_arc_flag(self) -> None:
        assert is_large_arc(SliceAngles(start=-90, end=90)) is False
        assert is_large_arc(SliceAngles(start=-90, end=91)) is True


# --- Wedge Tests ---


class TestWedgeCommands:
    """Test wedge outlines."""

    def test_outline_shape(self) -> None:
        commands = wedge_commands(GEOMETRY, SliceAngles(start=0, end=90))
        assert [c.op for c in commands] == ["M", "L", "A", "Z"]
        assert commands[0].args == (150, 150)
        assert commands[1].args == pytest.approx((150, 50))
        rx, ry, rotation, large, sweep, x, y = commands[2].args
        assert (rx, ry, rotation, large, sweep) == (100, 100, 0, 0, 1)
        assert (x, y) == pytest.approx((250, 150))

    def test_large_arc_in_outline(self) -> None:
        commands = wedge_commands(GEOMETRY, SliceAngles(start=-90, end=200))
        assert commands[2].args[3] == 1

    def test_full_circle_uses_two_arcs(self) -> None:
        commands = wedge_commands(GEOMETRY, SliceAngles(start=-90, end=270))
        assert [c.op for c in commands] == ["M", "L", "A", "A", "Z"]
        assert commands[3].args[5:] == pytest.approx(commands[1].args)

    def test_primitives(self) -> None:
        items = [_item(50, "a"), _item(50, "b")]
        wedges = wedge_primitives(items, slice_angles([50, 50]), GEOMETRY)
        assert [w.label for w in wedges] == ["a", "b"]
        assert all(w.opacity == 0.9 and w.kind == "wedge" for w in wedges)
        assert wedges[0].d.startswith("M 150 150 L")


# --- Label Tests ---


class TestSliceLabels:
    """Test slice label placement."""

    def test_threshold(self) -> None:
        assert should_label(5.0) is True
        assert should_label(4.9) is False

    def test_small_slices_skipped(self) -> None:
        items = [_item(4.9, "small"), _item(5.0, "edge"), _item(90.1, "big")]
        labels = slice_labels(items, slice_angles([4.9, 5.0, 90.1]), GEOMETRY, color="#FFFFFF")
        assert [lbl.text for lbl in labels] == ["5%", "90%"]

    def test_anchor_at_seventy_percent(self) -> None:
        x, y = label_anchor(GEOMETRY, SliceAngles(start=0, end=0))
        assert (x, y) == pytest.approx((150, 80))

    def test_label_style(self) -> None:
        (label,) = slice_labels([_item(100)], slice_angles([100]), GEOMETRY, color="#FFFFFF")
        assert label.text == "100%"
        assert label.weight == "bold"
        assert label.font_size == 14
        assert label.fill == "#FFFFFF"

    def test_donut_hole(self) -> None:
        hole = donut_hole(GEOMETRY, color="#FFFFFF")
        assert (hole.cx, hole.cy) == (150, 150)
        assert hole.r == pytest.approx(40)
        assert hole.role == "donut-hole"

    def test_legend(self) -> None:
        legend = pie_legend([_item(33.333, "a"), _item(66.667, "b")])
        assert [(e.name, e.detail) for e in legend] == [("a", "33.3%"), ("b", "66.7%")]
