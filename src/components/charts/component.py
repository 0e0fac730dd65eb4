"""
Charts component - Bar, line and pie render plan builders.

Entry points turning (dataset, options, viewport) into a RenderPlan of
absolute-pixel primitives for an external drawing backend.

Invariants:
- Pure: identical inputs yield equal plans; nothing is cached or shared
- Empty dataset yields a plan with no primitives and no_data set
- Chart variant (single/grouped, vertical/horizontal, straight/curved) is
  resolved once at entry, never per point
- Contract violations (negative viewport, non-list dataset) raise
  ChartContractError; data edge cases (zeros, flat series) never raise
"""

from __future__ import annotations

import logging
from typing import Any

from src.components.bars import (
    bar_primitives,
    bar_value_labels,
    layout_bars,
    resolve_bar_variant,
)
from src.components.curves import (
    area_primitive,
    build_series,
    dot_primitives,
    resolve_curve_kind,
    stroke_primitive,
)
from src.components.labels import (
    LabelStyle,
    axis_lines,
    bottom_category_labels,
    category_ticks,
    default_format_value,
    gridlines,
    line_label_indices,
    side_category_labels,
    value_tick_labels,
)
from src.components.pie import (
    donut_hole,
    pie_geometry,
    pie_legend,
    slice_angles,
    slice_labels,
    wedge_primitives,
)
from src.components.scale import (
    band_scale,
    bar_domain,
    has_second_series,
    horizontal_scale,
    line_domain,
    point_scale,
    vertical_scale,
)
from src.domain.entities import ChartFamily, Padding, Viewport
from src.domain.primitives import LegendEntry, Primitive, RenderPlan
from src.rules.adapter import default_rules_adapter

from .models import (
    BarChartInput,
    ChartConfig,
    ChartContractError,
    ChartOptions,
    ChartValidationError,
    LineChartInput,
    PieChartInput,
)
from .ports import ChartRulesPort

logger = logging.getLogger(__name__)


# --- Configuration ---


def _build_config(options: ChartOptions, family: ChartFamily, rules: ChartRulesPort | None) -> ChartConfig:
    """Merge caller options over theme defaults from the rules port."""
    port: ChartRulesPort = rules if rules is not None else default_rules_adapter
    theme = port.get_theme_colors()

    return ChartConfig(
        primary_color=options.primary_color or theme["primary"],
        secondary_color=options.secondary_color or theme["secondary"],
        grid_color=theme["grid"],
        axis_color=theme["axis"],
        text_color=theme["muted_text"],
        background_color=theme["background"],
        series_names=port.get_series_names(family) if family != "pie" else ("", ""),
        empty_message=port.get_empty_message(),
        pie_radius_ratio=port.get_pie_radius_ratio(),
        format_value=options.format_value or default_format_value,
    )


def _label_style(config: ChartConfig) -> LabelStyle:
    return LabelStyle(
        grid_color=config.grid_color,
        axis_color=config.axis_color,
        text_color=config.text_color,
    )


def _series_legend(config: ChartConfig) -> tuple[LegendEntry, ...]:
    first, second = config.series_names
    return (
        LegendEntry(name=first, color=config.primary_color),
        LegendEntry(name=second, color=config.secondary_color),
    )


def viewport_for(family: ChartFamily, screen_width: float, *, rules: ChartRulesPort | None = None) -> Viewport:
    """
    Build the preset viewport of a chart family for a screen width.

    Chart width is the screen width minus the margin on both sides; pie
    charts are square.
    """
    port: ChartRulesPort = rules if rules is not None else default_rules_adapter
    preset = port.get_viewport_preset(family)
    width = screen_width - 2 * port.get_screen_margin()
    height = preset.get("height") or width
    return Viewport(width=width, height=height, padding=Padding(**preset.get("padding", {})))


# --- Validation ---


def validate_viewport(viewport: Viewport) -> list[ChartValidationError]:
    """
    Check viewport dimensions.

    Returns:
        List of validation errors (empty if valid)
    """
    errors: list[ChartValidationError] = []

    if viewport.width < 0:
        errors.append(
            ChartValidationError(
                code="NEGATIVE_DIMENSION",
                message="Viewport width cannot be negative",
                field_name="width",
            )
        )
    if viewport.height < 0:
        errors.append(
            ChartValidationError(
                code="NEGATIVE_DIMENSION",
                message="Viewport height cannot be negative",
                field_name="height",
            )
        )

    pad = viewport.padding
    for side in ("top", "right", "bottom", "left"):
        if getattr(pad, side) < 0:
            errors.append(
                ChartValidationError(
                    code="NEGATIVE_PADDING",
                    message=f"Viewport padding '{side}' cannot be negative",
                    field_name=f"padding.{side}",
                )
            )

    if not errors:
        plot = viewport.plot_area
        if plot.width < 0 or plot.height < 0:
            errors.append(
                ChartValidationError(
                    code="PLOT_AREA_NEGATIVE",
                    message="Viewport padding exceeds viewport size",
                    field_name="padding",
                )
            )

    return errors


def validate_dataset(points: Any) -> list[ChartValidationError]:
    """A dataset must be an ordered list or tuple of points."""
    if not isinstance(points, (list, tuple)):
        return [
            ChartValidationError(
                code="INVALID_DATASET",
                message=f"Dataset must be a list or tuple, got {type(points).__name__}",
                field_name="points",
            )
        ]
    return []


def _ensure_valid(points: Any, viewport: Viewport) -> None:
    errors = validate_dataset(points) + validate_viewport(viewport)
    if errors:
        raise ChartContractError(errors)


def _empty_plan(family: ChartFamily, viewport: Viewport, config: ChartConfig) -> RenderPlan:
    logger.debug("%s chart has no data, returning empty plan", family)
    return RenderPlan(
        family=family,
        viewport=viewport,
        no_data=True,
        empty_message=config.empty_message,
    )


# --- Component Entry Points ---


def run_bar_chart(inp: BarChartInput, *, rules: ChartRulesPort | None = None) -> RenderPlan:
    """
    Lay out a single or grouped bar chart.

    Args:
        inp: Dataset, viewport and options.
        rules: Optional rules port for theme defaults.

    Returns:
        RenderPlan with gridlines, bars, value labels, axes and labels.

    Raises:
        ChartContractError: Dataset is not a list/tuple or viewport is invalid.
    """
    _ensure_valid(inp.points, inp.viewport)
    options = inp.options
    config = _build_config(options, "bar", rules)
    if not inp.points:
        return _empty_plan("bar", inp.viewport, config)

    points = inp.points
    plot = inp.viewport.plot_area
    grouped = has_second_series(points)
    variant = resolve_bar_variant(grouped, options.horizontal)
    domain = bar_domain(points)
    style = _label_style(config)
    logger.debug(
        "bar chart: %d points, grouped=%s, orientation=%s", len(points), grouped, variant.orientation
    )

    if variant.orientation == "vertical":
        band = band_scale(len(points), plot.left, plot.width)
        value_scale = vertical_scale(domain, plot)
        place_categories = bottom_category_labels
    else:
        band = band_scale(len(points), plot.top, plot.height)
        value_scale = horizontal_scale(domain, plot)
        place_categories = side_category_labels
    vertical_axis = variant.orientation == "vertical"

    bars = layout_bars(
        points,
        variant,
        band,
        value_scale,
        primary_color=config.primary_color,
        secondary_color=config.secondary_color,
    )

    primitives: list[Primitive] = []
    if options.show_grid:
        primitives.extend(gridlines(value_scale, plot, style, vertical_axis=vertical_axis))
    primitives.extend(bar_primitives(bars, gradient=options.show_gradient))
    if options.show_values:
        primitives.extend(bar_value_labels(bars, variant, config.format_value))
    primitives.extend(axis_lines(plot, style))
    if options.show_labels:
        primitives.extend(
            value_tick_labels(
                value_scale, plot, style, config.format_value, vertical_axis=vertical_axis
            )
        )
        ticks = category_ticks(
            [p.label for p in points],
            [band.center(i) for i in range(len(points))],
        )
        primitives.extend(place_categories(ticks, plot, style))

    legend = _series_legend(config) if grouped and options.show_legend else ()
    return RenderPlan(
        family="bar",
        viewport=inp.viewport,
        primitives=tuple(primitives),
        legend=legend,
    )


def run_line_chart(inp: LineChartInput, *, rules: ChartRulesPort | None = None) -> RenderPlan:
    """
    Lay out a one- or two-series line chart with optional area fill.

    Args:
        inp: Dataset, viewport and options.
        rules: Optional rules port for theme defaults.

    Returns:
        RenderPlan with gridlines, areas, strokes, dots, axes and labels.

    Raises:
        ChartContractError: Dataset is not a list/tuple or viewport is invalid.
    """
    _ensure_valid(inp.points, inp.viewport)
    options = inp.options
    config = _build_config(options, "line", rules)
    if not inp.points:
        return _empty_plan("line", inp.viewport, config)

    points = inp.points
    plot = inp.viewport.plot_area
    dual = has_second_series(points)
    kind = resolve_curve_kind(options.curved, len(points))
    domain = line_domain(points)
    style = _label_style(config)
    logger.debug("line chart: %d points, dual=%s, curve=%s", len(points), dual, kind)

    x_scale = point_scale(len(points), plot)
    y_scale = vertical_scale(domain, plot)
    colors = (config.primary_color, config.secondary_color)
    series = [
        build_series(points, index, kind, x_scale, y_scale, plot.baseline)
        for index in range(2 if dual else 1)
    ]

    primitives: list[Primitive] = []
    if options.show_grid:
        primitives.extend(gridlines(y_scale, plot, style))
    if options.show_gradient:
        primitives.extend(area_primitive(path, colors[path.series]) for path in series)
    primitives.extend(stroke_primitive(path, colors[path.series]) for path in series)
    if options.show_dots:
        for path in series:
            primitives.extend(dot_primitives(path, colors[path.series]))
    primitives.extend(axis_lines(plot, style))
    if options.show_labels:
        primitives.extend(value_tick_labels(y_scale, plot, style, config.format_value))
        ticks = category_ticks(
            [p.label for p in points],
            [x_scale.position(i) for i in range(len(points))],
            wrap=False,
            indices=line_label_indices(len(points)),
        )
        primitives.extend(bottom_category_labels(ticks, plot, style))

    legend = _series_legend(config) if dual and options.show_legend else ()
    return RenderPlan(
        family="line",
        viewport=inp.viewport,
        primitives=tuple(primitives),
        legend=legend,
    )


def run_pie_chart(inp: PieChartInput, *, rules: ChartRulesPort | None = None) -> RenderPlan:
    """
    Lay out a donut chart from pre-normalized percentages.

    Percentages are used as given: a set summing to less than 100 leaves a
    gap, more than 100 overlaps. Use compute_percentages to normalize.

    Args:
        inp: Items, viewport and options.
        rules: Optional rules port for theme defaults.

    Returns:
        RenderPlan with wedges, the donut hole, slice labels and a legend.

    Raises:
        ChartContractError: Dataset is not a list/tuple or viewport is invalid.
    """
    _ensure_valid(inp.items, inp.viewport)
    options = inp.options
    config = _build_config(options, "pie", rules)
    if not inp.items:
        return _empty_plan("pie", inp.viewport, config)

    items = inp.items
    geometry = pie_geometry(inp.viewport.plot_area, config.pie_radius_ratio)
    angles = slice_angles([item.percentage for item in items])
    logger.debug("pie chart: %d slices, radius=%.2f", len(items), geometry.radius)

    primitives: list[Primitive] = []
    primitives.extend(wedge_primitives(items, angles, geometry))
    primitives.append(donut_hole(geometry, color=config.background_color))
    if options.show_labels:
        primitives.extend(slice_labels(items, angles, geometry, color=config.background_color))

    return RenderPlan(
        family="pie",
        viewport=inp.viewport,
        primitives=tuple(primitives),
        legend=pie_legend(items) if options.show_legend else (),
    )


def run(
    inp: BarChartInput | LineChartInput | PieChartInput,
    *,
    rules: ChartRulesPort | None = None,
) -> RenderPlan:
    """
    Main entry point for the charts component.

    Dispatches to the chart family matching the input type.
    """
    if isinstance(inp, BarChartInput):
        return run_bar_chart(inp, rules=rules)
    elif isinstance(inp, LineChartInput):
        return run_line_chart(inp, rules=rules)
    elif isinstance(inp, PieChartInput):
        return run_pie_chart(inp, rules=rules)
    else:
        raise TypeError(f"Unknown chart input type: {type(inp).__name__}")
