"""
Charts component - Bar, line and pie render plan entry points.
"""

from .component import (
    run,
    run_bar_chart,
    run_line_chart,
    run_pie_chart,
    validate_dataset,
    validate_viewport,
    viewport_for,
)
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

__all__ = [
    # Entry points
    "run",
    "run_bar_chart",
    "run_line_chart",
    "run_pie_chart",
    # Helpers
    "viewport_for",
    "validate_viewport",
    "validate_dataset",
    # Input models
    "BarChartInput",
    "LineChartInput",
    "PieChartInput",
    "ChartOptions",
    "ChartConfig",
    # Errors
    "ChartValidationError",
    "ChartContractError",
    # Ports
    "ChartRulesPort",
]
