from pathlib import Path

import pytest

from src.domain.entities import DataPoint, Padding, PieDataPoint, Viewport
from src.rules.adapter import RulesChartAdapter
from src.rules.loader import load_rules


@pytest.fixture
def rules_adapter():
    """
    Rules adapter backed by the REAL rules.yaml from the project root.
    """
    rules_path = Path(__file__).parent.parent / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return RulesChartAdapter(load_rules(rules_path))


@pytest.fixture
def plain_viewport():
    """300x150 viewport without padding: the plot area is the whole viewport."""
    return Viewport(width=300, height=150)


@pytest.fixture
def padded_viewport():
    return Viewport(width=400, height=280, padding=Padding(top=20, right=20, bottom=60, left=50))


@pytest.fixture
def square_viewport():
    return Viewport(width=300, height=300)


@pytest.fixture
def single_points():
    return [
        DataPoint(label="Jan", value=10),
        DataPoint(label="Fev", value=20),
        DataPoint(label="Mar", value=0),
    ]


@pytest.fixture
def dual_points():
    return [
        DataPoint(label="Jan", value=10, second_value=5),
        DataPoint(label="Fev", value=20, second_value=15),
        DataPoint(label="Mar", value=0, second_value=8),
    ]


@pytest.fixture
def pie_items():
    return [
        PieDataPoint(label="Moradia", value=500, percentage=50, color="#2563EB"),
        PieDataPoint(label="Mercado", value=300, percentage=30, color="#16A34A"),
        PieDataPoint(label="Lazer", value=200, percentage=20, color="#F59E0B"),
    ]
