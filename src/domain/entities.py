from typing import Literal

from pydantic import BaseModel, ConfigDict

# --- Enums / Literals ---
ChartFamily = Literal["bar", "line", "pie"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Data points ---

class DataPoint(_Frozen):
    label: str
    value: float
    second_value: float | None = None
    color: str | None = None


class PieDataPoint(_Frozen):
    label: str
    value: float
    percentage: float  # Caller-normalized, not re-checked by the engine
    color: str


# --- Viewport ---

class Padding(_Frozen):
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


class PlotArea(_Frozen):
    """Drawable region of a viewport, in absolute pixels."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def baseline(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2


class Viewport(_Frozen):
    width: float
    height: float
    padding: Padding = Padding()

    @property
    def plot_area(self) -> PlotArea:
        return PlotArea(
            left=self.padding.left,
            top=self.padding.top,
            width=self.width - self.padding.left - self.padding.right,
            height=self.height - self.padding.top - self.padding.bottom,
        )


# --- Value domain ---

class ValueDomain(_Frozen):
    min: float
    max: float

    @property
    def span(self) -> float:
        # Zero span (all values equal) maps to a flat series instead of dividing by zero
        return (self.max - self.min) or 1.0
