"""
Render plan primitives.

Everything a drawing backend needs, already in absolute pixel coordinates.
Primitives are frozen values: two plans built from the same inputs compare
equal, which is what backends rely on to skip redundant redraws.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal, Union

from src.domain.entities import ChartFamily, Viewport

PathOp = Literal["M", "L", "C", "A", "Z"]
TextAnchor = Literal["start", "middle", "end"]
FontWeight = Literal["regular", "semibold", "bold"]


# --- Fills ---


@dataclass(frozen=True)
class LinearGradient:
    """Vertical (top to bottom) single-color opacity ramp."""

    color: str
    start_opacity: float
    end_opacity: float


# --- Paths ---


@dataclass(frozen=True)
class PathCommand:
    """One absolute SVG-style path command."""

    op: PathOp
    args: tuple[float, ...] = ()


def _num(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def path_to_svg(commands: tuple[PathCommand, ...]) -> str:
    """Render path commands as an SVG ``d`` attribute."""
    parts: list[str] = []
    for cmd in commands:
        if cmd.op == "Z":
            parts.append("Z")
        elif cmd.op == "A":
            rx, ry, rotation, large, sweep, x, y = cmd.args
            parts.append(
                f"A {_num(rx)} {_num(ry)} {_num(rotation)} {int(large)} {int(sweep)} "
                f"{_num(x)} {_num(y)}"
            )
        else:
            parts.append(" ".join([cmd.op, *(_num(a) for a in cmd.args)]))
    return " ".join(parts)


# --- Primitives ---


@dataclass(frozen=True)
class RectPrimitive:
    x: float
    y: float
    width: float
    height: float
    fill: str
    gradient: LinearGradient | None = None
    corner_radius: float = 0.0
    role: str = "bar"
    kind: Literal["rect"] = field(default="rect", init=False)


@dataclass(frozen=True)
class PathPrimitive:
    commands: tuple[PathCommand, ...]
    stroke: str | None = None
    stroke_width: float = 0.0
    fill: str | None = None
    gradient: LinearGradient | None = None
    role: str = "line"
    kind: Literal["path"] = field(default="path", init=False)

    @property
    def d(self) -> str:
        return path_to_svg(self.commands)


@dataclass(frozen=True)
class WedgePrimitive:
    """One pie slice: angles in degrees plus its closed outline."""

    cx: float
    cy: float
    radius: float
    start_angle: float
    end_angle: float
    large_arc: bool
    commands: tuple[PathCommand, ...]
    fill: str
    opacity: float = 1.0
    label: str = ""
    role: str = "slice"
    kind: Literal["wedge"] = field(default="wedge", init=False)

    @property
    def d(self) -> str:
        return path_to_svg(self.commands)


@dataclass(frozen=True)
class LinePrimitive:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float = 1.0
    dash: tuple[float, ...] | None = None
    role: str = "axis"
    kind: Literal["line"] = field(default="line", init=False)


@dataclass(frozen=True)
class TextPrimitive:
    x: float
    y: float
    text: str
    fill: str
    font_size: float = 12.0
    anchor: TextAnchor = "middle"
    middle_baseline: bool = False
    weight: FontWeight = "regular"
    role: str = "label"
    kind: Literal["text"] = field(default="text", init=False)


@dataclass(frozen=True)
class CirclePrimitive:
    cx: float
    cy: float
    r: float
    fill: str
    stroke: str | None = None
    stroke_width: float = 0.0
    role: str = "dot"
    kind: Literal["circle"] = field(default="circle", init=False)


Primitive = Union[
    RectPrimitive,
    PathPrimitive,
    WedgePrimitive,
    LinePrimitive,
    TextPrimitive,
    CirclePrimitive,
]


# --- Plan ---


@dataclass(frozen=True)
class LegendEntry:
    name: str
    color: str
    detail: str | None = None


@dataclass(frozen=True)
class RenderPlan:
    """Complete, backend-agnostic description of one chart."""

    family: ChartFamily
    viewport: Viewport
    primitives: tuple[Primitive, ...] = ()
    legend: tuple[LegendEntry, ...] = ()
    no_data: bool = False
    empty_message: str | None = None

    def by_role(self, role: str) -> tuple[Primitive, ...]:
        return tuple(p for p in self.primitives if p.role == role)

    def by_kind(self, kind: str) -> tuple[Primitive, ...]:
        return tuple(p for p in self.primitives if p.kind == kind)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible form, stable for identical plans."""
        return {
            "family": self.family,
            "viewport": self.viewport.model_dump(),
            "primitives": [asdict(p) for p in self.primitives],
            "legend": [asdict(entry) for entry in self.legend],
            "no_data": self.no_data,
            "empty_message": self.empty_message,
        }
