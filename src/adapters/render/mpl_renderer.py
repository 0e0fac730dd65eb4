import hashlib
import json
import logging
from io import BytesIO
from typing import Any

import matplotlib.figure
from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import to_rgba
from matplotlib.patches import Circle, FancyBboxPatch, Patch, PathPatch, Rectangle, Wedge
from matplotlib.path import Path

from src.domain.primitives import (
    CirclePrimitive,
    LinearGradient,
    LinePrimitive,
    PathCommand,
    PathPrimitive,
    Primitive,
    RectPrimitive,
    RenderPlan,
    TextPrimitive,
    WedgePrimitive,
)
from src.ports.filestore import FileStorePort

logger = logging.getLogger(__name__)

_H_ALIGN = {"start": "left", "middle": "center", "end": "right"}
_WEIGHT = {"regular": "normal", "semibold": "semibold", "bold": "bold"}
_GRADIENT_STEPS = 32


def plan_cache_key(plan: RenderPlan, dpi: int) -> str:
    """Content-addressed cache path for a rendered plan."""
    plan_str = json.dumps(plan.to_dict(), sort_keys=True, default=str)
    digest = hashlib.md5(f"{plan_str}|{dpi}".encode("utf-8")).hexdigest()
    return f"charts/{digest}.png"


def to_mpl_path(commands: tuple[PathCommand, ...]) -> Path:
    """
    Convert M/L/C/Z commands to a matplotlib Path.

    Arcs only occur in pie wedges, which are drawn as Wedge patches.
    """
    vertices: list[tuple[float, float]] = []
    codes: list[int] = []
    start = (0.0, 0.0)
    for cmd in commands:
        if cmd.op == "M":
            start = (cmd.args[0], cmd.args[1])
            vertices.append(start)
            codes.append(Path.MOVETO)
        elif cmd.op == "L":
            vertices.append((cmd.args[0], cmd.args[1]))
            codes.append(Path.LINETO)
        elif cmd.op == "C":
            a = cmd.args
            vertices.extend([(a[0], a[1]), (a[2], a[3]), (a[4], a[5])])
            codes.extend([Path.CURVE4] * 3)
        elif cmd.op == "Z":
            vertices.append(start)
            codes.append(Path.CLOSEPOLY)
        else:
            raise ValueError(f"Unsupported path command for matplotlib: {cmd.op}")
    return Path(vertices, codes)


class MatplotlibRenderer:
    def __init__(self, cache_store: FileStorePort):
        self.cache_store = cache_store

    def render_plan(self, plan: RenderPlan, dpi: int = 100) -> bytes:
        """
        Draw a render plan to PNG bytes.

        Plan coordinates are screen pixels with y growing downward; the axes
        are set up to match so primitives are drawn without conversion.
        Results are cached by plan content.
        """
        # 1. Check Cache
        cache_key = plan_cache_key(plan, dpi)
        try:
            cached = self.cache_store.get(cache_key)
            logger.debug("Chart cache hit: %s", cache_key)
            return cached
        except FileNotFoundError:
            logger.debug("Chart cache miss: %s", cache_key)

        # 2. Render
        width = max(plan.viewport.width, 1.0)
        height = max(plan.viewport.height, 1.0)
        fig = matplotlib.figure.Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        FigureCanvasAgg(fig)  # Attach canvas backend
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()

        # Pixel sizes to points
        pt = 72.0 / dpi

        if plan.no_data:
            ax.text(
                width / 2,
                height / 2,
                plan.empty_message or "",
                ha="center",
                va="center",
                color="#6B7280",
                fontsize=14 * pt,
            )
        else:
            for z, prim in enumerate(plan.primitives, start=1):
                self._draw(ax, prim, z, pt)
            if plan.legend:
                handles = [
                    Patch(
                        facecolor=entry.color,
                        label=f"{entry.name} {entry.detail}" if entry.detail else entry.name,
                    )
                    for entry in plan.legend
                ]
                ax.legend(handles=handles, loc="upper right", fontsize=12 * pt, frameon=False)

        # 3. Save to Bytes
        buf = BytesIO()
        fig.savefig(buf, format="png")
        png_data = buf.getvalue()
        buf.close()
        logger.debug(
            "Rendered %s chart with %d primitives (%d bytes)",
            plan.family,
            len(plan.primitives),
            len(png_data),
        )

        # 4. Write to Cache
        self.cache_store.save(cache_key, png_data)

        return png_data

    def _draw(self, ax: Axes, prim: Primitive, z: int, pt: float) -> None:
        if isinstance(prim, RectPrimitive):
            self._draw_rect(ax, prim, z)
        elif isinstance(prim, PathPrimitive):
            self._draw_path(ax, prim, z, pt)
        elif isinstance(prim, WedgePrimitive):
            ax.add_patch(
                Wedge(
                    (prim.cx, prim.cy),
                    prim.radius,
                    prim.start_angle - 90,
                    prim.end_angle - 90,
                    facecolor=prim.fill,
                    alpha=prim.opacity,
                    linewidth=0,
                    zorder=z,
                )
            )
        elif isinstance(prim, LinePrimitive):
            style: Any = (0, tuple(d * pt for d in prim.dash)) if prim.dash else "solid"
            ax.plot(
                [prim.x1, prim.x2],
                [prim.y1, prim.y2],
                color=prim.stroke,
                linewidth=prim.stroke_width * pt,
                linestyle=style,
                zorder=z,
            )
        elif isinstance(prim, TextPrimitive):
            ax.text(
                prim.x,
                prim.y,
                prim.text,
                ha=_H_ALIGN[prim.anchor],
                va="center" if prim.middle_baseline else "baseline",
                color=prim.fill,
                fontsize=prim.font_size * pt,
                fontweight=_WEIGHT[prim.weight],
                zorder=z,
            )
        elif isinstance(prim, CirclePrimitive):
            ax.add_patch(
                Circle(
                    (prim.cx, prim.cy),
                    prim.r,
                    facecolor=prim.fill,
                    edgecolor=prim.stroke or "none",
                    linewidth=prim.stroke_width * pt,
                    zorder=z,
                )
            )

    def _draw_rect(self, ax: Axes, prim: RectPrimitive, z: int) -> None:
        # Corners cannot round past half the shorter side
        radius = min(prim.corner_radius, prim.width / 2, prim.height / 2)
        if radius > 0:
            patch: Any = FancyBboxPatch(
                (prim.x, prim.y),
                prim.width,
                prim.height,
                boxstyle=f"round,pad=0,rounding_size={radius}",
                linewidth=0,
                zorder=z,
            )
        else:
            patch = Rectangle((prim.x, prim.y), prim.width, prim.height, linewidth=0, zorder=z)

        if prim.gradient is None:
            patch.set_facecolor(prim.fill)
            ax.add_patch(patch)
            return
        patch.set_facecolor("none")
        ax.add_patch(patch)
        self._fill_gradient(
            ax,
            patch,
            prim.gradient,
            (prim.x, prim.x + prim.width, prim.y, prim.y + prim.height),
            z,
        )

    def _draw_path(self, ax: Axes, prim: PathPrimitive, z: int, pt: float) -> None:
        path = to_mpl_path(prim.commands)
        if prim.gradient is not None:
            patch = PathPatch(path, facecolor="none", linewidth=0, zorder=z)
            ax.add_patch(patch)
            xs = [v[0] for v in path.vertices]
            ys = [v[1] for v in path.vertices]
            self._fill_gradient(ax, patch, prim.gradient, (min(xs), max(xs), min(ys), max(ys)), z)
            return
        ax.add_patch(
            PathPatch(
                path,
                facecolor=prim.fill or "none",
                edgecolor=prim.stroke or "none",
                linewidth=prim.stroke_width * pt,
                capstyle="round",
                joinstyle="round",
                zorder=z,
            )
        )

    def _fill_gradient(
        self,
        ax: Axes,
        clip: Any,
        gradient: LinearGradient,
        bounds: tuple[float, float, float, float],
        z: int,
    ) -> None:
        """Vertical opacity ramp clipped to a patch, top to bottom."""
        x0, x1, y0, y1 = bounds
        r, g, b, _ = to_rgba(gradient.color)
        steps = _GRADIENT_STEPS
        ramp = [
            [
                (
                    r,
                    g,
                    b,
                    gradient.start_opacity
                    + (gradient.end_opacity - gradient.start_opacity) * i / (steps - 1),
                )
            ]
            for i in range(steps)
        ]
        image = ax.imshow(
            ramp,
            extent=(x0, x1, y1, y0),
            origin="upper",
            aspect="auto",
            interpolation="bilinear",
            zorder=z,
        )
        image.set_clip_path(clip)
