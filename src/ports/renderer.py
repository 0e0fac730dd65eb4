from typing import Protocol

from src.domain.primitives import RenderPlan


class RenderBackendPort(Protocol):
    def render_plan(self, plan: RenderPlan, dpi: int) -> bytes:
        """Draw a render plan to image bytes (PNG)."""
        ...
