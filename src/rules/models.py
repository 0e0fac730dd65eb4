from pydantic import BaseModel, Field


class ThemeRules(BaseModel):
    primary: str = "#2563EB"
    secondary: str = "#64748B"
    grid: str = "#E5E7EB"
    axis: str = "#D1D5DB"
    muted_text: str = "#6B7280"
    background: str = "#FFFFFF"

class PaddingRules(BaseModel):
    top: float = Field(0.0, ge=0)
    right: float = Field(0.0, ge=0)
    bottom: float = Field(0.0, ge=0)
    left: float = Field(0.0, ge=0)

class ViewportPreset(BaseModel):
    height: float | None = Field(None, gt=0)  # None = square (height follows width)
    padding: PaddingRules = PaddingRules()

class ViewportRules(BaseModel):
    screen_margin: float = Field(32.0, ge=0)
    bar: ViewportPreset = ViewportPreset(
        height=280, padding=PaddingRules(top=20, right=20, bottom=60, left=50)
    )
    line: ViewportPreset = ViewportPreset(
        height=250, padding=PaddingRules(top=20, right=20, bottom=40, left=50)
    )
    pie: ViewportPreset = ViewportPreset()

class SeriesNamesRules(BaseModel):
    bar: list[str] = Field(default_factory=lambda: ["Principal", "Comparação"])
    line: list[str] = Field(default_factory=lambda: ["Receitas", "Despesas"])

class PieRules(BaseModel):
    radius_ratio: float = Field(1 / 3, gt=0, le=0.5)

class ChartRules(BaseModel):
    theme: ThemeRules = ThemeRules()
    viewports: ViewportRules = ViewportRules()
    series_names: SeriesNamesRules = SeriesNamesRules()
    pie: PieRules = PieRules()
    empty_message: str = "Sem dados para exibir"
