"""Output formatters for risk results: progress bars, text and JSON."""

import json
from datetime import date
from enum import StrEnum

from skyrisk.models.location import Location
from skyrisk.models.risk import RiskCategory, RiskResult

CATEGORY_LABELS = {
    RiskCategory.HOT: "Very Hot",
    RiskCategory.COLD: "Very Cold",
    RiskCategory.WET: "Very Wet",
    RiskCategory.WINDY: "Very Windy",
}

CLIMATOLOGY_BAR = "Climatology Chance"
FORECAST_BAR = "Forecast Risk"
UNAVAILABLE = "n/a"


class RiskLevel(StrEnum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"


LEVEL_COLORS = {
    RiskLevel.LOW: "green",
    RiskLevel.MODERATE: "yellow",
    RiskLevel.HIGH: "orange",
    RiskLevel.SEVERE: "red",
}


def bar_level(value: int) -> RiskLevel:
    if value > 75:
        return RiskLevel.SEVERE
    if value > 50:
        return RiskLevel.HIGH
    if value > 25:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def category_label(category: RiskCategory) -> str:
    return CATEGORY_LABELS[category]


def _bar(label: str, value: int) -> dict:
    level = bar_level(value)
    return {"label": label, "value": value, "level": level.value, "color": LEVEL_COLORS[level]}


def render_bars(result: RiskResult) -> list[dict]:
    """Progress-bar view model per category; the forecast bar is left out when unavailable."""
    panels = []
    for category in RiskCategory:
        risk = result.get(category)
        bars = [_bar(CLIMATOLOGY_BAR, risk.clim_percent)]
        if risk.forecast_percent is not None:
            bars.append(_bar(FORECAST_BAR, risk.forecast_percent))
        panels.append(
            {"category": category.value, "title": category_label(category), "bars": bars}
        )
    return panels


def _percent(value: int | None) -> str:
    return UNAVAILABLE if value is None else f"{value}%"


def format_result_text(location: Location, target_date: date, result: RiskResult) -> str:
    """Plain text table for the terminal."""
    lines = [
        f"=== Weather risk | {location.label} | {target_date.isoformat()} ===",
        f"{'':<12}{'climatology':>12}{'forecast':>10}",
    ]
    for category in RiskCategory:
        risk = result.get(category)
        lines.append(
            f"{category_label(category):<12}"
            f"{_percent(risk.clim_percent):>12}"
            f"{_percent(risk.forecast_percent):>10}"
        )
    if not result.forecast_available:
        lines.append("Forecast unavailable for this date (outside forecast window)")
    return "\n".join(lines)


def format_result_json(location: Location, target_date: date, result: RiskResult) -> str:
    data = {
        "location": {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "name": location.display_name,
        },
        "date": target_date.isoformat(),
        "forecast_available": result.forecast_available,
        "risk": result.as_dict(),
    }
    return json.dumps(data, indent=2)
