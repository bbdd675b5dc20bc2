"""Risk score models."""

from dataclasses import dataclass
from enum import StrEnum


class RiskCategory(StrEnum):
    HOT = "hot"
    COLD = "cold"
    WET = "wet"
    WINDY = "windy"


@dataclass(frozen=True)
class CategoryRisk:
    clim_percent: int
    forecast_percent: int | None  # None: no forecast for the date


@dataclass(frozen=True)
class RiskResult:
    hot: CategoryRisk
    cold: CategoryRisk
    wet: CategoryRisk
    windy: CategoryRisk

    def get(self, category: RiskCategory) -> CategoryRisk:
        return getattr(self, category.value)

    @property
    def forecast_available(self) -> bool:
        return all(self.get(c).forecast_percent is not None for c in RiskCategory)

    def as_dict(self) -> dict[str, dict[str, int | None]]:
        return {
            c.value: {
                "clim": self.get(c).clim_percent,
                "fc": self.get(c).forecast_percent,
            }
            for c in RiskCategory
        }
