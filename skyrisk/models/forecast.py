"""Daily forecast models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ForecastRecord:
    date: date
    tmax: float | None
    tmin: float | None
    precip: float | None
    wind_max: float | None
