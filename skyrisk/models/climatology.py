"""Monthly climatology models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClimatologyRecord:
    month: int  # 0-11
    tmax: float  # °C
    tmin: float  # °C
    precip: float  # mm
    wind: float  # km/h
