"""Risk evaluator: threshold scoring of climatology and forecast records."""

import math

from skyrisk.config.schema import RiskThresholds
from skyrisk.models.climatology import ClimatologyRecord
from skyrisk.models.forecast import ForecastRecord
from skyrisk.models.risk import CategoryRisk, RiskCategory, RiskResult
from skyrisk.risk.jitter import JitterSource, RandomJitter

MAX_PERCENT = 100


def _at_least(value: float | None, threshold: float) -> bool:
    return value is not None and value >= threshold


def _at_most(value: float | None, threshold: float) -> bool:
    return value is not None and value <= threshold


def climatology_hits(
    record: ClimatologyRecord, thresholds: RiskThresholds
) -> dict[RiskCategory, bool]:
    return {
        RiskCategory.HOT: _at_least(record.tmax, thresholds.hot_tmax_c),
        RiskCategory.COLD: _at_most(record.tmin, thresholds.cold_tmin_c),
        RiskCategory.WET: _at_least(record.precip, thresholds.wet_precip_mm),
        RiskCategory.WINDY: _at_least(record.wind, thresholds.windy_wind_kmh),
    }


def forecast_hits(
    record: ForecastRecord, thresholds: RiskThresholds
) -> dict[RiskCategory, bool]:
    """Threshold tests on one forecast day. A null field never hits."""
    return {
        RiskCategory.HOT: _at_least(record.tmax, thresholds.hot_tmax_c),
        RiskCategory.COLD: _at_most(record.tmin, thresholds.cold_tmin_c),
        RiskCategory.WET: _at_least(record.precip, thresholds.wet_precip_mm),
        RiskCategory.WINDY: _at_least(record.wind_max, thresholds.windy_wind_kmh),
    }


def jittered_percent(hit: bool, jitter: float) -> int:
    """Base 100/0 plus jitter, floored and clamped to [0, 100]."""
    base = MAX_PERCENT if hit else 0
    return max(0, min(math.floor(base + jitter), MAX_PERCENT))


class RiskEvaluator:
    def __init__(
        self,
        thresholds: RiskThresholds | None = None,
        jitter: JitterSource | None = None,
    ):
        self.thresholds = thresholds or RiskThresholds()
        self.jitter = jitter if jitter is not None else RandomJitter()

    def evaluate(
        self, clim: ClimatologyRecord, forecast: ForecastRecord | None
    ) -> RiskResult:
        """Score all four categories.

        Climatology scores carry jitter; forecast scores are exactly 0 or 100,
        or None for every category when no forecast day matched.
        """
        clim_hit = climatology_hits(clim, self.thresholds)
        fc_hit = forecast_hits(forecast, self.thresholds) if forecast else None

        scores: dict[str, CategoryRisk] = {}
        for category in RiskCategory:
            fc_percent = None
            if fc_hit is not None:
                fc_percent = MAX_PERCENT if fc_hit[category] else 0
            scores[category.value] = CategoryRisk(
                clim_percent=jittered_percent(clim_hit[category], self.jitter()),
                forecast_percent=fc_percent,
            )
        return RiskResult(**scores)
