"""Forecast gateway: fetches a daily forecast and picks out the requested date."""

import logging
from datetime import date

from skyrisk.errors import MalformedResponseError
from skyrisk.ingest.open_meteo_client import DAILY_FIELDS, OpenMeteoClient
from skyrisk.models.forecast import ForecastRecord

logger = logging.getLogger(__name__)


class ForecastGateway:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    def fetch_forecast(
        self, latitude: float, longitude: float, target_date: date
    ) -> ForecastRecord | None:
        """Return the forecast for target_date, or None if it is outside the window.

        Raises NetworkError or MalformedResponseError; a missing date is not an error.
        """
        raw = self.client.get_daily_forecast(latitude, longitude)
        record = extract_forecast_day(raw, target_date)
        if record is None:
            logger.warning(
                "No forecast for %s at (%s, %s); outside forecast window",
                target_date, latitude, longitude,
            )
        return record


def extract_forecast_day(raw: dict, target_date: date) -> ForecastRecord | None:
    """Locate target_date in daily.time (exact string match) and build a record."""
    daily = raw.get("daily")
    if not isinstance(daily, dict) or not isinstance(daily.get("time"), list):
        raise MalformedResponseError("Forecast data unavailable: missing daily.time")

    times: list[str] = daily["time"]
    wanted = target_date.isoformat()
    if wanted not in times:
        return None
    idx = times.index(wanted)

    values: dict[str, float | None] = {}
    for field in DAILY_FIELDS:
        series = daily.get(field)
        if not isinstance(series, list) or len(series) <= idx:
            raise MalformedResponseError(f"Forecast field {field} missing for {wanted}")
        value = series[idx]
        values[field] = float(value) if value is not None else None

    return ForecastRecord(
        date=target_date,
        tmax=values["temperature_2m_max"],
        tmin=values["temperature_2m_min"],
        precip=values["precipitation_sum"],
        wind_max=values["windspeed_10m_max"],
    )
