"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com"
DEFAULT_USER_AGENT = "skyrisk/0.1.0"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_base_url: str = OPEN_METEO_FORECAST_URL
    geocoding_base_url: str = OPEN_METEO_GEOCODING_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class RiskThresholds(BaseModel):
    model_config = {"extra": "forbid"}

    hot_tmax_c: float = 35.0  # tmax >= hot
    cold_tmin_c: float = 0.0  # tmin <= cold
    wet_precip_mm: float = Field(default=20.0, ge=0.0)
    windy_wind_kmh: float = Field(default=12.0, ge=0.0)


class JitterConfig(BaseModel):
    model_config = {"extra": "forbid"}

    max_jitter: float = Field(default=10.0, gt=0.0, le=100.0)
    seed: int | None = None


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8787, ge=1, le=65535)
    default_date: str = "2025-10-10"


class SkyRiskConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    thresholds: RiskThresholds = RiskThresholds()
    jitter: JitterConfig = JitterConfig()
    dashboard: DashboardConfig = DashboardConfig()
    climatology_file: str | None = None


class ClimatologyRow(BaseModel):
    """One month of a climatology table file."""

    model_config = {"extra": "forbid"}

    month: int = Field(ge=0, le=11)
    tmax: float
    tmin: float
    precip: float = Field(ge=0.0)
    wind: float = Field(ge=0.0)
