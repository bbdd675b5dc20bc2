"""Wiring: build the clients, evaluator and controller from a config."""

from skyrisk.climatology.source import climatology_from_config
from skyrisk.config.schema import SkyRiskConfig
from skyrisk.controller.view_controller import ViewController
from skyrisk.ingest.forecast_gateway import ForecastGateway
from skyrisk.ingest.geocoding_client import GeocodingClient
from skyrisk.ingest.location_resolver import LocationResolver
from skyrisk.ingest.open_meteo_client import OpenMeteoClient
from skyrisk.models.common import parse_date
from skyrisk.risk.evaluator import RiskEvaluator
from skyrisk.risk.jitter import RandomJitter


def build_evaluator(config: SkyRiskConfig) -> RiskEvaluator:
    jitter = RandomJitter(config.jitter.max_jitter, seed=config.jitter.seed)
    return RiskEvaluator(config.thresholds, jitter)


def build_controller(config: SkyRiskConfig, **kwargs) -> ViewController:
    api = config.api
    forecast_client = OpenMeteoClient(
        base_url=api.forecast_base_url,
        user_agent=api.user_agent,
        timeout=api.timeout_seconds,
        max_retries=api.max_retries,
        retry_base_delay=api.retry_base_delay,
    )
    geocoder = GeocodingClient(
        base_url=api.geocoding_base_url,
        user_agent=api.user_agent,
        timeout=api.timeout_seconds,
        max_retries=api.max_retries,
        retry_base_delay=api.retry_base_delay,
    )
    return ViewController(
        resolver=LocationResolver(geocoder),
        gateway=ForecastGateway(forecast_client),
        climatology=climatology_from_config(config.climatology_file),
        evaluator=build_evaluator(config),
        initial_date=parse_date(config.dashboard.default_date),
        **kwargs,
    )
