"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from skyrisk.climatology.source import demo_table
from skyrisk.config.schema import SkyRiskConfig
from skyrisk.controller.view_controller import ViewController
from skyrisk.ingest.forecast_gateway import ForecastGateway
from skyrisk.ingest.geocoding_client import GeocodingClient
from skyrisk.ingest.location_resolver import LocationResolver
from skyrisk.ingest.open_meteo_client import OpenMeteoClient
from skyrisk.risk.evaluator import RiskEvaluator
from skyrisk.risk.jitter import FixedJitter

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    return load_fixture("open_meteo_forecast.json")


@pytest.fixture
def berlin_payload() -> dict:
    return load_fixture("geocoding_berlin.json")


@pytest.fixture
def default_config() -> SkyRiskConfig:
    return SkyRiskConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "thresholds": {"hot_tmax_c": 34.0},
        "jitter": {"seed": 42},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def mock_forecast_client(forecast_payload: dict) -> MagicMock:
    client = MagicMock(spec=OpenMeteoClient)
    client.get_daily_forecast.return_value = forecast_payload
    return client


@pytest.fixture
def mock_geocoder(berlin_payload: dict) -> MagicMock:
    geocoder = MagicMock(spec=GeocodingClient)
    geocoder.search.return_value = berlin_payload["results"]
    return geocoder


@pytest.fixture
def notifications() -> list[str]:
    return []


@pytest.fixture
def controller(
    mock_forecast_client: MagicMock,
    mock_geocoder: MagicMock,
    notifications: list[str],
) -> ViewController:
    """Controller with mocked network clients and zero jitter."""
    return ViewController(
        resolver=LocationResolver(mock_geocoder),
        gateway=ForecastGateway(mock_forecast_client),
        climatology=demo_table(),
        evaluator=RiskEvaluator(jitter=FixedJitter(0.0)),
        initial_date=date(2025, 10, 10),
        notifier=notifications.append,
    )
