"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from skyrisk.cli import main

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
SEARCH_URL = "https://geocoding-api.open-meteo.com/v1/search"


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def _empty_config(tmp_path: Path) -> str:
    config_path = tmp_path / "test.yaml"
    config_path.write_text("")
    return str(config_path)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, tmp_path: Path, capsys):
        result = main(["--config", _empty_config(tmp_path), "config", "show"])
        assert result == 0
        assert "open-meteo" in capsys.readouterr().out

    def test_config_set(self, tmp_path: Path, capsys):
        result = main([
            "--config", _empty_config(tmp_path),
            "config", "set", "thresholds.hot_tmax_c=33.5",
        ])
        assert result == 0
        assert "33.5" in capsys.readouterr().out

    def test_config_set_bad_format(self, tmp_path: Path, capsys):
        result = main(["--config", _empty_config(tmp_path), "config", "set", "nope"])
        assert result == 1

    def test_climatology(self, tmp_path: Path, capsys):
        result = main(["--config", _empty_config(tmp_path), "climatology"])
        assert result == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 13

    def test_risk_requires_one_location_source(self, tmp_path: Path, capsys):
        result = main([
            "--config", _empty_config(tmp_path),
            "risk", "--date", "2026-07-03", "--lat", "1.0",
        ])
        assert result == 1

    def test_risk_invalid_date(self, tmp_path: Path, capsys):
        result = main([
            "--config", _empty_config(tmp_path),
            "risk", "--date", "10/10/2025", "--city", "Berlin",
        ])
        assert result == 1
        assert "invalid date" in capsys.readouterr().out

    @respx.mock
    def test_risk_by_city_json(self, tmp_path: Path, capsys):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=_load("geocoding_berlin.json"))
        )
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=_load("open_meteo_forecast.json"))
        )
        result = main([
            "--config", _empty_config(tmp_path),
            "risk", "--date", "2026-07-03", "--city", "Berlin", "--json",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["location"]["name"] == "Berlin, Germany"
        assert {v["fc"] for v in data["risk"].values()} == {100}

    @respx.mock
    def test_risk_by_coords_outside_window(self, tmp_path: Path, capsys):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=_load("open_meteo_forecast.json"))
        )
        result = main([
            "--config", _empty_config(tmp_path),
            "risk", "--date", "2025-10-10", "--lat", "52.52", "--lon", "13.41",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "My Location" in out
        assert "n/a" in out

    @respx.mock
    def test_risk_unknown_city(self, tmp_path: Path, capsys):
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, json={}))
        result = main([
            "--config", _empty_config(tmp_path),
            "risk", "--date", "2025-10-10", "--city", "Xyzzyville",
        ])
        assert result == 1
        assert "City not found" in capsys.readouterr().err
