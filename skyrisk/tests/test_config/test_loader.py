"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
import yaml

from skyrisk.config.loader import (
    config_hash,
    get_config_value,
    load_config,
    load_config_or_default,
    set_config_value,
)
from skyrisk.config.schema import SkyRiskConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.thresholds.hot_tmax_c == 34.0
        assert config.jitter.seed == 42

    def test_unspecified_sections_default(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.api.max_retries == 0
        assert config.thresholds.windy_wind_kmh == 12.0

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config == SkyRiskConfig()

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_missing_file_falls_back_to_default(self, tmp_path: Path):
        assert load_config_or_default(tmp_path / "nope.yaml") == SkyRiskConfig()
        assert load_config_or_default(None) == SkyRiskConfig()

    def test_unknown_key_rejected(self, tmp_path: Path):
        from pydantic import ValidationError

        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"thresholds": {"scorching": 50}}, f)
        with pytest.raises(ValidationError):
            load_config(path)

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.jitter.seed == 7
        assert config.dashboard.default_date == "2025-10-10"


class TestConfigHash:
    def test_deterministic(self):
        assert config_hash(SkyRiskConfig()) == config_hash(SkyRiskConfig())

    def test_different_config_different_hash(self):
        c2 = SkyRiskConfig(jitter={"seed": 1})
        assert config_hash(SkyRiskConfig()) != config_hash(c2)


class TestGetConfigValue:
    def test_dotted_key(self, default_config: SkyRiskConfig):
        assert get_config_value(default_config, "thresholds.hot_tmax_c") == 35.0

    def test_top_level(self, default_config: SkyRiskConfig):
        val = get_config_value(default_config, "api")
        assert val.max_retries == 0

    def test_invalid_key(self, default_config: SkyRiskConfig):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(default_config, "nonexistent.key")


class TestSetConfigValue:
    def test_set_and_revalidate(self, default_config: SkyRiskConfig):
        new_config = set_config_value(default_config, "thresholds.wet_precip_mm", 15.0)
        assert new_config.thresholds.wet_precip_mm == 15.0
        assert default_config.thresholds.wet_precip_mm == 20.0

    def test_set_string_coercion(self, default_config: SkyRiskConfig):
        new_config = set_config_value(default_config, "api.max_retries", "2")
        assert new_config.api.max_retries == 2

    def test_unknown_leaf_raises(self, default_config: SkyRiskConfig):
        with pytest.raises(KeyError):
            set_config_value(default_config, "api.nope", "1")

    def test_invalid_value_raises(self, default_config: SkyRiskConfig):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            set_config_value(default_config, "jitter.max_jitter", -1.0)
