"""YAML config loader with runtime get/set."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from skyrisk.config.schema import SkyRiskConfig


def load_config(path: str | Path) -> SkyRiskConfig:
    """Load and validate config from a YAML file.

    An empty file yields the defaults.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return SkyRiskConfig(**raw)


def load_config_or_default(path: str | Path | None) -> SkyRiskConfig:
    """Like load_config, but a missing path falls back to the defaults."""
    if path is None or not Path(path).exists():
        return SkyRiskConfig()
    return load_config(path)


def config_hash(config: SkyRiskConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: SkyRiskConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'thresholds.hot_tmax_c'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: SkyRiskConfig, dotted_key: str, value: Any) -> SkyRiskConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new SkyRiskConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return SkyRiskConfig(**data)
