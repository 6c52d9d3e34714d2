"""Configuration Loader - Imperative Shell.

This module handles loading map settings from YAML files. All I/O is
contained here.

Models (MapSettings) are defined in src/core/config.py to avoid
information leakage between layers.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from src.core.config import MapSettings, validate_settings


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


class ConfigError(ValueError):
    """Settings failed validation."""


def _parse_center(data: Any) -> tuple[float, float]:
    """Parse a map center from [lat, lon] or {latitude, longitude}."""
    if isinstance(data, dict):
        return (float(data["latitude"]), float(data["longitude"]))
    lat, lon = data
    return (float(lat), float(lon))


def load_settings_from_dict(data: dict[str, Any]) -> MapSettings:
    """Load settings from a dictionary.

    Pure function. Missing keys keep their defaults.

    Args:
        data: Settings dictionary

    Returns:
        Parsed MapSettings object

    Raises:
        ConfigError: If the resulting settings have critical errors
    """
    defaults = MapSettings()

    settings = MapSettings(
        center=_parse_center(data["center"]) if "center" in data else defaults.center,
        zoom=int(data.get("zoom", defaults.zoom)),
        default_base_layer=data.get("default_base_layer", defaults.default_base_layer),
        seismic_url=data.get("seismic_url", defaults.seismic_url),
        tectonic_url=data.get("tectonic_url", defaults.tectonic_url),
        timeout_seconds=float(data.get("timeout_seconds", defaults.timeout_seconds)),
        title=data.get("title", defaults.title),
    )

    result = validate_settings(settings)
    for warning in result.warnings:
        logger.warning("Config warning: %s: %s", warning.field, warning.message)

    if not result.valid:
        details = "; ".join(f"{e.field}: {e.message}" for e in result.critical_errors)
        raise ConfigError(f"Invalid settings: {details}")

    return settings


def load_settings(config_path: str | Path | None = None) -> MapSettings:
    """Load settings from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file. If None, uses the default path.

    Returns:
        Parsed MapSettings object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ConfigError: If the settings are invalid
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return MapSettings()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return MapSettings()

    settings = load_settings_from_dict(data)

    logger.info(
        "Loaded config: center (%.4f, %.4f), zoom %d, base layer %s",
        settings.center[0],
        settings.center[1],
        settings.zoom,
        settings.default_base_layer,
    )

    return settings
