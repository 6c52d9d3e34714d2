"""Tests for the Configuration Loader module.

Tests settings loading from YAML files and dictionaries.
"""

import pytest

from src.core.config import MapSettings
from src.shell.config_loader import (
    ConfigError,
    _parse_center,
    load_settings,
    load_settings_from_dict,
)


class TestParseCenter:
    """Tests for _parse_center function."""

    def test_parses_list(self):
        """[lat, lon] lists are accepted."""
        assert _parse_center([37.77, -122.42]) == (37.77, -122.42)

    def test_parses_mapping(self):
        """{latitude, longitude} mappings are accepted."""
        assert _parse_center({"latitude": "37.77", "longitude": -122.42}) == (37.77, -122.42)


class TestLoadSettingsFromDict:
    """Tests for load_settings_from_dict function."""

    def test_empty_dict_gives_defaults(self):
        """Missing keys keep their defaults."""
        assert load_settings_from_dict({}) == MapSettings()

    def test_overrides(self):
        """Provided keys override defaults."""
        settings = load_settings_from_dict({
            "center": [35.68, 139.69],
            "zoom": 5,
            "default_base_layer": "Topography",
            "seismic_url": "https://example.com/quakes.geojson",
            "timeout_seconds": 10,
            "title": "Japan",
        })

        assert settings.center == (35.68, 139.69)
        assert settings.zoom == 5
        assert settings.default_base_layer == "Topography"
        assert settings.seismic_url == "https://example.com/quakes.geojson"
        assert settings.tectonic_url == MapSettings().tectonic_url
        assert settings.timeout_seconds == 10.0
        assert settings.title == "Japan"

    def test_invalid_settings_raise(self):
        """Critical validation errors raise ConfigError."""
        with pytest.raises(ConfigError, match="default_base_layer"):
            load_settings_from_dict({"default_base_layer": "Satellite"})

    def test_warnings_do_not_raise(self):
        """Warnings are logged, not raised."""
        settings = load_settings_from_dict({"timeout_seconds": 1})
        assert settings.timeout_seconds == 1.0


class TestLoadSettings:
    """Tests for load_settings function."""

    def test_loads_yaml(self, tmp_path):
        """Settings are read from a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "center:\n"
            "  latitude: 19.4\n"
            "  longitude: -155.3\n"
            "zoom: 8\n"
        )

        settings = load_settings(path)

        assert settings.center == (19.4, -155.3)
        assert settings.zoom == 8

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing file falls back to defaults."""
        assert load_settings(tmp_path / "nope.yaml") == MapSettings()

    def test_empty_file_gives_defaults(self, tmp_path):
        """An empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_settings(path) == MapSettings()
