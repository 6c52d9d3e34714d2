"""Unit tests for settings validation.

Pure functions - no mocks needed.
"""

from src.core.config import (
    SEISMIC_FEED_URL,
    TECTONIC_PLATES_URL,
    MapSettings,
    validate_coordinates,
    validate_settings,
)


class TestMapSettings:
    """Tests for MapSettings defaults."""

    def test_defaults(self):
        """Defaults center on Chicago at zoom 7 with Street tiles."""
        settings = MapSettings()

        assert settings.center == (41.8781, -87.6298)
        assert settings.zoom == 7
        assert settings.default_base_layer == "Street"
        assert settings.seismic_url == SEISMIC_FEED_URL
        assert settings.tectonic_url == TECTONIC_PLATES_URL

    def test_defaults_are_valid(self):
        """Default settings pass validation with no messages."""
        result = validate_settings(MapSettings())

        assert result.valid is True
        assert result.errors == []


class TestValidateCoordinates:
    """Tests for validate_coordinates()."""

    def test_valid(self):
        """In-range coordinates produce no errors."""
        assert validate_coordinates(0, 0, "center") == []

    def test_out_of_range(self):
        """Both latitude and longitude are checked."""
        errors = validate_coordinates(95, -181, "center")
        assert len(errors) == 2
        assert all(e.field == "center" for e in errors)


class TestValidateSettings:
    """Tests for validate_settings()."""

    def test_bad_center(self):
        """An out-of-range center is an error."""
        result = validate_settings(MapSettings(center=(100.0, 0.0)))

        assert result.valid is False
        assert result.critical_errors[0].field == "center"

    def test_bad_zoom(self):
        """Zoom must be 0-18."""
        result = validate_settings(MapSettings(zoom=25))
        assert result.valid is False
        assert result.critical_errors[0].field == "zoom"

    def test_unknown_base_layer(self):
        """The default base layer must exist."""
        result = validate_settings(MapSettings(default_base_layer="Satellite"))

        assert result.valid is False
        assert "Street" in result.critical_errors[0].message

    def test_empty_url(self):
        """Dataset URLs must not be empty."""
        result = validate_settings(MapSettings(tectonic_url=""))
        assert [e.field for e in result.critical_errors] == ["tectonic_url"]

    def test_non_positive_timeout(self):
        """Timeout must be positive."""
        result = validate_settings(MapSettings(timeout_seconds=0))
        assert result.valid is False

    def test_short_timeout_is_warning(self):
        """A very short timeout only warns."""
        result = validate_settings(MapSettings(timeout_seconds=2))

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].field == "timeout_seconds"
