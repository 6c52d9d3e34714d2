"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from src.core.layers import default_base_layers


SEISMIC_FEED_URL = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
)

TECTONIC_PLATES_URL = (
    "https://raw.githubusercontent.com/fraxen/tectonicplates/master/"
    "GeoJSON/PB2002_boundaries.json"
)


@dataclass
class MapSettings:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        center: Initial map center as (latitude, longitude)
        zoom: Initial zoom level
        default_base_layer: Name of the base layer shown at startup
        seismic_url: Earthquake GeoJSON feed
        tectonic_url: Tectonic plate boundaries GeoJSON
        timeout_seconds: HTTP timeout for each fetch
        title: HTML page title
    """
    center: tuple[float, float] = (41.8781, -87.6298)
    zoom: int = 7
    default_base_layer: str = "Street"
    seismic_url: str = SEISMIC_FEED_URL
    tectonic_url: str = TECTONIC_PLATES_URL
    timeout_seconds: float = 30
    title: str = "Earthquakes and Tectonic Plates"


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_settings(settings: MapSettings) -> ValidationResult:
    """Validate map settings for errors and warnings.

    Pure function.

    Args:
        settings: Settings to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    lat, lon = settings.center
    errors.extend(validate_coordinates(lat, lon, "center"))

    if not 0 <= settings.zoom <= 18:
        errors.append(ValidationError(
            field="zoom",
            message=f"Zoom {settings.zoom} out of range [0, 18]",
        ))

    base_layers = default_base_layers()
    if settings.default_base_layer not in base_layers:
        errors.append(ValidationError(
            field="default_base_layer",
            message=(
                f"Unknown base layer '{settings.default_base_layer}', "
                f"expected one of {', '.join(base_layers)}"
            ),
        ))

    for name in ("seismic_url", "tectonic_url"):
        if not getattr(settings, name):
            errors.append(ValidationError(
                field=name,
                message="URL is empty",
            ))

    if settings.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="timeout_seconds",
            message=f"Timeout must be positive, got {settings.timeout_seconds}",
        ))
    elif settings.timeout_seconds < 5:
        errors.append(ValidationError(
            field="timeout_seconds",
            message=f"Timeout of {settings.timeout_seconds}s may be too short for the feeds",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
