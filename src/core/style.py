"""Feature styling and popup content - Pure functions.

This module derives the visual style and popup text of each map feature.
Earthquake markers are styled per feature from depth and magnitude;
tectonic plate boundaries share one fixed line style.
"""

from dataclasses import dataclass
from typing import Any

from src.core.classification import color_for_depth, radius_for_magnitude
from src.core.feature import GeoFeature


@dataclass(frozen=True)
class StyleDescriptor:
    """Immutable style of a single earthquake marker.

    Attributes:
        fill_color: Hex fill color from the depth bucket
        radius: Marker radius in pixels from the magnitude
        stroke_color: Hex outline color
        fill_opacity: Fill opacity (0-1)
        stroke_opacity: Outline opacity (0-1)
        stroke_weight: Outline width in pixels
    """
    fill_color: str
    radius: float
    stroke_color: str = "#000000"
    fill_opacity: float = 0.65
    stroke_opacity: float = 0.5
    stroke_weight: float = 0.425

    def to_leaflet(self) -> dict[str, Any]:
        """Return Leaflet path options for this style."""
        return {
            "radius": self.radius,
            "stroke": True,
            "color": self.stroke_color,
            "weight": self.stroke_weight,
            "opacity": self.stroke_opacity,
            "fill": True,
            "fillColor": self.fill_color,
            "fillOpacity": self.fill_opacity,
        }


@dataclass(frozen=True)
class LineStyle:
    """Immutable style shared by every tectonic boundary line."""
    color: str = "#ff7800"
    weight: float = 2
    opacity: float = 0.7

    def to_leaflet(self) -> dict[str, Any]:
        """Return Leaflet path options for this style."""
        return {
            "color": self.color,
            "weight": self.weight,
            "opacity": self.opacity,
        }


TECTONIC_STYLE = LineStyle()

UNKNOWN_PLATE = "Unknown"


def resolve_style(feature: GeoFeature) -> StyleDescriptor:
    """Get the marker style for an earthquake feature.

    Pure function.

    Args:
        feature: Earthquake feature (depth is the third coordinate)

    Returns:
        StyleDescriptor with color from depth and radius from magnitude

    Raises:
        MalformedFeatureError: If depth or magnitude is missing
    """
    return StyleDescriptor(
        fill_color=color_for_depth(feature.depth),
        radius=radius_for_magnitude(feature.magnitude),
    )


def format_number(value: float) -> str:
    """Format a feed number the way the feed wrote it.

    Integral floats lose their trailing '.0' (4.0 -> '4'), everything else
    keeps its shortest repr.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def popup_content(feature: GeoFeature) -> str:
    """Format the popup shown when an earthquake marker is clicked.

    Pure function.

    Args:
        feature: Earthquake feature

    Returns:
        Three-line HTML snippet with magnitude, depth and location
    """
    return (
        f"Magnitude: <strong>{format_number(feature.magnitude)}</strong><br>"
        f"Depth: <strong>{format_number(feature.depth)}</strong><br>"
        f"Location: {feature.place}"
    )


def plate_name(feature: GeoFeature) -> str:
    """Get the plate name of a boundary feature.

    Pure function. An absent, null or blank 'PlateName' counts as missing.
    """
    name = feature.properties.get("PlateName")
    if name is None or not str(name).strip():
        return UNKNOWN_PLATE
    return str(name)


def plate_popup_content(feature: GeoFeature) -> str:
    """Format the popup shown when a plate boundary is clicked.

    Pure function.
    """
    return f"<strong>Plate:</strong> {plate_name(feature)}"
