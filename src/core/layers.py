"""Map layer composition - Pure functions.

This module turns feature collections into renderable overlay
descriptions and defines the base tile layers. Nothing here touches the
rendering engine; the shell's MapController materializes these values.
"""

from dataclasses import dataclass
from typing import Any, Callable

from src.core.feature import FeatureCollection, GeoFeature
from src.core.style import LineStyle, StyleDescriptor


OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    "contributors"
)

OPENTOPOMAP_ATTRIBUTION = (
    'Map data: &copy; <a href="https://www.openstreetmap.org/copyright">'
    "OpenStreetMap</a> contributors, "
    '<a href="http://viewfinderpanoramas.org">SRTM</a> | Map style: &copy; '
    '<a href="https://opentopomap.org">OpenTopoMap</a> '
    '(<a href="https://creativecommons.org/licenses/by-sa/3.0/">CC-BY-SA</a>)'
)


@dataclass(frozen=True)
class BaseLayer:
    """A background tile layer; exactly one is shown at a time.

    Attributes:
        name: Name shown in the layer control
        url_template: Tile URL with {s}, {z}, {x}, {y} placeholders
        attribution: Attribution HTML that must be displayed
        subdomains: Values substituted for {s}
        max_zoom: Highest zoom level the provider serves
    """
    name: str
    url_template: str
    attribution: str
    subdomains: str = "abc"
    max_zoom: int = 18


STREET_LAYER = BaseLayer(
    name="Street",
    url_template="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
    attribution=OSM_ATTRIBUTION,
    max_zoom=19,
)

TOPOGRAPHY_LAYER = BaseLayer(
    name="Topography",
    url_template="https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
    attribution=OPENTOPOMAP_ATTRIBUTION,
    max_zoom=17,
)


def default_base_layers() -> dict[str, BaseLayer]:
    """Return the base layers in layer control order."""
    return {
        STREET_LAYER.name: STREET_LAYER,
        TOPOGRAPHY_LAYER.name: TOPOGRAPHY_LAYER,
    }


@dataclass(frozen=True)
class Marker:
    """A styled circle marker at a point.

    Attributes:
        latitude: Marker latitude
        longitude: Marker longitude
        style: Per-feature marker style
        popup: Popup HTML
    """
    latitude: float
    longitude: float
    style: StyleDescriptor
    popup: str


@dataclass(frozen=True)
class Shape:
    """A styled line or polygon feature.

    Attributes:
        geojson: GeoJSON feature dict for the geometry
        style: Line style shared across the overlay
        popup: Popup HTML
    """
    geojson: dict[str, Any]
    style: LineStyle
    popup: str


@dataclass(frozen=True)
class Overlay:
    """A composed, attachable layer built from one feature collection.

    Items are in source order, which is also their drawing order.
    """
    name: str
    items: tuple[Marker | Shape, ...]

    def __len__(self) -> int:
        return len(self.items)

    @property
    def markers(self) -> tuple[Marker, ...]:
        return tuple(i for i in self.items if isinstance(i, Marker))

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(i for i in self.items if isinstance(i, Shape))


def build_overlay(
    name: str,
    collection: FeatureCollection,
    style_fn: Callable[[GeoFeature], StyleDescriptor],
    popup_fn: Callable[[GeoFeature], str],
) -> Overlay:
    """Build a circle marker overlay from point features.

    Pure function. If styling or popup derivation fails for any feature the
    exception propagates and no overlay is returned.

    Args:
        name: Overlay name
        collection: Point features
        style_fn: Per-feature style resolver
        popup_fn: Per-feature popup formatter

    Returns:
        Overlay with one Marker per feature
    """
    markers = tuple(
        Marker(
            latitude=feature.latitude,
            longitude=feature.longitude,
            style=style_fn(feature),
            popup=popup_fn(feature),
        )
        for feature in collection
    )
    return Overlay(name=name, items=markers)


def build_styled_geometry_overlay(
    name: str,
    collection: FeatureCollection,
    fixed_style: LineStyle,
    popup_fn: Callable[[GeoFeature], str],
) -> Overlay:
    """Build an overlay of line/polygon features sharing one style.

    Pure function. Fails as a whole like build_overlay.

    Args:
        name: Overlay name
        collection: Line or polygon features
        fixed_style: Style applied to every feature
        popup_fn: Per-feature popup formatter

    Returns:
        Overlay with one Shape per feature
    """
    shapes = tuple(
        Shape(
            geojson=feature.to_geojson(),
            style=fixed_style,
            popup=popup_fn(feature),
        )
        for feature in collection
    )
    return Overlay(name=name, items=shapes)
