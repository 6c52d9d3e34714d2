"""GeoJSON feature models and parsing - Pure functions.

This module turns raw GeoJSON FeatureCollections into typed, immutable
GeoFeature records. Validation happens here, at the boundary where
fetched data enters the program, so styling code never sees an
unvalidated shape.

Unlike a "skip what doesn't parse" policy, a single malformed feature
fails the whole collection: a partially trusted dataset is not rendered.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping


POINT = "Point"
LINE_GEOMETRIES = frozenset({
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
})


class MalformedFeatureError(ValueError):
    """A feature is missing an expected geometry or property field."""

    def __init__(self, message: str, feature_id: str | None = None) -> None:
        self.feature_id = feature_id
        if feature_id:
            message = f"{message} (feature {feature_id})"
        super().__init__(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _freeze_coordinates(coords: Any) -> Any:
    """Recursively convert nested coordinate lists into tuples."""
    if isinstance(coords, (list, tuple)):
        return tuple(_freeze_coordinates(c) for c in coords)
    return coords


@dataclass(frozen=True)
class GeoFeature:
    """Immutable GeoJSON feature.

    Attributes:
        geometry_type: GeoJSON geometry type (e.g., 'Point', 'LineString')
        coordinates: Geometry coordinates as (nested) tuples; for seismic
            points this is (longitude, latitude, depth_km)
        properties: Read-only feature properties
        id: Feature ID if the feed provides one
    """
    geometry_type: str
    coordinates: tuple
    properties: Mapping[str, Any] = field(default_factory=dict)
    id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coordinates", _freeze_coordinates(self.coordinates))
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def _point_component(self, index: int, name: str) -> float:
        if self.geometry_type != POINT:
            raise MalformedFeatureError(
                f"Expected Point geometry, got {self.geometry_type}", self.id
            )
        if len(self.coordinates) <= index or not _is_number(self.coordinates[index]):
            raise MalformedFeatureError(f"Missing {name} coordinate", self.id)
        return self.coordinates[index]

    @property
    def longitude(self) -> float:
        return self._point_component(0, "longitude")

    @property
    def latitude(self) -> float:
        return self._point_component(1, "latitude")

    @property
    def depth(self) -> float:
        """Depth in kilometers, the third coordinate component."""
        return self._point_component(2, "depth")

    @property
    def location(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    @property
    def magnitude(self) -> float:
        mag = self.properties.get("mag")
        if not _is_number(mag):
            raise MalformedFeatureError("Missing or non-numeric 'mag' property", self.id)
        return mag

    @property
    def place(self) -> str:
        place = self.properties.get("place")
        if place is None:
            return "Unknown location"
        return str(place)

    def to_geojson(self) -> dict[str, Any]:
        """Return the feature as a plain GeoJSON dict."""

        def thaw(coords: Any) -> Any:
            if isinstance(coords, tuple):
                return [thaw(c) for c in coords]
            return coords

        feature: dict[str, Any] = {
            "type": "Feature",
            "geometry": {
                "type": self.geometry_type,
                "coordinates": thaw(self.coordinates),
            },
            "properties": dict(self.properties),
        }
        if self.id is not None:
            feature["id"] = self.id
        return feature


@dataclass(frozen=True)
class FeatureCollection:
    """Ordered, immutable collection of features from a single fetch.

    Attributes:
        features: Features in source order
        metadata: Collection-level metadata (e.g., USGS 'metadata' block)
    """
    features: tuple[GeoFeature, ...] = ()
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[GeoFeature]:
        return iter(self.features)


def parse_feature(raw: dict[str, Any]) -> GeoFeature:
    """Parse a single GeoJSON feature dict into a GeoFeature.

    Pure function. Only the generic GeoJSON shape is checked here; the
    dataset-specific checks are in parse_seismic_feature and
    parse_plate_feature.

    Args:
        raw: GeoJSON feature dict

    Returns:
        GeoFeature

    Raises:
        MalformedFeatureError: If geometry or properties are missing
    """
    if not isinstance(raw, dict):
        raise MalformedFeatureError(f"Feature is not an object: {raw!r}")

    feature_id = raw.get("id")
    if feature_id is not None:
        feature_id = str(feature_id)

    geometry = raw.get("geometry")
    if not isinstance(geometry, dict):
        raise MalformedFeatureError("Missing geometry", feature_id)

    geometry_type = geometry.get("type")
    coords = geometry.get("coordinates")
    if not isinstance(geometry_type, str) or not isinstance(coords, list):
        raise MalformedFeatureError("Geometry has no type or coordinates", feature_id)

    properties = raw.get("properties") or {}
    if not isinstance(properties, dict):
        raise MalformedFeatureError("Properties is not an object", feature_id)

    return GeoFeature(
        geometry_type=geometry_type,
        coordinates=coords,
        properties=properties,
        id=feature_id,
    )


def parse_seismic_feature(raw: dict[str, Any]) -> GeoFeature:
    """Parse and validate a USGS earthquake feature.

    Pure function. The feature must be a Point with numeric
    [longitude, latitude, depth] coordinates and a numeric 'mag'.

    Raises:
        MalformedFeatureError: If any required field is missing
    """
    feature = parse_feature(raw)
    # Touch every field styling and popups read so failures surface here
    _ = (feature.location, feature.depth, feature.magnitude)
    return feature


def parse_plate_feature(raw: dict[str, Any]) -> GeoFeature:
    """Parse and validate a tectonic plate boundary feature.

    Pure function. The feature must carry a line or polygon geometry;
    'PlateName' is optional.

    Raises:
        MalformedFeatureError: If the geometry is not a line or polygon
    """
    feature = parse_feature(raw)
    if feature.geometry_type not in LINE_GEOMETRIES:
        raise MalformedFeatureError(
            f"Expected line or polygon geometry, got {feature.geometry_type}",
            feature.id,
        )
    if not feature.coordinates:
        raise MalformedFeatureError("Empty coordinates", feature.id)
    return feature


def _parse_collection(geojson: dict[str, Any], parse) -> FeatureCollection:
    if not isinstance(geojson, dict):
        raise MalformedFeatureError("FeatureCollection is not an object")

    features = geojson.get("features")
    if not isinstance(features, list):
        raise MalformedFeatureError("FeatureCollection has no 'features' list")

    return FeatureCollection(
        features=tuple(parse(f) for f in features),
        metadata=geojson.get("metadata") or {},
    )


def parse_seismic_collection(geojson: dict[str, Any]) -> FeatureCollection:
    """Parse a USGS GeoJSON FeatureCollection.

    Pure function. Feature order is preserved from the feed.

    Args:
        geojson: Full GeoJSON FeatureCollection from the USGS summary feed

    Returns:
        FeatureCollection of validated earthquake features

    Raises:
        MalformedFeatureError: If any feature is malformed
    """
    return _parse_collection(geojson, parse_seismic_feature)


def parse_plate_collection(geojson: dict[str, Any]) -> FeatureCollection:
    """Parse a tectonic plate boundaries FeatureCollection.

    Pure function. Feature order is preserved from the source.

    Raises:
        MalformedFeatureError: If any feature is malformed
    """
    return _parse_collection(geojson, parse_plate_feature)
