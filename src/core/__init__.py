"""Functional Core - Pure functions with no side effects.

This module contains all map logic as pure functions:
- Depth and magnitude classification
- GeoJSON feature parsing and validation
- Marker styling and popup content
- Legend synthesis
- Overlay composition

All functions here are deterministic and have no I/O.
"""

from src.core.classification import DEPTH_BUCKETS, color_for_depth, radius_for_magnitude
from src.core.feature import (
    FeatureCollection,
    GeoFeature,
    MalformedFeatureError,
    parse_plate_collection,
    parse_seismic_collection,
)
from src.core.style import StyleDescriptor, popup_content, resolve_style
from src.core.legend import Legend, build_legend
from src.core.layers import Overlay, build_overlay, build_styled_geometry_overlay

__all__ = [
    # Classification
    "DEPTH_BUCKETS",
    "color_for_depth",
    "radius_for_magnitude",
    # Features
    "FeatureCollection",
    "GeoFeature",
    "MalformedFeatureError",
    "parse_plate_collection",
    "parse_seismic_collection",
    # Style
    "StyleDescriptor",
    "popup_content",
    "resolve_style",
    # Legend
    "Legend",
    "build_legend",
    # Layers
    "Overlay",
    "build_overlay",
    "build_styled_geometry_overlay",
]
