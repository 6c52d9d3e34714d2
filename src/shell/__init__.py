"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- GeoJSON feed client (HTTP)
- Map controller (folium rendering)
- Configuration loading (files)

Keep this layer thin and simple. All map logic should be in core.
"""

from src.shell.geojson_client import FetchError, GeoJSONClient
from src.shell.map_controller import MapController, MapViewState
from src.shell.config_loader import load_settings

__all__ = [
    "FetchError",
    "GeoJSONClient",
    "MapController",
    "MapViewState",
    "load_settings",
]
