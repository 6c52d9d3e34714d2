"""Map Controller - Imperative Shell.

This module owns the folium map: viewport, base tile layers, the layer
switch control, and the overlays and legend attached to it. Layer and
legend contents are computed in the core module.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import folium
from branca.element import Element, MacroElement, Template

from src.core.layers import BaseLayer, Marker, Overlay, Shape
from src.core.legend import Legend


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapViewState:
    """Snapshot of what the map currently shows.

    Attributes:
        center: Map center as (latitude, longitude)
        zoom: Zoom level
        active_base_layer: Name of the base layer shown
        base_layers: Names of all registered base layers
        overlays: Names of attached overlays, in attach order
        legends: Number of legends attached
        layer_control: Whether the layer switch control is attached
    """
    center: tuple[float, float]
    zoom: int
    active_base_layer: str
    base_layers: tuple[str, ...] = ()
    overlays: tuple[str, ...] = ()
    legends: int = 0
    layer_control: bool = False


class LegendControl(MacroElement):
    """Leaflet control rendering the depth legend."""

    _template = Template("""
        {% macro header(this, kwargs) %}
        <style>
            .info.legend {
                padding: 6px 8px;
                font: 14px/16px Arial, Helvetica, sans-serif;
                background: white;
                background: rgba(255, 255, 255, 0.8);
                box-shadow: 0 0 15px rgba(0, 0, 0, 0.2);
                border-radius: 5px;
                line-height: 18px;
                color: #555;
            }
            .info.legend i {
                width: 18px;
                height: 18px;
                float: left;
                margin-right: 8px;
                opacity: 0.7;
            }
        </style>
        {% endmacro %}

        {% macro script(this, kwargs) %}
        var {{ this.get_name() }} = L.control({position: {{ this.position|tojson }}});
        {{ this.get_name() }}.onAdd = function (map) {
            var div = L.DomUtil.create("div", "info legend");
            div.innerHTML = {{ this.html|tojson }};
            return div;
        };
        {{ this.get_name() }}.addTo({{ this._parent.get_name() }});
        {% endmacro %}
    """)

    def __init__(self, legend: Legend) -> None:
        super().__init__()
        self._name = "LegendControl"
        self.position = legend.position
        self.html = self._legend_html(legend)

    @staticmethod
    def _legend_html(legend: Legend) -> str:
        rows = [
            f"<i style='background: {entry.color}'></i> {entry.label}"
            for entry in legend.entries
        ]
        return f"<strong>{legend.title}</strong><br>" + "<br>".join(rows)


class MapController:
    """Owns the map viewport and everything attached to it.

    This is part of the imperative shell - it drives the rendering engine.
    Attach calls are not idempotent: attaching the same overlay twice draws
    it twice.
    """

    def __init__(self, title: str | None = None) -> None:
        """Initialize map controller.

        Args:
            title: Optional HTML page title
        """
        self.title = title
        self.map: folium.Map | None = None
        self._center: tuple[float, float] = (0.0, 0.0)
        self._zoom = 0
        self._active_base_layer = ""
        self._base_layers: list[str] = []
        self._overlays: list[str] = []
        self._legends = 0
        self._layer_control = False

    def _require_map(self) -> folium.Map:
        if self.map is None:
            raise RuntimeError("Map not initialized; call initialize() first")
        return self.map

    @staticmethod
    def _tile_layer(layer: BaseLayer, show: bool) -> folium.TileLayer:
        return folium.TileLayer(
            tiles=layer.url_template,
            attr=layer.attribution,
            name=layer.name,
            subdomains=layer.subdomains,
            max_zoom=layer.max_zoom,
            overlay=False,
            control=True,
            show=show,
        )

    def initialize(
        self,
        center: tuple[float, float],
        zoom: int,
        default_base_layer: BaseLayer,
    ) -> MapViewState:
        """Create the map viewport with one active base layer.

        Args:
            center: Map center as (latitude, longitude)
            zoom: Initial zoom level
            default_base_layer: Base layer shown at startup

        Returns:
            The initial view state
        """
        self.map = folium.Map(location=list(center), zoom_start=zoom, tiles=None)
        if self.title:
            self.map.get_root().header.add_child(Element(f"<title>{self.title}</title>"))

        self._center = center
        self._zoom = zoom
        self._active_base_layer = default_base_layer.name
        self._base_layers = [default_base_layer.name]
        self._overlays = []
        self._legends = 0
        self._layer_control = False

        self._tile_layer(default_base_layer, show=True).add_to(self.map)

        logger.info(
            "Initialized map at (%.4f, %.4f) zoom %d with base layer %s",
            center[0],
            center[1],
            zoom,
            default_base_layer.name,
        )

        return self.view_state

    def register_base_layers(self, layers: dict[str, BaseLayer]) -> None:
        """Add base layers to the map, hidden until selected.

        The active base layer is skipped if it is in the mapping.

        Args:
            layers: Base layers keyed by display name
        """
        fmap = self._require_map()

        for name, layer in layers.items():
            if name in self._base_layers:
                continue
            self._tile_layer(layer, show=False).add_to(fmap)
            self._base_layers.append(name)

        logger.debug("Registered base layers: %s", ", ".join(self._base_layers))

    def attach_layer_control(self, position: str = "topright") -> None:
        """Add the control that switches between base layers."""
        fmap = self._require_map()
        folium.LayerControl(position=position, collapsed=True).add_to(fmap)
        self._layer_control = True

    def attach(self, item: Overlay | Legend) -> None:
        """Add an overlay or the legend to the map.

        Overlays are always visible and are not listed in the layer control.

        Args:
            item: Composed overlay or legend
        """
        fmap = self._require_map()

        if isinstance(item, Legend):
            LegendControl(item).add_to(fmap)
            self._legends += 1
            logger.info("Attached legend with %d entries", len(item))
            return

        group = folium.FeatureGroup(name=item.name, overlay=True, control=False, show=True)
        for element in item.items:
            if isinstance(element, Marker):
                self._circle_marker(element).add_to(group)
            elif isinstance(element, Shape):
                self._shape(element).add_to(group)
        group.add_to(fmap)
        self._overlays.append(item.name)

        logger.info("Attached overlay %s with %d features", item.name, len(item))

    @staticmethod
    def _circle_marker(marker: Marker) -> folium.CircleMarker:
        style = marker.style
        return folium.CircleMarker(
            location=[marker.latitude, marker.longitude],
            radius=style.radius,
            stroke=True,
            color=style.stroke_color,
            weight=style.stroke_weight,
            opacity=style.stroke_opacity,
            fill=True,
            fill_color=style.fill_color,
            fill_opacity=style.fill_opacity,
            popup=folium.Popup(marker.popup),
        )

    @staticmethod
    def _shape(shape: Shape) -> folium.GeoJson:
        options = shape.style.to_leaflet()
        geojson = folium.GeoJson(
            shape.geojson,
            style_function=lambda _feature: options,
        )
        folium.Popup(shape.popup).add_to(geojson)
        return geojson

    @property
    def view_state(self) -> MapViewState:
        """Current view state snapshot."""
        self._require_map()
        return MapViewState(
            center=self._center,
            zoom=self._zoom,
            active_base_layer=self._active_base_layer,
            base_layers=tuple(self._base_layers),
            overlays=tuple(self._overlays),
            legends=self._legends,
            layer_control=self._layer_control,
        )

    def render(self) -> str:
        """Render the map as a standalone HTML document."""
        return self._require_map().get_root().render()

    def save(self, path: str | Path) -> Path:
        """Write the map HTML to a file.

        This method performs file I/O.

        Args:
            path: Output file path

        Returns:
            Path written
        """
        path = Path(path)
        path.write_text(self.render(), encoding="utf-8")
        logger.info("Saved map to %s", path)
        return path
