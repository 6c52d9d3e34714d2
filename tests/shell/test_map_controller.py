"""Tests for the folium-backed map controller.

Renders HTML in memory; no tiles or network involved.
"""

import pytest

from src.core.feature import FeatureCollection, GeoFeature
from src.core.layers import (
    STREET_LAYER,
    TOPOGRAPHY_LAYER,
    build_overlay,
    build_styled_geometry_overlay,
    default_base_layers,
)
from src.core.legend import build_legend
from src.core.style import (
    TECTONIC_STYLE,
    plate_popup_content,
    popup_content,
    resolve_style,
)
from src.shell.map_controller import LegendControl, MapController, MapViewState


CENTER = (41.8781, -87.6298)

QUAKES = FeatureCollection(features=(
    GeoFeature("Point", (-116.6, 33.5, -5), {"mag": 0, "place": "near Anza, CA"}),
    GeoFeature("Point", (-125.1, 43.9, 45), {"mag": 3, "place": "Offshore Oregon"}),
))

PLATES = FeatureCollection(features=(
    GeoFeature("LineString", ((0, 0), (1, 1)), {"PlateName": "Africa"}),
))


@pytest.fixture
def controller():
    """Controller with the default base layers and layer control."""
    controller = MapController(title="Test Map")
    controller.initialize(CENTER, 7, STREET_LAYER)
    controller.register_base_layers(default_base_layers())
    controller.attach_layer_control()
    return controller


class TestInitialize:
    """Tests for MapController.initialize()."""

    def test_returns_view_state(self):
        """initialize returns the initial viewport."""
        state = MapController().initialize(CENTER, 7, STREET_LAYER)

        assert isinstance(state, MapViewState)
        assert state.center == CENTER
        assert state.zoom == 7
        assert state.active_base_layer == "Street"
        assert state.base_layers == ("Street",)
        assert state.overlays == ()
        assert state.legends == 0

    def test_requires_initialize(self):
        """Using the controller before initialize raises."""
        controller = MapController()

        with pytest.raises(RuntimeError):
            controller.attach(build_legend())
        with pytest.raises(RuntimeError):
            controller.render()

    def test_renders_title(self):
        """The page title is set."""
        controller = MapController(title="Quakes")
        controller.initialize(CENTER, 7, STREET_LAYER)
        assert "<title>Quakes</title>" in controller.render()


class TestBaseLayers:
    """Tests for base layer registration and the layer control."""

    def test_registers_each_layer_once(self, controller):
        """The active layer is not added twice."""
        assert controller.view_state.base_layers == ("Street", "Topography")

    def test_tile_urls_and_attribution_rendered(self, controller):
        """Both tile templates and attributions appear in the page."""
        html = controller.render()

        assert STREET_LAYER.url_template in html
        assert TOPOGRAPHY_LAYER.url_template in html
        assert "OpenTopoMap" in html

    def test_layer_control_attached(self, controller):
        """A layer switch control is rendered."""
        assert controller.view_state.layer_control is True
        assert "L.control.layers(" in controller.render()

    def test_default_layer_can_be_topography(self):
        """Any base layer can be the default."""
        controller = MapController()
        state = controller.initialize(CENTER, 5, TOPOGRAPHY_LAYER)
        controller.register_base_layers(default_base_layers())

        assert state.active_base_layer == "Topography"
        assert controller.view_state.base_layers == ("Topography", "Street")


class TestAttach:
    """Tests for MapController.attach()."""

    def test_attach_overlay_draws_markers(self, controller):
        """One circle marker per overlay item."""
        overlay = build_overlay("Earthquakes", QUAKES, resolve_style, popup_content)
        controller.attach(overlay)
        html = controller.render()

        assert controller.view_state.overlays == ("Earthquakes",)
        assert html.count("L.circleMarker(") == 2
        assert "#eecc00" in html
        assert "Offshore Oregon" in html

    def test_attach_shapes(self, controller):
        """Tectonic shapes render as GeoJSON with popups."""
        overlay = build_styled_geometry_overlay(
            "Tectonic Plates", PLATES, TECTONIC_STYLE, plate_popup_content
        )
        controller.attach(overlay)
        html = controller.render()

        assert controller.view_state.overlays == ("Tectonic Plates",)
        assert "#ff7800" in html
        assert "Africa" in html

    def test_attach_legend(self, controller):
        """The legend renders as a bottom-right control."""
        controller.attach(build_legend())
        html = controller.render()

        assert controller.view_state.legends == 1
        assert "info legend" in html
        assert "bottomright" in html
        assert "#ea2c2c" in html

    def test_attach_is_not_idempotent(self, controller):
        """Attaching twice draws twice."""
        overlay = build_overlay("Earthquakes", QUAKES, resolve_style, popup_content)
        controller.attach(overlay)
        controller.attach(overlay)

        assert controller.view_state.overlays == ("Earthquakes", "Earthquakes")
        assert controller.render().count("L.circleMarker(") == 4

    def test_overlays_not_in_layer_control(self, controller):
        """Overlays are always shown, not toggled from the control."""
        overlay = build_overlay("Earthquakes", QUAKES, resolve_style, popup_content)
        controller.attach(overlay)

        assert '"Earthquakes"' not in controller.render()


class TestLegendControl:
    """Tests for LegendControl HTML."""

    def test_html_lists_labels_and_colors(self):
        """Each bucket gets a swatch and a label."""
        control = LegendControl(build_legend())

        assert control.position == "bottomright"
        assert control.html.count("<i style=") == 6
        assert "90+" in control.html
        assert "background: #98ee00" in control.html


class TestSave:
    """Tests for MapController.save()."""

    def test_writes_html(self, controller, tmp_path):
        """save writes the rendered page."""
        path = controller.save(tmp_path / "map.html")

        assert path.exists()
        assert "leaflet" in path.read_text(encoding="utf-8").lower()
