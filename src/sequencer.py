"""Acquisition Sequencer - Wires Functional Core and Imperative Shell.

This module fetches the two remote datasets, builds their overlays with
the pure core functions, and attaches them to the map. The sequence is
strictly ordered:

    IDLE -> SEISMIC_PENDING -> SEISMIC_READY -> TECTONIC_PENDING -> TECTONIC_READY

A seismic failure ends the sequence before the legend is attached or the
tectonic fetch is issued. A tectonic failure leaves the seismic overlay
and the legend in place.
"""

import enum
import logging
from dataclasses import dataclass, field

from src.core.feature import (
    MalformedFeatureError,
    parse_plate_collection,
    parse_seismic_collection,
)
from src.core.layers import Overlay, build_overlay, build_styled_geometry_overlay
from src.core.legend import build_legend
from src.core.style import (
    TECTONIC_STYLE,
    plate_popup_content,
    popup_content,
    resolve_style,
)
from src.shell.geojson_client import FetchError, GeoJSONClient
from src.shell.map_controller import MapController


logger = logging.getLogger(__name__)


SEISMIC_OVERLAY = "Earthquakes"
TECTONIC_OVERLAY = "Tectonic Plates"


class Stage(enum.Enum):
    """Acquisition stages."""
    IDLE = "idle"
    SEISMIC_PENDING = "seismic_pending"
    SEISMIC_READY = "seismic_ready"
    SEISMIC_FAILED = "seismic_failed"
    TECTONIC_PENDING = "tectonic_pending"
    TECTONIC_READY = "tectonic_ready"
    TECTONIC_FAILED = "tectonic_failed"


TERMINAL_STAGES = frozenset({
    Stage.SEISMIC_FAILED,
    Stage.TECTONIC_READY,
    Stage.TECTONIC_FAILED,
})


@dataclass
class SequenceResult:
    """Result of a complete acquisition sequence.

    Attributes:
        stage: Final stage reached
        earthquakes: Markers in the attached seismic overlay
        plate_boundaries: Shapes in the attached tectonic overlay
        legend_attached: Whether the legend was attached
        errors: Any errors that occurred
    """
    stage: Stage
    earthquakes: int = 0
    plate_boundaries: int = 0
    legend_attached: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if both overlays were attached."""
        return self.stage is Stage.TECTONIC_READY

    @property
    def summary(self) -> str:
        """Human-readable summary of the sequence."""
        return (
            f"{self.earthquakes} earthquakes, "
            f"{self.plate_boundaries} plate boundaries, "
            f"stage {self.stage.value}"
        )


class AcquisitionSequencer:
    """Fetches both datasets in order and attaches their overlays.

    This class wires together:
    - GeoJSON client (fetches both datasets)
    - Core functions (parsing, styling, legend, overlay composition)
    - Map controller (attaches overlays and the legend)
    """

    def __init__(
        self,
        controller: MapController,
        client: GeoJSONClient | None = None,
    ) -> None:
        """Initialize sequencer.

        Args:
            controller: Initialized map controller to attach layers to
            client: GeoJSON client (created if not provided)
        """
        self.controller = controller
        self.client = client or GeoJSONClient()
        self.stage = Stage.IDLE

    def _transition(self, stage: Stage) -> None:
        logger.info("Acquisition stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    async def _build_seismic_overlay(self) -> Overlay:
        geojson = await self.client.fetch_seismic()
        collection = parse_seismic_collection(geojson)
        return build_overlay(SEISMIC_OVERLAY, collection, resolve_style, popup_content)

    async def _build_tectonic_overlay(self) -> Overlay:
        geojson = await self.client.fetch_tectonic()
        collection = parse_plate_collection(geojson)
        return build_styled_geometry_overlay(
            TECTONIC_OVERLAY,
            collection,
            TECTONIC_STYLE,
            plate_popup_content,
        )

    async def run(self) -> SequenceResult:
        """Run the acquisition sequence once.

        Fetch and data errors end the sequence in a failed stage and are
        reported in the result; they are not raised.

        Returns:
            SequenceResult with the final stage and what was attached
        """
        if self.stage is not Stage.IDLE:
            raise RuntimeError(f"Sequence already run (stage {self.stage.value})")

        result = SequenceResult(stage=self.stage)

        # Stage 1: earthquakes, then the legend
        self._transition(Stage.SEISMIC_PENDING)
        try:
            seismic = await self._build_seismic_overlay()
        except (FetchError, MalformedFeatureError) as e:
            error_msg = f"Failed to load earthquakes: {e}"
            logger.error(error_msg)
            self._transition(Stage.SEISMIC_FAILED)
            result.stage = self.stage
            result.errors.append(error_msg)
            return result

        self.controller.attach(seismic)
        self.controller.attach(build_legend())
        result.earthquakes = len(seismic)
        result.legend_attached = True
        self._transition(Stage.SEISMIC_READY)

        # Stage 2: tectonic plate boundaries
        self._transition(Stage.TECTONIC_PENDING)
        try:
            tectonic = await self._build_tectonic_overlay()
        except (FetchError, MalformedFeatureError) as e:
            error_msg = f"Failed to load tectonic plates: {e}"
            logger.error(error_msg)
            self._transition(Stage.TECTONIC_FAILED)
            result.stage = self.stage
            result.errors.append(error_msg)
            return result

        self.controller.attach(tectonic)
        result.plate_boundaries = len(tectonic)
        self._transition(Stage.TECTONIC_READY)

        result.stage = self.stage
        logger.info("Completed: %s", result.summary)
        return result
