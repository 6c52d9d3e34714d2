"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions and a
local command line renderer. It's a thin wrapper that loads settings,
initializes the map, and runs the acquisition sequencer.
"""

import argparse
import asyncio
import logging
import os
import sys

import functions_framework
from flask import Request, Response

from src.core.config import MapSettings
from src.core.layers import default_base_layers
from src.sequencer import AcquisitionSequencer, SequenceResult
from src.shell.config_loader import load_settings
from src.shell.geojson_client import GeoJSONClient
from src.shell.map_controller import MapController


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def build_map(
    settings: MapSettings,
    client: GeoJSONClient | None = None,
) -> tuple[MapController, SequenceResult]:
    """Build the full map for one session.

    Sets up the viewport, base layers and layer control, then runs the
    acquisition sequence to attach the overlays and legend.

    Args:
        settings: Map settings
        client: GeoJSON client (created from settings if not provided)

    Returns:
        Tuple of (map controller, sequence result)
    """
    base_layers = default_base_layers()

    controller = MapController(title=settings.title)
    controller.initialize(
        center=settings.center,
        zoom=settings.zoom,
        default_base_layer=base_layers[settings.default_base_layer],
    )
    controller.register_base_layers(base_layers)
    controller.attach_layer_control()

    client = client or GeoJSONClient(
        seismic_url=settings.seismic_url,
        tectonic_url=settings.tectonic_url,
        timeout=settings.timeout_seconds,
    )
    result = await AcquisitionSequencer(controller, client).run()

    return controller, result


@functions_framework.http
def seismic_map(request: Request) -> Response:
    """HTTP Cloud Function entry point.

    Renders the map page. Dataset fetch failures still return the page
    with whatever was attached.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        HTML response
    """
    logger.info("Rendering seismic map")

    try:
        settings = load_settings(os.environ.get("CONFIG_PATH"))
        controller, result = asyncio.run(build_map(settings))

        for error in result.errors:
            logger.error("Error: %s", error)
        logger.info("Completed: %s", result.summary)

        return Response(controller.render(), status=200, mimetype="text/html")

    except Exception as e:
        logger.exception("Unexpected error rendering seismic map")
        return Response(f"Error: {e}", status=500, mimetype="text/plain")


def main(argv: list[str] | None = None) -> int:
    """Render the map to an HTML file."""
    parser = argparse.ArgumentParser(
        description="Render earthquakes and tectonic plates to an HTML map",
    )
    parser.add_argument(
        "--output",
        "-o",
        default="map.html",
        help="Output HTML file (default: map.html)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML settings file (default: config/config.yaml if present)",
    )
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    controller, result = asyncio.run(build_map(settings))
    path = controller.save(args.output)

    print(f"Wrote {path} ({result.summary})")
    for error in result.errors:
        print(f"  {error}", file=sys.stderr)

    return 0 if result.success else 1


# For local testing
if __name__ == "__main__":
    sys.exit(main())
