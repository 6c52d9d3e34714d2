"""GeoJSON Feed Client - Imperative Shell.

This module handles HTTP communication with the earthquake feed and the
tectonic plate boundaries file. All I/O is contained here; parsing and
validation are in the core module.
"""

import logging
from typing import Any

import httpx

from src.core.config import SEISMIC_FEED_URL, TECTONIC_PLATES_URL


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


class FetchError(Exception):
    """A dataset could not be fetched (network error or bad response)."""

    def __init__(self, dataset: str, url: str, reason: str) -> None:
        self.dataset = dataset
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {dataset} from {url}: {reason}")


class GeoJSONClient:
    """Async client for the two remote GeoJSON datasets.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        seismic_url: str = SEISMIC_FEED_URL,
        tectonic_url: str = TECTONIC_PLATES_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize GeoJSON client.

        Args:
            seismic_url: Earthquake feed URL
            tectonic_url: Tectonic plate boundaries URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.seismic_url = seismic_url
        self.tectonic_url = tectonic_url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, dataset: str, url: str) -> dict[str, Any]:
        """Fetch a GeoJSON document.

        This method performs HTTP I/O.

        Args:
            dataset: Dataset name for logs and errors
            url: Document URL

        Returns:
            Decoded GeoJSON

        Raises:
            FetchError: On network errors, non-2xx responses or invalid JSON
        """
        logger.info("Fetching %s from %s", dataset, url)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise FetchError(dataset, url, str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(dataset, url, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise FetchError(dataset, url, "response is not a GeoJSON object")

        logger.info(
            "Fetched %d %s features",
            len(data.get("features") or []),
            dataset,
        )

        return data

    async def fetch_seismic(self) -> dict[str, Any]:
        """Fetch the earthquake FeatureCollection."""
        return await self.fetch("earthquakes", self.seismic_url)

    async def fetch_tectonic(self) -> dict[str, Any]:
        """Fetch the tectonic plate boundaries FeatureCollection."""
        return await self.fetch("tectonic plates", self.tectonic_url)
