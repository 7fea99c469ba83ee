"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.errors import (
    AddressNotFoundError,
    GeocoderParseError,
    GeocoderTransportError,
)
from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class NominatimAdapter(GeocoderPort):
    """Forward geocoding against a Nominatim-style `/search` endpoint.

    One outbound request per call: no caching, no retries (the public
    instance's usage policy forbids hammering it).
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ):
        self._client = client
        self._base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        self._user_agent = user_agent if user_agent is not None else settings.geocoder_user_agent
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout
        if not self._user_agent.strip():
            raise ValueError("Nominatim requires a non-empty User-Agent")

    @property
    def search_url(self) -> str:
        return f"{self._base_url}/search"

    async def geocode(self, address: str) -> GeoPoint:
        """Resolve an address to the provider's best match.

        Raises:
            AddressNotFoundError: the provider returned an empty result list.
            GeocoderTransportError: network failure or non-2xx status.
            GeocoderParseError: body or coordinates could not be decoded.
        """
        if self._client is not None:
            results = await self._search(self._client, address)
        else:
            async with httpx.AsyncClient() as client:
                results = await self._search(client, address)

        if not results:
            logger.info("Nominatim returned no results for '%s'", address)
            raise AddressNotFoundError(f"no match for '{address}'")

        point = self._to_point(results[0])
        logger.info("Nominatim resolved '%s' → (%f, %f)", address, point.latitude, point.longitude)
        return point

    async def _search(self, client: httpx.AsyncClient, address: str) -> list[Any]:
        try:
            response = await client.get(
                self.search_url,
                params={
                    "q": address,
                    "format": "json",
                    "limit": 1,
                },
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Nominatim answered HTTP %d for '%s'", status, address)
            raise GeocoderTransportError(f"provider answered HTTP {status}") from e
        except httpx.RequestError as e:
            logger.warning("Nominatim request failed for '%s': %r", address, e)
            raise GeocoderTransportError(f"{type(e).__name__}: {e}") from e

        try:
            results = response.json()
        except ValueError as e:
            logger.warning("Nominatim sent malformed JSON for '%s'", address)
            raise GeocoderParseError("provider response is not valid JSON") from e

        if not isinstance(results, list):
            raise GeocoderParseError(
                f"expected a JSON array, got {type(results).__name__}"
            )
        return results

    @classmethod
    def _to_point(cls, result: Any) -> GeoPoint:
        if not isinstance(result, dict) or "lat" not in result or "lon" not in result:
            raise GeocoderParseError("result has no lat/lon fields")

        lat = cls._parse_coordinate(result["lat"])
        lon = cls._parse_coordinate(result["lon"])
        # -180 and 180 are the same meridian; GeoPoint keeps the positive one
        if lon == -180.0:
            lon = 180.0

        try:
            return GeoPoint(latitude=lat, longitude=lon)
        except ValueError as e:
            raise GeocoderParseError(str(e)) from e

    @staticmethod
    def _parse_coordinate(raw: Any) -> float:
        """Parse a string coordinate such as ' 35.6586 ' into a float.

        Nominatim always sends decimal strings; bare JSON numbers and Python-only
        spellings like '1_0' are rejected.
        """
        if not isinstance(raw, str) or "_" in raw:
            raise GeocoderParseError(f"invalid coordinate: {raw!r}")
        try:
            return float(raw.strip())
        except ValueError as e:
            raise GeocoderParseError(f"invalid coordinate: {raw!r}") from e
