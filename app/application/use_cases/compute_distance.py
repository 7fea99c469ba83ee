"""ComputeDistanceUseCase — geocode two addresses → haversine distance."""

from __future__ import annotations

import asyncio
import logging

from app.application.errors import AddressResolutionError, GeocodingError
from app.application.ports.geocoder_port import GeocoderPort
from app.domain.entities.distance_result import DistanceResult
from app.domain.value_objects.geo_point import GeoPoint, haversine_km

logger = logging.getLogger(__name__)


class ComputeDistanceUseCase:
    """Orchestrates the two lookups and the distance kernel for one query."""

    def __init__(self, geocoder: GeocoderPort, parallel: bool = False):
        self._geocoder = geocoder
        self._parallel = parallel

    async def execute(self, address1: str, address2: str) -> DistanceResult:
        """Resolve both addresses and measure the great-circle distance.

        Raises:
            AddressResolutionError: naming the parameter whose lookup failed.
                When both fail, address1 is reported.
        """
        if self._parallel:
            p1, p2 = await self._resolve_concurrently(address1, address2)
        else:
            p1 = await self._resolve("address1", address1)
            p2 = await self._resolve("address2", address2)

        km = haversine_km(p1.latitude, p1.longitude, p2.latitude, p2.longitude)
        return DistanceResult(address1=address1, address2=address2, distance_km=km)

    async def _resolve(self, field: str, address: str) -> GeoPoint:
        try:
            return await self._geocoder.geocode(address)
        except GeocodingError as e:
            logger.warning("Could not geocode %s='%s': %s", field, address, e)
            raise AddressResolutionError(field, address, e) from e

    async def _resolve_concurrently(
        self, address1: str, address2: str
    ) -> tuple[GeoPoint, GeoPoint]:
        # Cancelling the caller cancels both lookups via gather
        results = await asyncio.gather(
            self._resolve("address1", address1),
            self._resolve("address2", address2),
            return_exceptions=True,
        )
        for outcome in results:
            if isinstance(outcome, BaseException):
                raise outcome
        return results[0], results[1]
