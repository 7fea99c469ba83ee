"""Port interface for geocoding addresses to coordinates."""

from abc import ABC, abstractmethod

from app.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address: str) -> GeoPoint:
        """Convert address string to lat/lon coordinates.

        Raises a GeocodingError subclass (see app.application.errors) if the
        address cannot be resolved.
        """
        ...
