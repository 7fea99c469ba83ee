"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio

import pytest

from app.application.errors import AddressNotFoundError, GeocodingError
from app.application.ports.geocoder_port import GeocoderPort
from app.domain.value_objects.geo_point import GeoPoint


class FakeGeocoder(GeocoderPort):
    """Answers from a dict; values may be a GeoPoint or an exception to raise."""

    def __init__(self, answers: dict[str, GeoPoint | GeocodingError], delay: float = 0.0):
        self._answers = answers
        self._delay = delay
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    async def geocode(self, address):
        self.calls.append(address)
        if self._delay:
            try:
                await asyncio.sleep(self._delay)
            except asyncio.CancelledError:
                self.cancelled.append(address)
                raise
        answer = self._answers.get(address, AddressNotFoundError(f"no match for '{address}'"))
        if isinstance(answer, GeocodingError):
            raise answer
        return answer


@pytest.fixture
def make_geocoder():
    return FakeGeocoder


@pytest.fixture
def tokyo_tower():
    return GeoPoint(latitude=35.6586, longitude=139.7454)


@pytest.fixture
def osaka():
    return GeoPoint(latitude=34.6937, longitude=135.5023)


@pytest.fixture
def geocoder(make_geocoder, tokyo_tower, osaka):
    return make_geocoder({"A": tokyo_tower, "B": osaka})


@pytest.fixture
def nominatim_tokyo_tower():
    """Trimmed-down /search?format=json answer as Nominatim sends it."""
    return [
        {
            "place_id": 128455521,
            "osm_type": "way",
            "lat": "35.6586",
            "lon": "139.7454",
            "display_name": "東京タワー, 芝公園, 港区, 東京都, 日本",
        }
    ]
