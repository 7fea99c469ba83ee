"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends, Request

from app.adapters.geocoder.nominatim_adapter import NominatimAdapter
from app.application.ports.geocoder_port import GeocoderPort
from app.application.use_cases.compute_distance import ComputeDistanceUseCase
from app.config import settings


def get_geocoder(request: Request) -> GeocoderPort:
    # Shared pooled client from the lifespan; absent when lifespan did not run
    client = getattr(request.app.state, "http_client", None)
    return NominatimAdapter(client=client)


def get_compute_distance_uc(
    geocoder: GeocoderPort = Depends(get_geocoder),
) -> ComputeDistanceUseCase:
    return ComputeDistanceUseCase(geocoder=geocoder, parallel=settings.geocoder_parallel)
