"""Distance endpoint — two addresses in, great-circle kilometers out."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from app.application.errors import AddressResolutionError
from app.application.use_cases.compute_distance import ComputeDistanceUseCase
from app.config import settings
from app.infrastructure.api.cancellation import ClientDisconnected, run_cancellable
from app.infrastructure.api.dependencies import get_compute_distance_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["distance"])

# nginx's "client closed request"; never actually seen by the client
CLIENT_CLOSED_REQUEST = 499


@router.get("/distance")
async def get_distance(
    request: Request,
    address1: str | None = None,
    address2: str | None = None,
    distance_uc: ComputeDistanceUseCase = Depends(get_compute_distance_uc),
):
    """Geocode both addresses and return the distance between them in km."""
    if not address1 or not address1.strip() or not address2 or not address2.strip():
        return PlainTextResponse(
            "Both address1 and address2 must be specified", status_code=400
        )

    try:
        result = await run_cancellable(
            request,
            distance_uc.execute(address1, address2),
            timeout=settings.request_timeout,
        )
    except AddressResolutionError as e:
        # NotFound included: kept at 500 for compatibility with existing clients
        return PlainTextResponse(str(e), status_code=500)
    except ClientDisconnected:
        logger.warning("Client disconnected, abandoned lookup of '%s' / '%s'", address1, address2)
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    except asyncio.TimeoutError:
        logger.warning("Deadline of %.1fs exceeded for '%s' / '%s'", settings.request_timeout, address1, address2)
        return PlainTextResponse("Distance lookup timed out", status_code=504)

    payload = result.to_dict()
    logger.info("Response: %s", payload)
    return payload
