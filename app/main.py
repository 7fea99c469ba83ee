"""geodistance — FastAPI application factory and server entry point."""

import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from app.config import settings
from app.infrastructure.api.routes_distance import router as distance_router
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.api.static_files import PublicStaticFiles

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.geocoder_timeout,
        follow_redirects=True,
    )
    logger.info("Geocoder client ready for %s", settings.geocoder_base_url)
    yield
    await app.state.http_client.aclose()


def create_app(static_dir: str | None = None) -> FastAPI:
    app = FastAPI(
        title="geodistance",
        description="Great-circle distance between two geocoded addresses",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(distance_router)

    # Catch-all: must be mounted after every API route
    app.mount(
        "/",
        PublicStaticFiles(directory=static_dir or settings.static_dir, html=True),
        name="static",
    )

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting server at http://%s:%d/", settings.host, settings.port)
    # uvicorn exits with status 1 when the socket cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
