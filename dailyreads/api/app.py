"""FastAPI application factory."""

from typing import Optional

import httpx
from fastapi import FastAPI

from .. import __version__
from ..config import Config
from .routes import router


def create_app(
    settings: Optional[Config] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Configuration manager, read lazily on each request
        transport: Optional httpx transport shared by outbound requests
    """
    app = FastAPI(
        title="dailyreads",
        description="Daily essay and longform picks from a handful of RSS feeds",
        version=__version__,
    )
    app.state.settings = settings or Config()
    app.state.transport = transport
    app.include_router(router)

    @app.get("/health")
    async def health():
        """Liveness check."""
        return {"status": "ok"}

    return app

