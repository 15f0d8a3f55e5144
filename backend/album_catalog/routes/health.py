"""
Album Catalog Backend — Health Check Route
===========================================

What:  Health check endpoint for monitoring and load balancer checks.
How:   Reports version, uptime, and the current size of the album collection.
Who:   Called by process supervisors, Docker health checks, load balancers.

The service has no external dependencies, so a response at all means
"healthy". Requests to /health are not written to the access log.
"""

import time

from fastapi import APIRouter, Depends

from album_catalog import __version__
from album_catalog.schemas.album import HealthResponse
from album_catalog.services.album_store import AlbumStore, get_album_store

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: AlbumStore = Depends(get_album_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        album_count=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
