"""
Album Catalog Backend — API Ping Route
=======================================

What:  GET /api/ returns {"message": "pong"}.
Who:   Called by the frontend to check that the API is reachable.
"""

from fastapi import APIRouter

from album_catalog.schemas.album import MessageResponse

router = APIRouter(prefix="/api", tags=["API"])


@router.get("/", response_model=MessageResponse, summary="Ping the API")
async def ping() -> MessageResponse:
    return MessageResponse(message="pong")
