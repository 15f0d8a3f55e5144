"""
Album Catalog Backend — Album Route Handlers
=============================================

What:  Handles GET /albums (list), GET /albums/{id} (detail), POST /albums (create).
How:   Receives the app's AlbumStore via Depends(get_album_store) and delegates.

Error responses (handled by global exception handlers in main.py):
    HTTP 400: Body is not valid JSON or does not decode into an Album
    HTTP 404: {"message": "album not found"}
"""

from typing import List

from fastapi import APIRouter, Depends

from album_catalog.schemas.album import Album, ErrorResponse
from album_catalog.services.album_store import AlbumStore, get_album_store

router = APIRouter(prefix="/albums", tags=["Albums"])


@router.get(
    "",
    response_model=List[Album],
    summary="List all albums",
    description="Returns every album in the collection, seed albums first, then created albums in creation order.",
)
async def list_albums(store: AlbumStore = Depends(get_album_store)) -> List[Album]:
    return store.list_albums()


@router.get(
    "/{album_id}",
    response_model=Album,
    responses={
        404: {"description": "No album has this id", "model": ErrorResponse},
    },
    summary="Get a single album by ID",
)
async def get_album(album_id: str, store: AlbumStore = Depends(get_album_store)) -> Album:
    """
    Return the first album whose id matches the path parameter.

    AlbumNotFoundError propagates to the global handler, which renders the
    404 body.
    """
    return store.get_album(album_id)


@router.post(
    "",
    status_code=201,
    response_model=Album,
    responses={
        400: {"description": "Malformed JSON or wrong field types", "model": ErrorResponse},
    },
    summary="Add an album",
    description=(
        "Appends the album from the JSON body to the end of the collection and "
        "echoes it back. Ids are not checked for uniqueness."
    ),
)
async def create_album(album: Album, store: AlbumStore = Depends(get_album_store)) -> Album:
    # Body decoding happens before this runs; a bad payload never reaches the store
    return store.add_album(album)
