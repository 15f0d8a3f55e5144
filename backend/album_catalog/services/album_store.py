"""
Album Catalog Backend — Album Store
====================================

What:  The ordered, in-memory collection of albums and its three operations.
How:   A list of Album records guarded by a lock. Each FastAPI app owns one
       store (app.state.album_store); route handlers receive it through
       the get_album_store dependency.
Who:   Used by the /albums and /health route handlers.
When:  Seeded once when the app is created; lives until the process exits.

Ordering Contract:
    - New albums are appended to the end of the collection
    - list_albums() returns albums in insertion order (seed order, then
      creation order)
    - get_album() scans in insertion order and returns the FIRST match;
      duplicate ids are allowed and never rejected on insert

Thread Safety:
    Reads and appends hold `_lock`, so the store may be shared by async
    handlers, threadpool handlers, and background threads alike.
    list_albums() returns a copy; callers never see the list grow under them.
"""

import logging
import threading
from typing import Iterable, List, Optional

from starlette.requests import Request

from album_catalog.exceptions import AlbumNotFoundError
from album_catalog.schemas.album import Album

logger = logging.getLogger(__name__)

# ── Seed Data ─────────────────────────────────────────────────────────────
SEED_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", year="1977", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", year="1987", price=17.99),
    Album(
        id="3",
        title="Sarah Vaughan and Clifford Brown",
        artist="Sarah Vaughan",
        year="1997",
        price=39.99,
    ),
)


class AlbumStore:
    """
    Ordered in-memory album collection.

    Responsibilities:
        - list_albums(): Snapshot of every album, insertion order
        - get_album():   First album with a matching id, else AlbumNotFoundError
        - add_album():   Append without any uniqueness or field checks
    """

    def __init__(self, albums: Optional[Iterable[Album]] = None):
        """
        Args:
            albums: Initial contents. Defaults to an empty collection; use
                    AlbumStore.seeded() for the standard three records.
        """
        self._lock = threading.Lock()
        self._albums: List[Album] = [album.model_copy() for album in albums or ()]

    @classmethod
    def seeded(cls) -> "AlbumStore":
        """Create a store holding the three seed albums."""
        return cls(SEED_ALBUMS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def list_albums(self) -> List[Album]:
        """Return every album in insertion order. Has no side effects."""
        with self._lock:
            return list(self._albums)

    def get_album(self, album_id: str) -> Album:
        """
        Return the first album whose id equals `album_id`.

        Raises:
            AlbumNotFoundError: No album has that id (→ 404)
        """
        with self._lock:
            for album in self._albums:
                if album.id == album_id:
                    return album

        logger.debug("Album lookup miss: id=%s", album_id)
        raise AlbumNotFoundError(album_id)

    def add_album(self, album: Album) -> Album:
        """
        Append `album` to the end of the collection and return it.

        The album is stored as given; an existing album with the same id is
        left in place and keeps winning lookups.
        """
        with self._lock:
            self._albums.append(album)
            size = len(self._albums)

        logger.info("Album created: id=%s title=%r (collection size=%d)", album.id, album.title, size)
        return album


def get_album_store(request: Request) -> AlbumStore:
    """
    FastAPI dependency that provides the app's album store.

    Example usage in a route:
        @router.get("/albums")
        async def list_albums(store: AlbumStore = Depends(get_album_store)):
            return store.list_albums()
    """
    return request.app.state.album_store
