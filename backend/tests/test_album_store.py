"""
Album Catalog Backend — Album Store Unit Tests
===============================================

What:  Tests for AlbumStore ordering, lookup, and append semantics.
How:   Exercises the store directly (no HTTP).

What we test:
    ✅ Seed contents and order
    ✅ First-match lookup, including duplicate ids
    ✅ Unknown id raises AlbumNotFoundError
    ✅ Appends preserve operation order
    ✅ list_albums() is side-effect-free and returns a snapshot
    ✅ Concurrent appends are not lost
"""

import threading

import pytest

from album_catalog.exceptions import AlbumNotFoundError, NotFoundError
from album_catalog.schemas.album import Album
from album_catalog.services.album_store import SEED_ALBUMS, AlbumStore


class TestAlbumStoreSeed:
    """Tests for the seeded collection."""

    def setup_method(self):
        self.store = AlbumStore.seeded()

    def test_seeded_with_three_albums_in_order(self):
        albums = self.store.list_albums()

        assert [a.id for a in albums] == ["1", "2", "3"]
        assert len(self.store) == 3

    def test_seed_album_one(self):
        album = self.store.get_album("1")

        assert album.title == "Blue Train"
        assert album.artist == "John Coltrane"
        assert album.year == "1977"
        assert album.price == 56.99

    def test_empty_store(self):
        store = AlbumStore()

        assert store.list_albums() == []
        assert len(store) == 0

    def test_stores_do_not_share_seed_records(self):
        other = AlbumStore.seeded()
        other.get_album("1").title = "Changed"

        assert self.store.get_album("1").title == "Blue Train"
        assert SEED_ALBUMS[0].title == "Blue Train"


class TestAlbumStoreGet:
    """Tests for get_album lookup."""

    def setup_method(self):
        self.store = AlbumStore.seeded()

    def test_unknown_id_raises_not_found(self):
        with pytest.raises(AlbumNotFoundError) as exc_info:
            self.store.get_album("999")

        assert exc_info.value.message == "album not found"
        assert exc_info.value.album_id == "999"
        assert isinstance(exc_info.value, NotFoundError)

    def test_lookup_is_exact_match(self):
        with pytest.raises(AlbumNotFoundError):
            self.store.get_album(" 1")

    def test_duplicate_id_first_match_wins(self):
        self.store.add_album(Album(id="1", title="Impostor", artist="Nobody", year="2000", price=1.0))

        assert self.store.get_album("1").title == "Blue Train"
        assert len(self.store) == 4


class TestAlbumStoreAdd:
    """Tests for add_album append semantics."""

    def setup_method(self):
        self.store = AlbumStore.seeded()

    def test_add_returns_album_and_appends(self):
        album = Album(id="4", title="Test Album", artist="Test Artist", year="2023", price=29.99)

        result = self.store.add_album(album)

        assert result == album
        albums = self.store.list_albums()
        assert len(albums) == 4
        assert albums[3] == album
        assert self.store.get_album("4") == album

    def test_list_reflects_operation_order(self):
        for album_id in ("10", "5", "7"):
            self.store.add_album(Album(id=album_id, title=f"Album {album_id}"))

        assert [a.id for a in self.store.list_albums()] == ["1", "2", "3", "10", "5", "7"]

    def test_list_is_side_effect_free(self):
        first = self.store.list_albums()
        for _ in range(5):
            self.store.list_albums()

        assert self.store.list_albums() == first

    def test_list_returns_snapshot(self):
        snapshot = self.store.list_albums()
        self.store.add_album(Album(id="4"))

        assert len(snapshot) == 3
        assert len(self.store.list_albums()) == 4

    def test_concurrent_adds_are_not_lost(self):
        def add_many(prefix: str):
            for i in range(200):
                self.store.add_album(Album(id=f"{prefix}-{i}"))

        threads = [threading.Thread(target=add_many, args=(f"t{n}",)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        albums = self.store.list_albums()
        assert len(albums) == 3 + 8 * 200
        # Per-thread creation order is preserved
        t0_ids = [a.id for a in albums if a.id.startswith("t0-")]
        assert t0_ids == [f"t0-{i}" for i in range(200)]
