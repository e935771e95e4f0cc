"""Tests for the background units of work used by the pages."""

from __future__ import annotations

import threading

import pytest

from movieSearch.gui import controller
from movieSearch.metadata.core.errors import DetailLookupMiss, StoreWriteError
from movieSearch.metadata.core.models import FavoritesList
from movieSearch.metadata.core.repo import FavoritesStore
from movieSearch.metadata.movie_search_db import connect
from tests.support import FailingSaveStore, FakeFetcher, make_movie, seed_favorites


def test_fetch_or_create_returns_existing_list(store: FavoritesStore) -> None:
    seed_favorites(store, [("Dune", "2021")])

    favorites = controller.fetch_or_create_favorites(store)

    assert [m.title for m in favorites.movies] == ["Dune"]


def test_fetch_or_create_persists_a_new_empty_list(tmp_path) -> None:
    path = tmp_path / "fresh.sqlite"
    store = FavoritesStore.open(path)
    try:
        favorites = controller.fetch_or_create_favorites(store)
        assert favorites.movies == []

        # a second connection only sees committed rows
        other = FavoritesStore(connect(path))
        try:
            assert other.fetch_first(FavoritesList) is not None
        finally:
            other.close()
    finally:
        store.close()


def test_fetch_or_create_still_returns_list_when_save_fails(conn) -> None:
    favorites = controller.fetch_or_create_favorites(FailingSaveStore(conn))

    assert favorites.movies == []
    assert FavoritesStore(conn).fetch_first(FavoritesList) is None


def test_delete_favorite_removes_and_persists(store: FavoritesStore) -> None:
    favorites = seed_favorites(store, [("Dune", "2021"), ("Arrival", "2016")])

    controller.delete_favorite(store, favorites.movies[0])

    assert [m.title for m in store.fetch_first(FavoritesList).movies] == ["Arrival"]


def test_delete_favorite_propagates_write_errors(conn) -> None:
    favorites = seed_favorites(FavoritesStore(conn), [("Dune", "2021")])

    with pytest.raises(StoreWriteError):
        controller.delete_favorite(FailingSaveStore(conn), favorites.movies[0])
    assert len(FavoritesStore(conn).fetch_first(FavoritesList).movies) == 1


def test_add_favorite_appends_at_the_end(store: FavoritesStore) -> None:
    favorites = seed_favorites(store, [("Dune", "2021")])

    record = controller.add_favorite(
        store, favorites, make_movie("Arrival", "2016", imdb_id="tt2543164", type="movie")
    )

    assert (record.title, record.year, record.position) == ("Arrival", "2016", 1)
    stored = store.fetch_first(FavoritesList).movies
    assert [(m.title, m.imdb_id) for m in stored] == [("Dune", None), ("Arrival", "tt2543164")]


def test_resolve_movie_raises_lookup_miss() -> None:
    fetcher = FakeFetcher(known=[("Dune", "2021")])

    assert controller.resolve_movie(fetcher, "Dune", "2021").title == "Dune"
    with pytest.raises(DetailLookupMiss) as info:
        controller.resolve_movie(fetcher, "Dune", "1984")
    assert (info.value.title, info.value.year) == ("Dune", "1984")


class InterleavingStore(FavoritesStore):
    """Runs *after_delete* right after a delete is staged, before the commit."""

    def __init__(self, conn, after_delete) -> None:
        super().__init__(conn)
        self.after_delete = after_delete

    def delete(self, record) -> None:
        super().delete(record)
        self.after_delete()


def test_failing_write_on_another_thread_cannot_undo_a_delete(conn) -> None:
    favorites = seed_favorites(FavoritesStore(conn), [("Dune", "2021"), ("Arrival", "2016")])
    errors: list[StoreWriteError] = []

    def add_duplicate() -> None:
        try:
            controller.add_favorite(store, favorites, make_movie("Arrival", "2016"))
        except StoreWriteError as exc:
            errors.append(exc)

    racer = threading.Thread(target=add_duplicate)

    def start_racer() -> None:
        racer.start()
        racer.join(0.3)   # blocked on the store lock until the delete commits

    store = InterleavingStore(conn, start_racer)
    controller.delete_favorite(store, favorites.movies[0])
    racer.join(5)

    assert not racer.is_alive()
    assert len(errors) == 1
    assert [m.title for m in FavoritesStore(conn).fetch_first(FavoritesList).movies] == ["Arrival"]
