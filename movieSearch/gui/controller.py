"""
Background units of work behind the pages.

Everything here runs on a pool thread via `TaskScope.submit`; nothing
touches a widget or mutates an aggregate the GUI holds. Results travel
back to the GUI thread, which applies them.
"""
from __future__ import annotations
from typing import List, Protocol

from movieSearch.utils import log_debug
from movieSearch.metadata.core.models import FavoriteMovie, FavoritesList, Movie, SearchResult
from movieSearch.metadata.core.errors import DetailLookupMiss, StoreWriteError
from movieSearch.metadata.core.repo import FavoritesStore


class DetailFetcher(Protocol):
    def resolve(self, title: str, year: str | None) -> Movie | None: ...


def fetch_or_create_favorites(store: FavoritesStore) -> FavoritesList:
    """
    Return the stored aggregate, creating (and saving) an empty one on the
    very first run. A failed save of the new aggregate is logged; the
    in-memory list is still returned.
    """
    favorites = store.fetch_first(FavoritesList)
    if favorites is not None:
        return favorites

    log_debug("Could not find favorites list, creating a new one.")
    try:
        with store.transaction():
            favorites = store.create(FavoritesList)
    except StoreWriteError as exc:
        if favorites is None:
            raise
        log_debug(f"Error saving new favorites list: {exc}")
    return favorites


def delete_favorite(store: FavoritesStore, movie: FavoriteMovie) -> FavoriteMovie:
    """Delete *movie* and persist. Raises `StoreWriteError` on failure."""
    with store.transaction():
        store.delete(movie)
    return movie


def add_favorite(store: FavoritesStore, favorites: FavoritesList, movie: Movie) -> FavoriteMovie:
    """Persist *movie* as the last entry of *favorites* and return the new row."""
    with store.transaction():
        record = store.create(
            FavoriteMovie,
            list_id=favorites.id,
            title=movie.title,
            year=movie.year,
            imdb_id=movie.imdb_id,
            type=movie.type,
            poster_url=movie.poster_url,
        )
    return record


def resolve_movie(fetcher: DetailFetcher, title: str, year: str | None) -> Movie:
    """Full details for a favorite / search hit. Raises `DetailLookupMiss`."""
    movie = fetcher.resolve(title, year)
    if movie is None:
        raise DetailLookupMiss(title, year or "")
    return movie


def search_movies(fetcher, text: str) -> List[SearchResult]:
    return fetcher.search(text)
