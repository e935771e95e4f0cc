"""Test doubles and seeding helpers shared by the Movie Search tests."""

from __future__ import annotations

from PySide6.QtWidgets import QWidget

from movieSearch.metadata.core.errors import StoreWriteError
from movieSearch.metadata.core.models import FavoriteMovie, FavoritesList, Movie, SearchResult
from movieSearch.metadata.core.repo import FavoritesStore


def seed_favorites(store: FavoritesStore, movies: list[tuple[str, str]]) -> FavoritesList:
    """Persist a favorites list holding *movies* (title, year) in order."""

    favorites = store.create(FavoritesList)
    for title, year in movies:
        favorites.movies.append(
            store.create(FavoriteMovie, list_id=favorites.id, title=title, year=year)
        )
    store.save()
    return favorites


def make_movie(title: str, year: str, **extra) -> Movie:
    return Movie(title=title, year=year, **extra)


class FailingSaveStore(FavoritesStore):
    """Store whose commit always fails, the way a full disk would."""

    def save(self) -> None:
        self.rollback()
        raise StoreWriteError("database or disk is full")


class FakeFetcher:
    """Detail fetcher double: resolves only the (title, year) pairs it knows."""

    def __init__(self, known: list[tuple[str, str]] | None = None, error: Exception | None = None):
        self.known = {(t, y): make_movie(t, y, plot=f"About {t}") for t, y in (known or [])}
        self.error = error
        self.resolve_calls: list[tuple[str, str | None]] = []
        self.search_calls: list[str] = []

    def resolve(self, title: str, year: str | None) -> Movie | None:
        self.resolve_calls.append((title, year))
        if self.error is not None:
            raise self.error
        return self.known.get((title, year))

    def search(self, text: str) -> list[SearchResult]:
        self.search_calls.append(text)
        return [SearchResult(title=t, year=y) for t, y in self.known if text.lower() in t.lower()]


class RecordingNavigator:
    def __init__(self) -> None:
        self.pushed: list[QWidget] = []

    def push(self, page: QWidget) -> None:
        self.pushed.append(page)
