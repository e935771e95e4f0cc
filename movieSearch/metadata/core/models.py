# Favorites aggregate, persisted movie rows and resolved OMDb DTOs
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List


def _na(value: Any) -> Any:
    """OMDb uses the literal string "N/A" for missing values."""
    return None if value in ("N/A", "", None) else value


@dataclass(slots=True)
class FavoriteMovie:
    id: int
    list_id: int
    title: str
    year: str
    imdb_id: str | None = None
    type: str | None = None
    poster_url: str | None = None
    position: int = 0

    def matches(self, title: str, year: str) -> bool:
        return self.title == title and self.year == year


@dataclass(slots=True)
class FavoritesList:
    id: int
    movies: List[FavoriteMovie] = field(default_factory=list)

    def contains(self, title: str, year: str) -> bool:
        return any(m.matches(title, year) for m in self.movies)


@dataclass(slots=True)
class SearchResult:
    title: str
    year: str
    imdb_id: str | None = None
    type: str | None = None
    poster_url: str | None = None

    @classmethod
    def from_omdb(cls, d: Dict[str, Any]) -> "SearchResult":
        return cls(
            title=d.get("Title", ""),
            year=d.get("Year", ""),
            imdb_id=_na(d.get("imdbID")),
            type=_na(d.get("Type")),
            poster_url=_na(d.get("Poster")),
        )


@dataclass(slots=True)
class Movie:
    """Full detail record for one title; never written to the store."""
    title: str
    year: str
    rated: str | None = None
    released: str | None = None
    runtime: str | None = None
    genre: str | None = None
    director: str | None = None
    writer: str | None = None
    actors: str | None = None
    plot: str | None = None
    language: str | None = None
    country: str | None = None
    awards: str | None = None
    poster_url: str | None = None
    imdb_id: str | None = None
    imdb_rating: str | None = None
    imdb_votes: str | None = None
    type: str | None = None
    ratings: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_omdb(cls, d: Dict[str, Any]) -> "Movie":
        return cls(
            title=d.get("Title", ""),
            year=d.get("Year", ""),
            rated=_na(d.get("Rated")),
            released=_na(d.get("Released")),
            runtime=_na(d.get("Runtime")),
            genre=_na(d.get("Genre")),
            director=_na(d.get("Director")),
            writer=_na(d.get("Writer")),
            actors=_na(d.get("Actors")),
            plot=_na(d.get("Plot")),
            language=_na(d.get("Language")),
            country=_na(d.get("Country")),
            awards=_na(d.get("Awards")),
            poster_url=_na(d.get("Poster")),
            imdb_id=_na(d.get("imdbID")),
            imdb_rating=_na(d.get("imdbRating")),
            imdb_votes=_na(d.get("imdbVotes")),
            type=_na(d.get("Type")),
            ratings=list(d.get("Ratings") or []),
        )
