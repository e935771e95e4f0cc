"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses, errors + the favorites store
* api_clients – OMDb detail fetcher
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieSearch.metadata.core.models import FavoriteMovie, FavoritesList, Movie, SearchResult
from movieSearch.metadata.core.repo   import FavoritesStore
from movieSearch.metadata.core.errors import (
    StoreError,
    StoreReadError,
    StoreWriteError,
    DetailLookupMiss,
    CellTypeError,
)

# ── API clients ───────────────────────────────────────────────────────────
from movieSearch.metadata.api_clients.omdb_client import OMDBClient

__all__ = [
    "FavoriteMovie",
    "FavoritesList",
    "Movie",
    "SearchResult",
    "FavoritesStore",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "DetailLookupMiss",
    "CellTypeError",
    "OMDBClient",
]
