# metadata/core/__init__.py
from movieSearch.metadata.core.models import FavoriteMovie, FavoritesList, Movie, SearchResult
from movieSearch.metadata.core.repo   import FavoritesStore

__all__ = ["FavoriteMovie", "FavoritesList", "Movie", "SearchResult", "FavoritesStore"]
