"""
movieSearch
~~~~~~~~~~~

Top-level package for the Movie Search desktop application.

Exports:
  - DATABASE_PATH, OMDB_API_KEY
  - Utility functions: log_debug, apply_dark_palette
  - Store + fetcher: FavoritesStore, OMDBClient
  - MainWindow GUI entrypoint
"""

# settings
from movieSearch.settings import DATABASE_PATH, OMDB_API_KEY

# utils
from movieSearch.utils import log_debug, apply_dark_palette

# store + fetcher
from movieSearch.metadata import FavoritesStore, OMDBClient

# GUI entrypoint
from movieSearch.gui.main_window import MainWindow

__all__ = [
    # settings
    "DATABASE_PATH",
    "OMDB_API_KEY",
    # utils
    "log_debug",
    "apply_dark_palette",
    # store + fetcher
    "FavoritesStore",
    "OMDBClient",
    # GUI
    "MainWindow",
]
