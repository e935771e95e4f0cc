"""
gui
~~~
All Qt widgets, pages and the background-task plumbing.

•  No direct SQL here – everything goes through `metadata.core.repo`.
•  Re-export the high-level symbols so the app can simply:

    from movieSearch.gui import MainWindow
"""

from movieSearch.gui.workers            import TaskScope
from movieSearch.gui.navigation         import NavigationStack
from movieSearch.gui.favorite_cell      import CellFactory, FavoriteCell
from movieSearch.gui.movie_details_page import MovieDetailsPage
from movieSearch.gui.favorites_page     import FavoritesPage
from movieSearch.gui.search_page        import SearchPage
from movieSearch.gui.main_window        import MainWindow

__all__ = [
    "TaskScope", "NavigationStack",
    "CellFactory", "FavoriteCell",
    "MovieDetailsPage", "FavoritesPage", "SearchPage", "MainWindow",
]
