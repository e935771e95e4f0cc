# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QMainWindow, QListWidget, QListWidgetItem, QStackedWidget, QSplitter
)

from movieSearch.settings import WINDOW_TITLE
from movieSearch.metadata.core.models import Movie
from movieSearch.metadata.core.repo   import FavoritesStore
from movieSearch.gui.favorites_page     import FavoritesPage
from movieSearch.gui.movie_details_page import MovieDetailsPage
from movieSearch.gui.navigation         import NavigationStack
from movieSearch.gui.search_page        import SearchPage


class MainWindow(QMainWindow):
    def __init__(self, store: FavoritesStore, fetcher):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(960, 600)

        # ── pages, each the root of its own navigation stack ─────────────
        self.search_page = SearchPage(fetcher)
        self.search_stack = NavigationStack(self.search_page)
        self.search_page.navigator = self.search_stack
        self.search_page.details_factory = lambda m: self._details_page(m, self.search_stack)

        self.favorites_page = FavoritesPage(store, fetcher)
        self.favorites_stack = NavigationStack(self.favorites_page)
        self.favorites_page.navigator = self.favorites_stack
        self.favorites_page.details_factory = lambda m: self._details_page(m, self.favorites_stack)

        # ── sidebar ─────────────────────────────────────────────────────
        self.nav_list = QListWidget()
        self.nav_list.setFixedWidth(170)
        for label in ("Search", "Favorites"):
            item = QListWidgetItem(label)
            item.setTextAlignment(Qt.AlignHCenter)
            self.nav_list.addItem(item)

        # ── stacked widget ──────────────────────────────────────────────
        self.pages = QStackedWidget()
        self.pages.addWidget(self.search_stack)
        self.pages.addWidget(self.favorites_stack)
        self.nav_list.currentRowChanged.connect(self.pages.setCurrentIndex)
        self.nav_list.setCurrentRow(0)

        splitter = QSplitter()
        splitter.addWidget(self.nav_list)
        splitter.addWidget(self.pages)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        # details pages opened from search can add favorites before the
        # favorites tab was ever shown
        self.favorites_page.load()

    def _details_page(self, movie: Movie, stack: NavigationStack) -> MovieDetailsPage:
        page = MovieDetailsPage(movie)
        page.back_requested.connect(stack.pop)
        page.favorite_requested.connect(self.favorites_page.add_to_favorites)
        if self.favorites_page.favorites_list and self.favorites_page.favorites_list.contains(
            movie.title, movie.year
        ):
            page.btn_favorite.setEnabled(False)
            page.btn_favorite.setText("In favorites")
        return page

    def closeEvent(self, event):
        self.search_stack.dispose()
        self.favorites_stack.dispose()
        super().closeEvent(event)
