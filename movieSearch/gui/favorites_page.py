"""
favorites_page
~~~~~~~~~~~~~~
Lists the movies of the stored `FavoritesList`.

•  First show loads the aggregate in the background; later shows only
   re-render what is already held.
•  Click → resolve details → push a details page.
•  Delete key / context menu → delete + save → re-render.

The store, detail fetcher and navigator are injected; no globals.
"""
from __future__ import annotations
from typing import Callable, List, Protocol

from PySide6.QtCore    import Qt, QSize, Slot # type: ignore
from PySide6.QtGui     import QAction, QKeySequence # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QLabel, QListWidget, QListWidgetItem, QAbstractItemView
)

from movieSearch.settings import ROW_HEIGHT
from movieSearch.utils    import log_debug
from movieSearch.metadata.core.models import FavoriteMovie, FavoritesList, Movie
from movieSearch.metadata.core.errors import CellTypeError
from movieSearch.metadata.core.repo   import FavoritesStore
from movieSearch.gui.controller import (
    DetailFetcher,
    add_favorite,
    delete_favorite,
    fetch_or_create_favorites,
    resolve_movie,
)
from movieSearch.gui.favorite_cell      import CellFactory, FavoriteCell
from movieSearch.gui.movie_details_page import MovieDetailsPage
from movieSearch.gui.workers            import TaskScope


class Navigator(Protocol):
    def push(self, page: QWidget) -> None: ...


class FavoritesPage(QWidget):
    def __init__(
        self,
        store: FavoritesStore,
        fetcher: DetailFetcher,
        navigator: Navigator | None = None,
        details_factory: Callable[[Movie], QWidget] = MovieDetailsPage,
        cell_factory: CellFactory | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.favorites_list: FavoritesList | None = None
        self.navigator = navigator
        self._store = store
        self._fetcher = fetcher
        self.details_factory = details_factory
        self._cells = cell_factory or CellFactory()
        self._tasks = TaskScope(self, name="favorites")
        self._load_started = False
        self._build_ui()

    # ───────────────────────────── ui ────────────────────────────────
    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        header = QLabel("Favorites")
        header.setStyleSheet("font-size:18px; font-weight:bold;")
        root.addWidget(header)

        self.table = QListWidget()
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setVerticalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.table.itemClicked.connect(self._on_item_clicked)
        root.addWidget(self.table, 1)

        self.empty_label = QLabel("No favorites yet.", alignment=Qt.AlignCenter)
        root.addWidget(self.empty_label)

        act = QAction("Remove from favorites", self.table)
        act.setShortcut(QKeySequence(QKeySequence.Delete))
        act.setShortcutContext(Qt.WidgetShortcut)
        act.triggered.connect(self._on_remove_current)
        self.table.addAction(act)
        self.table.setContextMenuPolicy(Qt.ActionsContextMenu)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if not self._load_started:
            self.load()
        self.reload_data()

    def dispose(self, timeout_ms: int = 3000) -> None:
        """Cancel outstanding work; nothing navigates or renders afterwards."""
        self._tasks.cancel()
        self._tasks.wait_for_done(timeout_ms)

    @property
    def tasks(self) -> TaskScope:
        return self._tasks

    # ───────────────────────── data source ───────────────────────────
    def number_of_rows(self) -> int:
        return len(self.favorites_list.movies) if self.favorites_list else 0

    def movie_at(self, row: int) -> FavoriteMovie | None:
        if self.favorites_list is None or not 0 <= row < len(self.favorites_list.movies):
            return None
        return self.favorites_list.movies[row]

    def cell_for_row(self, row: int) -> FavoriteCell:
        movie = self.movie_at(row)
        if movie is None:
            raise IndexError(f"row {row} out of range ({self.number_of_rows()} rows)")
        return self._cells.create(movie)

    def cell_at(self, row: int) -> QWidget | None:
        item = self.table.item(row)
        return self.table.itemWidget(item) if item else None

    def row_titles(self) -> List[str]:
        titles = []
        for row in range(self.table.count()):
            cell = self.cell_at(row)
            titles.append(cell.title() if isinstance(cell, FavoriteCell) else self.table.item(row).text())
        return titles

    def reload_data(self) -> None:
        self.table.clear()
        for row in range(self.number_of_rows()):
            item = QListWidgetItem()
            item.setSizeHint(QSize(0, ROW_HEIGHT))
            self.table.addItem(item)
            try:
                cell = self.cell_for_row(row)
            except CellTypeError as exc:
                movie = self.movie_at(row)
                log_debug(f"Favorites cell for row {row}: {exc}")
                item.setText(f"{movie.title} ({movie.year})")
                continue
            self.table.setItemWidget(item, cell)
        self.empty_label.setHidden(self.number_of_rows() > 0)

    # ─────────────────────────── load ────────────────────────────────
    def load(self) -> None:
        """Fetch (or lazily create) the favorites aggregate, then render."""
        self._load_started = True
        store = self._store
        self._tasks.submit(
            lambda: fetch_or_create_favorites(store),
            self._on_loaded,
            self._on_load_failed,
        )

    def _on_loaded(self, favorites: FavoritesList) -> None:
        self.favorites_list = favorites
        self.reload_data()

    def _on_load_failed(self, exc: BaseException) -> None:
        log_debug(f"Error fetching favorites list: {exc!r}")
        self.reload_data()

    # ───────────────────────── selection ─────────────────────────────
    @Slot(QListWidgetItem)
    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        self.select_row(self.table.row(item))

    def select_row(self, row: int) -> None:
        """Resolve the row's movie by title + year and push its details."""
        movie = self.movie_at(row)
        if movie is None:
            return
        fetcher, title, year = self._fetcher, movie.title, movie.year
        self._tasks.submit(
            lambda: resolve_movie(fetcher, title, year),
            self._on_resolved,
            self._on_resolve_failed,
        )

    def _on_resolved(self, movie: Movie) -> None:
        if self.navigator is None:
            log_debug(f"No navigator to show “{movie.title}”")
            return
        self.navigator.push(self.details_factory(movie))

    def _on_resolve_failed(self, exc: BaseException) -> None:
        log_debug(f"Error fetching movie details: {exc}")

    # ───────────────────────── deletion ──────────────────────────────
    @Slot()
    def _on_remove_current(self) -> None:
        row = self.table.currentRow()
        if row >= 0:
            self.remove_from_favorites(row)

    def remove_from_favorites(self, row: int) -> None:
        """Delete the row's record and save; re-render either way.

        A failed save leaves the store untouched, but the row still
        disappears from this page until the next fresh load.
        """
        movie = self.movie_at(row)
        if movie is None:
            log_debug(f"Error finding movie to delete at row {row}")
            return
        store = self._store
        self._tasks.submit(
            lambda: delete_favorite(store, movie),
            lambda _deleted: self._after_delete(movie),
            lambda exc: self._after_delete(movie, exc),
        )

    def _after_delete(self, movie: FavoriteMovie, exc: BaseException | None = None) -> None:
        if exc is not None:
            log_debug(f"Error saving data after deletion: {exc!r}")
        if self.favorites_list is not None:
            self.favorites_list.movies = [m for m in self.favorites_list.movies if m is not movie]
        self.reload_data()

    # ───────────────────────── adding ────────────────────────────────
    @Slot(object)
    def add_to_favorites(self, movie: Movie) -> None:
        """Persist *movie* at the end of the list unless it is already there."""
        favorites = self.favorites_list
        if favorites is None:
            log_debug(f"Favorites not loaded yet; “{movie.title}” not added")
            return
        if favorites.contains(movie.title, movie.year):
            log_debug(f"“{movie.title}” ({movie.year}) already in favorites")
            return
        store = self._store
        self._tasks.submit(
            lambda: add_favorite(store, favorites, movie),
            self._on_added,
            lambda exc: log_debug(f"Error adding “{movie.title}” to favorites: {exc!r}"),
        )

    def _on_added(self, record: FavoriteMovie) -> None:
        favorites = self.favorites_list
        if favorites is None or favorites.id != record.list_id:
            return
        if not favorites.contains(record.title, record.year):
            favorites.movies.append(record)
        self.reload_data()
