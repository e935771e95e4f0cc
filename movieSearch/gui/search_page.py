from __future__ import annotations
from typing import Callable, List

from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton, QLabel,
    QListWidget, QListWidgetItem
)

from movieSearch.utils import log_debug, format_year
from movieSearch.metadata.core.models import Movie, SearchResult
from movieSearch.gui.controller   import resolve_movie, search_movies
from movieSearch.gui.movie_details_page import MovieDetailsPage
from movieSearch.gui.workers      import TaskScope


class SearchPage(QWidget):
    """OMDb title search; clicking a hit opens its details page."""

    def __init__(
        self,
        fetcher,
        navigator=None,
        details_factory: Callable[[Movie], QWidget] = MovieDetailsPage,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.navigator = navigator
        self.results: List[SearchResult] = []
        self._fetcher = fetcher
        self.details_factory = details_factory
        self._tasks = TaskScope(self, name="search")
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        row = QHBoxLayout()
        self.query_input = QLineEdit()
        self.query_input.setPlaceholderText("Search movies and series…")
        self.query_input.returnPressed.connect(self.search)
        self.btn_search = QPushButton("Search")
        self.btn_search.setAutoDefault(False)
        self.btn_search.clicked.connect(self.search)
        row.addWidget(self.query_input, 1)
        row.addWidget(self.btn_search)
        root.addLayout(row)

        self.status_lbl = QLabel("", alignment=Qt.AlignLeft)
        root.addWidget(self.status_lbl)

        self.result_list = QListWidget()
        self.result_list.itemClicked.connect(
            lambda item: self.open_result(self.result_list.row(item))
        )
        root.addWidget(self.result_list, 1)

    def dispose(self, timeout_ms: int = 3000) -> None:
        self._tasks.cancel()
        self._tasks.wait_for_done(timeout_ms)

    @property
    def tasks(self) -> TaskScope:
        return self._tasks

    # ------------------------------------------------------------------
    @Slot()
    def search(self) -> None:
        text = self.query_input.text().strip()
        if not text:
            return
        self.status_lbl.setText("Searching…")
        fetcher = self._fetcher
        self._tasks.submit(
            lambda: search_movies(fetcher, text),
            self._on_results,
            self._on_search_failed,
        )

    def _on_results(self, results: List[SearchResult]) -> None:
        self.results = list(results)
        self.result_list.clear()
        for r in self.results:
            kind = f" · {r.type}" if r.type else ""
            self.result_list.addItem(QListWidgetItem(f"{r.title} ({format_year(r.year)}){kind}"))
        self.status_lbl.setText(f"{len(self.results)} result(s)" if self.results else "No results.")

    def _on_search_failed(self, exc: BaseException) -> None:
        log_debug(f"Search failed: {exc!r}")
        self.status_lbl.setText("")

    def open_result(self, row: int) -> None:
        if not 0 <= row < len(self.results):
            return
        hit = self.results[row]
        fetcher = self._fetcher
        self._tasks.submit(
            lambda: resolve_movie(fetcher, hit.title, hit.year),
            self._on_resolved,
            lambda exc: log_debug(f"Error fetching movie details: {exc}"),
        )

    def _on_resolved(self, movie: Movie) -> None:
        if self.navigator is not None:
            self.navigator.push(self.details_factory(movie))
