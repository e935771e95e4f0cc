from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QPushButton, QScrollArea
)

from movieSearch.utils import format_year
from movieSearch.metadata.core.models import Movie


class MovieDetailsPage(QWidget):
    """Read-only view of a resolved `Movie` with an “Add to favorites” button."""
    back_requested     = Signal()
    favorite_requested = Signal(object)   # Movie

    def __init__(self, movie: Movie, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._movie = movie
        self._build_ui()

    def movie(self) -> Movie:
        return self._movie

    def _build_ui(self) -> None:
        m = self._movie
        root = QVBoxLayout(self)

        # ── top bar ─────────────────────────────────────────────────────
        bar = QHBoxLayout()
        self.btn_back = QPushButton("‹ Back")
        self.btn_back.setAutoDefault(False)
        self.btn_back.clicked.connect(self.back_requested.emit)
        self.btn_favorite = QPushButton("Add to favorites")
        self.btn_favorite.setAutoDefault(False)
        self.btn_favorite.clicked.connect(self._on_favorite)
        bar.addWidget(self.btn_back)
        bar.addStretch()
        bar.addWidget(self.btn_favorite)
        root.addLayout(bar)

        self.title_lbl = QLabel(f"{m.title} ({format_year(m.year)})")
        self.title_lbl.setWordWrap(True)
        self.title_lbl.setStyleSheet("font-size:20px; font-weight:bold;")
        root.addWidget(self.title_lbl)

        meta = " · ".join(v for v in (m.rated, m.runtime, m.genre) if v)
        if meta:
            root.addWidget(QLabel(meta))

        # ── detail form ─────────────────────────────────────────────────
        body = QWidget()
        form = QFormLayout(body)
        for label, value in (
            ("Released", m.released),
            ("Director", m.director),
            ("Writer",   m.writer),
            ("Actors",   m.actors),
            ("Language", m.language),
            ("Country",  m.country),
            ("Awards",   m.awards),
            ("IMDb",     f"{m.imdb_rating}/10 ({m.imdb_votes} votes)" if m.imdb_rating else None),
        ):
            if value:
                lbl = QLabel(value)
                lbl.setWordWrap(True)
                form.addRow(f"{label}:", lbl)
        for r in m.ratings:
            if r.get("Source") and r.get("Source") != "Internet Movie Database":
                form.addRow(f"{r['Source']}:", QLabel(r.get("Value", "—")))

        self.plot_lbl = QLabel(m.plot or "No plot available.")
        self.plot_lbl.setWordWrap(True)
        self.plot_lbl.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        form.addRow(self.plot_lbl)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(body)
        root.addWidget(scroll, 1)

    @Slot()
    def _on_favorite(self) -> None:
        self.btn_favorite.setEnabled(False)
        self.btn_favorite.setText("Added to favorites")
        self.favorite_requested.emit(self._movie)
