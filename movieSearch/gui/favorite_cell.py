from __future__ import annotations
from typing import Callable

from PySide6.QtCore    import Qt, QPropertyAnimation # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect, QWidget
)

from movieSearch.settings import ACCENT_COLOR, ROW_HEIGHT
from movieSearch.utils    import format_year
from movieSearch.metadata.core.models import FavoriteMovie
from movieSearch.metadata.core.errors import CellTypeError


class FavoriteCell(QFrame):
    """One favorites row: title on top, year | type pill underneath."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("FavoriteCellItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setFixedHeight(ROW_HEIGHT - 8)
        self._movie: FavoriteMovie | None = None

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        self._title_lbl = QLabel()
        self._title_lbl.setWordWrap(True)
        self._title_lbl.setStyleSheet("font-size:15px; font-weight:bold;")
        root.addWidget(self._title_lbl)

        # ── footer row: year | type ────────────────────────────────────
        footer = QHBoxLayout()
        self._year_lbl = QLabel(alignment=Qt.AlignLeft)
        self._type_pill = QLabel(alignment=Qt.AlignCenter)
        self._type_pill.setStyleSheet(
            f"background:{ACCENT_COLOR}; color:#ffffff; border-radius:6px; padding:2px 8px;"
        )
        footer.addWidget(self._year_lbl,  0, Qt.AlignLeft)
        footer.addStretch()
        footer.addWidget(self._type_pill, 0, Qt.AlignRight)
        root.addLayout(footer)
        root.addStretch()

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def set_movie(self, movie: FavoriteMovie) -> None:
        self._movie = movie
        self._title_lbl.setText(movie.title)
        self._year_lbl.setText(format_year(movie.year))
        self._type_pill.setText((movie.type or "movie").capitalize())
        if movie.imdb_id:
            self.setToolTip(f"IMDb {movie.imdb_id}")

    def movie(self) -> FavoriteMovie | None:
        return self._movie

    def title(self) -> str:
        return self._title_lbl.text()

    def year(self) -> str:
        return self._year_lbl.text()

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        self._animate_shadow(16)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        self._animate_shadow(4)

    def _animate_shadow(self, radius: int) -> None:
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(radius)
        anim.start(QPropertyAnimation.DeleteWhenStopped)


class CellFactory:
    """Builds a `FavoriteCell` per row; anything else is a `CellTypeError`."""

    def __init__(self, builder: Callable[[], QWidget] = FavoriteCell):
        self._builder = builder

    def create(self, movie: FavoriteMovie) -> FavoriteCell:
        cell = self._builder()
        if not isinstance(cell, FavoriteCell):
            name = type(cell).__name__
            if isinstance(cell, QWidget):
                cell.deleteLater()
            raise CellTypeError(f"cell builder returned {name}, expected FavoriteCell")
        cell.set_movie(movie)
        return cell
