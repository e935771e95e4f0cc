"""Pytest configuration helpers for the Movie Search tests.

Qt runs headless and every log / database file lands in a throw-away
directory; both have to be set before ``movieSearch`` is first imported.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["MOVIESEARCH_DATA_DIR"] = tempfile.mkdtemp(prefix="movieSearch-tests-")

import pytest
from PySide6.QtWidgets import QApplication

from movieSearch.metadata.movie_search_db import connect
from movieSearch.metadata.core.repo import FavoritesStore
from tests.support import RecordingNavigator


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One QApplication for the whole run."""

    return QApplication.instance() or QApplication([])


@pytest.fixture
def conn():
    """In-memory SQLite connection with the schema applied."""

    connection = connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def store(conn) -> FavoritesStore:
    return FavoritesStore(conn)


@pytest.fixture
def navigator() -> Iterator[RecordingNavigator]:
    nav = RecordingNavigator()
    yield nav
    for page in nav.pushed:
        page.deleteLater()
