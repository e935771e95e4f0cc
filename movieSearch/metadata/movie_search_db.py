# movie_search_db.py
from __future__ import annotations
import sqlite3
from pathlib import Path

from movieSearch.settings import DATABASE_PATH as _DB_PATH, SCHEMA_PATH as _SCHEMA_PATH


def connect(path: str | Path = _DB_PATH) -> sqlite3.Connection:
    """
    Open a sqlite3.Connection on *path* (``":memory:"`` works too) and run
    the schema script.

    The connection is shared between the GUI thread and pool workers, so
    ``check_same_thread`` is off; callers serialise access themselves
    (see `FavoritesStore`).
    """
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(
        str(path),
        check_same_thread=False,
        isolation_level="DEFERRED",
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")

    # schema is all IF NOT EXISTS, safe on every open
    conn.executescript(_SCHEMA_PATH.read_text(encoding="utf-8"))
    conn.commit()
    return conn
