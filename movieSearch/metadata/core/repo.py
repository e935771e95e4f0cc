"""metadata.core.repo
Store accessor for the favorites aggregate.

All SQL lives here; other layers receive a `FavoritesStore` instance and
never touch `sqlite3` directly.
"""

from __future__ import annotations
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, Optional, Set, Type, TypeVar

from movieSearch.metadata.movie_search_db import connect
from movieSearch.metadata.core.models import FavoriteMovie, FavoritesList
from movieSearch.metadata.core.errors import StoreReadError, StoreWriteError
from movieSearch.settings import DATABASE_PATH

T = TypeVar("T", FavoritesList, FavoriteMovie)

_ALLOWED_MOVIE_COLS: Set[str] = {
    "list_id", "title", "year", "imdb_id", "type", "poster_url",
}

_TABLES = {
    FavoritesList: "favorites_lists",
    FavoriteMovie: "favorite_movies",
}

# the aggregate's primary key is pinned by the schema's CHECK (id = 1)
_FAVORITES_LIST_ID = 1


def _table_for(entity: type) -> str:
    try:
        return _TABLES[entity]
    except KeyError:
        raise ValueError(f"Unknown entity type: {getattr(entity, '__name__', entity)!r}") from None


def _movie_from_row(row: sqlite3.Row) -> FavoriteMovie:
    return FavoriteMovie(**dict(row))


class FavoritesStore:
    """
    fetch / create / delete / save over one sqlite3 connection.

    ``create`` and ``delete`` only stage their change inside the open
    transaction; nothing is durable until ``save()`` commits. Every call
    holds the instance lock, so pool workers and the GUI thread can share
    one store. Units of work stage and commit inside ``transaction()`` so
    no other thread can roll back their change before it is saved.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self._lock = threading.RLock()

    @classmethod
    def open(cls, path: str | Path = DATABASE_PATH) -> "FavoritesStore":
        return cls(connect(path))

    # ───────────────────────────── look-ups ──────────────────────────
    def fetch_first(self, entity: Type[T]) -> Optional[T]:
        """Return the first stored *entity* or **None** when there is none.

        For `FavoritesList` the movies are loaded too, ordered by position.

        Raises
        ------
        ValueError
            If *entity* is not a stored type.
        StoreReadError
            On any sqlite error.
        """
        table = _table_for(entity)
        try:
            with self._lock:
                if entity is FavoritesList:
                    return self._first_list()
                row = self._conn.execute(
                    f"SELECT * FROM {table} ORDER BY position, id LIMIT 1"
                ).fetchone()
                return _movie_from_row(row) if row else None
        except sqlite3.Error as exc:
            raise StoreReadError(f"fetch {entity.__name__} failed: {exc}") from exc

    def _first_list(self) -> Optional[FavoritesList]:
        row = self._conn.execute(
            "SELECT id FROM favorites_lists ORDER BY id LIMIT 1"
        ).fetchone()
        if not row:
            return None
        rows = self._conn.execute(
            "SELECT * FROM favorite_movies WHERE list_id=? ORDER BY position, id",
            (row["id"],),
        ).fetchall()
        return FavoritesList(id=row["id"], movies=[_movie_from_row(r) for r in rows])

    # ───────────────────────────── writers ──────────────────────────
    def create(self, entity: Type[T], **fields: Any) -> T:
        """Stage a new *entity* row and return its record.

        `FavoritesList` takes no fields. `FavoriteMovie` needs at least
        ``list_id``, ``title`` and ``year``; any other key must be in
        `_ALLOWED_MOVIE_COLS`. The new movie goes to the end of the list.

        Raises
        ------
        ValueError
            Unknown entity or column names.
        StoreWriteError
            For UNIQUE / FK / CHECK violations (after rollback).
        """
        _table_for(entity)
        if entity is FavoritesList:
            if fields:
                raise ValueError("FavoritesList takes no fields")
            return self._write(self._insert_list)
        unknown = set(fields) - _ALLOWED_MOVIE_COLS
        if unknown:
            raise ValueError(f"Unknown movie columns: {', '.join(sorted(unknown))}")
        missing = {"list_id", "title", "year"} - set(fields)
        if missing:
            raise ValueError(f"Missing movie columns: {', '.join(sorted(missing))}")
        return self._write(lambda: self._insert_movie(fields))

    def _insert_list(self) -> FavoritesList:
        self._conn.execute(
            "INSERT INTO favorites_lists (id, created_at) VALUES (?, ?)",
            (_FAVORITES_LIST_ID, datetime.now(timezone.utc).isoformat(timespec="seconds")),
        )
        return FavoritesList(id=_FAVORITES_LIST_ID)

    def _insert_movie(self, data: dict[str, Any]) -> FavoriteMovie:
        row = self._conn.execute(
            "SELECT COALESCE(MAX(position), -1) + 1 AS nxt FROM favorite_movies WHERE list_id=?",
            (data["list_id"],),
        ).fetchone()
        data = {**data, "position": row["nxt"]}
        cols = ", ".join(data)
        ph   = ", ".join("?" for _ in data)
        cur  = self._conn.execute(
            f"INSERT INTO favorite_movies ({cols}) VALUES ({ph})", tuple(data.values())
        )
        return FavoriteMovie(id=cur.lastrowid, **data)

    def delete(self, record: FavoritesList | FavoriteMovie) -> None:
        """Stage removal of *record*; movies of a deleted list cascade."""
        table = _table_for(type(record))
        self._write(lambda: self._conn.execute(f"DELETE FROM {table} WHERE id=?", (record.id,)))

    def save(self) -> None:
        """Commit everything staged since the last save."""
        self._write(self._conn.commit)

    @contextmanager
    def transaction(self) -> Iterator["FavoritesStore"]:
        """Hold the lock from the first staged change through the commit.

        Another thread's failing write (and its rollback) cannot land
        between this block's ``create`` / ``delete`` and its ``save()``.
        An exception inside the block discards what the block staged.
        """
        with self._lock:
            try:
                yield self
            except BaseException:
                self._conn.rollback()
                raise
            self.save()

    def rollback(self) -> None:
        with self._lock:
            self._conn.rollback()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _write(self, op):
        with self._lock:
            try:
                return op()
            except sqlite3.Error as exc:
                self._conn.rollback()
                raise StoreWriteError(str(exc)) from exc
