"""SQLite-backed storage for the parking reservation records."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from typing import Any

_SCHEMA = """
CREATE TABLE IF NOT EXISTS user (
    UserID TEXT PRIMARY KEY
);
CREATE TABLE IF NOT EXISTS Car (
    CarID TEXT PRIMARY KEY,
    UserID TEXT NOT NULL,
    CarModel TEXT NOT NULL DEFAULT '',
    CarLicensePlate TEXT NOT NULL DEFAULT '',
    CarDate TEXT NOT NULL DEFAULT ''
);
CREATE TABLE IF NOT EXISTS fines (
    FineID TEXT PRIMARY KEY,
    UserID TEXT NOT NULL,
    FineAmount REAL NOT NULL DEFAULT 0,
    FineReason TEXT NOT NULL DEFAULT '',
    FineStatus TEXT NOT NULL DEFAULT 'No',
    FineDate TEXT NOT NULL DEFAULT ''
);
"""


class DatabaseError(Exception):
    """Raised when a database operation fails."""


class Database:
    """A connection to the reservation database, committing every statement."""

    def __init__(self, path: str = ":memory:") -> None:
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(
                path, isolation_level=None
            )
        except sqlite3.Error as exc:
            raise DatabaseError(f"Unable to connect to database: {exc}") from exc
        self._conn.row_factory = sqlite3.Row

    @property
    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("Database connection is closed.")
        return self._conn

    def create_schema(self) -> None:
        """Create the user, Car and fines tables if they do not exist."""
        try:
            self._connection.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def execute(self, query: str, params: Sequence[Any] = ()) -> int:
        """Run a statement that returns no rows; return the affected row count."""
        try:
            cursor = self._connection.execute(query, tuple(params))
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor.rowcount

    def query(self, query: str, params: Sequence[Any] = ()) -> list[sqlite3.Row]:
        """Run a query and return all of its rows."""
        try:
            return self._connection.execute(query, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def query_one(self, query: str, params: Sequence[Any] = ()) -> sqlite3.Row | None:
        """Run a query and return its first row, or None when it has none."""
        try:
            return self._connection.execute(query, tuple(params)).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def last_insert_id(self) -> int:
        """Return the row id of the most recent insert on this connection."""
        row = self.query_one("SELECT last_insert_rowid();")
        return -1 if row is None else int(row[0])

    def close(self) -> None:
        """Close the connection; further use raises DatabaseError."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()