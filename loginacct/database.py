"""Opening the account database and making sure its table exists."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Union

DEFAULT_DATABASE = "database1.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS UserInfo (
    username   TEXT,
    password   TEXT,
    Image_Name TEXT,
    Image_Data BLOB
)
"""


class DatabaseError(Exception):
    """Raised when the database cannot be opened or queried."""


def open_database(path: Union[str, "PathLike[str]"] = DEFAULT_DATABASE) -> sqlite3.Connection:
    """Open the SQLite database at *path* and return the connection."""
    try:
        conn = sqlite3.connect(str(path))
        # Touch the file so that an unusable path fails here, not later.
        conn.execute("SELECT 1").fetchone()
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc
    conn.row_factory = sqlite3.Row
    return conn


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the ``UserInfo`` table when it is missing."""
    try:
        with conn:
            conn.execute(_SCHEMA)
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc