"""Storage for time-based one-time-password secrets of people."""

from __future__ import annotations

import sqlite3

from .models import Totp, _create_table, _fetch_one

# The algorithm column keeps the name existing databases were created with.
_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS totp (
    id INTEGER PRIMARY KEY,
    people_id INTEGER NOT NULL,
    secret_key TEXT NOT NULL,
    alrgorithm INTEGER,
    period INTEGER,
    digits INTEGER,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO totp
    (id, people_id, secret_key)
VALUES
    (?1, ?2, ?3)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM totp
WHERE id = ?1
"""


def create_table(conn: sqlite3.Connection) -> None:
    """Create the totp table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "totp")


def create(
    conn: sqlite3.Connection, id: int, people_id: int, secret_key: str
) -> Totp | None:
    """Insert a TOTP entry; None if it could not be stored."""
    return _fetch_one(
        conn, _INSERT, (id, people_id, secret_key), Totp, "could not create totp"
    )


def read(conn: sqlite3.Connection, id: int) -> Totp | None:
    """Return the TOTP entry with this id, deleted or not, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (id,), Totp, "could not read totp")