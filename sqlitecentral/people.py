"""Storage for people and their password hash results."""

from __future__ import annotations

import sqlite3

from .models import Person, _create_table, _fetch_one

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS people (
    id INTEGER PRIMARY KEY,
    password_hash_results TEXT NOT NULL,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO people
    (id, password_hash_results)
VALUES
    (?1, ?2)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM people
WHERE id = ?1
"""


def create_table(conn: sqlite3.Connection) -> None:
    """Create the people table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "people")


def create(
    conn: sqlite3.Connection, id: int, password_hash_results: str
) -> Person | None:
    """Insert a person; None if it could not be stored."""
    return _fetch_one(
        conn,
        _INSERT,
        (id, password_hash_results),
        Person,
        "could not create person",
    )


def read(conn: sqlite3.Connection, id: int) -> Person | None:
    """Return the person with this id, deleted or not, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (id,), Person, "could not read person")