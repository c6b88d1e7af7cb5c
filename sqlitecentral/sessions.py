"""Storage for sessions, optionally tied to a person."""

from __future__ import annotations

import sqlite3

from .models import Session, _create_table, _fetch_one, _query

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS sessions (
    id INTEGER PRIMARY KEY,
    people_id INTEGER,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO sessions
    (id, people_id)
VALUES
    (?1, ?2)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM sessions
WHERE id = ?1
"""

_SELECT_BY_PEOPLE_ID = """
SELECT * FROM sessions
WHERE deleted_at IS NULL AND people_id = ?1
ORDER BY id DESC
LIMIT ?2, ?3
"""

_FAILURE = "could not prepare statement"


def create_table(conn: sqlite3.Connection) -> None:
    """Create the sessions table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "sessions")


def create(conn: sqlite3.Connection, id: int, people_id: int | None) -> Session | None:
    """Insert a session; None if it could not be stored."""
    return _fetch_one(conn, _INSERT, (id, people_id), Session, _FAILURE)


def read(conn: sqlite3.Connection, session_id: int) -> Session | None:
    """Return the session with this id, deleted or not, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (session_id,), Session, _FAILURE)


def read_all_by_people_id(
    conn: sqlite3.Connection, people_id: int, offset: int, limit: int
) -> list[Session]:
    """Return a page of a person's live sessions, newest id first."""
    return _query(
        conn, _SELECT_BY_PEOPLE_ID, (people_id, offset, limit), Session, _FAILURE
    )