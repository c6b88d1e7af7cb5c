"""Storage for public session tokens with per-session rate limiting."""

from __future__ import annotations

import sqlite3

from .models import PublicSession, _create_table, _fetch_one, _query

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS public_sessions (
    id INTEGER PRIMARY KEY,
    people_id INTEGER NOT NULL,
    token INTEGER NOT NULL,
    session_id INTEGER NOT NULL,
    window_count INTEGER NOT NULL,
    prev_window_count INTEGER NOT NULL,
    updated_at INTEGER NOT NULL,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO public_sessions
    (id, people_id, token, session_id, window_count, prev_window_count, updated_at)
VALUES
    (?1, ?2, ?3, ?4, 1, 0, 0)
RETURNING
    *
"""

_SELECT_ONE = """
SELECT * FROM public_sessions
WHERE deleted_at IS NULL AND id = ?1 AND token = ?2
"""

_SELECT_BY_SESSION_ID = """
SELECT * FROM public_sessions
WHERE deleted_at IS NULL AND session_id = ?1
ORDER BY id DESC
LIMIT ?2, ?3
"""

_SELECT_BY_PEOPLE_ID = """
SELECT * FROM public_sessions
WHERE deleted_at IS NULL AND people_id = ?1
ORDER BY id DESC
LIMIT ?2, ?3
"""

_RATE_LIMIT = """
UPDATE OR IGNORE
    public_sessions
SET
    prev_window_count =
        CASE
            WHEN ?1 > (?2 - updated_at) THEN prev_window_count
            ELSE MIN(window_count, ?3)
        END,
    window_count =
        CASE
            WHEN ?1 > (?2 - updated_at) THEN (window_count + 1)
            ELSE 1
        END,
    updated_at = ?2
WHERE
    deleted_at IS NULL AND id = ?4 AND token = ?5
RETURNING
    *
"""

_FAILURE = "could not prepare statement"


def create_table(conn: sqlite3.Connection) -> None:
    """Create the public_sessions table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "public_sessions")


def create(
    conn: sqlite3.Connection,
    id: int,
    people_id: int | None,
    token: int,
    session_id: int,
) -> PublicSession | None:
    """Insert a public session with a fresh window; None if it could not be stored."""
    return _fetch_one(
        conn, _INSERT, (id, people_id, token, session_id), PublicSession, _FAILURE
    )


def read(conn: sqlite3.Connection, id: int, token: int) -> PublicSession | None:
    """Return the live public session matching id and token, if any."""
    return _fetch_one(conn, _SELECT_ONE, (id, token), PublicSession, _FAILURE)


def read_all_by_session_id(
    conn: sqlite3.Connection, session_id: int, offset: int, limit: int
) -> list[PublicSession]:
    """Return a page of live public sessions for a session, newest id first."""
    return _query(
        conn, _SELECT_BY_SESSION_ID, (session_id, offset, limit), PublicSession, _FAILURE
    )


def read_all_by_people_id(
    conn: sqlite3.Connection, people_id: int | None, offset: int, limit: int
) -> list[PublicSession]:
    """Return a page of live public sessions for a person, newest id first."""
    return _query(
        conn, _SELECT_BY_PEOPLE_ID, (people_id, offset, limit), PublicSession, _FAILURE
    )


def rate_limit_session(
    conn: sqlite3.Connection,
    id: int,
    token: int,
    current_timestamp: int,
    window_max_count: int,
    window_length_ms: int,
) -> PublicSession | None:
    """Count one request on the session and return it; None if it does not exist.

    Requests within ``window_length_ms`` of the last update increment the
    window count; otherwise the count (capped at ``window_max_count``) moves
    to the previous window and a new window starts.
    """
    return _fetch_one(
        conn,
        _RATE_LIMIT,
        (window_length_ms, current_timestamp, window_max_count, id, token),
        PublicSession,
        _FAILURE,
    )