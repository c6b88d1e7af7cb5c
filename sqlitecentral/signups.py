"""Storage for pending signups keyed by a contact and a token."""

from __future__ import annotations

import sqlite3

from .models import Signup, _create_table, _fetch_one, _query

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS signups (
    id INTEGER PRIMARY KEY,
    token INTEGER NOT NULL,
    contact_kind_id INTEGER NOT NULL,
    contact_content TEXT KEY NOT NULL,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO signups
    (id, token, contact_kind_id, contact_content)
VALUES
    (?1, ?2, ?3, ?4)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM signups
WHERE deleted_at IS NULL AND id = ?1
"""

_SELECT_BY_CONTACT = """
SELECT * FROM signups
WHERE deleted_at IS NULL AND contact_kind_id = ?1 AND contact_content = ?2
ORDER BY id DESC
LIMIT ?3, ?4
"""

_FAILURE = "could not prepare statement"


def create_table(conn: sqlite3.Connection) -> None:
    """Create the signups table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "signups")


def create(
    conn: sqlite3.Connection,
    id: int,
    token: int,
    contact_kind_id: int,
    contact_content: str,
) -> Signup | None:
    """Insert a signup; None if it could not be stored."""
    return _fetch_one(
        conn,
        _INSERT,
        (id, token, contact_kind_id, contact_content),
        Signup,
        "could not create a signup",
    )


def read(conn: sqlite3.Connection, signup_id: int) -> Signup | None:
    """Return the live signup with this id, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (signup_id,), Signup, _FAILURE)


def read_all_by_contact(
    conn: sqlite3.Connection,
    contact_kind_id: int,
    contact_content: str,
    offset: int,
    limit: int,
) -> list[Signup]:
    """Return a page of live signups for a contact, newest id first."""
    return _query(
        conn,
        _SELECT_BY_CONTACT,
        (contact_kind_id, contact_content, offset, limit),
        Signup,
        _FAILURE,
    )