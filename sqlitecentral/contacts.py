"""Storage for contacts; each (kind, content) pair is unique."""

from __future__ import annotations

import sqlite3

from .models import Contact, _create_table, _fetch_one

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS contacts (
    id INTEGER PRIMARY KEY,
    people_id INTEGER NOT NULL,
    contact_kind_id INTEGER NOT NULL,
    content TEXT NOT NULL,
    verified_at INTEGER,
    deleted_at INTEGER,
    UNIQUE (contact_kind_id, content)
)
"""

_INSERT = """
INSERT INTO contacts
    (id, people_id, contact_kind_id, content, verified_at)
VALUES
    (?1, ?2, ?3, ?4, ?5)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM contacts
WHERE deleted_at IS NULL AND id = ?1
"""

_SELECT_BY_KIND_AND_CONTENT = """
SELECT * FROM contacts
WHERE deleted_at IS NULL AND contact_kind_id = ?1 AND content = ?2
"""


def create_table(conn: sqlite3.Connection) -> None:
    """Create the contacts table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "contacts")


def create(
    conn: sqlite3.Connection,
    id: int,
    people_id: int,
    contact_kind_id: int,
    content: str,
    verified_at: int | None,
) -> Contact | None:
    """Insert a contact; None if it could not be stored."""
    return _fetch_one(
        conn,
        _INSERT,
        (id, people_id, contact_kind_id, content, verified_at),
        Contact,
        "failed to create a contact",
    )


def read(conn: sqlite3.Connection, id: int) -> Contact | None:
    """Return the live contact with this id, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (id,), Contact, "failed to read a contact")


def read_by_kind_id_and_content(
    conn: sqlite3.Connection, contact_kind_id: int, content: str
) -> Contact | None:
    """Return the live contact of this kind with this content, if any."""
    return _fetch_one(
        conn,
        _SELECT_BY_KIND_AND_CONTENT,
        (contact_kind_id, content),
        Contact,
        "failed to read a contact by id",
    )