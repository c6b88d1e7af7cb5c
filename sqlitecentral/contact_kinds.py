"""Storage for the kinds of contact a person can register (e-mail and so on)."""

from __future__ import annotations

import sqlite3

from .models import ContactKind, _create_table, _fetch_one

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS contact_kinds (
    id INTEGER PRIMARY KEY,
    kind TEXT NOT NULL UNIQUE,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO contact_kinds
    (id, kind)
VALUES
    (?1, ?2)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM contact_kinds
WHERE deleted_at IS NULL AND id = ?1
"""

_SELECT_BY_KIND = """
SELECT * FROM contact_kinds
WHERE deleted_at IS NULL AND kind = ?1
"""

_FAILURE = "could not prepare statement"


def create_table(conn: sqlite3.Connection) -> None:
    """Create the contact_kinds table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "contact_kinds")


def create(conn: sqlite3.Connection, id: int, kind: str) -> ContactKind | None:
    """Insert a contact kind; None if it could not be stored."""
    return _fetch_one(conn, _INSERT, (id, kind), ContactKind, _FAILURE)


def read(conn: sqlite3.Connection, id: int) -> ContactKind | None:
    """Return the live contact kind with this id, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (id,), ContactKind, _FAILURE)


def read_by_kind(conn: sqlite3.Connection, kind: str) -> ContactKind | None:
    """Return the live contact kind with this name, if any."""
    return _fetch_one(conn, _SELECT_BY_KIND, (kind,), ContactKind, _FAILURE)