"""Storage for named roles."""

from __future__ import annotations

import sqlite3

from .models import Role, _create_table, _fetch_one

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS roles (
    id INTEGER PRIMARY KEY,
    kind TEXT NOT NULL UNIQUE,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO roles
    (id, kind)
VALUES
    (?1, ?2)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM roles
WHERE deleted_at IS NULL AND id = ?1
"""

_SELECT_BY_KIND = """
SELECT * FROM roles
WHERE deleted_at IS NULL AND kind = ?1
"""


def create_table(conn: sqlite3.Connection) -> None:
    """Create the roles table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "roles")


def create(conn: sqlite3.Connection, id: int, kind: str) -> Role | None:
    """Insert a role; None if it could not be stored."""
    return _fetch_one(
        conn, _INSERT, (id, kind), Role, "could not prepare create statement"
    )


def read(conn: sqlite3.Connection, id: int) -> Role | None:
    """Return the live role with this id, if any."""
    return _fetch_one(
        conn, _SELECT_BY_ID, (id,), Role, "could not prepare read statement"
    )


def read_by_kind(conn: sqlite3.Connection, kind: str) -> Role | None:
    """Return the live role with this name, if any."""
    return _fetch_one(
        conn, _SELECT_BY_KIND, (kind,), Role, "could not prepare read_by_kind statement"
    )