"""Storage for the kinds of action rate limited per IP address."""

from __future__ import annotations

import sqlite3

from .models import IpAddressActionKind, _create_table, _fetch_one

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS ip_address_action_kinds (
    id INTEGER PRIMARY KEY,
    kind TEXT NOT NULL UNIQUE,
    deleted_at INTEGER
)
"""

_INSERT = """
INSERT INTO ip_address_action_kinds
    (id, kind)
VALUES
    (?1, ?2)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM ip_address_action_kinds
WHERE deleted_at IS NULL AND id = ?1
"""

_SELECT_BY_KIND = """
SELECT * FROM ip_address_action_kinds
WHERE deleted_at IS NULL AND kind = ?1
"""

_FAILURE = "could not prepare statement"


def create_table(conn: sqlite3.Connection) -> None:
    """Create the ip_address_action_kinds table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "ip_address_action_kinds")


def create(conn: sqlite3.Connection, id: int, kind: str) -> IpAddressActionKind | None:
    """Insert an action kind; None if it could not be stored."""
    return _fetch_one(conn, _INSERT, (id, kind), IpAddressActionKind, _FAILURE)


def read(conn: sqlite3.Connection, id: int) -> IpAddressActionKind | None:
    """Return the live action kind with this id, if any."""
    return _fetch_one(conn, _SELECT_BY_ID, (id,), IpAddressActionKind, _FAILURE)


def read_by_kind(conn: sqlite3.Connection, kind: str) -> IpAddressActionKind | None:
    """Return the live action kind with this name, if any."""
    return _fetch_one(conn, _SELECT_BY_KIND, (kind,), IpAddressActionKind, _FAILURE)