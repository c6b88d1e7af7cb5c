"""Storage linking roles to people; each (role, person) pair is unique."""

from __future__ import annotations

import sqlite3

from .models import RoleToPerson, _create_table, _fetch_one

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS roles_to_people (
    id INTEGER PRIMARY KEY,
    role_id INTEGER NOT NULL,
    people_id INTEGER NOT NULL,
    deleted_at INTEGER,
    UNIQUE (role_id, people_id)
)
"""

_INSERT = """
INSERT INTO roles_to_people
    (id, role_id, people_id)
VALUES
    (?1, ?2, ?3)
RETURNING
    *
"""

_SELECT_BY_ID = """
SELECT * FROM roles_to_people
WHERE deleted_at IS NULL AND id = ?1
"""

_SELECT_BY_ROLE_AND_PERSON = """
SELECT * FROM roles_to_people
WHERE deleted_at IS NULL AND role_id = ?1 AND people_id = ?2
"""


def create_table(conn: sqlite3.Connection) -> None:
    """Create the roles_to_people table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "roles_to_people")


def create(
    conn: sqlite3.Connection, id: int, role_id: int, people_id: int
) -> RoleToPerson | None:
    """Give a person a role; None if the link could not be stored."""
    return _fetch_one(
        conn,
        _INSERT,
        (id, role_id, people_id),
        RoleToPerson,
        "failed to create a RoleToPerson",
    )


def read(conn: sqlite3.Connection, id: int) -> RoleToPerson | None:
    """Return the live link with this id, if any."""
    return _fetch_one(
        conn,
        _SELECT_BY_ID,
        (id,),
        RoleToPerson,
        "failed to read a RoleToPerson entry",
    )


def read_by_role_id_and_people_id(
    conn: sqlite3.Connection, role_id: int, people_id: int
) -> RoleToPerson | None:
    """Return the live link between this role and person, if any."""
    return _fetch_one(
        conn,
        _SELECT_BY_ROLE_AND_PERSON,
        (role_id, people_id),
        RoleToPerson,
        "failed to read a RoleToPerson by id",
    )