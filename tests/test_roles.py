import sqlite3

import pytest

from sqlitecentral import roles
from sqlitecentral.models import Role, StoreError


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    roles.create_table(connection)
    yield connection
    connection.close()


def test_crud_operations(conn):
    incorrect = Role(id=0, kind="lovers stand sublime together", deleted_at=None)

    role = roles.create(conn, 1, "lovers thatch time together")
    read_by_id = roles.read(conn, 1)

    assert role == Role(id=1, kind="lovers thatch time together", deleted_at=None)
    assert role == read_by_id
    assert read_by_id != incorrect

    read_by_kind = roles.read_by_kind(conn, "lovers thatch time together")
    assert role == read_by_kind
    assert read_by_kind != incorrect


def test_duplicate_kind_returns_none(conn):
    roles.create(conn, 1, "admin")
    assert roles.create(conn, 2, "admin") is None


def test_deleted_roles_are_hidden(conn):
    roles.create(conn, 1, "admin")
    conn.execute("UPDATE roles SET deleted_at = 3 WHERE id = 1")
    assert roles.read(conn, 1) is None
    assert roles.read_by_kind(conn, "admin") is None


def test_missing_table_raises_with_statement_name():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(StoreError, match="read_by_kind"):
        roles.read_by_kind(connection, "admin")
    connection.close()