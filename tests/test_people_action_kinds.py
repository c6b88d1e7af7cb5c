import sqlite3

import pytest

from sqlitecentral import people_action_kinds
from sqlitecentral.models import PeopleActionKind, StoreError


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    people_action_kinds.create_table(connection)
    yield connection
    connection.close()


def test_crud_operations(conn):
    incorrect = PeopleActionKind(
        id=0, kind="foul and filth preach sublime", deleted_at=None
    )

    kind = people_action_kinds.create(conn, 1, "create_account")
    read_by_id = people_action_kinds.read(conn, 1)

    assert kind == PeopleActionKind(id=1, kind="create_account", deleted_at=None)
    assert kind == read_by_id
    assert read_by_id != incorrect

    read_by_kind = people_action_kinds.read_by_kind(conn, "create_account")
    assert kind == read_by_kind
    assert read_by_kind != incorrect


def test_duplicate_kind_returns_none(conn):
    people_action_kinds.create(conn, 1, "create_account")
    assert people_action_kinds.create(conn, 2, "create_account") is None
    assert people_action_kinds.read(conn, 2) is None


def test_deleted_kinds_are_hidden(conn):
    people_action_kinds.create(conn, 1, "create_account")
    conn.execute("UPDATE people_action_kinds SET deleted_at = 5 WHERE id = 1")
    assert people_action_kinds.read(conn, 1) is None
    assert people_action_kinds.read_by_kind(conn, "create_account") is None


def test_unknown_kind_returns_none(conn):
    assert people_action_kinds.read_by_kind(conn, "missing") is None


def test_missing_table_raises():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(StoreError):
        people_action_kinds.read_by_kind(connection, "create_account")
    connection.close()