import sqlite3

import pytest

from sqlitecentral import people
from sqlitecentral.models import Person, StoreError


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    people.create_table(connection)
    yield connection
    connection.close()


def test_crud_operations(conn):
    incorrect_person = Person(id=0, password_hash_results="secret", deleted_at=None)

    person = people.create(conn, 1, "placeholder")
    person_read_by_id = people.read(conn, 1)

    assert person == Person(id=1, password_hash_results="placeholder", deleted_at=None)
    assert person == person_read_by_id
    assert person_read_by_id != incorrect_person


def test_read_missing_returns_none(conn):
    assert people.read(conn, 99) is None


def test_duplicate_id_returns_none(conn):
    people.create(conn, 1, "placeholder")
    assert people.create(conn, 1, "secret") is None
    assert people.read(conn, 1).password_hash_results == "placeholder"


def test_read_includes_deleted_people(conn):
    people.create(conn, 3, "placeholder")
    conn.execute("UPDATE people SET deleted_at = 50 WHERE id = 3")
    assert people.read(conn, 3) == Person(
        id=3, password_hash_results="placeholder", deleted_at=50
    )


def test_create_table_is_idempotent(conn):
    people.create(conn, 1, "placeholder")
    people.create_table(conn)
    assert people.read(conn, 1).id == 1


def test_missing_table_raises():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(StoreError):
        people.read(connection, 1)
    connection.close()


def test_closed_connection_raises_on_create_table():
    connection = sqlite3.connect(":memory:")
    connection.close()
    with pytest.raises(StoreError, match="people table error"):
        people.create_table(connection)