import sqlite3

import pytest

from sqlitecentral import people_action_rate_limits as limits
from sqlitecentral.models import PeopleActionRateLimit, StoreError


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    limits.create_table(connection)
    yield connection
    connection.close()


def test_crud_operations(conn):
    incorrect = PeopleActionRateLimit(
        people_id=32,
        kind_id=3,
        window_count=42,
        prev_window_count=51,
        updated_at=27,
        deleted_at=None,
    )

    first = limits.rate_limit_people_action(conn, 64, 1, 20, 5)
    assert first == PeopleActionRateLimit(
        people_id=64,
        kind_id=1,
        window_count=1,
        prev_window_count=0,
        updated_at=0,
        deleted_at=None,
    )

    second = limits.rate_limit_people_action(conn, 64, 1, 20, 5)
    assert first != second
    assert second != incorrect
    assert second == PeopleActionRateLimit(
        people_id=64,
        kind_id=1,
        window_count=1,
        prev_window_count=1,
        updated_at=20,
        deleted_at=None,
    )


def test_calls_within_window_increment_count(conn):
    limits.rate_limit_people_action(conn, 64, 1, 20, 5)
    limits.rate_limit_people_action(conn, 64, 1, 20, 5)
    third = limits.rate_limit_people_action(conn, 64, 1, 22, 5)
    assert (third.window_count, third.prev_window_count, third.updated_at) == (2, 1, 22)


def test_separate_keys_are_counted_separately(conn):
    limits.rate_limit_people_action(conn, 64, 1, 20, 5)
    other = limits.rate_limit_people_action(conn, 64, 2, 20, 5)
    assert (other.kind_id, other.window_count, other.updated_at) == (2, 1, 0)


def test_missing_table_raises():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(StoreError):
        limits.rate_limit_people_action(connection, 64, 1, 20, 5)
    connection.close()