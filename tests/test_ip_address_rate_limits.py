import sqlite3

import pytest

from sqlitecentral import ip_address_rate_limits
from sqlitecentral.models import IpAddressRateLimit, StoreError


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    ip_address_rate_limits.create_table(connection)
    yield connection
    connection.close()


def test_crud_operations(conn):
    incorrect = IpAddressRateLimit(
        ip_address="127.0.0.1", kind_id=72, window_count=42,
        prev_window_count=51, updated_at=27, deleted_at=None,
    )

    first = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    assert first is not None

    second = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    assert first != second
    assert second != incorrect


def test_first_call_starts_window_at_zero(conn):
    first = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    assert first == IpAddressRateLimit(
        ip_address="127.0.0.1", kind_id=1, window_count=1,
        prev_window_count=0, updated_at=0, deleted_at=None,
    )


def test_expired_window_rolls_over(conn):
    ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    second = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    assert (second.window_count, second.prev_window_count, second.updated_at) == (1, 1, 20)


def test_calls_within_window_increment(conn):
    ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    third = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 22, 10, 5)
    assert (third.window_count, third.prev_window_count, third.updated_at) == (2, 1, 22)


def test_previous_window_is_capped(conn):
    ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 0, 2, 100)
    for _ in range(4):
        ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 10, 2, 100)
    rolled = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 500, 2, 100)
    assert rolled.prev_window_count == 2
    assert rolled.window_count == 1


def test_addresses_and_kinds_are_independent(conn):
    ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 1, 20, 10, 5)
    other_kind = ip_address_rate_limits.rate_limit_ip_address(conn, "127.0.0.1", 2, 20, 10, 5)
    other_ip = ip_address_rate_limits.rate_limit_ip_address(conn, "10.0.0.1", 1, 20, 10, 5)
    assert other_kind.window_count == 1 and other_kind.prev_window_count == 0
    assert other_ip.window_count == 1 and other_ip.prev_window_count == 0


def test_missing_table_raises():
    connection = sqlite3.connect(":memory:")
    with pytest.raises(StoreError):
        ip_address_rate_limits.rate_limit_ip_address(connection, "127.0.0.1", 1, 20, 10, 5)
    connection.close()