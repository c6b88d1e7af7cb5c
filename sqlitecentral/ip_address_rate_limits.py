"""Sliding-window rate limiting keyed by IP address and action kind."""

from __future__ import annotations

import sqlite3

from .models import IpAddressRateLimit, _create_table, _fetch_one

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS ip_address_rate_limits ("
    " ip_address TEXT NOT NULL,"
    " kind_id INTEGER NOT NULL,"
    " window_count INTEGER NOT NULL,"
    " prev_window_count INTEGER NOT NULL,"
    " updated_at INTEGER NOT NULL,"
    " deleted_at INTEGER,"
    " PRIMARY KEY (ip_address, kind_id))"
)

# A row still inside its window when less than :window ms passed since its
# last update; otherwise the window rolls over.
_UPSERT = (
    "INSERT INTO ip_address_rate_limits"
    " (ip_address, kind_id, window_count, prev_window_count, updated_at)"
    " VALUES (:ip_address, :kind_id, 1, 0, 0)"
    " ON CONFLICT (ip_address, kind_id) DO UPDATE SET"
    " prev_window_count = IIF(:now - updated_at < :window,"
    " prev_window_count, MIN(window_count, :max_count)),"
    " window_count = IIF(:now - updated_at < :window, window_count + 1, 1),"
    " updated_at = :now"
    " RETURNING ip_address, kind_id, window_count, prev_window_count,"
    " updated_at, deleted_at"
)


def create_table(conn: sqlite3.Connection) -> None:
    """Create the ip_address_rate_limits table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "ip_address_rate_limits")


def rate_limit_ip_address(
    conn: sqlite3.Connection,
    ip_address: str,
    kind_id: int,
    current_timestamp: int,
    max_window_count: int,
    window_length_ms: int,
) -> IpAddressRateLimit | None:
    """Count one action for the address and return the updated window.

    The first call starts a window at timestamp 0. Later calls within
    ``window_length_ms`` of the last update increment the count; otherwise
    the count (capped at ``max_window_count``) moves to the previous window
    and a new window starts.
    """
    return _fetch_one(
        conn,
        _UPSERT,
        {
            "ip_address": ip_address,
            "kind_id": kind_id,
            "window": window_length_ms,
            "now": current_timestamp,
            "max_count": max_window_count,
        },
        IpAddressRateLimit,
        "could not prepare statement",
    )