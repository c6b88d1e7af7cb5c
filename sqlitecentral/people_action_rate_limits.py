"""Sliding-window rate limiting keyed by person and action kind."""

from __future__ import annotations

import sqlite3

from .models import PeopleActionRateLimit, _create_table, _fetch_one

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS people_action_rate_limits ("
    " people_id INTEGER NOT NULL,"
    " kind_id INTEGER NOT NULL,"
    " window_count INTEGER NOT NULL,"
    " prev_window_count INTEGER NOT NULL,"
    " updated_at INTEGER NOT NULL,"
    " deleted_at INTEGER,"
    " PRIMARY KEY (people_id, kind_id))"
)

# A row still inside its window when less than :window ms passed since its
# last update; otherwise the window rolls over.
_UPSERT = (
    "INSERT INTO people_action_rate_limits"
    " (people_id, kind_id, window_count, prev_window_count, updated_at)"
    " VALUES (:people_id, :kind_id, 1, 0, 0)"
    " ON CONFLICT (people_id, kind_id) DO UPDATE SET"
    " prev_window_count = IIF(:now - updated_at < :window,"
    " prev_window_count, window_count),"
    " window_count = IIF(:now - updated_at < :window, window_count + 1, 1),"
    " updated_at = :now"
    " RETURNING people_id, kind_id, window_count, prev_window_count,"
    " updated_at, deleted_at"
)


def create_table(conn: sqlite3.Connection) -> None:
    """Create the people_action_rate_limits table if it does not exist."""
    _create_table(conn, _CREATE_TABLE, "people_action_rate_limits")


def rate_limit_people_action(
    conn: sqlite3.Connection,
    people_id: int,
    kind_id: int,
    current_timestamp: int,
    window_length_ms: int,
) -> PeopleActionRateLimit | None:
    """Count one action for the person and return the updated window.

    The first call starts a window at timestamp 0. Later calls within
    ``window_length_ms`` of the last update increment the count; otherwise
    the count moves to the previous window and a new window starts.
    """
    return _fetch_one(
        conn,
        _UPSERT,
        {
            "people_id": people_id,
            "kind_id": kind_id,
            "window": window_length_ms,
            "now": current_timestamp,
        },
        PeopleActionRateLimit,
        "could not prepare statement",
    )