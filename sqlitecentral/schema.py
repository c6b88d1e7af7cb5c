"""Database-wide setup: journal mode and the core tables."""

from __future__ import annotations

import sqlite3

from . import contact_kinds, contacts, people, public_sessions, sessions, signups
from .models import StoreError


def set_journal_mode_to_wal2(conn: sqlite3.Connection) -> None:
    """Switch the database to the wal2 journal mode, or raise StoreError."""
    prefix = "error setting journal mode to WAL2: \n"
    try:
        row = conn.execute("PRAGMA journal_mode = wal2").fetchone()
    except sqlite3.Error as exc:
        raise StoreError(f"{prefix}{exc}") from exc
    mode = row[0] if row else None
    if not isinstance(mode, str) or mode.lower() != "wal2":
        raise StoreError(f"{prefix}journal mode is {mode}")


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the core tables, stopping at the first failure."""
    for module in (contact_kinds, signups, contacts, people, sessions, public_sessions):
        module.create_table(conn)