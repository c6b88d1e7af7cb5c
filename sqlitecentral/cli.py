"""Command that opens a central database relative to the working directory."""

from __future__ import annotations

import sqlite3
import sys
from collections.abc import Sequence
from pathlib import Path


class _UsageError(Exception):
    pass


def _run(args: Sequence[str]) -> None:
    try:
        cwd = Path.cwd()
    except OSError as exc:
        raise _UsageError("current directory does not exist!") from exc
    print(f'"{cwd}"')

    if not args:
        raise _UsageError("no arguments provided")
    action = args[0]
    print(action)

    if len(args) < 3:
        raise _UsageError("no arguments provided")
    sqlite_path = cwd / args[2]
    try:
        conn = sqlite3.connect(sqlite_path)
    except sqlite3.Error as exc:
        raise _UsageError(str(exc)) from exc
    try:
        # Force the file open so an unusable path is reported here.
        conn.execute("PRAGMA schema_version").fetchone()
    except sqlite3.Error as exc:
        raise _UsageError(str(exc)) from exc
    finally:
        conn.close()

    print(action)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``action config database`` arguments; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        _run(args)
    except _UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())