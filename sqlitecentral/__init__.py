"""Table definitions, queries and rate-limit counters for a centralized SQLite store."""

__version__ = "0.1.0"