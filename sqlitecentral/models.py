"""Record types stored in the central database, plus shared query helpers."""

from __future__ import annotations

import json
import sqlite3
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any, TypeVar, Union

_U64_LIMIT = 2**64

_BASE_TYPES: dict[str, type] = {"int": int, "str": str}

R = TypeVar("R", bound="Record")

Params = Union[Sequence[Any], Mapping[str, Any]]


class StoreError(Exception):
    """Raised when the database or a serialised record cannot be used."""


@dataclass(frozen=True)
class Record:
    """Base of every stored record: typed, comparable and JSON-serialisable."""

    def to_json(self) -> str:
        """Serialise the record as a compact JSON object."""
        return json.dumps(asdict(self), separators=(",", ":"))

    @classmethod
    def from_json(cls: type[R], text: str) -> R:
        """Build a record from a JSON object; absent optional fields become None."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise StoreError(f"invalid JSON for {cls.__name__}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"expected a JSON object for {cls.__name__}")

        values: dict[str, Any] = {}
        for name, optional, _ in cls._field_specs():
            if name in data:
                values[name] = data[name]
            elif optional:
                values[name] = None
            else:
                raise StoreError(f"missing field `{name}` for {cls.__name__}")
        return cls._validated(values)

    @classmethod
    def _from_row(cls: type[R], row: Sequence[Any]) -> R:
        specs = cls._field_specs()
        if len(row) != len(specs):
            raise StoreError(
                f"{cls.__name__} expects {len(specs)} columns, got {len(row)}"
            )
        return cls._validated({name: value for (name, _, _), value in zip(specs, row)})

    @classmethod
    def _field_specs(cls) -> list[tuple[str, bool, type]]:
        """Name, optionality and base type of each field, from its annotation."""
        specs = []
        for field in fields(cls):
            parts = {part.strip() for part in str(field.type).split("|")}
            optional = "None" in parts
            base_name = next(part for part in parts if part != "None")
            specs.append((field.name, optional, _BASE_TYPES[base_name]))
        return specs

    @classmethod
    def _validated(cls: type[R], values: dict[str, Any]) -> R:
        for name, optional, base in cls._field_specs():
            value = values[name]
            if value is None:
                if not optional:
                    raise StoreError(f"field `{name}` of {cls.__name__} is required")
            elif base is int:
                if (
                    not isinstance(value, int)
                    or isinstance(value, bool)
                    or not 0 <= value < _U64_LIMIT
                ):
                    raise StoreError(
                        f"field `{name}` of {cls.__name__} must be an unsigned 64-bit integer"
                    )
            elif base is str and not isinstance(value, str):
                raise StoreError(f"field `{name}` of {cls.__name__} must be a string")
        return cls(**values)


@dataclass(frozen=True)
class ContactKind(Record):
    id: int
    kind: str
    deleted_at: int | None


@dataclass(frozen=True)
class Contact(Record):
    id: int
    people_id: int
    contact_kind_id: int
    content: str
    verified_at: int | None
    deleted_at: int | None


@dataclass(frozen=True)
class IpAddressActionKind(Record):
    id: int
    kind: str
    deleted_at: int | None


@dataclass(frozen=True)
class IpAddressRateLimit(Record):
    ip_address: str
    kind_id: int
    window_count: int
    prev_window_count: int
    updated_at: int
    deleted_at: int | None


@dataclass(frozen=True)
class Person(Record):
    id: int
    password_hash_results: str
    deleted_at: int | None


@dataclass(frozen=True)
class PeopleActionKind(Record):
    id: int
    kind: str
    deleted_at: int | None


@dataclass(frozen=True)
class PeopleActionRateLimit(Record):
    people_id: int
    kind_id: int
    window_count: int
    prev_window_count: int
    updated_at: int
    deleted_at: int | None


@dataclass(frozen=True)
class Role(Record):
    id: int
    kind: str
    deleted_at: int | None


@dataclass(frozen=True)
class RoleToPerson(Record):
    id: int
    role_id: int
    people_id: int
    deleted_at: int | None


@dataclass(frozen=True)
class Session(Record):
    id: int
    people_id: int | None
    deleted_at: int | None


@dataclass(frozen=True)
class PublicSession(Record):
    id: int
    people_id: int | None
    token: int
    session_id: int
    window_count: int
    prev_window_count: int
    updated_at: int
    deleted_at: int | None


@dataclass(frozen=True)
class Signup(Record):
    id: int
    token: int
    contact_kind_id: int
    contact_content: str
    deleted_at: int | None


@dataclass(frozen=True)
class Totp(Record):
    id: int
    people_id: int
    secret_key: str
    algorithm: int | None
    period: int | None
    digits: int | None
    deleted_at: int | None


def _create_table(conn: sqlite3.Connection, sql: str, table: str) -> None:
    try:
        conn.execute(sql)
    except sqlite3.Error as exc:
        raise StoreError(f"{table} table error: \n{exc}") from exc


def _query(
    conn: sqlite3.Connection,
    sql: str,
    params: Params,
    record_type: type[R],
    failure: str,
) -> list[R]:
    """Run a statement and collect the rows that form valid records.

    A constraint violation yields no rows, as do rows that cannot be read
    as ``record_type``; any other database failure raises StoreError.
    """
    bound = dict(params) if isinstance(params, Mapping) else tuple(params)
    try:
        cursor = conn.execute(sql, bound)
    except sqlite3.IntegrityError:
        return []
    except (sqlite3.Error, OverflowError) as exc:
        raise StoreError(f"{failure}: {exc}") from exc

    records: list[R] = []
    try:
        for row in cursor:
            try:
                records.append(record_type._from_row(row))
            except StoreError:
                continue
    except sqlite3.DatabaseError:
        # A failure while stepping ends the result set rather than the call.
        pass
    finally:
        cursor.close()
    return records


def _fetch_one(
    conn: sqlite3.Connection,
    sql: str,
    params: Params,
    record_type: type[R],
    failure: str,
) -> R | None:
    records = _query(conn, sql, params, record_type, failure)
    return records[0] if records else None