# sqlitecentral

Table definitions and queries for a centralized SQLite store that keeps
people, their contacts, sessions, public sessions, signups, roles, TOTP
settings and rate-limit counters.

Every table module works on a plain `sqlite3.Connection` and offers the
same small set of functions: `create_table(conn)` makes the table if it
does not exist yet, and `create(...)` and `read...(...)` functions insert
or look up rows.

- A lookup returns a record, or `None` if no matching row exists.
- A `create(...)` returns the stored record, or `None` if the row could
  not be stored because it breaks a constraint (a duplicate id, a
  duplicate unique value, a missing required value).
- Other database failures, and a failure to create a table, raise
  `sqlitecentral.models.StoreError`.

Inserts use `RETURNING`, which needs SQLite 3.35 or newer. The `sqlite3`
module that ships with current Python releases meets this.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Table | Functions |
| --- | --- | --- |
| `contact_kinds` | `contact_kinds` | `create_table`, `create`, `read`, `read_by_kind` |
| `contacts` | `contacts` | `create_table`, `create`, `read`, `read_by_kind_id_and_content` |
| `people` | `people` | `create_table`, `create`, `read` |
| `sessions` | `sessions` | `create_table`, `create`, `read`, `read_all_by_people_id` |
| `public_sessions` | `public_sessions` | `create_table`, `create`, `read`, `read_all_by_session_id`, `read_all_by_people_id`, `rate_limit_session` |
| `signups` | `signups` | `create_table`, `create`, `read`, `read_all_by_contact` |
| `roles` | `roles` | `create_table`, `create`, `read`, `read_by_kind` |
| `roles_to_people` | `roles_to_people` | `create_table`, `create`, `read`, `read_by_role_id_and_people_id` |
| `totp` | `totp` | `create_table`, `create`, `read` |
| `ip_address_action_kinds` | `ip_address_action_kinds` | `create_table`, `create`, `read`, `read_by_kind` |
| `ip_address_rate_limits` | `ip_address_rate_limits` | `create_table`, `rate_limit_ip_address` |
| `people_action_kinds` | `people_action_kinds` | `create_table`, `create`, `read`, `read_by_kind` |
| `people_action_rate_limits` | `people_action_rate_limits` | `create_table`, `rate_limit_people_action` |
| `schema` | all core tables | `create_tables`, `set_journal_mode_to_wal2` |

All ids, tokens and timestamps are supplied by the caller as unsigned
64-bit integers.

## Records

`sqlitecentral.models` defines one frozen dataclass per table: `ContactKind`,
`Contact`, `IpAddressActionKind`, `IpAddressRateLimit`, `Person`,
`PeopleActionKind`, `PeopleActionRateLimit`, `Role`, `RoleToPerson`,
`Session`, `PublicSession`, `Signup` and `Totp`, all derived from `Record`.
Records compare equal field by field.

Every record turns into compact JSON with `to_json()` and back with the
class method `from_json(text)`. `from_json` fills absent optional fields
with `None` and raises `StoreError` for text that is not a JSON object, a
missing required field, or a value of the wrong type (integer fields must
be unsigned 64-bit integers).

## Example

```python
import sqlite3

from sqlitecentral import contact_kinds, contacts, sessions

conn = sqlite3.connect(":memory:")

contact_kinds.create_table(conn)
email = contact_kinds.create(conn, 1, "email")
assert contact_kinds.read(conn, 1) == email
assert contact_kinds.read_by_kind(conn, "email") == email
assert contact_kinds.create(conn, 2, "email") is None  # kind is unique

contacts.create_table(conn)
contact = contacts.create(conn, 1, 2, email.id, "someone@example.com", None)
assert contacts.read_by_kind_id_and_content(conn, email.id, "someone@example.com") == contact

sessions.create_table(conn)
session = sessions.create(conn, 16, 42)
assert sessions.read_all_by_people_id(conn, 42, 0, 5) == [session]
```

Reads skip rows whose `deleted_at` is set, except `people.read`,
`sessions.read` and `totp.read`, which return a row by id whatever its
`deleted_at`. List queries (`sessions.read_all_by_people_id`,
`public_sessions.read_all_by_session_id`,
`public_sessions.read_all_by_people_id`, `signups.read_all_by_contact`)
return rows newest id first and take an `offset` and a `limit`.

The `public_sessions` table requires a `people_id`; `public_sessions.create`
with `people_id=None` stores nothing and returns `None`.

## Rate limits

Three kinds of counters track activity in time windows:

- `ip_address_rate_limits.rate_limit_ip_address` counts actions by an IP
  address and an action kind (see `ip_address_action_kinds`).
- `people_action_rate_limits.rate_limit_people_action` counts actions by a
  person and an action kind (see `people_action_kinds`).
- `public_sessions.rate_limit_session` counts requests made with a public
  session.

Each call records one more action at `current_timestamp` (milliseconds)
and returns the updated record. While the time since the last update is
shorter than the window length, `window_count` goes up by one. Otherwise
a new window starts: `window_count` goes back to 1 and the count of the
window that just ended moves to `prev_window_count`. For IP addresses and
public sessions that count is capped at the given maximum. The caller
decides from the returned counts whether to allow the action.

The first call for an IP address or a person creates the counter with
`window_count` 1, `prev_window_count` 0 and `updated_at` 0. A public
session gets its counter when `public_sessions.create` makes it.
`rate_limit_session` returns `None` when there is no live session with
that id and token.

## Setting up a whole database

`sqlitecentral.schema.create_tables(conn)` creates the contact kinds,
signups, contacts, people, sessions and public sessions tables in that
order, stopping with `StoreError` at the first failure. The roles, roles
to people, TOTP and rate-limit tables are created with their own modules'
`create_table`.

`sqlitecentral.schema.set_journal_mode_to_wal2(conn)` asks SQLite for the
`wal2` journal mode and raises `StoreError` unless the database reports
that mode afterwards. Only SQLite builds that support `wal2` accept it;
the stock builds do not, so there it raises.

## Command line

The package installs a `sqlitecentral` command:

```
sqlitecentral <action> <config> <database>
```

It prints the current directory (in double quotes) and the action, opens
the database file at `<database>`, taken relative to the current
directory, prints the action again and exits with status 0. If an
argument is missing or the database cannot be opened it prints
`Error: ...` to standard error and exits with status 1. The `<config>`
argument is required but not read.

## What this package does not do

- The command does not act on its `action`: it creates no tables and
  changes nothing in the database. Use `schema.create_tables` from Python
  to set up a database.
- There is no signup or login workflow: nothing hashes or checks
  passwords, generates ids or tokens, or turns a signup into a person and
  a contact. `people.create` stores whatever hash string it is given.
- There are no update or delete functions apart from the rate-limit
  counters; `deleted_at` is only read.