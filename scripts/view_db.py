"""Print the database layout and contents (handy for quick inspection)."""

from __future__ import annotations

import importlib

from conference_registration.config import get_settings_module
from conference_registration.database.bootstrap import describe_table, dump_rows, list_tables
from conference_registration.database.connection import DBConfig


def _print_columns(db_config: dict, table: str) -> None:
    print(f"=== {table.upper()} TABLE SCHEMA ===")
    for col in describe_table(db_config, table):
        flags = ""
        if col.get("Null") == "NO":
            flags += " NOT NULL"
        if col.get("Key") == "PRI":
            flags += " PRIMARY KEY"
        print(f"{col['Field']}: {col['Type']}{flags}")
    print()


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    print(f"Connected to {DBConfig.from_dict(db_config).describe()}\n")

    print("=== DATABASE TABLES ===")
    for name in list_tables(db_config):
        print(f"- {name}")
    print()

    _print_columns(db_config, "attendees")
    _print_columns(db_config, "sessions")

    print("=== ATTENDEES DATA ===")
    rows = dump_rows(db_config, "SELECT * FROM attendees ORDER BY attendee_id")
    if not rows:
        print("No attendees found.")
    for r in rows:
        print(
            f"ID: {r['attendee_id']}, Name: {r['name']}, Email: {r['email']}, "
            f"Phone: {r['phone'] or 'N/A'}, Registered: {r['registration_date']}"
        )
    print()

    print("=== SESSIONS DATA ===")
    rows = dump_rows(db_config, "SELECT * FROM sessions ORDER BY session_id")
    if not rows:
        print("No sessions found.")
    for r in rows:
        print(
            f"ID: {r['session_id']}, Title: {r['title']}, Speaker: {r['speaker']}, "
            f"Time: {r['time']}, Location: {r['location']}, Capacity: {r['capacity']}"
        )
    print()

    print("=== REGISTRATIONS DATA ===")
    rows = dump_rows(
        db_config,
        """
        SELECT r.registration_id, r.attendee_id, r.session_id, r.registration_date,
               a.name AS attendee_name, s.title AS session_title
        FROM registrations r
        JOIN attendees a ON a.attendee_id = r.attendee_id
        JOIN sessions s ON s.session_id = r.session_id
        ORDER BY r.registration_date DESC, r.registration_id DESC
        """,
    )
    if not rows:
        print("No registrations found.")
    for r in rows:
        print(
            f"ID: {r['registration_id']}, Attendee: {r['attendee_name']} (ID: {r['attendee_id']}), "
            f"Session: {r['session_title']} (ID: {r['session_id']}), Registered: {r['registration_date']}"
        )


if __name__ == "__main__":
    main()
