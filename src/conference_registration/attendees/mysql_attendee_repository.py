from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Attendee
from .repository import AttendeeRepository

_COLUMNS = "attendee_id, name, email, phone, registration_date"


def _to_attendee(row: dict) -> Attendee:
    return Attendee(
        attendee_id=int(row["attendee_id"]),
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        registration_date=row["registration_date"],
    )


class MySQLAttendeeRepository(AttendeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendee_id: int) -> Optional[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendees WHERE attendee_id=%s", (int(attendee_id),))
            row = fetchone(cur)
            return _to_attendee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendees WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_attendee(row) if row else None

    def list_all(self) -> Sequence[Attendee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendees ORDER BY attendee_id DESC")
            return [_to_attendee(r) for r in fetchall(cur)]

    def create(self, *, name: str, email: str, phone: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "INSERT INTO attendees(name, email, phone) VALUES(%s,%s,%s)",
                    (name, email, phone),
                )
            except mysql.connector.IntegrityError as e:
                if is_duplicate_key(e):
                    raise ConflictError("Email already exists") from e
                raise
            return int(cur.lastrowid)

    def update(self, *, attendee_id: int, name: str, email: str, phone: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "UPDATE attendees SET name=%s, email=%s, phone=%s WHERE attendee_id=%s",
                    (name, email, phone, int(attendee_id)),
                )
            except mysql.connector.IntegrityError as e:
                if is_duplicate_key(e):
                    raise ConflictError("Email already exists") from e
                raise
            return cur.rowcount > 0

    def delete(self, attendee_id: int) -> bool:
        # registrations go with it via ON DELETE CASCADE, in the same statement
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendees WHERE attendee_id=%s", (int(attendee_id),))
            return cur.rowcount > 0
