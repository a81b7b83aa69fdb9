from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import mysql.connector

from ..core.exceptions import DuplicateRegistrationError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, is_missing_parent
from ..sessions.model import Session
from ..sessions.mysql_session_repository import SESSION_COLUMNS, to_session
from .model import AttendeeRegistration, Registration, SessionDetails, SessionRegistrant
from .repository import RegistrationRepository, SessionAdmission


class MySQLSessionAdmission(SessionAdmission):
    def __init__(self, cur, session_id: int):
        self._cur = cur
        self._session_id = int(session_id)
        # Row lock on the session: concurrent admissions to it queue here until commit/rollback.
        cur.execute(
            f"SELECT {SESSION_COLUMNS} FROM sessions WHERE session_id=%s FOR UPDATE",
            (self._session_id,),
        )
        row = fetchone(cur)
        self._session = to_session(row) if row else None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def occupancy(self) -> int:
        # First consistent read of the transaction, so the snapshot is taken after the lock.
        self._cur.execute(
            "SELECT COUNT(*) AS registered FROM registrations WHERE session_id=%s",
            (self._session_id,),
        )
        row = fetchone(self._cur)
        return int(row["registered"]) if row else 0

    def has_registration(self, attendee_id: int) -> bool:
        self._cur.execute(
            "SELECT registration_id FROM registrations WHERE attendee_id=%s AND session_id=%s",
            (int(attendee_id), self._session_id),
        )
        return fetchone(self._cur) is not None

    def attendee_exists(self, attendee_id: int) -> bool:
        self._cur.execute("SELECT attendee_id FROM attendees WHERE attendee_id=%s", (int(attendee_id),))
        return fetchone(self._cur) is not None

    def insert(self, attendee_id: int) -> Registration:
        try:
            self._cur.execute(
                "INSERT INTO registrations(attendee_id, session_id) VALUES(%s,%s)",
                (int(attendee_id), self._session_id),
            )
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateRegistrationError("Already registered for this session") from e
            if is_missing_parent(e):
                raise NotFoundError("Attendee not found") from e
            raise

        registration_id = int(self._cur.lastrowid)
        self._cur.execute(
            """
            SELECT registration_id, attendee_id, session_id, registration_date
            FROM registrations
            WHERE registration_id=%s
            """,
            (registration_id,),
        )
        r = fetchone(self._cur)
        return Registration(
            registration_id=int(r["registration_id"]),
            attendee_id=int(r["attendee_id"]),
            session_id=int(r["session_id"]),
            registration_date=r["registration_date"],
        )


class MySQLRegistrationRepository(RegistrationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def admission(self, session_id: int) -> Iterator[SessionAdmission]:
        with db_cursor(self._conn_factory) as (_, cur):
            yield MySQLSessionAdmission(cur, session_id)

    def delete(self, *, attendee_id: int, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM registrations WHERE attendee_id=%s AND session_id=%s",
                (int(attendee_id), int(session_id)),
            )
            return cur.rowcount > 0

    def session_details(self, session_id: int) -> Optional[SessionDetails]:
        # One statement, one snapshot: capacity and count cannot drift apart.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {SESSION_COLUMNS},
                       (SELECT COUNT(*) FROM registrations r WHERE r.session_id = s.session_id) AS registered
                FROM sessions s
                WHERE s.session_id=%s
                """,
                (int(session_id),),
            )
            row = fetchone(cur)
            if not row:
                return None
            return SessionDetails(session=to_session(row), registered=int(row["registered"]))

    def list_for_session(self, session_id: int) -> Sequence[SessionRegistrant]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.registration_id, r.attendee_id, r.session_id, r.registration_date,
                       a.name AS attendee_name, a.email AS attendee_email
                FROM registrations r
                JOIN attendees a ON a.attendee_id = r.attendee_id
                WHERE r.session_id=%s
                ORDER BY r.registration_date DESC, r.registration_id DESC
                """,
                (int(session_id),),
            )
            return [
                SessionRegistrant(
                    registration_id=int(r["registration_id"]),
                    attendee_id=int(r["attendee_id"]),
                    session_id=int(r["session_id"]),
                    registration_date=r["registration_date"],
                    attendee_name=r["attendee_name"],
                    attendee_email=r["attendee_email"],
                )
                for r in fetchall(cur)
            ]

    def list_for_attendee(self, attendee_id: int) -> Sequence[AttendeeRegistration]:
        # ORDER BY the stored text: '10:00 AM' sorts before '2:00 PM' lexically, not chronologically.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT r.registration_id, r.attendee_id, r.session_id, r.registration_date,
                       s.title AS session_title, s.speaker, s.`time`, s.location
                FROM registrations r
                JOIN sessions s ON s.session_id = r.session_id
                WHERE r.attendee_id=%s
                ORDER BY s.`time` ASC, r.registration_id ASC
                """,
                (int(attendee_id),),
            )
            return [
                AttendeeRegistration(
                    registration_id=int(r["registration_id"]),
                    attendee_id=int(r["attendee_id"]),
                    session_id=int(r["session_id"]),
                    registration_date=r["registration_date"],
                    session_title=r["session_title"],
                    speaker=r["speaker"],
                    time=r["time"],
                    location=r["location"],
                )
                for r in fetchall(cur)
            ]
