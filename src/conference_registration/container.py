from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendees.mysql_attendee_repository import MySQLAttendeeRepository
from .attendees.repository import AttendeeRepository
from .attendees.service import AttendeeService
from .database.connection import DBConfig, DatabaseConnection
from .registrations.mysql_registration_repository import MySQLRegistrationRepository
from .registrations.repository import RegistrationRepository
from .registrations.service import RegistrationService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendees_repo: AttendeeRepository
    sessions_repo: SessionRepository
    registrations_repo: RegistrationRepository

    attendee_service: AttendeeService
    session_service: SessionService
    registration_service: RegistrationService


def wire(
    *,
    attendees_repo: AttendeeRepository,
    sessions_repo: SessionRepository,
    registrations_repo: RegistrationRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        attendees_repo=attendees_repo,
        sessions_repo=sessions_repo,
        registrations_repo=registrations_repo,
        attendee_service=AttendeeService(attendees_repo),
        session_service=SessionService(sessions_repo),
        registration_service=RegistrationService(registrations_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire(
        conn=conn,
        attendees_repo=MySQLAttendeeRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        registrations_repo=MySQLRegistrationRepository(conn),
    )
