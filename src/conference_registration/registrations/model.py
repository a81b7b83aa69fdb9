from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..sessions.model import Session


@dataclass(frozen=True)
class Registration:
    """Relationship record: an attendee holding a seat in a session."""

    registration_id: int
    attendee_id: int
    session_id: int
    registration_date: datetime


@dataclass(frozen=True)
class SessionRegistrant:
    """Read-model for a session roster (registration joined with attendee)."""

    registration_id: int
    attendee_id: int
    session_id: int
    registration_date: datetime
    attendee_name: str
    attendee_email: str


@dataclass(frozen=True)
class AttendeeRegistration:
    """Read-model for an attendee's schedule (registration joined with session)."""

    registration_id: int
    attendee_id: int
    session_id: int
    registration_date: datetime
    session_title: str
    speaker: str
    time: str
    location: str


@dataclass(frozen=True)
class SessionDetails:
    session: Session
    registered: int

    @property
    def available(self) -> int:
        # Not clamped: capacity may have been lowered below occupancy after admission.
        return self.session.capacity - self.registered
