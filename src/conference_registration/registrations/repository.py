from __future__ import annotations

from typing import ContextManager, Optional, Protocol, Sequence

from ..sessions.model import Session
from .model import AttendeeRegistration, Registration, SessionDetails, SessionRegistrant


class SessionAdmission(Protocol):
    """Locked view of one session while a registration is being admitted.

    Everything read or written through this object happens in one store
    transaction that holds the session's lock, so occupancy cannot change
    between the capacity check and the insert.
    """

    @property
    def session(self) -> Optional[Session]:
        raise NotImplementedError

    def occupancy(self) -> int:
        raise NotImplementedError

    def has_registration(self, attendee_id: int) -> bool:
        raise NotImplementedError

    def attendee_exists(self, attendee_id: int) -> bool:
        raise NotImplementedError

    def insert(self, attendee_id: int) -> Registration:
        raise NotImplementedError


class RegistrationRepository(Protocol):
    def admission(self, session_id: int) -> ContextManager[SessionAdmission]:
        """Open a transaction scoped to one session (serialized per session)."""

        raise NotImplementedError

    def delete(self, *, attendee_id: int, session_id: int) -> bool:
        raise NotImplementedError

    def session_details(self, session_id: int) -> Optional[SessionDetails]:
        """Session row and its occupancy read together; None if the session is absent."""

        raise NotImplementedError

    def list_for_session(self, session_id: int) -> Sequence[SessionRegistrant]:
        """Roster joined with attendee name/email, newest registration first."""

        raise NotImplementedError

    def list_for_attendee(self, attendee_id: int) -> Sequence[AttendeeRegistration]:
        """Schedule joined with session fields, ordered by the stored session time text."""

        raise NotImplementedError
