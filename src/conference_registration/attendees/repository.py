from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Attendee


class AttendeeRepository(Protocol):
    """Repository interface for Attendee.

    Note (DIP): the service layer depends on this interface, not on a concrete database.
    """

    def get_by_id(self, attendee_id: int) -> Optional[Attendee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Attendee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Attendee]:
        """Newest first."""

        raise NotImplementedError

    def create(self, *, name: str, email: str, phone: Optional[str]) -> int:
        """Insert an attendee; raises ConflictError on a duplicate email. Returns attendee_id."""

        raise NotImplementedError

    def update(self, *, attendee_id: int, name: str, email: str, phone: Optional[str]) -> bool:
        raise NotImplementedError

    def delete(self, attendee_id: int) -> bool:
        """Delete the attendee together with their registrations."""

        raise NotImplementedError
