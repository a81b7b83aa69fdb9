from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import is_blank, optional_text, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Attendee
from .repository import AttendeeRepository

logger = logging.getLogger(__name__)


class AttendeeService:
    """Use case: manage attendees (plain CRUD)."""

    def __init__(self, attendees: AttendeeRepository):
        self._attendees = attendees

    def _clean(self, name: Any, email: Any, phone: Any) -> tuple[str, str, Optional[str]]:
        if is_blank(name) or is_blank(email):
            raise ValidationError("Name and email are required")
        return require_non_empty(name, "Name"), require_non_empty(email, "Email"), optional_text(phone, "Phone")

    def create(self, *, name: Any, email: Any, phone: Any = None) -> Attendee:
        name, email, phone = self._clean(name, email, phone)

        if self._attendees.get_by_email(email):
            raise ConflictError("Email already exists")

        attendee_id = self._attendees.create(name=name, email=email, phone=phone)
        logger.info("Attendee %s created", attendee_id)
        return self.get(attendee_id)

    def get(self, attendee_id: int) -> Attendee:
        attendee = self._attendees.get_by_id(int(attendee_id))
        if not attendee:
            raise NotFoundError("Attendee not found")
        return attendee

    def list(self) -> Sequence[Attendee]:
        return self._attendees.list_all()

    def update(self, attendee_id: int, *, name: Any, email: Any, phone: Any = None) -> Attendee:
        name, email, phone = self._clean(name, email, phone)
        current = self.get(attendee_id)

        owner = self._attendees.get_by_email(email)
        if owner and owner.attendee_id != current.attendee_id:
            raise ConflictError("Email already exists")

        if not self._attendees.update(attendee_id=current.attendee_id, name=name, email=email, phone=phone):
            raise NotFoundError("Attendee not found")
        return self.get(current.attendee_id)

    def delete(self, attendee_id: int) -> None:
        if not self._attendees.delete(int(attendee_id)):
            raise NotFoundError("Attendee not found")
        logger.info("Attendee %s deleted with their registrations", attendee_id)
