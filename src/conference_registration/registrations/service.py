from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import is_blank, require_id
from ..core.exceptions import CapacityExceededError, DuplicateRegistrationError, NotFoundError, ValidationError
from .model import AttendeeRegistration, Registration, SessionDetails, SessionRegistrant
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: enroll attendees in sessions under capacity and uniqueness rules.

    Checks in `register` run in a fixed order: input, session, capacity,
    duplicate, attendee. They all happen inside one admission unit held by the
    repository, so two requests for the last seat cannot both be admitted.
    """

    def __init__(self, registrations: RegistrationRepository):
        self._registrations = registrations

    def register(self, attendee_id: Any, session_id: Any) -> Registration:
        if is_blank(attendee_id) or is_blank(session_id):
            raise ValidationError("Attendee ID and Session ID are required")
        attendee_id = require_id(attendee_id, "Attendee ID")
        session_id = require_id(session_id, "Session ID")

        with self._registrations.admission(session_id) as admission:
            session = admission.session
            if session is None:
                raise NotFoundError("Session not found")

            registered = admission.occupancy()
            if registered >= session.capacity:
                logger.info("Session %s full (%s/%s), attendee %s rejected", session_id, registered, session.capacity, attendee_id)
                raise CapacityExceededError("Session is full")

            if admission.has_registration(attendee_id):
                raise DuplicateRegistrationError("Already registered for this session")

            if not admission.attendee_exists(attendee_id):
                raise NotFoundError("Attendee not found")

            registration = admission.insert(attendee_id)

        logger.info(
            "Attendee %s registered for session %s (%s/%s)",
            attendee_id,
            session_id,
            registered + 1,
            session.capacity,
        )
        return registration

    def unregister(self, attendee_id: Any, session_id: Any) -> None:
        try:
            attendee_id = require_id(attendee_id, "Attendee ID")
            session_id = require_id(session_id, "Session ID")
        except ValidationError:
            # A pair with a malformed id was never registered.
            raise NotFoundError("Registration not found") from None

        if not self._registrations.delete(attendee_id=attendee_id, session_id=session_id):
            raise NotFoundError("Registration not found")
        logger.info("Attendee %s unregistered from session %s", attendee_id, session_id)

    def list_for_session(self, session_id: int) -> Sequence[SessionRegistrant]:
        # No existence check: an unknown session simply has no registrations.
        return self._registrations.list_for_session(int(session_id))

    def list_for_attendee(self, attendee_id: int) -> Sequence[AttendeeRegistration]:
        return self._registrations.list_for_attendee(int(attendee_id))

    def session_details(self, session_id: int) -> SessionDetails:
        details = self._registrations.session_details(int(session_id))
        if details is None:
            raise NotFoundError("Session not found")
        return details
