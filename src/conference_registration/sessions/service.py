from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import is_blank, optional_text, parse_capacity, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Use case: manage sessions (organizer side, plain CRUD)."""

    def __init__(self, sessions: SessionRepository):
        self._sessions = sessions

    def _clean(self, fields: dict[str, Any]) -> dict[str, Any]:
        required = ("title", "speaker", "time", "location")
        if any(is_blank(fields.get(k)) for k in required):
            raise ValidationError("Title, speaker, time, and location are required")

        cleaned: dict[str, Any] = {k: require_non_empty(fields.get(k), k.capitalize()) for k in required}
        cleaned["description"] = optional_text(fields.get("description"), "Description")
        cleaned["capacity"] = parse_capacity(fields.get("capacity"))
        return cleaned

    def create(self, **fields: Any) -> Session:
        session_id = self._sessions.create(**self._clean(fields))
        logger.info("Session %s created", session_id)
        return self.get(session_id)

    def get(self, session_id: int) -> Session:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise NotFoundError("Session not found")
        return session

    def list(self) -> Sequence[Session]:
        return self._sessions.list_all()

    def update(self, session_id: int, **fields: Any) -> Session:
        cleaned = self._clean(fields)
        if not self._sessions.update(session_id=int(session_id), **cleaned):
            raise NotFoundError("Session not found")
        return self.get(session_id)

    def delete(self, session_id: int) -> None:
        if not self._sessions.delete(int(session_id)):
            raise NotFoundError("Session not found")
        logger.info("Session %s deleted with its registrations", session_id)
