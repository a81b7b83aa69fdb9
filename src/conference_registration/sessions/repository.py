from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    def get_by_id(self, session_id: int) -> Optional[Session]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Session]:
        """Newest first."""

        raise NotImplementedError

    def create(
        self,
        *,
        title: str,
        speaker: str,
        time: str,
        location: str,
        description: Optional[str],
        capacity: int,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        session_id: int,
        title: str,
        speaker: str,
        time: str,
        location: str,
        description: Optional[str],
        capacity: int,
    ) -> bool:
        raise NotImplementedError

    def delete(self, session_id: int) -> bool:
        """Delete the session together with its registrations."""

        raise NotImplementedError
