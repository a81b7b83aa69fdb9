from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Attendee:
    """Domain entity: a conference attendee.

    Note: Plain data object (no DB access code).
    """

    attendee_id: int
    name: str
    email: str
    phone: Optional[str]
    registration_date: datetime
