from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_SESSION_CAPACITY


@dataclass(frozen=True)
class Session:
    """Domain entity: a scheduled conference session."""

    session_id: int
    title: str
    speaker: str
    time: str
    location: str
    description: Optional[str] = None
    capacity: int = DEFAULT_SESSION_CAPACITY
