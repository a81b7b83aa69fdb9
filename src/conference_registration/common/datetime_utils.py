from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from ..core.constants import TIMESTAMP_FORMAT


def format_timestamp(value: Optional[Union[datetime, str]]) -> Optional[str]:
    """Render a stored timestamp the way the API exposes it (YYYY-MM-DD HH:MM:SS)."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return value.strftime(TIMESTAMP_FORMAT)
