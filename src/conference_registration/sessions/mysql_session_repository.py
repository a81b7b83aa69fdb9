from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Session
from .repository import SessionRepository

SESSION_COLUMNS = "session_id, title, speaker, `time`, location, description, capacity"


def to_session(row: dict) -> Session:
    return Session(
        session_id=int(row["session_id"]),
        title=row["title"],
        speaker=row["speaker"],
        time=row["time"],
        location=row["location"],
        description=row.get("description"),
        capacity=int(row["capacity"]),
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, session_id: int) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {SESSION_COLUMNS} FROM sessions WHERE session_id=%s", (int(session_id),))
            row = fetchone(cur)
            return to_session(row) if row else None

    def list_all(self) -> Sequence[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {SESSION_COLUMNS} FROM sessions ORDER BY session_id DESC")
            return [to_session(r) for r in fetchall(cur)]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO sessions(title, speaker, `time`, location, description, capacity)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (title, speaker, time, location, description, int(capacity)),
            )
            return int(cur.lastrowid)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE sessions
                SET title=%s, speaker=%s, `time`=%s, location=%s, description=%s, capacity=%s
                WHERE session_id=%s
                """,
                (title, speaker, time, location, description, int(capacity), int(session_id)),
            )
            return cur.rowcount > 0

    def delete(self, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sessions WHERE session_id=%s", (int(session_id),))
            return cur.rowcount > 0
