from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

SAMPLE_ATTENDEES: Sequence[tuple[str, str, str]] = (
    ("John Doe", "john@example.com", "555-0101"),
    ("Jane Smith", "jane@example.com", "555-0102"),
    ("Bob Johnson", "bob@example.com", "555-0103"),
)

SAMPLE_SESSIONS: Sequence[tuple[str, str, str, str, str, int]] = (
    ("Introduction to Web Development", "Dr. Sarah Williams", "10:00 AM", "Room A",
     "Learn the basics of modern web development", 30),
    ("Database Design Best Practices", "Prof. Michael Chen", "2:00 PM", "Room B",
     "Explore database design patterns and optimization", 25),
    ("Node.js Advanced Topics", "Alex Rodriguez", "4:00 PM", "Room C",
     "Deep dive into Node.js performance and scalability", 40),
)

TABLES = ("attendees", "sessions", "registrations")


# Quoted strings, line comments and ';' are the only tokens that matter when splitting.
_SQL_TOKEN = re.compile(r"""'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*"|--[^\n]*|;|[^'";-]+|.""", re.DOTALL)

# The target database comes from DB_CONFIG, not from the file.
_DATABASE_SELECTION = re.compile(r"(?i)^(?:CREATE\s+DATABASE|USE)\b")


def split_sql(sql: str) -> list[str]:
    """Split a schema file into executable statements.

    Drops `--` comments and any CREATE DATABASE / USE statement.
    """

    statements: list[str] = []
    current: list[str] = []
    for token in _SQL_TOKEN.findall(sql):
        if token.startswith("--"):
            continue
        if token == ";":
            statements.append("".join(current).strip())
            current = []
        else:
            current.append(token)
    statements.append("".join(current).strip())
    return [s for s in statements if s and not _DATABASE_SELECTION.match(s)]


@contextmanager
def _connect(target: DBConfig, *, with_database: bool = True, dictionary: bool = False) -> Iterator:
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    try:
        conn = mysql.connector.connect(**kwargs)
    except mysql.connector.Error as e:
        raise PersistenceError(f"Cannot connect to database {target.describe()}: {e}") from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield cur
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    with _connect(target, with_database=False) as cur:
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    statements = split_sql(Path(schema_path).read_text(encoding="utf-8"))

    with _connect(target) as cur:
        for stmt in statements:
            cur.execute(stmt)
    logger.info("Schema applied to %s", target.describe())


def ensure_sample_data(db_config: dict) -> None:
    """Insert the demo attendees and sessions; safe to call repeatedly."""

    target = DBConfig.from_dict(db_config)
    with _connect(target, dictionary=True) as cur:
        for name, email, phone in SAMPLE_ATTENDEES:
            cur.execute(
                """
                INSERT INTO attendees(name, email, phone)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name), phone=VALUES(phone)
                """,
                (name, email, phone),
            )

        for title, speaker, time_s, location, description, capacity in SAMPLE_SESSIONS:
            cur.execute("SELECT session_id FROM sessions WHERE title=%s", (title,))
            if cur.fetchone():
                continue
            cur.execute(
                """
                INSERT INTO sessions(title, speaker, `time`, location, description, capacity)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (title, speaker, time_s, location, description, capacity),
            )
    logger.info("Sample data ready in %s", target.describe())


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    with _connect(target) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]


def describe_table(db_config: dict, table: str) -> list[dict]:
    if table not in TABLES:
        raise ValueError(f"Unsupported table: {table}")
    target = DBConfig.from_dict(db_config)
    with _connect(target, dictionary=True) as cur:
        cur.execute(f"SHOW COLUMNS FROM {table}")
        return list(cur.fetchall())


def dump_rows(db_config: dict, query: str) -> list[dict]:
    target = DBConfig.from_dict(db_config)
    with _connect(target, dictionary=True) as cur:
        cur.execute(query)
        return list(cur.fetchall())
