from __future__ import annotations

from conference_registration.database.bootstrap import SCHEMA_PATH, split_sql


def test_split_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\"; SELECT 1"

    assert split_sql(sql) == [
        "INSERT INTO t VALUES ('a;b')",
        'SELECT "x;y"',
        "SELECT 1",
    ]


def test_split_drops_comments_and_database_selection():
    sql = """
    -- header; with a semicolon
    CREATE DATABASE IF NOT EXISTS other_db;
    use other_db;
    INSERT INTO t VALUES ('-- kept', 'it''s');
    """

    assert split_sql(sql) == ["INSERT INTO t VALUES ('-- kept', 'it''s')"]


def test_schema_file_yields_three_tables_with_constraints():
    statements = split_sql(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert len(statements) == 3
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    registrations = statements[2]
    assert "UNIQUE KEY uq_registrations_attendee_session (attendee_id, session_id)" in registrations
    assert registrations.count("ON DELETE CASCADE") == 2
    assert "UNIQUE KEY uq_attendees_email (email)" in statements[0]
    assert "DEFAULT 50" in statements[1]
