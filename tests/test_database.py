import sqlite3

import pytest

from loginacct.database import DatabaseError, ensure_schema, open_database


def test_open_database_creates_file(tmp_path):
    path = tmp_path / "accounts.db"
    conn = open_database(path)
    try:
        assert path.exists()
        assert conn.execute("SELECT 1").fetchone()[0] == 1
    finally:
        conn.close()


def test_open_database_on_directory_fails(tmp_path):
    with pytest.raises(DatabaseError):
        open_database(tmp_path)


def test_open_database_missing_parent_fails(tmp_path):
    with pytest.raises(DatabaseError):
        open_database(tmp_path / "missing" / "accounts.db")


def test_ensure_schema_creates_userinfo_columns(tmp_path):
    conn = open_database(tmp_path / "accounts.db")
    try:
        ensure_schema(conn)
        columns = [row[1] for row in conn.execute("PRAGMA table_info(UserInfo)")]
        assert columns == ["username", "password", "Image_Name", "Image_Data"]
    finally:
        conn.close()


def test_ensure_schema_is_idempotent_and_keeps_rows(tmp_path):
    conn = open_database(tmp_path / "accounts.db")
    try:
        ensure_schema(conn)
        with conn:
            conn.execute("INSERT INTO UserInfo(username) VALUES (?)", ("alice",))
        ensure_schema(conn)
        count = conn.execute("SELECT COUNT(*) FROM UserInfo").fetchone()[0]
        assert count == 1
    finally:
        conn.close()


def test_ensure_schema_on_closed_connection_fails(tmp_path):
    conn = open_database(tmp_path / "accounts.db")
    conn.close()
    with pytest.raises((DatabaseError, sqlite3.ProgrammingError)):
        ensure_schema(conn)