import sqlite3

import pytest

from wristtrack.database import create_tables, open_database


def _tables(conn):
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


def _columns(conn, table):
    return [row[1] for row in conn.execute(f"PRAGMA table_info({table})")]


def test_open_memory_database_has_all_tables():
    conn = open_database(":memory:")
    assert _tables(conn) == {"mi_band_activity", "sports_data", "sports_meta"}


def test_sports_data_columns():
    conn = open_database(":memory:")
    assert _columns(conn, "sports_data") == [
        "id",
        "name",
        "version",
        "start_timestamp",
        "start_timestamp_dt",
        "end_timestamp",
        "end_timestamp_dt",
        "kind",
        "base_longitude",
        "base_latitude",
        "base_altitude",
        "device_id",
        "user_id",
        "gpx",
    ]


def test_activity_and_meta_columns():
    conn = open_database(":memory:")
    assert _columns(conn, "mi_band_activity") == [
        "id",
        "timestamp",
        "timestamp_dt",
        "device_id",
        "user_id",
        "raw_intensity",
        "steps",
        "raw_kind",
        "heartrate",
    ]
    assert _columns(conn, "sports_meta") == ["id", "sport_id", "key", "value", "unit"]


def test_create_tables_is_idempotent_and_keeps_data():
    conn = sqlite3.connect(":memory:")
    create_tables(conn)
    with conn:
        conn.execute("INSERT INTO sports_meta (sport_id, key, value, unit) VALUES (1, 'k', 'v', 'u')")
    create_tables(conn)
    assert conn.execute("SELECT key, value, unit FROM sports_meta").fetchall() == [("k", "v", "u")]


def test_open_database_creates_file_and_parents(tmp_path):
    path = tmp_path / "nested" / "dir" / "store.db"
    conn = open_database(path)
    conn.close()
    assert path.exists()
    reopened = open_database(path)
    assert "sports_data" in _tables(reopened)


def test_ids_autoincrement():
    conn = open_database(":memory:")
    with conn:
        first = conn.execute("INSERT INTO sports_data (name) VALUES ('a')").lastrowid
        second = conn.execute("INSERT INTO sports_data (name) VALUES ('b')").lastrowid
    assert second > first


def test_create_tables_on_closed_connection_raises():
    conn = sqlite3.connect(":memory:")
    conn.close()
    with pytest.raises(sqlite3.ProgrammingError):
        create_tables(conn)