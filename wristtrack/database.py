"""SQLite storage for activity samples and sports summaries."""

from __future__ import annotations

import sqlite3
from pathlib import Path

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS mi_band_activity (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        timestamp INTEGER,
        timestamp_dt TEXT,
        device_id INTEGER,
        user_id INTEGER,
        raw_intensity INTEGER,
        steps INTEGER,
        raw_kind INTEGER,
        heartrate INTEGER
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS sports_data (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT,
        version INTEGER,
        start_timestamp INTEGER,
        start_timestamp_dt TEXT,
        end_timestamp INTEGER,
        end_timestamp_dt TEXT,
        kind INTEGER,
        base_longitude REAL,
        base_latitude REAL,
        base_altitude REAL,
        device_id INTEGER,
        user_id INTEGER,
        gpx TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS sports_meta (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        sport_id INTEGER,
        key TEXT,
        value TEXT,
        unit TEXT
    )
    """,
)


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the activity, sports and sports meta tables if they are missing."""
    with conn:
        for statement in _SCHEMA:
            conn.execute(statement)


def open_database(path: str | Path) -> sqlite3.Connection:
    """Open (creating if needed) the database at ``path`` with all tables in place."""
    if str(path) != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    try:
        create_tables(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn