"""Summary of one recorded sport activity and its storage."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import datetime

from wristtrack.activitykind import ActivityKind

_HUAMI_DIVISOR = 3000000.0


@dataclass(frozen=True)
class MetaData:
    """One key/value/unit entry attached to a sport activity."""

    key: str
    value: str
    unit: str


@dataclass
class ActivitySummary:
    """Summary data of a sport activity as fetched from the watch."""

    name: str = ""
    version: int = 0
    activity_kind: ActivityKind = ActivityKind.UNKNOWN
    start_time: datetime | None = None
    end_time: datetime | None = None
    base_latitude: int = 0
    base_longitude: int = 0
    base_altitude: int = 0
    profile_id: int = 0
    device_id: int = 0
    gpx: str = ""
    id: int = 0
    meta_data: list[MetaData] = field(default_factory=list)

    def add_meta_data(self, key: str, value: str, unit: str) -> None:
        """Attach a key/value/unit entry to the summary."""
        self.meta_data.append(MetaData(key, value, unit))

    def save_to_database(self, conn: sqlite3.Connection) -> int:
        """Store the summary and its meta data in one transaction.

        Sets and returns the new record id. On any database error nothing
        is stored and the error is raised.
        """
        if self.start_time is None or self.end_time is None:
            raise ValueError("start_time and end_time must be set before saving")

        with conn:
            cursor = conn.execute(
                "INSERT INTO sports_data (name, version, start_timestamp, "
                "start_timestamp_dt, end_timestamp, end_timestamp_dt, device_id, "
                "user_id, kind, base_longitude, base_latitude, base_altitude, gpx) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    self.name,
                    self.version,
                    int(self.start_time.timestamp()),
                    self.start_time.isoformat(),
                    int(self.end_time.timestamp()),
                    self.end_time.isoformat(),
                    self.device_id,
                    self.profile_id,
                    int(self.activity_kind),
                    self.base_longitude / _HUAMI_DIVISOR,
                    self.base_latitude / _HUAMI_DIVISOR,
                    self.base_altitude,
                    self.gpx,
                ),
            )
            record_id = cursor.lastrowid
            conn.executemany(
                "INSERT INTO sports_meta (sport_id, key, value, unit) VALUES (?, ?, ?, ?)",
                [(record_id, m.key, m.value, m.unit) for m in self.meta_data],
            )
        self.id = record_id
        return record_id