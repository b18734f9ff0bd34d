"""Plain value types for activity track points and samples."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime


def _same(a: float, b: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    return math.isclose(a, b, rel_tol=1e-12, abs_tol=0.0)


@dataclass(frozen=True, eq=False)
class GeoCoordinate:
    """A geographic position; NaN fields mean "not set"."""

    latitude: float = math.nan
    longitude: float = math.nan
    altitude: float = math.nan

    def is_valid(self) -> bool:
        """True when latitude and longitude are set and within range."""
        if math.isnan(self.latitude) or math.isnan(self.longitude):
            return False
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoCoordinate):
            return NotImplemented
        return (
            _same(self.latitude, other.latitude)
            and _same(self.longitude, other.longitude)
            and _same(self.altitude, other.altitude)
        )


@dataclass
class ActivityCoordinate:
    """One point of an activity track."""

    coordinate: GeoCoordinate = field(default_factory=GeoCoordinate)
    timestamp: datetime | None = None
    heart_rate: int = 0


@dataclass(frozen=True)
class ActivitySample:
    """One activity sample as recorded by the watch."""

    kind: int
    intensity: int
    steps: int
    heart_rate: int