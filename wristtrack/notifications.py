"""Alert bookkeeping, button actions and periodic refresh scheduling."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

BUFFER_CAPACITY = 10
LOW_BATTERY_THRESHOLD = 10
LOW_BATTERY_SENDER = "Amazfish"
LOW_BATTERY_SUBJECT = "Low Battery"
ACTIVITY_SYNC_SECONDS = 60 * 60

ACTION_NONE = "action-none"
ACTION_MUSIC_NEXT = "action-music-next"
ACTION_MUSIC_PREV = "action-music-prev"
ACTION_VOL_UP = "action-vol-up"
ACTION_VOL_DOWN = "action-vol-down"
ACTION_CUSTOM = "action-custom"


@dataclass(frozen=True)
class WatchNotification:
    """A phone notification waiting to be shown on the watch."""

    id: int
    app_name: str
    summary: str
    body: str


class NotificationBuffer:
    """Holds notifications while the watch is not ready; keeps only the newest."""

    def __init__(self, capacity: int = BUFFER_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._queue: deque[WatchNotification] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[WatchNotification]:
        return iter(self._queue)

    def push(self, notification: WatchNotification) -> None:
        """Queue a notification, dropping the oldest one when over capacity."""
        self._queue.append(notification)
        if len(self._queue) > self.capacity:
            self._queue.popleft()

    def drain(self) -> list[WatchNotification]:
        """Remove and return every queued notification, oldest first."""
        items = list(self._queue)
        self._queue.clear()
        return items


class AlertFilter:
    """Suppresses an alert identical to the one sent just before it."""

    def __init__(self) -> None:
        self._last: tuple[str, str, str] | None = None

    def should_send(
        self, sender: str, subject: str, message: str, allow_duplicate: bool = False
    ) -> bool:
        """Return whether the alert should go out, and remember it if so."""
        key = (sender, subject, message)
        if key == self._last and not allow_duplicate:
            return False
        self._last = key
        return True


@dataclass
class BatteryMonitor:
    """Tracks the battery level and decides when to warn about it running low."""

    last_level: int = 0

    def update(self, level: int, notify_enabled: bool) -> str | None:
        """Record a new level; return the low-battery message to send, if any.

        The message reports the level last seen before this update.
        """
        if level == self.last_level:
            return None
        alert = None
        if level <= LOW_BATTERY_THRESHOLD and level < self.last_level and notify_enabled:
            alert = f"Battery level now {self.last_level}%"
        self.last_level = level
        return alert


class RefreshTask(Enum):
    """Periodic jobs the daemon runs."""

    WEATHER = "weather"
    CALENDAR = "calendar"
    ACTIVITY = "activity"


@dataclass
class RefreshScheduler:
    """Remembers when each periodic job last ran and reports which are due."""

    last_weather: datetime = field(default_factory=datetime.now)
    last_calendar: datetime | None = None
    last_activity: datetime | None = None

    def __post_init__(self) -> None:
        if self.last_calendar is None:
            self.last_calendar = self.last_weather
        if self.last_activity is None:
            self.last_activity = self.last_weather

    def due(
        self,
        now: datetime,
        weather_minutes: int,
        calendar_minutes: int,
        auto_sync: bool,
    ) -> set[RefreshTask]:
        """Return the jobs due at ``now`` and mark them as run."""
        tasks: set[RefreshTask] = set()
        if (now - self.last_weather).total_seconds() >= weather_minutes * 60:
            self.last_weather = now
            tasks.add(RefreshTask.WEATHER)
        if (now - self.last_calendar).total_seconds() >= calendar_minutes * 60:
            self.last_calendar = now
            tasks.add(RefreshTask.CALENDAR)
        if auto_sync and (now - self.last_activity).total_seconds() >= ACTIVITY_SYNC_SECONDS:
            self.last_activity = now
            tasks.add(RefreshTask.ACTIVITY)
        return tasks


def button_action(
    presses: int, double_action: str, triple_action: str, quad_action: str
) -> str:
    """Return the configured action for a number of button presses."""
    actions = {2: double_action, 3: triple_action, 4: quad_action}
    return actions.get(presses, ACTION_NONE)


def supports_feature(supported: int, feature: int) -> bool:
    """True when every bit of ``feature`` is set in ``supported``."""
    return (supported & feature) == feature