# wristtrack

A library for working with activity data from Huami-style fitness watches
(Amazfit Bip and relatives). It decodes the raw detail stream of a workout
into a track of timestamped points, exports that track as GPX or TCX, reads
battery status packets, and stores workout summaries in SQLite. It also holds
small pieces of bookkeeping useful to a program that relays phone
notifications to a watch.

## Installation

```
pip install .
```

## Modules

- `wristtrack.activitykind`: the `ActivityKind` enumeration (bit-flag
  values), `from_bip_type()` to map a watch's sport code to a kind (unknown
  codes give `ActivityKind.ACTIVITY`), and `kind_to_string()` for a kind's
  display name (`"Unknown"` for values that are not a kind).
- `wristtrack.models`: `GeoCoordinate` (latitude, longitude, altitude; NaN
  means not set, and `is_valid()` checks that latitude and longitude are set
  and in range), `ActivityCoordinate` (a track point with coordinate,
  timestamp and heart rate) and `ActivitySample` (kind, intensity, steps,
  heart rate).
- `wristtrack.battery`: `BipBatteryInfo(data)` decodes a battery status
  packet. `state()` returns a `BatteryState` (`NORMAL`, `CHARGING`, or
  `UNKNOWN`); `current_charge_level_percent()` and
  `last_charge_level_percent()` return 50 when the packet is too short;
  `num_charges()` is always -1.
- `wristtrack.database`: `open_database(path)` opens an SQLite file
  (creating its directory if needed; `":memory:"` works too) and
  `create_tables(conn)` creates the `mi_band_activity`, `sports_data` and
  `sports_meta` tables if they are missing.
- `wristtrack.summary`: `ActivitySummary` describes one workout.
  `add_meta_data(key, value, unit)` attaches a `MetaData` entry and
  `save_to_database(conn)` writes the summary and its entries in one
  transaction, sets `id` and returns it. Start and end times must be set,
  otherwise `ValueError` is raised.
- `wristtrack.detailparser`: `BipActivityDetailParser(summary,
  skip_counter_byte=False)` decodes detail packets with `parse(data)`; the
  decoded points are in `track`. `to_gpx()` and `to_tcx()` render the track,
  with times in UTC. Truncated packets raise `ValueError`, as does a summary
  without a start time. `huami_to_degrees()` converts a raw position value to
  decimal degrees.
- `wristtrack.notifications`:
  - `NotificationBuffer` keeps the newest `WatchNotification`s (10 by
    default); `push()` adds one and `drain()` removes and returns them all,
    oldest first.
  - `AlertFilter.should_send(sender, subject, message, allow_duplicate)`
    rejects an alert identical to the previous one unless duplicates are
    allowed.
  - `BatteryMonitor.update(level, notify_enabled)` returns a low-battery
    message when the level falls to 10 or below.
  - `RefreshScheduler.due(now, weather_minutes, calendar_minutes,
    auto_sync)` returns the set of `RefreshTask`s due and marks them as run;
    activity sync is due hourly when `auto_sync` is on.
  - `button_action(presses, double_action, triple_action, quad_action)`
    picks the configured action for 2, 3 or 4 presses, `"action-none"`
    otherwise.
  - `supports_feature(supported, feature)` tests feature bit flags.

## Example

```python
from datetime import datetime, timezone

from wristtrack.activitykind import ActivityKind
from wristtrack.database import open_database
from wristtrack.detailparser import BipActivityDetailParser
from wristtrack.summary import ActivitySummary

summary = ActivitySummary(
    name="Morning run",
    activity_kind=ActivityKind.RUNNING,
    start_time=datetime(2024, 5, 1, 7, 0, tzinfo=timezone.utc),
    end_time=datetime(2024, 5, 1, 7, 30, tzinfo=timezone.utc),
)
parser = BipActivityDetailParser(summary)
parser.parse(raw_detail_bytes)
summary.gpx = parser.to_gpx()

summary.add_meta_data("distance", "5012", "m")
conn = open_database("activities.db")
try:
    summary.save_to_database(conn)
finally:
    conn.close()
```

## What it does not do

wristtrack does not talk to watches: there is no Bluetooth connection,
pairing, firmware update or data download, and no background service or
command-line program. It works on data you have already obtained from a
device. Weather, calendar, music and navigation forwarding are not included;
`notifications` only decides what to send and when.

## Running the tests

```
pip install .[test]
pytest
```