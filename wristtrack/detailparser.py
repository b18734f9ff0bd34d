"""Decoding of sport detail data into a track, with GPX and TCX export."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from wristtrack.activitykind import kind_to_string
from wristtrack.models import ActivityCoordinate, GeoCoordinate
from wristtrack.summary import ActivitySummary

HUAMI_TO_DECIMAL_DEGREES_DIVISOR = 3000000.0

TYPE_GPS = 0x00
TYPE_HR = 0x01
TYPE_UNKNOWN2 = 0x02
TYPE_PAUSE = 0x03
TYPE_SPEED4 = 0x04
TYPE_SPEED5 = 0x05
TYPE_GPS_SPEED6 = 0x06

_PAYLOAD_SIZE = 6
_COUNTER_STRIDE = 17


def huami_to_degrees(value: int) -> float:
    """Convert a raw position value from the watch to decimal degrees."""
    return value / HUAMI_TO_DECIMAL_DEGREES_DIVISOR


def _int16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 2], "little", signed=True)


def _number(value: float) -> str:
    return format(value, ".10g")


def _iso_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class BipActivityDetailParser:
    """Builds an activity track from the detail packets of one sport activity."""

    def __init__(self, summary: ActivitySummary, skip_counter_byte: bool = False) -> None:
        if summary.start_time is None:
            raise ValueError("the summary has no start time")
        self.summary = summary
        self.skip_counter_byte = skip_counter_byte
        self._base_longitude = summary.base_longitude
        self._base_latitude = summary.base_latitude
        self._base_altitude = summary.base_altitude
        self._base_date: datetime = summary.start_time
        self._last_heart_rate = 0
        self._last_point = ActivityCoordinate()
        self._track: list[ActivityCoordinate] = []
        self._pending: list[ActivityCoordinate] = []

    @property
    def track(self) -> list[ActivityCoordinate]:
        """The track points decoded so far."""
        return list(self._track)

    def parse(self, data: bytes) -> None:
        """Decode a block of detail packets and add them to the track."""
        i = 0
        total_offset = 0
        last_offset = 0
        have_gps = False
        length = len(data)

        while i < length:
            if self.skip_counter_byte and i % _COUNTER_STRIDE == 0:
                i += 1
            if i + 2 > length:
                raise ValueError(f"truncated packet header at offset {i}")
            packet_type = data[i]
            time_offset = data[i + 1]
            i += 2

            # The offset byte wraps; it always grows relative to the previous one.
            if last_offset <= time_offset:
                time_offset -= last_offset
                last_offset += time_offset
            else:
                last_offset = time_offset
            total_offset += time_offset

            if packet_type == TYPE_GPS:
                have_gps = True
                self._consume_gps(data, i, total_offset)
            elif packet_type == TYPE_HR:
                self._consume_heart_rate(data, i)
                if not have_gps:
                    self._track.append(
                        ActivityCoordinate(
                            timestamp=self._make_absolute(total_offset),
                            heart_rate=self._last_heart_rate,
                        )
                    )
            i += _PAYLOAD_SIZE

    def _require_payload(self, data: bytes, offset: int) -> None:
        if offset + _PAYLOAD_SIZE > len(data):
            raise ValueError(f"truncated packet payload at offset {offset}")

    def _consume_gps(self, data: bytes, offset: int, time_offset: int) -> None:
        self._require_payload(data, offset)
        self._base_longitude += _int16(data, offset)
        self._base_latitude += _int16(data, offset + 2)
        self._base_altitude += _int16(data, offset + 4)

        coordinate = GeoCoordinate(
            latitude=huami_to_degrees(self._base_latitude),
            longitude=huami_to_degrees(self._base_longitude),
            altitude=float(self._base_altitude),
        )
        point = self._point_for(time_offset)
        point.coordinate = coordinate
        point.heart_rate = self._last_heart_rate
        self._add(point)

    def _consume_heart_rate(self, data: bytes, offset: int) -> None:
        self._require_payload(data, offset)
        values = data[offset:offset + _PAYLOAD_SIZE]
        if not any(values[1:]):
            self._last_heart_rate = values[0]
        else:
            self._last_heart_rate = values[5]

    def _make_absolute(self, seconds: int) -> datetime:
        return self._base_date + timedelta(seconds=seconds)

    def _point_for(self, seconds: int) -> ActivityCoordinate:
        moment = self._make_absolute(seconds)
        if self._last_point.timestamp == moment:
            return replace(self._last_point)
        return ActivityCoordinate(timestamp=moment)

    def _add(self, point: ActivityCoordinate) -> None:
        if point.coordinate == self._last_point.coordinate:
            return
        if point.timestamp == self._last_point.timestamp or not self._pending:
            self._pending.append(point)
        else:
            # Spread points that shared one timestamp over the elapsed interval.
            duration_ms = int(
                (point.timestamp - self._pending[0].timestamp) / timedelta(milliseconds=1)
            )
            interval_ms = int(duration_ms / len(self._pending))
            for index, pending in enumerate(self._pending):
                pending.timestamp = pending.timestamp + timedelta(
                    milliseconds=index * interval_ms
                )
            self._track.extend(self._pending)
            self._pending = [point]
        self._last_point = point

    def to_gpx(self) -> str:
        """Render the track as a GPX document."""
        lines = [
            '<?xml version="1.0" standalone="yes"?>',
            '<?xml-stylesheet type="text/xsl" href="details.xsl"?>',
            "<gpx",
            'version="1.1"',
            'creator="wristtrack"',
            'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"',
            'xmlns="http://www.topografix.com/GPX/1/1"',
            'xmlns:topografix="http://www.topografix.com/GPX/Private/TopoGrafix/0/1"',
            'xsi:schemaLocation="http://www.topografix.com/GPX/1/1 '
            "http://www.topografix.com/GPX/1/1/gpx.xsd "
            "http://www.garmin.com/xmlschemas/GpxExtensions/v3 "
            "http://www.garmin.com/xmlschemas/GpxExtensionsv3.xsd "
            "http://www.garmin.com/xmlschemas/TrackPointExtension/v1 "
            'http://www.garmin.com/xmlschemas/TrackPointExtensionv1.xsd"',
            'xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">',
            "<metadata>",
            f"<name>{self.summary.name}</name>",
            "<desc></desc>",
            "<extensions>",
            f'<meerun activity="{kind_to_string(self.summary.activity_kind).lower()}" />',
            "</extensions>",
            "</metadata>",
            "<trk>",
            "<trkseg>",
        ]
        for point in self._track:
            coordinate = point.coordinate
            if not coordinate.is_valid():
                continue
            lines += [
                f'<trkpt lat="{_number(coordinate.latitude)}" '
                f'lon="{_number(coordinate.longitude)}">',
                f"<ele>{_number(coordinate.altitude)}</ele>",
                f"<time>{_iso_utc(point.timestamp)}</time>",
                "<extensions><gpxtpx:TrackPointExtension><gpxtpx:hr>"
                f"{point.heart_rate}"
                "</gpxtpx:hr></gpxtpx:TrackPointExtension></extensions>",
                "</trkpt>",
            ]
        lines += ["</trkseg>", "</trk>", "</gpx>"]
        return "\n".join(lines) + "\n"

    def to_tcx(self) -> str:
        """Render the track as a TCX document."""
        lines = [
            '<?xml version="1.0" standalone="yes"?>',
            "<TrainingCenterDatabase",
            'xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"',
            'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"',
            'xsi:schemaLocation="http://www.garmin.com/xmlschemas/ActivityExtension/v2',
            "http://www.garmin.com/xmlschemas/ActivityExtensionv2.xsd",
            "http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2",
            'http://www.garmin.com/xmlschemas/TrainingCenterDatabasev2.xsd">',
            "<Activities>",
            f'<Activity Sport="{kind_to_string(self.summary.activity_kind)}">',
            f"<Id>{self.summary.name}</Id>",
            f'<Lap StartTime="{_iso_utc(self._base_date)}">',
            "<Track>",
        ]
        for point in self._track:
            lines += ["<Trackpoint>", f"<Time>{_iso_utc(point.timestamp)}</Time>"]
            coordinate = point.coordinate
            if coordinate.is_valid():
                lines += [
                    "  <Position>",
                    f"    <LatitudeDegrees>{_number(coordinate.latitude)}</LatitudeDegrees>",
                    f"    <LongitudeDegrees>{_number(coordinate.longitude)}</LongitudeDegrees>",
                    "  </Position>",
                    f"  <AltitudeMeters>{_number(coordinate.altitude)}</AltitudeMeters>",
                ]
            lines += [
                '<HeartRateBpm xsi:type="HeartRateInBeatsPerMinute_t"><Value>'
                f"{point.heart_rate}</Value></HeartRateBpm>",
                "</Trackpoint>",
            ]
        lines += [
            "</Track>",
            "</Lap>",
            "</Activity>",
            "</Activities>",
            "</TrainingCenterDatabase>",
        ]
        return "\n".join(lines) + "\n"