"""Activity kinds recorded by the watch and their display names."""

from __future__ import annotations

from enum import IntEnum


class ActivityKind(IntEnum):
    """Kind of activity, stored as a bit flag."""

    NOT_MEASURED = -1
    UNKNOWN = 0x00000000
    ACTIVITY = 0x00000001
    LIGHT_SLEEP = 0x00000002
    DEEP_SLEEP = 0x00000004
    NOT_WORN = 0x00000008
    RUNNING = 0x00000010
    WALKING = 0x00000020
    SWIMMING = 0x00000040
    CYCLING = 0x00000080
    TREADMILL = 0x00000100
    EXERCISE = 0x00000200
    OPEN_SWIMMING = 0x00000400
    INDOOR_CYCLING = 0x00000800
    ELLIPTICAL_TRAINER = 0x00001000
    JUMP_ROPE = 0x00002000
    YOGA = 0x00004000


_BIP_TYPES = {
    1: ActivityKind.RUNNING,
    2: ActivityKind.TREADMILL,
    3: ActivityKind.WALKING,
    4: ActivityKind.CYCLING,
    5: ActivityKind.EXERCISE,
    6: ActivityKind.SWIMMING,
    7: ActivityKind.OPEN_SWIMMING,
    8: ActivityKind.INDOOR_CYCLING,
    9: ActivityKind.ELLIPTICAL_TRAINER,
    21: ActivityKind.JUMP_ROPE,
    60: ActivityKind.YOGA,
}

_NAMES = {
    ActivityKind.NOT_MEASURED: "NotMeasured",
    ActivityKind.UNKNOWN: "Unknown",
    ActivityKind.ACTIVITY: "Activity",
    ActivityKind.LIGHT_SLEEP: "LightSleep",
    ActivityKind.DEEP_SLEEP: "DeepSleep",
    ActivityKind.NOT_WORN: "NotWorn",
    ActivityKind.RUNNING: "Running",
    ActivityKind.WALKING: "Walking",
    ActivityKind.SWIMMING: "Swimming",
    ActivityKind.CYCLING: "Cycling",
    ActivityKind.TREADMILL: "Treadmill",
    ActivityKind.EXERCISE: "Exercise",
    ActivityKind.OPEN_SWIMMING: "Open Swimming",
    ActivityKind.INDOOR_CYCLING: "Indoor Cycling",
    ActivityKind.ELLIPTICAL_TRAINER: "Eliptical Trainer",
    ActivityKind.JUMP_ROPE: "Jump Rope",
    ActivityKind.YOGA: "Yoga",
}


def from_bip_type(value: int) -> ActivityKind:
    """Map a sport type code sent by the watch to an activity kind.

    Codes the watch sends that are not known map to ``ACTIVITY``.
    """
    return _BIP_TYPES.get(value, ActivityKind.ACTIVITY)


def kind_to_string(kind: int) -> str:
    """Return the display name of an activity kind, or "Unknown"."""
    try:
        return _NAMES[ActivityKind(kind)]
    except ValueError:
        return "Unknown"