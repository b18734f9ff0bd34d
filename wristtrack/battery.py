"""Decoding of the battery information characteristic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_UNKNOWN_LEVEL = 50


class BatteryState(IntEnum):
    """Charging state reported by the watch."""

    UNKNOWN = -1
    NORMAL = 0
    CHARGING = 1


def _signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


@dataclass
class BipBatteryInfo:
    """Battery information payload as read from the watch."""

    data: bytes = b""

    def state(self) -> BatteryState:
        """Charging state, or ``UNKNOWN`` if the payload does not say."""
        if len(self.data) >= 3:
            try:
                return BatteryState(_signed(self.data[2]))
            except ValueError:
                pass
        return BatteryState.UNKNOWN

    def current_charge_level_percent(self) -> int:
        """Current charge level; 50 when the payload is too short."""
        if len(self.data) >= 2:
            return _signed(self.data[1])
        return _UNKNOWN_LEVEL

    def last_charge_level_percent(self) -> int:
        """Charge level at the last charge; 50 when the payload is too short."""
        if len(self.data) >= 20:
            return _signed(self.data[19])
        return _UNKNOWN_LEVEL

    def num_charges(self) -> int:
        """Number of charges; the watch does not report it, so always -1."""
        return -1