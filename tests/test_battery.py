import pytest

from wristtrack.battery import BatteryState, BipBatteryInfo


def _payload(level=0, state=0, last=0, length=20):
    data = bytearray(length)
    if length > 1:
        data[1] = level
    if length > 2:
        data[2] = state
    if length > 19:
        data[19] = last
    return bytes(data)


def test_empty_payload_defaults():
    info = BipBatteryInfo()
    assert info.state() is BatteryState.UNKNOWN
    assert info.current_charge_level_percent() == 50
    assert info.last_charge_level_percent() == 50
    assert info.num_charges() == -1


def test_current_level_read_from_second_byte():
    info = BipBatteryInfo(_payload(level=87))
    assert info.current_charge_level_percent() == 87


def test_last_level_read_from_byte_nineteen():
    info = BipBatteryInfo(_payload(level=40, last=95))
    assert info.last_charge_level_percent() == 95


def test_short_payload_has_no_last_level():
    info = BipBatteryInfo(_payload(level=40, length=19))
    assert info.current_charge_level_percent() == 40
    assert info.last_charge_level_percent() == 50


def test_two_byte_payload_has_level_but_no_state():
    info = BipBatteryInfo(bytes([0, 33]))
    assert info.current_charge_level_percent() == 33
    assert info.state() is BatteryState.UNKNOWN


@pytest.mark.parametrize(
    "raw, expected",
    [(0, BatteryState.NORMAL), (1, BatteryState.CHARGING), (2, BatteryState.UNKNOWN), (200, BatteryState.UNKNOWN)],
)
def test_state(raw, expected):
    assert BipBatteryInfo(_payload(state=raw)).state() is expected


def test_data_can_be_replaced():
    info = BipBatteryInfo(_payload(level=10))
    info.data = _payload(level=60)
    assert info.current_charge_level_percent() == 60


def test_num_charges_is_never_reported():
    assert BipBatteryInfo(_payload(level=10)).num_charges() == -1