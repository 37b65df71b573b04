# tests/test_units.py

import pytest

from blockwatch.utils.units import format_ether, format_units


@pytest.mark.parametrize("wei, expected", [
    (10 ** 18, "1.0"),
    (0, "0.0"),
    (1, "0.000000000000000001"),
    (1_500_000_000_000_000_000, "1.5"),
    (25 * 10 ** 18, "25.0"),
    (123_456_789_000_000_000_000, "123.456789"),
])
def test_format_ether(wei, expected):
    assert format_ether(wei) == expected


def test_format_ether_accepts_hex_and_decimal_strings():
    assert format_ether("0xde0b6b3a7640000") == "1.0"
    assert format_ether("2000000000000000000") == "2.0"


def test_format_units_gwei():
    assert format_units(1_000_000_000, "gwei") == "1.0"
    assert format_units(1_500_000_000, "gwei") == "1.5"


def test_format_ether_rejects_negative():
    with pytest.raises(ValueError):
        format_ether(-1)
