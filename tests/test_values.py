"""Tests for value helpers, lookup tables and the Roland checksum."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from gx700.errors import IndexOutOfRange
from gx700.utils.checksum import (
    calculate_roland_checksum,
    message_checksum_matches,
    verify_checksum,
)
from gx700.utils.tables import (
    EQ_MID_FREQUENCIES,
    HARMONIST_INTERVALS,
    HIGH_CUT_FREQUENCIES,
    LOW_CUT_FREQUENCIES,
    SECTION_NAMES,
    get_section_name,
)
from gx700.utils.values import (
    PanPair,
    SignedValue,
    format_signed,
    packed_magnitude,
    pan,
    signed_offset,
    table_lookup,
)


class TestSignedValues:
    @pytest.mark.parametrize("bias", [20, 24, 50])
    def test_offset_plus_bias_is_raw(self, bias):
        for raw in range(128):
            assert signed_offset(raw, bias) + bias == raw

    def test_format(self):
        assert format_signed(10) == "+10"
        assert format_signed(-4) == "-4"
        assert format_signed(0) == "0"

    def test_signed_value(self):
        tone = SignedValue(60, 50)
        assert tone.value == 10
        assert str(tone) == "+10"
        assert int(tone) == 10

    def test_signed_value_negative(self):
        gain = SignedValue(8, 20)
        assert gain.value == -12
        assert str(gain) == "-12"

    def test_signed_value_center(self):
        assert str(SignedValue(24, 24)) == "0"


class TestPackedMagnitude:
    def test_base_128(self):
        assert packed_magnitude(1, 10, 128) == 138

    def test_base_256(self):
        assert packed_magnitude(1, 10, 256) == 266

    def test_high_zero(self):
        assert packed_magnitude(0, 99, 128) == 99


class TestPan:
    def test_sides_sum_to_100(self):
        for raw in range(101):
            left, right = pan(raw)
            assert left + right == 100

    def test_extremes(self):
        assert pan(0) == (100, 0)
        assert pan(100) == (0, 100)
        assert pan(50) == (50, 50)

    def test_pan_pair(self):
        p = PanPair(30)
        assert p.left == 70
        assert p.right == 30
        assert str(p) == "L70:R30"


class TestTableLookup:
    def test_in_range(self):
        assert table_lookup(("a", "b", "c"), 2) == "c"

    def test_out_of_range(self):
        with pytest.raises(IndexOutOfRange) as exc:
            table_lookup(("a", "b"), 2, "reverb type")
        assert exc.value.field == "reverb type"
        assert exc.value.raw == 2
        assert exc.value.table_size == 2

    def test_negative(self):
        with pytest.raises(IndexOutOfRange):
            table_lookup(("a", "b"), -1)


class TestTables:
    def test_section_names(self):
        assert len(SECTION_NAMES) == 14
        assert get_section_name(0) == "Header"
        assert get_section_name(9) == "Modulation"
        assert get_section_name(13) == "Reverb"

    def test_unknown_section_name(self):
        assert get_section_name(0x20) == "Unknown (0x20)"

    def test_eq_frequencies(self):
        assert EQ_MID_FREQUENCIES[0] == "100Hz"
        assert EQ_MID_FREQUENCIES[-1] == "10.0kHz"

    def test_cut_filters(self):
        assert LOW_CUT_FREQUENCIES[0] == "Flat"
        assert HIGH_CUT_FREQUENCIES[6] == "2.00kHz"
        assert HIGH_CUT_FREQUENCIES[-1] == "Flat"

    def test_harmonist_intervals_symmetric(self):
        """Tonic sits in the middle of the -2oct..+2oct range."""
        assert HARMONIST_INTERVALS[14] == "Tonic"
        assert HARMONIST_INTERVALS[0] == "-2oct"
        assert HARMONIST_INTERVALS[-1] == "+2oct"
        assert len(HARMONIST_INTERVALS) == 29


class TestRolandChecksum:
    def test_known_value(self):
        # Address 00 00 01 00, data 00 01 32 -> sum 0x34 = 52 -> 128 - 52 = 76
        data = bytes([0x00, 0x00, 0x01, 0x00, 0x00, 0x01, 0x32])
        assert calculate_roland_checksum(data) == 76

    def test_zero_sum(self):
        assert calculate_roland_checksum(bytes([0x00, 0x00])) == 0
        assert calculate_roland_checksum(bytes([0x40, 0x40])) == 0

    def test_verify(self):
        data = bytes([0x10, 0x20])
        assert verify_checksum(data, calculate_roland_checksum(data))
        assert not verify_checksum(data, 0x7F)

    def test_message(self, build_message):
        msg = build_message(12, {11: 40, 12: 90})
        assert message_checksum_matches(msg)

    def test_message_too_short(self):
        assert not message_checksum_matches(bytes([0xF0, 0xF7]))
