"""Tests for GX-700 envelope validation."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from gx700.errors import (
    DecodeError,
    HeaderMismatch,
    InvalidByteValue,
    InvalidEnableFlag,
    LengthMismatch,
    MissingTerminator,
    ReservedByteNonZero,
    TooShort,
    UnknownSectionId,
)
from gx700.sysex.envelope import EXPECTED_LENGTHS, MIN_LENGTH, expected_length, validate_envelope


class TestEnvelopeAccepts:
    """Well-formed messages pass validation."""

    @pytest.mark.parametrize("section_id", range(14))
    def test_every_section_length(self, build_message, section_id):
        """Each section id is accepted at exactly its expected length."""
        env = validate_envelope(build_message(section_id, patch_index=4))
        assert env.section_id == section_id
        assert env.patch_number == 5
        assert len(env.raw) == EXPECTED_LENGTHS[section_id]

    def test_header_has_no_enable_state(self, build_header):
        env = validate_envelope(build_header("LANDAU JUICE"))
        assert env.is_header
        assert env.section_enabled is None
        assert env.section_name == "Header"

    def test_enable_flag(self, build_message):
        assert validate_envelope(build_message(3, enable=1)).section_enabled is True
        assert validate_envelope(build_message(3, enable=0)).section_enabled is False

    def test_accepts_list_of_ints(self, build_message):
        """Byte lists are accepted as well as bytes."""
        env = validate_envelope(list(build_message(5)))
        assert env.section_name == "Loop"

    def test_header_ignores_bytes_8_and_9(self, build_message):
        """The header message has no reserved/enable bytes to check."""
        env = validate_envelope(build_message(0, {8: 0x7F, 9: 0x05}))
        assert env.is_header

    def test_patch_number_not_range_checked(self, build_message):
        """Patch byte is reported as-is plus one."""
        env = validate_envelope(build_message(1, patch_index=120))
        assert env.patch_number == 121


class TestEnvelopeRejects:
    """Each malformed message fails with the matching error."""

    def test_too_short(self):
        with pytest.raises(TooShort) as exc:
            validate_envelope(bytes([0xF0, 0x41, 0x00, 0x79, 0x12, 0x00, 0xF7]))
        assert exc.value.actual == 7
        assert exc.value.minimum == 15

    def test_empty(self):
        with pytest.raises(TooShort):
            validate_envelope(b"")

    def test_header_mismatch(self, build_message):
        data = bytearray(build_message(5))
        data[1] = 0x43  # Yamaha
        with pytest.raises(HeaderMismatch) as exc:
            validate_envelope(bytes(data))
        assert exc.value.observed[1] == 0x43
        assert exc.value.expected == bytes([0xF0, 0x41, 0x00, 0x79, 0x12, 0x00])

    def test_unknown_section_id(self, build_message):
        data = bytearray(build_message(5))
        data[7] = 14
        with pytest.raises(UnknownSectionId) as exc:
            validate_envelope(bytes(data))
        assert exc.value.section_id == 14

    @pytest.mark.parametrize("section_id", range(14))
    @pytest.mark.parametrize("delta", [-1, 1])
    def test_length_off_by_one(self, build_message, section_id, delta):
        """Any length other than the expected one is rejected."""
        expected = EXPECTED_LENGTHS[section_id]
        if expected + delta < MIN_LENGTH:
            # Loop (15 bytes) minus one is below the framing minimum
            with pytest.raises(TooShort):
                validate_envelope(build_message(section_id, length=expected + delta))
            return
        with pytest.raises(LengthMismatch) as exc:
            validate_envelope(build_message(section_id, length=expected + delta))
        assert exc.value.expected == expected
        assert exc.value.actual == expected + delta

    def test_compression_one_short(self, build_message):
        with pytest.raises(LengthMismatch) as exc:
            validate_envelope(build_message(1, length=18))
        assert (exc.value.expected, exc.value.actual) == (19, 18)

    @pytest.mark.parametrize("last", [0x00, 0x01, 0x7F, 0x80, 0xF0, 0xF6, 0xF8, 0xFF])
    def test_missing_terminator(self, build_message, last):
        """Any last byte other than F7 is rejected."""
        data = bytearray(build_message(7))
        data[-1] = last
        with pytest.raises(MissingTerminator) as exc:
            validate_envelope(bytes(data))
        assert exc.value.observed == last

    def test_reserved_byte(self, build_message):
        with pytest.raises(ReservedByteNonZero) as exc:
            validate_envelope(build_message(8, {8: 0x01}))
        assert exc.value.observed == 0x01

    @pytest.mark.parametrize("flag", [2, 0x7F])
    def test_invalid_enable_flag(self, build_message, flag):
        with pytest.raises(InvalidEnableFlag) as exc:
            validate_envelope(build_message(8, enable=flag))
        assert exc.value.observed == flag

    @pytest.mark.parametrize("bad", [300, -1, "F0"])
    def test_non_byte_value(self, build_message, bad):
        """List input holding a non-byte is rejected as a decode error."""
        data = list(build_message(5))
        data[3] = bad
        with pytest.raises(InvalidByteValue) as exc:
            validate_envelope(data)
        assert exc.value.observed == bad
        assert exc.value.index == 3

    def test_errors_share_base(self):
        assert issubclass(TooShort, DecodeError)
        assert issubclass(InvalidByteValue, DecodeError)
        assert issubclass(InvalidEnableFlag, DecodeError)


class TestCheckOrder:
    """When several checks fail, the earliest in the fixed order wins."""

    def test_header_before_length(self):
        data = bytes([0xF0, 0x43] + [0x00] * 20 + [0xF7])
        with pytest.raises(HeaderMismatch):
            validate_envelope(data)

    def test_section_before_length(self, build_message):
        data = bytearray(build_message(1, length=30))
        data[7] = 0x20
        with pytest.raises(UnknownSectionId):
            validate_envelope(bytes(data))

    def test_length_before_terminator(self, build_message):
        data = bytearray(build_message(1, length=20))
        data[-1] = 0x00
        with pytest.raises(LengthMismatch):
            validate_envelope(bytes(data))

    def test_terminator_before_enable(self, build_message):
        data = bytearray(build_message(8, enable=2))
        data[-1] = 0x00
        with pytest.raises(MissingTerminator):
            validate_envelope(bytes(data))

    def test_reserved_before_enable(self, build_message):
        with pytest.raises(ReservedByteNonZero):
            validate_envelope(build_message(8, {8: 0x01}, enable=2))


class TestChecksum:
    """The checksum byte is reported, never enforced."""

    def test_matching_checksum(self, build_message):
        env = validate_envelope(build_message(3, {11: 50}))
        assert env.checksum_matches

    def test_bad_checksum_still_valid(self, build_message):
        data = build_message(3, {11: 50})
        bad = build_message(3, {11: 50}, checksum=(data[-2] + 1) % 128)
        env = validate_envelope(bad)
        assert not env.checksum_matches
        assert env.checksum == (data[-2] + 1) % 128


class TestExpectedLength:
    def test_known(self):
        assert expected_length(0) == 77
        assert expected_length(9) == 88
        assert expected_length(13) == 20

    def test_unknown(self):
        with pytest.raises(UnknownSectionId):
            expected_length(14)
