"""
Envelope validation for GX-700 patch messages.

Checks the fixed header, the per-section message length, the terminator
and the enable byte. Checks run in a fixed order and the first failure
wins.
"""

from typing import List, Tuple, Union

from gx700.errors import (
    HeaderMismatch,
    InvalidByteValue,
    InvalidEnableFlag,
    LengthMismatch,
    MissingTerminator,
    ReservedByteNonZero,
    TooShort,
    UnknownSectionId,
)
from gx700.models.envelope import Envelope

# F0 41 00 79 12 00: SysEx start, Roland, device 0, GX-700, DT1, address MSB
SIGNATURE = bytes([0xF0, 0x41, 0x00, 0x79, 0x12, 0x00])
SYSEX_END = 0xF7

MIN_LENGTH = 15

# Total message length per section id (index = section id)
EXPECTED_LENGTHS: Tuple[int, ...] = (77, 19, 24, 17, 21, 15, 18, 16, 16, 88, 32, 20, 16, 20)

PATCH_OFFSET = 6
SECTION_OFFSET = 7
RESERVED_OFFSET = 8
ENABLE_OFFSET = 9

RawMessage = Union[bytes, bytearray, List[int]]


def to_bytes(data: RawMessage) -> bytes:
    """
    Convert raw input to bytes.

    Raises:
        InvalidByteValue: If an element is not an int in 0-255
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    values = list(data)
    for i, value in enumerate(values):
        if not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise InvalidByteValue(value, i)
    return bytes(values)


def validate_envelope(data: RawMessage) -> Envelope:
    """
    Validate a framed GX-700 patch message.

    Args:
        data: Complete message including F0 and F7

    Returns:
        Envelope for the message

    Raises:
        InvalidByteValue, TooShort, HeaderMismatch, UnknownSectionId, LengthMismatch,
        MissingTerminator, ReservedByteNonZero, InvalidEnableFlag
    """
    data = to_bytes(data)

    if len(data) < MIN_LENGTH:
        raise TooShort(len(data), MIN_LENGTH)

    if data[: len(SIGNATURE)] != SIGNATURE:
        raise HeaderMismatch(data[: len(SIGNATURE)], SIGNATURE)

    section_id = data[SECTION_OFFSET]
    if section_id >= len(EXPECTED_LENGTHS):
        raise UnknownSectionId(section_id)

    expected = EXPECTED_LENGTHS[section_id]
    if len(data) != expected:
        raise LengthMismatch(expected, len(data))

    if data[-1] != SYSEX_END:
        raise MissingTerminator(data[-1])

    patch_number = data[PATCH_OFFSET] + 1

    if section_id == 0:
        return Envelope(patch_number, section_id, None, data)

    if data[RESERVED_OFFSET] != 0:
        raise ReservedByteNonZero(data[RESERVED_OFFSET])

    enable = data[ENABLE_OFFSET]
    if enable not in (0, 1):
        raise InvalidEnableFlag(enable)

    return Envelope(patch_number, section_id, enable != 0, data)


def expected_length(section_id: int) -> int:
    """
    Get the total message length for a section id.

    Raises:
        UnknownSectionId: If section_id has no layout
    """
    if not 0 <= section_id < len(EXPECTED_LENGTHS):
        raise UnknownSectionId(section_id)
    return EXPECTED_LENGTHS[section_id]
