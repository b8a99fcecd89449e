"""
Decode errors for GX-700 SysEx messages.

Every failure the decoder can detect is a subclass of DecodeError. Each
carries the observed (and, where it applies, expected) values so the
caller can report what went wrong without re-reading the message.
"""

from typing import Optional


class DecodeError(Exception):
    """Base class for all message decode failures."""

    pass


class TooShort(DecodeError):
    """Message is shorter than the minimum framed envelope."""

    def __init__(self, actual: int, minimum: int = 15):
        self.actual = actual
        self.minimum = minimum
        super().__init__(f"Message too short: {actual} bytes (minimum {minimum})")


class HeaderMismatch(DecodeError):
    """The fixed device/manufacturer signature was not found."""

    def __init__(self, observed: bytes, expected: bytes):
        self.observed = bytes(observed)
        self.expected = bytes(expected)
        super().__init__(
            f"Header mismatch: got {self.observed.hex(' ').upper()}, "
            f"expected {self.expected.hex(' ').upper()}"
        )


class UnknownSectionId(DecodeError):
    """Section id byte has no known layout."""

    def __init__(self, section_id: int):
        self.section_id = section_id
        super().__init__(f"Unknown section id: {section_id}")


class LengthMismatch(DecodeError):
    """Message length does not match the length for its section id."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Length mismatch: expected {expected} bytes, got {actual}")


class MissingTerminator(DecodeError):
    """Last byte is not the end-of-exclusive marker."""

    def __init__(self, observed: int):
        self.observed = observed
        super().__init__(f"Missing terminator: last byte is 0x{observed:02X}, expected 0xF7")


class ReservedByteNonZero(DecodeError):
    """Byte 8 of a section message must be zero."""

    def __init__(self, observed: int):
        self.observed = observed
        super().__init__(f"Reserved byte 8 is 0x{observed:02X}, expected 0x00")


class InvalidEnableFlag(DecodeError):
    """Section enable byte is neither 0 nor 1."""

    def __init__(self, observed: int):
        self.observed = observed
        super().__init__(f"Invalid enable flag: {observed} (expected 0 or 1)")


class IndexOutOfRange(DecodeError):
    """A table-indexed field holds a value past the end of its table."""

    def __init__(self, field: str, raw: int, table_size: int):
        self.field = field
        self.raw = raw
        self.table_size = table_size
        super().__init__(f"{field}: value {raw} out of range (table has {table_size} entries)")


class UnknownVariant(DecodeError):
    """A discriminator byte selects no known sub-layout."""

    def __init__(self, field: str, raw: int, offset: Optional[int] = None):
        self.field = field
        self.raw = raw
        self.offset = offset
        where = f" at byte {offset}" if offset is not None else ""
        super().__init__(f"{field}: unknown variant {raw}{where}")


class InvalidByteValue(DecodeError):
    """Input holds a value that is not a byte (0-255)."""

    def __init__(self, observed: object, index: Optional[int] = None):
        self.observed = observed
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Invalid byte value{where}: {observed!r}")
