"""
GX700 - Decoder for Boss GX-700 patch SysEx messages.

This library provides tools to:
- Validate GX-700 patch message envelopes
- Decode the header and all 13 effect sections into typed records
- Read .syx patch dumps into a bank of patches

Example usage:
    from gx700 import decode, GX700Reader

    # Decode a single message
    result = decode(message_bytes)
    if result.ok:
        print(result.record)

    # Read a whole dump
    bank = GX700Reader.read("patches.syx")
    for patch in bank:
        print(patch)
"""

__version__ = "0.1.0"
__author__ = "GX700 Contributors"

from gx700.errors import (
    DecodeError,
    HeaderMismatch,
    IndexOutOfRange,
    InvalidByteValue,
    InvalidEnableFlag,
    LengthMismatch,
    MissingTerminator,
    ReservedByteNonZero,
    TooShort,
    UnknownSectionId,
    UnknownVariant,
)
from gx700.models.envelope import Envelope
from gx700.models.patch import Patch, PatchBank
from gx700.models.sections import Disabled, Header, SectionRecord
from gx700.reader import GX700Reader
from gx700.sysex.decoder import DecodeResult, decode, parse_message
from gx700.sysex.envelope import validate_envelope
from gx700.utils.diagnostics import UnmappedCollector

__all__ = [
    "decode",
    "parse_message",
    "validate_envelope",
    "DecodeResult",
    "Envelope",
    "SectionRecord",
    "Header",
    "Disabled",
    "Patch",
    "PatchBank",
    "GX700Reader",
    "UnmappedCollector",
    "DecodeError",
    "TooShort",
    "HeaderMismatch",
    "UnknownSectionId",
    "LengthMismatch",
    "MissingTerminator",
    "ReservedByteNonZero",
    "InvalidEnableFlag",
    "InvalidByteValue",
    "IndexOutOfRange",
    "UnknownVariant",
]
