"""GX-700 SysEx message handling."""

from gx700.sysex.envelope import validate_envelope, EXPECTED_LENGTHS, SIGNATURE
from gx700.sysex.decoder import decode, parse_message, DecodeResult, SECTION_DECODERS

__all__ = [
    "validate_envelope",
    "decode",
    "parse_message",
    "DecodeResult",
    "EXPECTED_LENGTHS",
    "SIGNATURE",
    "SECTION_DECODERS",
]
