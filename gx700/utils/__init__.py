"""Utility functions for GX700."""

from gx700.utils.values import format_signed, packed_magnitude, pan, signed_offset, table_lookup
from gx700.utils.checksum import calculate_roland_checksum, verify_checksum

__all__ = [
    "signed_offset",
    "format_signed",
    "packed_magnitude",
    "pan",
    "table_lookup",
    "calculate_roland_checksum",
    "verify_checksum",
]
