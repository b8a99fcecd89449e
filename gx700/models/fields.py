"""
Shared field types for section records.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnmappedField:
    """
    A byte whose meaning has not been reverse-engineered.

    Attributes:
        offset: Byte offset within the full message
        raw: Raw byte value
        note: What is known about the byte, if anything
    """

    offset: int
    raw: int
    note: str = "unmapped"
