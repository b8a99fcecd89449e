"""
Typed byte access for section decoders.
"""

from typing import Sequence, Tuple

from gx700.errors import UnknownVariant
from gx700.models.fields import UnmappedField
from gx700.utils.values import PanPair, SignedValue, packed_magnitude, table_lookup


class FieldReader:
    """
    Reads fields out of a validated, fixed-length message.

    Offsets are absolute positions in the full message (byte 0 is F0).

    Example:
        reader = FieldReader(envelope.raw)
        drive = reader.byte(11)
        bass = reader.signed(12, bias=50)
    """

    def __init__(self, data: bytes):
        self.data = data

    def byte(self, offset: int) -> int:
        return self.data[offset]

    def signed(self, offset: int, bias: int) -> SignedValue:
        return SignedValue(self.data[offset], bias)

    def lookup(self, offset: int, table: Sequence[str], field: str) -> str:
        return table_lookup(table, self.data[offset], field)

    def packed(self, offset: int, base: int) -> int:
        """Two-byte magnitude, high byte first."""
        return packed_magnitude(self.data[offset], self.data[offset + 1], base)

    def pan(self, offset: int) -> PanPair:
        return PanPair(self.data[offset])

    def variant(self, offset: int, table: Sequence[str], field: str) -> int:
        """
        Read a discriminator byte.

        Returns:
            The raw discriminator value

        Raises:
            UnknownVariant: If the value selects no known layout
        """
        raw = self.data[offset]
        if raw >= len(table):
            raise UnknownVariant(field, raw, offset)
        return raw

    def unmapped(self, start: int, stop: int, note: str = "unmapped") -> Tuple[UnmappedField, ...]:
        """Surface bytes start..stop-1 as unmapped fields."""
        return tuple(UnmappedField(i, self.data[i], note) for i in range(start, stop))
