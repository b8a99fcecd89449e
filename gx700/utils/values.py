"""
Composite value helpers for GX-700 parameter bytes.

The unit stores most parameters as a single 7-bit byte, but a few use
recurring encodings:

- Signed offsets: stored as ``raw``, shown as ``raw - bias`` (bias 50 for
  tone controls, 20 for EQ gains, 24 for pitch intervals).
- Packed magnitudes: two bytes combined as ``high * base + low``. The base
  is per field (128 for millisecond delay times, 256 for percentage-style
  balance fields).
- Pan pairs: one side is ``raw`` percent, the other ``100 - raw``.
- Table lookups: ``raw`` indexes an ordered label table.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

from gx700.errors import IndexOutOfRange

T = TypeVar("T")


def signed_offset(raw: int, bias: int) -> int:
    """Remove the storage bias from a signed parameter."""
    return raw - bias


def format_signed(value: int) -> str:
    """
    Format a signed value with an explicit sign.

    Returns:
        "+12", "-4", or "0" (zero carries no sign)
    """
    if value > 0:
        return f"+{value}"
    return str(value)


def packed_magnitude(high: int, low: int, base: int) -> int:
    """
    Combine a two-byte magnitude.

    Args:
        high: High part (multiplied by base)
        low: Low part
        base: Multiplier for the high part (128 or 256, field specific)

    Returns:
        high * base + low
    """
    return high * base + low


def pan(raw: int) -> Tuple[int, int]:
    """
    Split a pan/balance byte into (left, right) percentages.

    Raw 0 is hard left, 100 hard right, 50 center.
    """
    return 100 - raw, raw


def table_lookup(table: Sequence[T], raw: int, field: str = "value") -> T:
    """
    Look up a label in an ordered table.

    Args:
        table: Ordered labels, index = raw byte
        raw: Raw byte value
        field: Field name for error reporting

    Returns:
        The label at index raw

    Raises:
        IndexOutOfRange: If raw is not a valid index
    """
    if not 0 <= raw < len(table):
        raise IndexOutOfRange(field, raw, len(table))
    return table[raw]


@dataclass(frozen=True)
class SignedValue:
    """A stored byte with its bias; ``value`` is what the unit displays."""

    raw: int
    bias: int

    @property
    def value(self) -> int:
        return signed_offset(self.raw, self.bias)

    def __str__(self) -> str:
        return format_signed(self.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class PanPair:
    """Left/right percentages decoded from a single pan byte."""

    raw: int

    @property
    def left(self) -> int:
        return pan(self.raw)[0]

    @property
    def right(self) -> int:
        return pan(self.raw)[1]

    def __str__(self) -> str:
        return f"L{self.left}:R{self.right}"
