"""
Display formatting utilities for CLI output.

Provides bar graphics, pan displays, and field value formatting.
"""

from dataclasses import fields, is_dataclass
from typing import Any, Iterator, List, Tuple

from gx700.models.fields import UnmappedField
from gx700.utils.values import PanPair, SignedValue


def value_bar(
    value: int,
    max_value: int = 100,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a text-based bar graphic with value.

    Returns:
        Formatted string like " 80 [████████░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    return f"{value:3d} [{bar}]"


def pan_bar(
    pan: PanPair,
    width: int = 11,
    marker_char: str = "●",
    empty_char: str = "─",
) -> str:
    """
    Create a pan position bar.

    Returns:
        Formatted string like "L50:R50 [─────●─────]"
    """
    clamped = max(0, min(pan.raw, 100))
    pos = int(round(clamped / 100 * (width - 1)))
    bar = list(empty_char * width)
    bar[pos] = marker_char
    return f"{pan} [{''.join(bar)}]"


def hex_bytes(data: bytes) -> str:
    """Format bytes as space separated hex."""
    return " ".join(f"{b:02X}" for b in data)


def format_value(value: Any) -> str:
    """Format a decoded field value for display."""
    if isinstance(value, SignedValue):
        return f"{value} [dim](raw {value.raw})[/dim]"
    if isinstance(value, PanPair):
        return pan_bar(value)
    if isinstance(value, bytes):
        return hex_bytes(value) if value else "-"
    if isinstance(value, bool):
        return "On" if value else "Off"
    if isinstance(value, int):
        return value_bar(value)
    return str(value)


# Fields stored in milliseconds (packed delay times, pre-delays)
MS_FIELDS = frozenset({"time_c", "time_l", "time_r", "time_1", "time_2", "pre_delay"})

# Fields with no fixed 0-100 scale
PLAIN_FIELDS = frozenset({"balance"})


def format_ms(value: int) -> str:
    """
    Format a millisecond value.

    Returns:
        "138 ms"
    """
    return f"{value} ms"


def format_seconds(raw: int) -> str:
    """
    Format a time stored in tenths of a second.

    Returns:
        "2.5 s (raw 25)"
    """
    return f"{raw / 10:.1f} s [dim](raw {raw})[/dim]"


def format_field(name: str, value: Any) -> str:
    """Format a decoded field, using its name to pick units."""
    if name in MS_FIELDS:
        return format_ms(value)
    if name == "time_raw":
        return format_seconds(value)
    if name in PLAIN_FIELDS:
        return str(value)
    return format_value(value)


def format_unmapped(field: UnmappedField) -> str:
    """
    Format an unmapped byte.

    Returns:
        "byte 15 = 0x00 (0) unmapped"
    """
    return f"byte {field.offset} = 0x{field.raw:02X} ({field.raw}) [dim]{field.note}[/dim]"


def label(name: str) -> str:
    """Turn a field name into a display label ("effect_level" -> "Effect Level")."""
    return " ".join(part.upper() if part in ("c", "l", "r", "q") else part.capitalize() for part in name.split("_"))


def record_rows(record: Any, prefix: str = "") -> Iterator[Tuple[str, str]]:
    """
    Walk a decoded record and yield (label, formatted value) rows.

    Nested variants (wah mode, delay mode, modulation effect) are flattened
    with their kind shown first. Unmapped fields are listed last.
    """
    unmapped: List[UnmappedField] = []

    kind = getattr(record, "KIND", "") or getattr(record, "MODE", "")
    if kind:
        yield f"{prefix}Type", f"[bold]{kind}[/bold]"

    for f in fields(record):
        if f.name in ("patch_number", "disabled_section_id"):
            continue
        value = getattr(record, f.name)
        if f.name == "unmapped":
            unmapped.extend(value)
        elif is_dataclass(value) and not isinstance(value, (SignedValue, PanPair)):
            # Variant selectors are shown inline; other nested values get a prefix
            nested = prefix if f.name in ("mode", "effect") else f"{prefix}{label(f.name)} "
            yield from record_rows(value, prefix=nested)
        else:
            yield f"{prefix}{label(f.name)}", format_field(f.name, value)

    for u in unmapped:
        yield f"{prefix}[yellow]Unmapped[/yellow]", format_unmapped(u)
