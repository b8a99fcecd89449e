"""
CLI display modules.
"""

from cli.display.tables import (
    display_record,
    display_header,
    display_patch,
    display_bank_summary,
    display_error,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_record",
    "display_header",
    "display_patch",
    "display_bank_summary",
    "display_error",
    "display_hex_dump",
]
