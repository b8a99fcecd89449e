"""
Envelope model for GX-700 patch messages.

GX-700 patch messages are Roland DT1 (data set) messages:

    F0 41 00 79 12 00 PP SS RR EE [data...] CS F7

Where:
    - 41: Roland manufacturer ID
    - 00: Device ID
    - 79: GX-700 model ID
    - 12: DT1 command
    - 00 PP SS RR: Address (PP = patch index 0-99, SS = section id 0-13,
      RR = reserved, always 00)
    - EE: Section enable flag (sections 1-13 only; the header message has
      no enable byte)
    - CS: Roland checksum
"""

from dataclasses import dataclass
from typing import Optional

from gx700.utils.checksum import message_checksum_matches
from gx700.utils.tables import get_section_name


@dataclass(frozen=True)
class Envelope:
    """
    Validated message envelope.

    Attributes:
        patch_number: Patch number (1-100)
        section_id: Section id (0-13)
        section_enabled: Section switch, None for the header message
        raw: Original message bytes
    """

    patch_number: int
    section_id: int
    section_enabled: Optional[bool]
    raw: bytes = b""

    @property
    def is_header(self) -> bool:
        return self.section_id == 0

    @property
    def section_name(self) -> str:
        return get_section_name(self.section_id)

    @property
    def checksum(self) -> int:
        """Checksum byte (second to last)."""
        return self.raw[-2]

    @property
    def checksum_matches(self) -> bool:
        """Whether the checksum byte agrees with the Roland checksum. Advisory only."""
        return message_checksum_matches(self.raw)
