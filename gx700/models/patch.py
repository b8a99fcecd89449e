"""
Patch and bank models.

A patch is assembled from one header message and up to thirteen section
messages sharing the same patch number. A bank holds up to 100 patches.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from gx700.errors import DecodeError
from gx700.models.sections import Header, SectionRecord
from gx700.utils.tables import SECTION_NAMES

NUM_PATCHES = 100
NUM_SECTIONS = len(SECTION_NAMES)


@dataclass
class Patch:
    """
    One stored preset.

    Attributes:
        number: Patch number (1-100)
        header: Header record, if the header message was seen
        sections: Section records keyed by section id (1-13)
    """

    number: int
    header: Optional[Header] = None
    sections: Dict[int, SectionRecord] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.header.name if self.header else ""

    @property
    def is_complete(self) -> bool:
        """True when the header and all 13 sections have been seen."""
        return self.header is not None and len(self.sections) == NUM_SECTIONS - 1

    @property
    def missing_sections(self) -> List[int]:
        return [i for i in range(1, NUM_SECTIONS) if i not in self.sections]

    def add(self, record: SectionRecord) -> None:
        """Add a decoded record; a later record for the same section replaces the earlier one."""
        if record.patch_number != self.number:
            raise ValueError(
                f"Record for patch {record.patch_number} added to patch {self.number}"
            )
        if isinstance(record, Header):
            self.header = record
        else:
            self.sections[record.section_id] = record

    def get(self, section_id: int) -> Optional[SectionRecord]:
        if section_id == 0:
            return self.header
        return self.sections.get(section_id)

    def __str__(self) -> str:
        return f"Patch {self.number:3d}: {self.name or '(unnamed)'} ({len(self.sections)} sections)"


@dataclass
class PatchBank:
    """
    Patches decoded from a stream of messages.

    Attributes:
        patches: Patches keyed by patch number
        errors: (message index, error) for every message that failed to decode
    """

    patches: Dict[int, Patch] = field(default_factory=dict)
    errors: List[Tuple[int, DecodeError]] = field(default_factory=list)

    def add(self, record: SectionRecord) -> Patch:
        patch = self.patches.get(record.patch_number)
        if patch is None:
            patch = Patch(record.patch_number)
            self.patches[record.patch_number] = patch
        patch.add(record)
        return patch

    def get(self, number: int) -> Optional[Patch]:
        return self.patches.get(number)

    def __len__(self) -> int:
        return len(self.patches)

    def __iter__(self):
        return iter(self.patches[n] for n in sorted(self.patches))
