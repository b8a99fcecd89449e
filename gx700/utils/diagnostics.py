"""
Collector for unmapped-field observations.

Decoders report every byte whose meaning is not yet known to an optional
sink supplied by the caller. The sink is any callable taking
``(patch_number, section_id, field)``; UnmappedCollector is a thread-safe
implementation that keeps the notes in memory.
"""

import threading
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from gx700.models.fields import UnmappedField

UnmappedSink = Callable[[int, int, UnmappedField], None]


@dataclass(frozen=True)
class UnmappedNote:
    """One unmapped byte seen in one decoded message."""

    patch_number: int
    section_id: int
    field: UnmappedField


class UnmappedCollector:
    """
    Append-only, lock-guarded store of unmapped-field notes.

    Example:
        collector = UnmappedCollector()
        for message in messages:
            decode(message, sink=collector)
        for (section_id, offset), values in collector.values_by_offset().items():
            print(section_id, offset, sorted(values))
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._notes: List[UnmappedNote] = []

    def __call__(self, patch_number: int, section_id: int, field: UnmappedField) -> None:
        note = UnmappedNote(patch_number, section_id, field)
        with self._lock:
            self._notes.append(note)

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    @property
    def notes(self) -> Tuple[UnmappedNote, ...]:
        """Snapshot of all notes collected so far."""
        with self._lock:
            return tuple(self._notes)

    def values_by_offset(self, section_id: Optional[int] = None) -> Dict[Tuple[int, int], Counter]:
        """
        Group observed raw values by (section id, byte offset).

        Args:
            section_id: Only include notes for this section

        Returns:
            Mapping of (section_id, offset) to a Counter of raw values
        """
        grouped: Dict[Tuple[int, int], Counter] = {}
        for note in self.notes:
            if section_id is not None and note.section_id != section_id:
                continue
            key = (note.section_id, note.field.offset)
            grouped.setdefault(key, Counter())[note.field.raw] += 1
        return grouped
