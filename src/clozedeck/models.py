"""Core domain models for fixed-layout flashcard entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

MAX_ENTRIES = 2200


class EntryRole(Enum):
    """Meaning of one line within an entry block, in source order."""

    ID = "id"
    PROMPT = "prompt"
    TRANSLATION = "translation"
    HEADWORD = "headword"
    PRONUNCIATION = "pronunciation"
    DEFINITION = "definition"
    LABELS = "labels"
    END = "end"


ENTRY_LAYOUT: tuple[EntryRole, ...] = tuple(EntryRole)


@dataclass
class Entry:
    """One flashcard entry; ``id == 0`` marks an unpopulated slot."""

    id: int = 0
    dirty: bool = False
    notes: list[str] = field(default_factory=list)
    prompt_raw: str = ""
    prompt_cloze: str = ""
    translation: str = ""
    headword: str = ""
    pronunciation: str = ""
    definition: str = ""
    labels: list[str] = field(default_factory=list)

    @property
    def present(self) -> bool:
        """Whether this slot holds a committed entry."""
        return self.id != 0


class Entries:
    """Fixed-capacity entry storage indexed by ``id - 1``."""

    def __init__(self, capacity: int = MAX_ENTRIES) -> None:
        self._slots = [Entry() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> Entry:
        return self._slots[index]

    def accepts(self, entry_id: int) -> bool:
        """Whether ``entry_id`` maps to a slot in this storage."""
        return 1 <= entry_id <= len(self._slots)

    def commit(self, entry: Entry) -> None:
        """Store ``entry`` in its slot, replacing whatever was there."""
        if not self.accepts(entry.id):
            raise IndexError(f"entry ID {entry.id} outside 1..{len(self._slots)}")
        self._slots[entry.id - 1] = entry

    def get(self, entry_id: int) -> Entry | None:
        """Return the committed entry with ``entry_id``, if any."""
        if not self.accepts(entry_id):
            return None
        entry = self._slots[entry_id - 1]
        return entry if entry.present else None

    def present(self) -> list[Entry]:
        """Return committed entries in id order."""
        return [entry for entry in self._slots if entry.present]

    def dirty(self) -> list[Entry]:
        """Return entries flagged for manual review in id order."""
        return [entry for entry in self._slots if entry.dirty]
