"""Rebuild flashcard entries from a fixed-layout line stream."""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Callable, Iterable, Iterator
from itertools import cycle

from .errors import EntriesParseError, EntriesReadError
from .models import ENTRY_LAYOUT, MAX_ENTRIES, Entries, Entry, EntryRole
from .tags import validate_tags

LOGGER = logging.getLogger(__name__)

ID_WIDTH = 4
DIRTY_MARKER_OFFSET = ID_WIDTH
COMMENT_OFFSET = DIRTY_MARKER_OFFSET + 2
DIRTY_MARKER = "*"
ENTRY_DELIMITER = "---"

CLOZE_DELETION_PATTERN = re.compile(r"{{c[0-9]::(.+)}}")


def parse_entries(lines: Iterable[str], *, check_tags: bool = True, capacity: int = MAX_ENTRIES) -> Entries:
    """Parse a fixed-layout source into entry storage.

    Structural problems raise ``EntriesParseError`` with the storage built so
    far attached as ``entries``; content problems only mark entries dirty.
    """
    return EntryScanner(check_tags=check_tags, capacity=capacity).scan(lines)


class EntryScanner:
    """One forward pass over the source, one role per line."""

    def __init__(self, *, check_tags: bool = True, capacity: int = MAX_ENTRIES) -> None:
        self.check_tags = check_tags
        self.capacity = capacity
        self._handlers: dict[EntryRole, Callable[[Entry, int, str], None]] = {
            EntryRole.ID: self._read_id,
            EntryRole.PROMPT: self._read_prompt,
            EntryRole.TRANSLATION: self._read_translation,
            EntryRole.HEADWORD: self._read_headword,
            EntryRole.PRONUNCIATION: self._read_pronunciation,
            EntryRole.DEFINITION: self._read_definition,
            EntryRole.LABELS: self._read_labels,
        }

    def scan(self, lines: Iterable[str]) -> Entries:
        entries = Entries(self.capacity)
        current = Entry()
        role = EntryRole.END
        for role, (number, data) in zip(cycle(ENTRY_LAYOUT), _numbered(lines)):
            try:
                if role is EntryRole.END:
                    _check_delimiter(number, data)
                    entries.commit(current)
                    LOGGER.debug("committed entry %04d (dirty=%s)", current.id, current.dirty)
                    current = Entry()
                else:
                    self._handlers[role](current, number, data)
            except EntriesParseError as exc:
                exc.entries = entries
                raise
        if role is not EntryRole.END:
            LOGGER.debug("dropping incomplete trailing entry %04d", current.id)
        return entries

    def _read_id(self, entry: Entry, number: int, data: str) -> None:
        if len(data) < ID_WIDTH:
            raise EntriesParseError(
                number,
                data,
                f"line {number}: entry ID too short: {data!r}: found {len(data)} digits, expected {ID_WIDTH} digits",
            )
        digits = data[:ID_WIDTH]
        unsigned = digits[1:] if digits.startswith("+") else digits
        if not all(char in string.digits for char in unsigned):
            raise EntriesParseError(
                number, data, f"line {number}: failed to parse entry ID: {data!r}: {digits!r} is not a number"
            )
        entry_id = int(digits)
        if not 1 <= entry_id <= self.capacity:
            raise EntriesParseError(
                number, data, f"line {number}: entry ID out of range: {data!r}: expected 1 to {self.capacity}"
            )
        entry.id = entry_id
        entry.dirty = data[DIRTY_MARKER_OFFSET : DIRTY_MARKER_OFFSET + 1] == DIRTY_MARKER
        entry.notes = []
        if len(data) > COMMENT_OFFSET:
            entry.notes.append(data[COMMENT_OFFSET:])

    def _read_prompt(self, entry: Entry, number: int, data: str) -> None:
        entry.prompt_raw = data
        match = CLOZE_DELETION_PATTERN.search(data)
        if match:
            entry.prompt_cloze = match.group(1)
        else:
            _flag(entry, "usage is missing cloze deletion.")
        self._check_markup(entry, data)

    def _read_translation(self, entry: Entry, number: int, data: str) -> None:
        entry.translation = data
        if CLOZE_DELETION_PATTERN.search(data) is None:
            _flag(entry, "translation is missing cloze deletion.")
        self._check_markup(entry, data)

    def _read_headword(self, entry: Entry, number: int, data: str) -> None:
        entry.headword = data

    def _read_pronunciation(self, entry: Entry, number: int, data: str) -> None:
        entry.pronunciation = data

    def _read_definition(self, entry: Entry, number: int, data: str) -> None:
        entry.definition = data

    def _read_labels(self, entry: Entry, number: int, data: str) -> None:
        entry.labels = data.split(",")

    def _check_markup(self, entry: Entry, data: str) -> None:
        if not self.check_tags:
            return
        error = validate_tags(data)
        if error is not None:
            _flag(entry, str(error))


def _flag(entry: Entry, note: str) -> None:
    entry.dirty = True
    entry.notes.append(note)


def _check_delimiter(number: int, data: str) -> None:
    if data != ENTRY_DELIMITER:
        raise EntriesParseError(
            number,
            data,
            f"line {number}: unexpected end of entry. found: {data!r}, expected: {ENTRY_DELIMITER!r}",
        )


def _numbered(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield 1-based line numbers with line endings removed."""
    try:
        for number, raw in enumerate(lines, start=1):
            yield number, _strip_line_ending(raw)
    except (OSError, UnicodeDecodeError) as exc:
        raise EntriesReadError(f"failed to read file: {exc}") from exc


def _strip_line_ending(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw
