"""Write committed entries as delimited rows for flashcard import."""

from __future__ import annotations

import csv
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from . import profiles
from .models import Entries, Entry
from .profiles import ExportProfile


@dataclass(frozen=True)
class ExportSummary:
    """Counts emitted by one export run."""

    written: int
    dirty: int


def note_id(prefix: str, entry_id: int) -> str:
    """Return the stable import identifier for one entry."""
    return f"{prefix}-{entry_id:04d}"


_COLUMN_VALUES: dict[str, Callable[[Entry, ExportProfile, str], str]] = {
    profiles.NOTE_ID: lambda entry, profile, prefix: note_id(prefix, entry.id),
    profiles.CLOZE: lambda entry, profile, prefix: entry.prompt_cloze,
    profiles.PROMPT: lambda entry, profile, prefix: entry.prompt_raw,
    profiles.TRANSLATION: lambda entry, profile, prefix: entry.translation,
    profiles.HEADWORD: lambda entry, profile, prefix: entry.headword,
    profiles.PRONUNCIATION: lambda entry, profile, prefix: entry.pronunciation,
    profiles.DEFINITION: lambda entry, profile, prefix: entry.definition,
    profiles.AUDIO: lambda entry, profile, prefix: profile.audio(prefix, entry.id),
    profiles.LABELS: lambda entry, profile, prefix: ",".join(entry.labels),
}


def entry_row(entry: Entry, profile: ExportProfile, prefix: str) -> list[str]:
    """Build one output row in the profile's column order."""
    return [_COLUMN_VALUES[column](entry, profile, prefix) for column in profile.columns]


def write_entries(entries: Entries, stream: TextIO, profile: ExportProfile, prefix: str) -> ExportSummary:
    """Write clean committed entries and count the dirty ones."""
    writer = csv.writer(stream, delimiter=profile.delimiter, lineterminator="\n")
    written = 0
    dirty = 0
    for entry in entries:
        if entry.dirty:
            dirty += 1
        if not entry.present or entry.dirty:
            continue
        writer.writerow(entry_row(entry, profile, prefix))
        written += 1
    return ExportSummary(written=written, dirty=dirty)
