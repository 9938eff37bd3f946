"""Export profiles: delimiter, audio naming and column layout per target."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

NOTE_ID = "note_id"
CLOZE = "cloze"
PROMPT = "prompt"
TRANSLATION = "translation"
HEADWORD = "headword"
PRONUNCIATION = "pronunciation"
DEFINITION = "definition"
AUDIO = "audio"
LABELS = "labels"

KNOWN_COLUMNS = frozenset({NOTE_ID, CLOZE, PROMPT, TRANSLATION, HEADWORD, PRONUNCIATION, DEFINITION, AUDIO, LABELS})


@dataclass(frozen=True)
class ExportProfile:
    """How committed entries are laid out in the delimited output."""

    name: str
    delimiter: str
    audio_template: str
    columns: tuple[str, ...]
    check_tags: bool = True

    def audio(self, prefix: str, entry_id: int) -> str:
        """Render the audio field for one entry."""
        return self.audio_template.format(prefix=prefix, id=entry_id)


ANKI_TSV = ExportProfile(
    name="anki-tsv",
    delimiter="\t",
    audio_template="[sound:{prefix}-{id:04d}.mp3]",
    columns=(NOTE_ID, CLOZE, PROMPT, TRANSLATION, HEADWORD, PRONUNCIATION, DEFINITION, AUDIO, LABELS),
    check_tags=True,
)

ANKI_CSV = ExportProfile(
    name="anki-csv",
    delimiter=",",
    audio_template="[sound:{prefix}_{id:04d}.mp3]",
    columns=(NOTE_ID, PROMPT, CLOZE, TRANSLATION, HEADWORD, DEFINITION, PRONUNCIATION, AUDIO, LABELS),
    check_tags=False,
)

BUILTIN_PROFILES: dict[str, ExportProfile] = {profile.name: profile for profile in (ANKI_TSV, ANKI_CSV)}
DEFAULT_PROFILE = ANKI_TSV


def get_profile(name: str) -> ExportProfile:
    """Return a built-in profile by name."""
    return BUILTIN_PROFILES[name]


def load_profile(path: Path | str) -> ExportProfile:
    """Load a profile from a JSON file; omitted keys fall back to the default."""
    raw = json.loads(Path(path).read_text(encoding="utf-8-sig"))
    if not isinstance(raw, dict):
        raise ValueError(f"Profile file '{path}' must contain a JSON object.")
    return _profile_from_dict(raw)


def _profile_from_dict(raw: dict[str, Any]) -> ExportProfile:
    """Build a profile from raw JSON content."""
    name = str(raw.get("name", "")).strip()
    if not name:
        raise ValueError("Profile has no name.")

    delimiter = str(raw.get("delimiter", DEFAULT_PROFILE.delimiter))
    if len(delimiter) != 1 or delimiter in {'"', "\r", "\n"}:
        raise ValueError(f"Profile '{name}' has invalid delimiter {delimiter!r}.")

    raw_columns = raw.get("columns", list(DEFAULT_PROFILE.columns))
    if not isinstance(raw_columns, list) or not all(isinstance(column, str) for column in raw_columns):
        raise ValueError(f"Profile '{name}' columns must be a list of strings.")
    columns = tuple(raw_columns)
    if not columns:
        raise ValueError(f"Profile '{name}' has no columns.")
    unknown = [column for column in columns if column not in KNOWN_COLUMNS]
    if unknown:
        raise ValueError(f"Profile '{name}' has unknown columns: {', '.join(unknown)}")

    check_tags = raw.get("check_tags", DEFAULT_PROFILE.check_tags)
    if not isinstance(check_tags, bool):
        raise ValueError(f"Profile '{name}' check_tags must be true or false, not {check_tags!r}.")

    audio_template = str(raw.get("audio_template", DEFAULT_PROFILE.audio_template))
    try:
        audio_template.format(prefix="", id=0)
    except (KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"Profile '{name}' has invalid audio template {audio_template!r}: {exc}") from exc

    return ExportProfile(
        name=name,
        delimiter=delimiter,
        audio_template=audio_template,
        columns=columns,
        check_tags=check_tags,
    )
