from __future__ import annotations

import shutil
import sys
from collections.abc import Iterator
from pathlib import Path
from uuid import uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def entry_lines(
    entry_id: str = "0001",
    prompt: str = "私は{{c1::学生}}です。",
    translation: str = "I am a {{c1::student}}.",
    headword: str = "学生",
    pronunciation: str = "がくせい",
    definition: str = "student",
    labels: str = "noun,N5",
    end: str = "---",
) -> list[str]:
    """Build the eight source lines of one entry."""
    return [entry_id, prompt, translation, headword, pronunciation, definition, labels, end]


def _tmp_path_fixture() -> Iterator[Path]:
    """Provide per-test temporary directory path inside the workspace.

    Temporary files live under ``.tmp_pytest/`` in the project root and are
    removed after each test.
    """
    base = ROOT / ".tmp_pytest"
    base.mkdir(parents=True, exist_ok=True)
    path = base / str(uuid4())
    path.mkdir(parents=True, exist_ok=False)
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        try:
            next(base.iterdir())
        except StopIteration:
            base.rmdir()
        except FileNotFoundError:
            pass


tmp_path = pytest.fixture(name="tmp_path")(_tmp_path_fixture)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Two clean entries and one marked entry on disk."""
    lines = entry_lines("0001") + entry_lines("0002", headword="先生") + entry_lines("0003* check reading")
    path = tmp_path / "source.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
