import io

from conftest import entry_lines

from clozedeck.export import entry_row, note_id, write_entries
from clozedeck.models import Entries, Entry
from clozedeck.profiles import ANKI_CSV, ANKI_TSV
from clozedeck.scanner import parse_entries


def test_note_id_is_zero_padded() -> None:
    assert note_id("JLPT", 12) == "JLPT-0012"


def test_entry_row_follows_tsv_columns() -> None:
    entry = parse_entries(entry_lines("0001"))[0]
    assert entry_row(entry, ANKI_TSV, "JLPT") == [
        "JLPT-0001",
        "学生",
        "私は{{c1::学生}}です。",
        "I am a {{c1::student}}.",
        "学生",
        "がくせい",
        "student",
        "[sound:JLPT-0001.mp3]",
        "noun,N5",
    ]


def test_entry_row_follows_csv_columns() -> None:
    entry = parse_entries(entry_lines("0001"))[0]
    row = entry_row(entry, ANKI_CSV, "JLPT")
    assert row[:3] == ["JLPT-0001", "私は{{c1::学生}}です。", "学生"]
    assert row[5:8] == ["student", "がくせい", "[sound:JLPT_0001.mp3]"]


def test_write_skips_dirty_and_absent_entries() -> None:
    lines = entry_lines("0002") + entry_lines("0001*") + entry_lines("0004", prompt="none")
    entries = parse_entries(lines)
    stream = io.StringIO()
    summary = write_entries(entries, stream, ANKI_TSV, "JLPT")
    assert summary.written == 1
    assert summary.dirty == 2
    rows = stream.getvalue().split("\n")
    assert rows[-1] == ""
    assert len(rows) == 2
    assert rows[0].startswith("JLPT-0002\t学生\t")
    assert rows[0].endswith("\t[sound:JLPT-0002.mp3]\tnoun,N5")


def test_write_quotes_fields_containing_delimiter() -> None:
    entries = Entries(capacity=1)
    entries.commit(Entry(id=1, prompt_raw="a, b", labels=["x", "y"]))
    stream = io.StringIO()
    write_entries(entries, stream, ANKI_CSV, "P")
    assert stream.getvalue() == 'P-0001,"a, b",,,,,,[sound:P_0001.mp3],"x,y"\n'


def test_write_empty_storage() -> None:
    stream = io.StringIO()
    summary = write_entries(Entries(capacity=3), stream, ANKI_TSV, "P")
    assert (summary.written, summary.dirty) == (0, 0)
    assert stream.getvalue() == ""
