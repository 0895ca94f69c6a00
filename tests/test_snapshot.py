"""Tests for snapshot parsing/formatting and the file readers/writers."""

from __future__ import annotations

from pathlib import Path

import pytest

from flashdeck.core.contracts.card import CardRecord
from flashdeck.core.deck.snapshot import (
    format_record,
    parse_line,
    read_snapshot,
    write_snapshot,
    write_transcript,
)
from flashdeck.core.deck.store import CardStore
from flashdeck.core.errors import MalformedRecordError, SnapshotIOError


def test_format_record_uses_single_spaced_colons() -> None:
    assert format_record(CardRecord("France", "Paris", 3)) == "France : Paris : 3"


def test_parse_line_tolerates_surrounding_whitespace() -> None:
    rec = parse_line("   New York   : Albany\t: 12  ", path=Path("f"), line_no=1)
    assert rec == CardRecord("New York", "Albany", 12)


def test_parse_line_keeps_empty_definition_slot() -> None:
    rec = parse_line("a :  : 0", path=Path("f"), line_no=1)
    assert rec == CardRecord("a", "", 0)


@pytest.mark.parametrize(
    "line",
    [
        "only : two",
        "a : b : c : 1",
        "a : b : many",
        "a : b : -1",
    ],
)
def test_parse_line_rejects_malformed(line: str) -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        parse_line(line, path=Path("cards.txt"), line_no=7)
    assert exc_info.value.line_no == 7
    assert "cards.txt:7" in str(exc_info.value)


def test_read_snapshot_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "cards.txt"
    path.write_text("x : y : 2\n\n   \nz : w : 0\n", encoding="utf-8")
    assert read_snapshot(path) == [CardRecord("x", "y", 2), CardRecord("z", "w", 0)]


def test_read_snapshot_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(SnapshotIOError):
        read_snapshot(tmp_path / "missing.txt")


def test_write_snapshot_is_newline_terminated(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    count = write_snapshot(path, [CardRecord("a", "1", 0), CardRecord("b", "2", 4)])
    assert count == 2
    assert path.read_text(encoding="utf-8") == "a : 1 : 0\nb : 2 : 4\n"


def test_export_import_round_trip(tmp_path: Path) -> None:
    """A store written out and loaded into a fresh store yields the same triples."""
    source = CardStore()
    source.add("Germany", "Berlin")
    source.add("Italy", "Rome")
    source.upsert_from_record("Spain", "Madrid", 2)
    source.record_error("Italy")

    path = tmp_path / "deck.txt"
    write_snapshot(path, source.snapshot())

    target = CardStore()
    for rec in read_snapshot(path):
        target.upsert_from_record(rec.term, rec.definition, rec.error_count)

    assert set(target.snapshot()) == set(source.snapshot())


def test_write_to_directory_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(SnapshotIOError):
        write_transcript(tmp_path, "text\n")


@pytest.mark.parametrize(
    ("term", "definition"),
    [
        ("a", ""),
        ("spaced", "two  inner   gaps"),
        ("lead", "  indented answer"),
        ("New York", "Albany"),
    ],
)
def test_round_trip_boundary_fields(tmp_path: Path, term: str, definition: str) -> None:
    """Cards the store accepts come back unchanged from their own export."""
    store = CardStore()
    store.add(term, definition).unwrap()
    store.record_error(term)

    path = tmp_path / "deck.txt"
    write_snapshot(path, store.snapshot())

    assert read_snapshot(path) == [CardRecord(term, definition, 1)]


def test_read_snapshot_rejects_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"x : \xff\xfe : 1\n")
    with pytest.raises(SnapshotIOError) as exc_info:
        read_snapshot(path)
    assert exc_info.value.path == path


def test_write_snapshot_unencodable_card_leaves_no_file(tmp_path: Path) -> None:
    path = tmp_path / "ascii.txt"
    with pytest.raises(SnapshotIOError):
        write_snapshot(path, [CardRecord("Köln", "Cologne", 0)], encoding="ascii")
    assert not path.exists()
