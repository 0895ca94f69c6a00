"""Line-based snapshot files for the card store, plus the transcript writer.

Format
------
One card per line::

    TERM : DEFINITION : ERRORCOUNT

- Output uses exactly one space on each side of every colon and ends each
  line with a newline.
- Input lines are stripped and split on a whitespace run, a colon and a
  single whitespace character, so an empty definition survives.
  Exactly three fields are required and ERRORCOUNT must be a non-negative
  base-10 integer. Blank lines are skipped.
- There is no escaping: a term or definition containing ``" : "`` does not
  survive a round trip, and neither does whitespace at the start of the
  term or at the end of the term or definition.

Files are written in one go and closed before the caller reports success, so
a reported count always matches what is on disk.

Usage
-----
>>> records = read_snapshot(Path("cards.txt"))
>>> write_snapshot(Path("backup.txt"), records)
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from flashdeck.core.contracts.card import CardRecord
from flashdeck.core.errors import MalformedRecordError, SnapshotIOError
from flashdeck.core.settings import get_logger

DELIMITER = " : "
# One space after the colon only, so an empty definition ("a :  : 0") keeps its slot.
_SPLIT_RE = re.compile(r"\s+:\s")
_COUNT_RE = re.compile(r"[0-9]+")

log = get_logger(__name__)


def format_record(record: CardRecord) -> str:
    """Render one record as a snapshot line (without the newline)."""
    return DELIMITER.join((record.term, record.definition, str(record.error_count)))


def parse_line(line: str, *, path: Path, line_no: int) -> CardRecord:
    """Parse one non-blank snapshot line.

    Raises
    ------
    MalformedRecordError
        If the line does not have three fields or the count is not a
        non-negative integer. ``path`` and ``line_no`` only feed the message.
    """
    fields = _SPLIT_RE.split(line.strip())
    if len(fields) != 3:
        raise MalformedRecordError(path, line_no, line, f"expected 3 fields, got {len(fields)}")
    term, definition, raw_count = fields
    if not term:
        raise MalformedRecordError(path, line_no, line, "empty term")
    raw_count = raw_count.strip()
    if not _COUNT_RE.fullmatch(raw_count):
        raise MalformedRecordError(path, line_no, line, "error count is not a number")
    return CardRecord(term, definition, int(raw_count))


def read_snapshot(path: Path, encoding: str = "utf-8") -> list[CardRecord]:
    """Read and parse every card line in ``path``.

    The whole file is parsed before anything is returned, so a malformed line
    means no record from the file is applied.
    """
    try:
        with path.open("r", encoding=encoding) as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeError, LookupError) as e:
        raise SnapshotIOError(path, e) from e

    records = [
        parse_line(line, path=path, line_no=idx)
        for idx, line in enumerate(lines, start=1)
        if line.strip()
    ]
    log.debug("Read %d records from %s", len(records), path)
    return records


def _write_text(path: Path, text: str, encoding: str) -> None:
    # Encode up front so an unencodable card never leaves a truncated file behind.
    try:
        data = text.encode(encoding)
    except (UnicodeError, LookupError) as e:
        raise SnapshotIOError(path, e) from e
    try:
        with path.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise SnapshotIOError(path, e) from e


def write_snapshot(path: Path, records: Iterable[CardRecord], encoding: str = "utf-8") -> int:
    """Write ``records`` to ``path`` and return how many lines were written."""
    lines = [format_record(r) for r in records]
    _write_text(path, "".join(f"{line}\n" for line in lines), encoding)
    log.debug("Wrote %d records to %s", len(lines), path)
    return len(lines)


def write_transcript(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write an already-rendered transcript to ``path`` verbatim."""
    _write_text(path, text, encoding)
    log.debug("Saved transcript (%d chars) to %s", len(text), path)


__all__ = [
    "DELIMITER",
    "format_record",
    "parse_line",
    "read_snapshot",
    "write_snapshot",
    "write_transcript",
]
