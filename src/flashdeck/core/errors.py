"""Error kinds for the card store and the interactive session.

Two families live here:

- :class:`StoreError` values are *returned* (inside ``Err``) by the card store
  for everyday refusals. The session turns them into a message and the action
  ends without touching the store.
- :class:`FlashdeckError` subclasses are *raised* for conditions that end the
  whole session. The CLI catches the base class and exits with status 1.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class StoreError(str, Enum):
    """Non-fatal outcomes of a card store mutation."""

    DUPLICATE_TERM = "duplicate_term"
    DUPLICATE_DEFINITION = "duplicate_definition"
    NOT_FOUND = "not_found"


class FlashdeckError(Exception):
    """Base class for errors that terminate a session."""


class InvalidActionError(FlashdeckError):
    """The action line does not name a known action."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown action: {token!r}")
        self.token = token


class InvalidInputError(FlashdeckError):
    """A required input line could not be interpreted (e.g. a non-numeric count)."""


class EndOfInputError(FlashdeckError):
    """Input ran out while the session was waiting for a line."""

    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class MalformedRecordError(FlashdeckError):
    """A snapshot line does not parse into ``term : definition : count``."""

    def __init__(self, path: Path, line_no: int, line: str, reason: str) -> None:
        super().__init__(f"{path}:{line_no}: {reason}: {line!r}")
        self.path = path
        self.line_no = line_no
        self.line = line
        self.reason = reason


class SnapshotIOError(FlashdeckError):
    """A snapshot or log file could not be opened, decoded, encoded, or written."""

    def __init__(self, path: Path, cause: Exception) -> None:
        reason = cause.strerror if isinstance(cause, OSError) and cause.strerror else cause
        super().__init__(f"Cannot access {path}: {reason}")
        self.path = path


__all__ = [
    "StoreError",
    "FlashdeckError",
    "InvalidActionError",
    "InvalidInputError",
    "EndOfInputError",
    "MalformedRecordError",
    "SnapshotIOError",
]
