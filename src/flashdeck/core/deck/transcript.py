"""
Session transcript: everything shown and everything read, in order.

The transcript is append-only and feeds exactly one consumer, the ``log``
action, which writes it out verbatim. Nothing else reads it.

Design Notes
------------
- Each entry is one logical line without its newline; :meth:`render` adds a
  newline after every entry, so an empty entry becomes a blank line.
- :meth:`entries` returns a tuple so callers cannot rewrite history.
"""

from __future__ import annotations


class Transcript:
    """Ordered, append-only record of console lines."""

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: list[str] = []

    def record(self, line: str) -> None:
        """Append one line (shown or read)."""
        self._lines.append(line)

    def entries(self) -> tuple[str, ...]:
        """Return all recorded lines (immutable tuple)."""
        return tuple(self._lines)

    def render(self) -> str:
        """Return the transcript as text, each entry followed by a newline."""
        return "".join(f"{line}\n" for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)


__all__ = ["Transcript"]
