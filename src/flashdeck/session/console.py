"""
Console plumbing for the interactive session.

The session never touches ``sys.stdin`` or ``print`` directly. It talks to a
:class:`SessionConsole`, which combines:

- an :class:`InputSource` (anything with ``readline() -> str | None``),
- a ``rich`` :class:`~rich.console.Console` for output,
- the session :class:`~flashdeck.core.deck.transcript.Transcript`.

Every line shown and every line read passes through here, which is what keeps
the transcript complete. Tests swap in :class:`ScriptedInput` and a console
writing to a ``StringIO``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TextIO

from rich.console import Console

from flashdeck.core.deck.transcript import Transcript
from flashdeck.core.errors import EndOfInputError


class InputSource(Protocol):
    """Anything the session can pull input lines from."""

    def readline(self) -> str | None:
        """Return the next line without its newline, or ``None`` at end of input."""
        ...


class StreamInput:
    """Read lines from a text stream such as ``sys.stdin``."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def readline(self) -> str | None:
        line = self._stream.readline()
        if not line:
            return None
        # Only the line terminator is dropped; answers are compared verbatim.
        return line.removesuffix("\n").removesuffix("\r")


class ScriptedInput:
    """Serve a fixed sequence of lines, then report end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._pos = 0

    def readline(self) -> str | None:
        if self._pos >= len(self._lines):
            return None
        line = self._lines[self._pos]
        self._pos += 1
        return line

    @property
    def remaining(self) -> int:
        """Number of lines not yet consumed."""
        return len(self._lines) - self._pos


class SessionConsole:
    """Prompt/answer channel that records everything into a transcript."""

    def __init__(
        self,
        source: InputSource,
        console: Console | None = None,
        transcript: Transcript | None = None,
    ) -> None:
        self.source = source
        self.console = console if console is not None else Console(highlight=False, soft_wrap=True)
        self.transcript = transcript if transcript is not None else Transcript()

    def say(self, text: str) -> None:
        """Print one line verbatim and record it."""
        # Card text may contain "[...]"; markup must stay off.
        self.console.print(text, markup=False, highlight=False, emoji=False)
        self.transcript.record(text)

    def blank(self) -> None:
        """Print and record an empty line."""
        self.say("")

    def read(self) -> str:
        """Read one line and record it.

        Raises
        ------
        EndOfInputError
            If the input source is exhausted.
        """
        line = self.source.readline()
        if line is None:
            raise EndOfInputError()
        self.transcript.record(line)
        return line

    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input line."""
        self.say(prompt)
        return self.read()


__all__ = ["InputSource", "StreamInput", "ScriptedInput", "SessionConsole"]
