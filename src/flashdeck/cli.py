# src/flashdeck/cli.py
"""
flashdeck Command Line Interface (CLI).

This module wires the interactive session to the real terminal using `typer`
and `rich`. The session itself reads actions from stdin until `exit`.

Options
-------
- ``-import PATH``: load a snapshot before the first prompt.
- ``-export PATH``: write the final cards to a snapshot after `exit`.

Both also accept the double-dash spelling (``--import`` / ``--export``).

Exit status
-----------
0 after a normal `exit`; 1 when the session ends on a fatal error (unknown
action, malformed snapshot line, unreadable/unwritable file, end of input).

Usage
-----
    $ flashdeck -import capitals.txt -export capitals.txt
    Input the action (add, remove, import, export, ask, exit, log, hardest card, reset stats):
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console

from flashdeck.core.errors import FlashdeckError
from flashdeck.core.settings import get_logger
from flashdeck.session.console import SessionConsole, StreamInput
from flashdeck.session.controller import SessionController

# Pick up FLASHDECK_* settings from a local .env before anything reads them
load_dotenv()

app = typer.Typer(
    help="flashdeck: an interactive flashcard trainer.",
    add_completion=False,
)
err_console = Console(stderr=True)
log = get_logger(__name__)


@app.command()  # type: ignore[misc]
def main(
    import_path: Annotated[
        Path | None,
        typer.Option(
            "-import",
            "--import",
            help="Snapshot file to load before the first prompt.",
        ),
    ] = None,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "-export",
            "--export",
            help="Snapshot file that receives all cards on exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show full error tracebacks for debugging.",
        ),
    ] = False,
) -> None:
    """
    Start an interactive flashcard session on stdin/stdout.

    Type an action name at the prompt: add, remove, import, export, ask,
    exit, log, hardest card, reset stats.
    """
    io = SessionConsole(
        StreamInput(sys.stdin),
        Console(highlight=False, soft_wrap=True),
    )
    controller = SessionController(io, export_path=export_path)

    try:
        controller.run(import_path=import_path)
    except FlashdeckError as e:
        log.error("Session aborted: %s", e)
        err_console.print(f"Error: {e}", style="bold red", markup=False, highlight=False)
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
