"""Interactive session: action parsing, console channel and the controller loop.

Re-exports the public entry points so callers can write:
    from flashdeck.session import SessionController, SessionConsole
"""

from __future__ import annotations

from .actions import MENU_PROMPT, Action
from .console import InputSource, ScriptedInput, SessionConsole, StreamInput
from .controller import SessionController

__all__ = [
    "Action",
    "MENU_PROMPT",
    "InputSource",
    "ScriptedInput",
    "SessionConsole",
    "StreamInput",
    "SessionController",
]
