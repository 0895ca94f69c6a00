"""Action names accepted at the session prompt."""

from __future__ import annotations

from enum import Enum

from flashdeck.core.errors import InvalidActionError


class Action(str, Enum):
    """One entry of the action menu; the value is the canonical token."""

    ADD = "add"
    REMOVE = "remove"
    IMPORT = "import"
    EXPORT = "export"
    ASK = "ask"
    EXIT = "exit"
    LOG = "log"
    HARDEST_CARD = "hardest card"
    RESET_STATS = "reset stats"

    @classmethod
    def parse(cls, raw: str) -> Action:
        """Map a typed action line to an :class:`Action`.

        Matching ignores case, surrounding whitespace and the width of the
        gaps between words, so ``"  Hardest   CARD "`` is ``HARDEST_CARD``.
        Raises :class:`InvalidActionError` for anything else.
        """
        token = " ".join(raw.split()).lower()
        action = _BY_TOKEN.get(token)
        if action is None:
            raise InvalidActionError(raw)
        return action


_BY_TOKEN: dict[str, Action] = {action.value: action for action in Action}

MENU_PROMPT = f"Input the action ({', '.join(a.value for a in Action)}):"


__all__ = ["Action", "MENU_PROMPT"]
