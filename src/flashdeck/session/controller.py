"""
Session controller: the action loop over one card store.

Flow
----
1. Optionally import a snapshot given at startup.
2. Loop: show the action menu, parse the reply into an :class:`Action`,
   run its handler, print a blank line.
3. On ``exit``: say goodbye and, if configured, export the final store.

State
-----
All state is owned by the controller instance: the :class:`CardStore`, the
:class:`SessionConsole` (and through it the transcript) and the random
generator used to shuffle quiz cards. Nothing is module-global, so a test can
build a controller around scripted input and inspect the store afterwards.

Errors
------
Store refusals (duplicates, missing card) and a missing import file are
reported as messages and the loop continues. :class:`FlashdeckError`
subclasses propagate out of :meth:`SessionController.run` and end the session.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path

from flashdeck.core.deck.snapshot import read_snapshot, write_snapshot, write_transcript
from flashdeck.core.deck.store import CardStore
from flashdeck.core.errors import InvalidInputError
from flashdeck.core.settings import get_logger, load_settings
from flashdeck.session.actions import MENU_PROMPT, Action
from flashdeck.session.console import SessionConsole

log = get_logger(__name__)


class SessionController:
    """Interpret menu actions against a :class:`CardStore`.

    Parameters
    ----------
    io : SessionConsole
        Prompt/answer channel; also owns the transcript.
    store : CardStore | None
        Store to operate on. A fresh empty store by default.
    rng : random.Random | None
        Generator whose ``shuffle`` orders quiz cards. Defaults to one seeded
        from ``settings.shuffle_seed`` (unseeded when that is unset).
    export_path : Path | None
        Snapshot written after ``exit``, if given.
    encoding : str | None
        Encoding for snapshot and log files. Defaults to
        ``settings.file_encoding``.
    """

    def __init__(
        self,
        io: SessionConsole,
        store: CardStore | None = None,
        *,
        rng: random.Random | None = None,
        export_path: Path | None = None,
        encoding: str | None = None,
    ) -> None:
        cfg = load_settings()
        self.io = io
        self.store = store if store is not None else CardStore()
        self.rng = rng if rng is not None else random.Random(cfg.shuffle_seed)
        self.export_path = export_path
        self.encoding = encoding or cfg.file_encoding
        self._handlers: dict[Action, Callable[[], None]] = {
            Action.ADD: self.add_card,
            Action.REMOVE: self.remove_card,
            Action.IMPORT: self.import_cards,
            Action.EXPORT: self.export_cards,
            Action.ASK: self.ask,
            Action.EXIT: self.exit,
            Action.LOG: self.save_log,
            Action.HARDEST_CARD: self.hardest_card,
            Action.RESET_STATS: self.reset_stats,
        }

    # --------------------------------------------------------------------- #
    # Loop
    # --------------------------------------------------------------------- #

    def run(self, import_path: Path | None = None) -> None:
        """Run the session until ``exit``.

        ``import_path`` is loaded before the first prompt, with the same
        semantics as the ``import`` action.
        """
        if import_path is not None:
            self.load(import_path)

        while True:
            action = Action.parse(self.io.ask(MENU_PROMPT))
            log.debug("Dispatching %s", action.name)
            self._handlers[action]()
            if action is Action.EXIT:
                return
            self.io.blank()

    # --------------------------------------------------------------------- #
    # Card management
    # --------------------------------------------------------------------- #

    def add_card(self) -> None:
        term = self.io.ask("The card:")
        if not term:
            raise InvalidInputError("A card term cannot be empty")
        if term in self.store:
            self.io.say(f'The card "{term}" already exists.')
            return

        definition = self.io.ask("The definition of the card:")
        result = self.store.add(term, definition)
        if result.is_err():
            # The term was checked above, so only the definition can clash here.
            self.io.say(f'The definition "{definition}" already exists.')
            return
        card = result.unwrap()
        self.io.say(f'The pair ("{card.term}":"{card.definition}") has been added.')

    def remove_card(self) -> None:
        term = self.io.ask("Which card?")
        result = self.store.remove(term)
        if result.is_err():
            self.io.say(f'Can\'t remove "{term}": there is no such card.')
            return
        log.debug("Removed %r with %d errors", term, result.unwrap().error_count)
        self.io.say("The card has been removed.")

    # --------------------------------------------------------------------- #
    # Files
    # --------------------------------------------------------------------- #

    def import_cards(self) -> None:
        self.load(Path(self.io.ask("File name:")))

    def load(self, path: Path) -> None:
        """Merge the snapshot at ``path`` into the store and report the count."""
        if not path.is_file():
            self.io.say("File not found.")
            return

        records = read_snapshot(path, self.encoding)
        for record in records:
            self.store.upsert_from_record(record.term, record.definition, record.error_count)
        log.info("Loaded %d cards from %s", len(records), path)
        self.io.say(f"{len(records)} cards have been loaded.")

    def export_cards(self) -> None:
        self.save(Path(self.io.ask("File name:")))

    def save(self, path: Path) -> None:
        """Write the whole store to ``path`` and report the count."""
        count = write_snapshot(path, self.store.snapshot(), self.encoding)
        log.info("Saved %d cards to %s", count, path)
        self.io.say(f"{count} cards have been saved.")

    def save_log(self) -> None:
        """Write the transcript so far, including this action's own prompt and reply."""
        path = Path(self.io.ask("File name:"))
        write_transcript(path, self.io.transcript.render(), self.encoding)
        self.io.say("The log has been saved.")

    # --------------------------------------------------------------------- #
    # Quiz & statistics
    # --------------------------------------------------------------------- #

    def ask(self) -> None:
        """Quiz the user ``count`` times over one shuffled pass order.

        The card list is shuffled once; when ``count`` exceeds the number of
        cards the same order repeats.
        """
        raw = self.io.ask("How many times to ask?")
        try:
            count = int(raw.strip())
        except ValueError as e:
            raise InvalidInputError(f"Expected a number of questions, got {raw!r}") from e

        cards = list(self.store)
        if not cards:
            self.io.say("There are no cards to ask.")
            return
        self.rng.shuffle(cards)

        for i in range(count):
            card = cards[i % len(cards)]
            answer = self.io.ask(f'Print the definition of "{card.term}":')
            if answer == card.definition:
                self.io.say("Correct!")
                continue

            self.store.record_error(card.term)
            other = self.store.find_by_definition(answer)
            if other is not None:
                self.io.say(
                    f'Wrong. The right answer is "{card.definition}", '
                    f'but your definition is correct for "{other}".'
                )
            else:
                self.io.say(f'Wrong. The right answer is "{card.definition}".')

    def hardest_card(self) -> None:
        cards, errors = self.store.hardest_cards()
        if not cards:
            self.io.say("There are no cards with errors.")
        elif len(cards) == 1:
            self.io.say(
                f'The hardest card is "{cards[0].term}". '
                f"You have {errors} errors answering it."
            )
        else:
            terms = ", ".join(f'"{card.term}"' for card in cards)
            self.io.say(f"The hardest cards are {terms}. You have {errors} errors answering them.")

    def reset_stats(self) -> None:
        self.store.reset_all_errors()
        self.io.say("Card statistics have been reset.")

    def exit(self) -> None:
        self.io.say("Bye bye!")
        if self.export_path is not None:
            self.save(self.export_path)


__all__ = ["SessionController"]
