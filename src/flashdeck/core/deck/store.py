"""
In-memory card store keyed by term, in insertion order.

This module implements the single mutable collection a session works on.
It provides:

- ``add(term, definition)``: guarded insert (unique term, unique definition).
- ``remove(term)``: delete a card by term.
- ``upsert_from_record(...)``: trusted bulk load used by snapshot imports.
- ``record_error(term)`` / ``reset_all_errors()``: quiz statistics.
- ``find_by_definition(...)`` / ``hardest_cards()``: read-side queries.
- ``snapshot()``: the full dump, in iteration order, for export.

Ordering
--------
Iteration order is insertion order. An upsert of an existing term keeps the
card where it is; a removed term that is added again goes to the end.
"""

from __future__ import annotations

from collections.abc import Iterator

from flashdeck.core.contracts.card import Card, CardRecord
from flashdeck.core.errors import StoreError
from flashdeck.core.result import Result, err, ok
from flashdeck.core.settings import get_logger

log = get_logger(__name__)


class CardStore:
    """
    Insertion-ordered mapping ``term -> Card``.

    Attributes
    ----------
    _cards : dict[str, Card]
        The cards, keyed by term. Plain ``dict`` keeps insertion order.
    """

    __slots__ = ("_cards",)

    def __init__(self) -> None:
        self._cards: dict[str, Card] = {}

    # ------------------------------- Mutations ------------------------------

    def add(self, term: str, definition: str) -> Result[Card, StoreError]:
        """
        Append a new card with a zero error count.

        Returns
        -------
        Result[Card, StoreError]
            ``Ok(card)`` on success; ``Err(DUPLICATE_TERM)`` if the term is
            taken; ``Err(DUPLICATE_DEFINITION)`` if any card already has this
            definition. A refused add leaves the store untouched.
        """
        if term in self._cards:
            return err(StoreError.DUPLICATE_TERM)
        if self.find_by_definition(definition) is not None:
            return err(StoreError.DUPLICATE_DEFINITION)
        card = Card(term=term, definition=definition)
        self._cards[term] = card
        log.debug("Added card %r", term)
        return ok(card)

    def remove(self, term: str) -> Result[Card, StoreError]:
        """Delete the card for ``term`` and return it, or ``Err(NOT_FOUND)``."""
        card = self._cards.pop(term, None)
        if card is None:
            return err(StoreError.NOT_FOUND)
        log.debug("Removed card %r", term)
        return ok(card)

    def upsert_from_record(self, term: str, definition: str, error_count: int) -> Card:
        """
        Overwrite an existing card in place, or append a new one.

        Bulk loads are trusted: the duplicate-definition rule is not applied
        here, so an import may leave two cards with the same definition.
        """
        card = self._cards.get(term)
        if card is None:
            card = Card(term=term, definition=definition, error_count=error_count)
            self._cards[term] = card
        else:
            card.definition = definition
            card.error_count = error_count
        return card

    def record_error(self, term: str) -> int:
        """Increment the miss counter for ``term`` and return the new value.

        Raises ``KeyError`` if the term is not in the store.
        """
        card = self._cards[term]
        card.error_count += 1
        return card.error_count

    def reset_all_errors(self) -> None:
        """Set every card's error count back to zero."""
        for card in self._cards.values():
            card.error_count = 0
        log.debug("Reset error counts on %d cards", len(self._cards))

    # ------------------------------- Queries --------------------------------

    def find_by_definition(self, definition: str) -> str | None:
        """Return the first term (in iteration order) whose definition matches exactly."""
        for term, card in self._cards.items():
            if card.definition == definition:
                return term
        return None

    def hardest_cards(self) -> tuple[list[Card], int]:
        """
        Return the cards sharing the highest error count, and that count.

        Returns
        -------
        tuple[list[Card], int]
            ``([], 0)`` when no card has any errors (this includes the empty
            store); otherwise every card whose count equals the maximum, in
            iteration order, together with the maximum.
        """
        top = max((card.error_count for card in self._cards.values()), default=0)
        if top == 0:
            return [], 0
        return [card for card in self._cards.values() if card.error_count == top], top

    def snapshot(self) -> list[CardRecord]:
        """Return every card as a flat record, in iteration order."""
        return [card.to_record() for card in self._cards.values()]

    def __contains__(self, term: object) -> bool:
        return term in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards.values()))

    def __len__(self) -> int:
        return len(self._cards)


__all__ = ["CardStore"]
