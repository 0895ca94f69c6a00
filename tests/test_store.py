"""Unit tests for the in-memory card store."""

from __future__ import annotations

import pytest

from flashdeck.core.contracts.card import CardRecord
from flashdeck.core.deck.store import CardStore
from flashdeck.core.errors import StoreError


def terms(store: CardStore) -> tuple[str, ...]:
    return tuple(card.term for card in store)


def _store(*pairs: tuple[str, str]) -> CardStore:
    store = CardStore()
    for term, definition in pairs:
        store.add(term, definition).unwrap()
    return store


def test_add_appends_with_zero_errors() -> None:
    """A fresh card starts at zero errors and lands at the end."""
    store = _store(("a", "1"))
    card = store.add("b", "2").unwrap()
    assert card.term == "b" and card.definition == "2" and card.error_count == 0
    assert terms(store) == ("a", "b")
    assert len(store) == 2 and "b" in store


def test_duplicate_term_is_refused_without_mutation() -> None:
    store = _store(("a", "1"))
    result = store.add("a", "other")
    assert result.is_err() and result.unwrap_err() is StoreError.DUPLICATE_TERM
    assert store.snapshot() == [CardRecord("a", "1", 0)]


def test_duplicate_definition_is_refused_even_for_new_term() -> None:
    store = _store(("a", "1"))
    result = store.add("b", "1")
    assert result.unwrap_err() is StoreError.DUPLICATE_DEFINITION
    assert "b" not in store
    assert terms(store) == ("a",)


def test_remove_missing_term_reports_not_found() -> None:
    store = _store(("a", "1"))
    assert store.remove("zzz").unwrap_err() is StoreError.NOT_FOUND
    assert store.remove("a").unwrap().term == "a"
    assert len(store) == 0


def test_order_follows_insertion_across_adds_and_removes() -> None:
    """Removed terms drop out; re-added terms go to the end."""
    store = _store(("a", "1"), ("b", "2"), ("c", "3"))
    store.remove("b")
    store.add("d", "4")
    store.add("b", "2")
    assert terms(store) == ("a", "c", "d", "b")


def test_upsert_overwrites_in_place_and_skips_definition_check() -> None:
    store = _store(("a", "1"), ("b", "2"))
    store.upsert_from_record("a", "2", 5)
    store.upsert_from_record("c", "9", 1)
    assert store.snapshot() == [
        CardRecord("a", "2", 5),
        CardRecord("b", "2", 0),
        CardRecord("c", "9", 1),
    ]


def test_record_error_and_unknown_term() -> None:
    store = _store(("a", "1"))
    assert store.record_error("a") == 1
    assert store.record_error("a") == 2
    with pytest.raises(KeyError):
        store.record_error("missing")


def test_find_by_definition_returns_first_in_order() -> None:
    store = CardStore()
    store.upsert_from_record("x", "same", 0)
    store.upsert_from_record("y", "same", 0)
    assert store.find_by_definition("same") == "x"
    assert store.find_by_definition("nothing") is None


def test_hardest_cards_without_errors() -> None:
    assert CardStore().hardest_cards() == ([], 0)
    store = _store(("a", "1"), ("b", "2"))
    assert store.hardest_cards() == ([], 0)


def test_hardest_cards_returns_all_ties_in_order() -> None:
    store = CardStore()
    for term, count in (("w", 0), ("x", 3), ("y", 3), ("z", 1)):
        store.upsert_from_record(term, f"def-{term}", count)
    cards, top = store.hardest_cards()
    assert top == 3
    assert [c.term for c in cards] == ["x", "y"]


def test_reset_then_hardest_signals_no_errors() -> None:
    store = CardStore()
    store.upsert_from_record("a", "1", 4)
    store.upsert_from_record("b", "2", 2)
    store.reset_all_errors()
    assert store.hardest_cards() == ([], 0)
    assert all(card.error_count == 0 for card in store)
