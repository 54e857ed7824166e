"""Tests for srs/scheduling/memory_store.py -- dict-backed card store."""

from srs.persistence import CardStore
from srs.scheduling import InMemoryCardStore, Rating, advance_card

from conftest import T0


def test_satisfies_card_store_protocol():
    assert isinstance(InMemoryCardStore(), CardStore)


def test_save_upserts_by_id(make_card):
    store = InMemoryCardStore([make_card("a"), make_card("b", deck_id=2)])
    updated = advance_card(store.load_card("a"), Rating.PASS, T0)

    store.save_card(updated)
    store.save_card(updated)

    assert store.load_card("a") == updated
    assert store.save_count == 2
    assert [c.id for c in store.load_cards_for_deck(1)] == ["a"]
    assert store.load_card("missing") is None
