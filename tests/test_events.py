import random

import config
from events import EventDeck

from conftest import FixedRandom


def test_deck_starts_with_every_card_shuffled(reference):
    deck = EventDeck(reference, random.Random(7))
    assert len(deck) == len(reference.events)
    assert sorted(deck.card_ids) == sorted(reference.events)


def test_same_seed_same_order(reference):
    first = EventDeck(reference, random.Random(42))
    second = EventDeck(reference, random.Random(42))
    assert first.card_ids == second.card_ids


def test_relevant_cards_by_year(reference):
    deck = EventDeck(reference, random.Random(1))
    assert sorted(deck.relevant_ids(1953)) == ["E001", "E002", "E003"]
    assert deck.relevant_ids(1900) == []


def test_draw_two_cards_below_threshold(reference):
    deck = EventDeck(reference, FixedRandom(0.3))
    drawn = deck.draw(1953)
    assert len(drawn) == 2
    assert len({card.id for card in drawn}) == 2
    for card in drawn:
        assert card.id not in deck
    assert len(deck) == len(reference.events) - 2


def test_draw_one_card_at_or_above_threshold(reference):
    deck = EventDeck(reference, FixedRandom(config.EVENT_DOUBLE_DRAW_PROB))
    drawn = deck.draw(1953)
    assert len(drawn) == 1
    assert drawn[0].is_relevant(1953)


def test_draw_without_relevant_cards(reference):
    deck = EventDeck(reference, random.Random(3))
    assert deck.draw(1900) == []
    assert len(deck) == len(reference.events)


def test_cards_are_never_drawn_twice(reference):
    deck = EventDeck(reference, random.Random(11))
    seen = []
    for _ in range(5):
        seen.extend(card.id for card in deck.draw(1953))
    assert sorted(seen) == ["E001", "E002", "E003"]
    assert deck.draw(1953) == []


def test_remove_by_id(small_reference):
    deck = EventDeck(small_reference, random.Random(0), ["S1", "S2"])
    assert deck.remove("S1")
    assert not deck.remove("S1")
    assert deck.card_ids == ["S2"]


def test_explicit_order_is_kept(small_reference):
    deck = EventDeck(small_reference, random.Random(0), ["S3", "S1", "S2"])
    assert deck.card_ids == ["S3", "S1", "S2"]
    assert deck.relevant_ids(2005) == ["S3", "S2"]


def test_engine_draw_sets_pending_and_phase(reference):
    from election import GameEngine

    engine = GameEngine("NDP", reference=reference, rng=FixedRandom(0.3))
    drawn = engine.draw_events().value
    assert [card.id for card in drawn] == engine.pending_event_ids
    assert engine.current_phase() == config.PHASE_EVENT

    for card in drawn:
        assert engine.apply_event(card)
    assert engine.pending_events() == []
    assert engine.current_phase() == config.PHASE_CAMPAIGN


def test_event_effects_applied_with_clamp(reference):
    from election import GameEngine

    engine = GameEngine("LPC", reference=reference, seed=3)
    engine.support["ON"]["CPC"] = 5
    changes = engine.apply_event("E002").value
    assert engine.support["ON"]["CPC"] == 0
    assert engine.support["ON"]["LPC"] == 52
    assert engine.support["ON"]["NDP"] == 14
    assert ("ON", "CPC", 5, 0) in changes
