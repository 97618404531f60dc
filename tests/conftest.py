"""Pytest fixtures for blackjack engine tests."""

from random import Random
from typing import Iterable

import pytest

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackRound


class StackedDeck(Deck):
    """Deck that always deals the same cards in the given order and never shuffles."""

    def __init__(self, cards: Iterable[Card | str], rng: Random | None = None) -> None:
        self._order = [c if isinstance(c, Card) else Card.from_string(c) for c in cards]
        super().__init__(rng=rng)

    def reset(self) -> None:
        self._cards = list(reversed(self._order))

    def shuffle(self) -> None:
        pass


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    hand = Hand()
    for card in cards:
        hand.add_card(Card.from_string(card))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def stacked_deck():
    """Factory for decks with a fixed deal order (player, dealer, player, dealer, ...)."""
    return StackedDeck


@pytest.fixture
def rigged_game(stacked_deck):
    """Factory for a round engine dealing from a fixed card order."""

    def factory(*cards: str, **kwargs) -> BlackjackRound:
        return BlackjackRound(deck=stacked_deck(cards), **kwargs)

    return factory


@pytest.fixture
def game(rng):
    """A round engine with a seeded deck."""
    return BlackjackRound(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def all_cards():
    """Every distinct card once."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


@pytest.fixture
def hand_of():
    """Factory building a hand from card strings."""
    return make_hand
