"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.errors import BlackjackError, DeckExhausted, InvalidDecision, RoundNotInProgress
from core.hand import Hand, Winner, compare_hands
from core.players import Decision, Participant, dealer_policy

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "BlackjackError",
    "DeckExhausted",
    "InvalidDecision",
    "RoundNotInProgress",
    "Hand",
    "Winner",
    "compare_hands",
    "Decision",
    "Participant",
    "dealer_policy",
]
