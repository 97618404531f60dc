"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from core.cards import Card

BLACKJACK = 21


class Winner(Enum):
    """Who takes the round."""

    PLAYER = "player"
    DEALER = "dealer"
    PUSH = "push"

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """
        Calculate the hand total.

        Every Ace starts at 11; while the total is over 21, Aces are
        softened to 1 one at a time. A total above 21 with no Ace left
        to soften is a bust.
        """
        total = 0
        aces = 0

        for card in self.cards:
            total += card.value
            if card.is_ace:
                aces += 1

        # Reduce aces from 11 to 1 as needed
        while total > BLACKJACK and aces > 0:
            total -= 10
            aces -= 1

        return total

    def total(self) -> int:
        """Return the hand total (same as ``value``)."""
        return self.value

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        A hand is soft if it contains an ace that can be counted as 11
        without busting.
        """
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def compare_hands(player_hand: Hand, dealer_hand: Hand) -> Winner:
    """Decide a settled round by total: higher wins, equal is a push."""
    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return Winner.PLAYER
    if dealer_value > player_value:
        return Winner.DEALER
    return Winner.PUSH
