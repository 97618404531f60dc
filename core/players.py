"""Participants and their decision policies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from core.hand import Hand
from core.errors import InvalidDecision

DEALER_STANDS_ON = 17


class Decision(Enum):
    """A participant's choice at a decision point."""

    HIT = "hit"
    STAND = "stand"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: "Decision | str") -> "Decision":
        """
        Coerce user-facing input into a Decision.

        Accepts Decision members and the strings 'hit', 'stand', 'h', 's'
        in any case.

        Raises:
            InvalidDecision: For anything else.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            text = raw.strip().lower()
            for decision in cls:
                if text in (decision.value, decision.value[0]):
                    return decision
        raise InvalidDecision(raw)


# A policy looks at the participant's hand and picks the next move
Policy = Callable[[Hand], Decision]


def dealer_policy(stands_on: int = DEALER_STANDS_ON) -> Policy:
    """
    Build the fixed dealer policy.

    The dealer hits while the total is below ``stands_on`` and stands
    otherwise. Soft totals are treated like hard ones, so the dealer
    stands on soft 17.
    """

    def decide(hand: Hand) -> Decision:
        return Decision.HIT if hand.value < stands_on else Decision.STAND

    return decide


def always_stand(hand: Hand) -> Decision:
    """Policy that never draws."""
    return Decision.STAND


@dataclass
class Participant:
    """A seat at the table: one hand plus the policy that plays it."""

    name: str
    policy: Policy = always_stand
    hand: Hand = field(default_factory=Hand)

    def decide(self) -> Decision:
        """Ask the policy for the next move."""
        return Decision.parse(self.policy(self.hand))

    @property
    def hand_value(self) -> int:
        """Return the current hand total."""
        return self.hand.value

    def __str__(self) -> str:
        return f"{self.name}: {self.hand}"
