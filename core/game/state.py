"""Round state enumeration."""

from enum import Enum, auto

from core.hand import BLACKJACK


class RoundState(Enum):
    """
    Round state machine states.

    Flow: PLAYING → PLAYER_BLACKJACK | DEALER_BLACKJACK | PLAYER_BUST | DEALER_BUST | ROUND_END
    """

    # Cards are out and the round is undecided
    PLAYING = auto()

    # Settled early by a total of exactly 21
    PLAYER_BLACKJACK = auto()
    DEALER_BLACKJACK = auto()

    # Settled early by a total over 21
    PLAYER_BUST = auto()
    DEALER_BUST = auto()

    # Both turns finished without a blackjack or bust; decided on totals
    ROUND_END = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_terminal(self) -> bool:
        """Check if the round is settled."""
        return self != RoundState.PLAYING


# Valid state transitions; the engine builds its state machine from this table
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    # PLAYING may restart when a new deal replaces an unfinished one
    RoundState.PLAYING: [
        RoundState.PLAYING,
        RoundState.PLAYER_BLACKJACK,
        RoundState.DEALER_BLACKJACK,
        RoundState.PLAYER_BUST,
        RoundState.DEALER_BUST,
        RoundState.ROUND_END,
    ],
    # Settled outcomes only leave through a new round
    RoundState.PLAYER_BLACKJACK: [RoundState.PLAYING],
    RoundState.DEALER_BLACKJACK: [RoundState.PLAYING],
    RoundState.PLAYER_BUST: [RoundState.PLAYING],
    RoundState.DEALER_BUST: [RoundState.PLAYING],
    RoundState.ROUND_END: [RoundState.PLAYING],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])


def evaluate_state(player_total: int, dealer_total: int) -> RoundState:
    """
    Classify a pair of hand totals.

    Both totals are checked together on every call, in fixed priority:
    player 21, dealer 21, player over 21, dealer over 21.
    """
    if player_total == BLACKJACK:
        return RoundState.PLAYER_BLACKJACK
    if dealer_total == BLACKJACK:
        return RoundState.DEALER_BLACKJACK
    if player_total > BLACKJACK:
        return RoundState.PLAYER_BUST
    if dealer_total > BLACKJACK:
        return RoundState.DEALER_BUST
    return RoundState.PLAYING
