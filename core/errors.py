"""Engine error types."""


class BlackjackError(Exception):
    """Base class for blackjack engine errors."""


class DeckExhausted(BlackjackError, IndexError):
    """Raised when a card is dealt from an empty deck."""

    def __init__(self, message: str = "Cannot deal from an empty deck") -> None:
        super().__init__(message)


class InvalidDecision(BlackjackError, ValueError):
    """Raised when a player decision is neither hit nor stand."""

    def __init__(self, decision: object) -> None:
        self.decision = decision
        super().__init__(f"Invalid decision: {decision!r} (expected hit or stand)")


class RoundNotInProgress(BlackjackError, RuntimeError):
    """Raised when a player action arrives outside the playing phase."""

    def __init__(self, state: object) -> None:
        self.state = state
        super().__init__(f"No player action allowed in state {state}")
