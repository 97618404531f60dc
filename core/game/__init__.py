"""Round engine and state management."""

from core.game.events import GameEvent, EventEmitter, EventType
from core.game.state import RoundState, evaluate_state
from core.game.engine import BlackjackRound, RoundResult

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundState",
    "evaluate_state",
    "BlackjackRound",
    "RoundResult",
]
