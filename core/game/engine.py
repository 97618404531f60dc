"""Blackjack round orchestrator with state machine."""

from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck
from core.errors import DeckExhausted, InvalidDecision, RoundNotInProgress
from core.hand import Hand, Winner, compare_hands
from core.players import (
    DEALER_STANDS_ON,
    Decision,
    Participant,
    Policy,
    always_stand,
    dealer_policy,
)
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import VALID_TRANSITIONS, RoundState, evaluate_state

# Early outcomes decided straight from the state
_SETTLED_WINNERS = {
    RoundState.PLAYER_BLACKJACK: Winner.PLAYER,
    RoundState.DEALER_BUST: Winner.PLAYER,
    RoundState.DEALER_BLACKJACK: Winner.DEALER,
    RoundState.PLAYER_BUST: Winner.DEALER,
}

_SETTLEMENT_EVENTS = {
    RoundState.PLAYER_BLACKJACK: EventType.PLAYER_BLACKJACK,
    RoundState.DEALER_BLACKJACK: EventType.DEALER_BLACKJACK,
    RoundState.PLAYER_BUST: EventType.PLAYER_BUSTS,
    RoundState.DEALER_BUST: EventType.DEALER_BUSTS,
}

_OUTCOME_EVENTS = {
    Winner.PLAYER: EventType.PLAYER_WINS,
    Winner.DEALER: EventType.DEALER_WINS,
    Winner.PUSH: EventType.PUSH,
}


def _trigger_name(dest: RoundState) -> str:
    """Name of the machine trigger that moves into ``dest``."""
    if dest == RoundState.PLAYING:
        return "new_round"
    if dest == RoundState.ROUND_END:
        return "finish"
    return f"settle_{dest.name.lower()}"


@dataclass(frozen=True)
class RoundResult:
    """Snapshot of a round handed back to the presentation layer."""

    state: RoundState
    player_total: int
    dealer_total: int
    player_cards: tuple[Card, ...] = ()
    dealer_cards: tuple[Card, ...] = ()
    winner: Winner | None = None

    @property
    def is_over(self) -> bool:
        """Check if the round has been settled."""
        return self.state.is_terminal


def winner_for(state: RoundState, player_hand: Hand, dealer_hand: Hand) -> Winner | None:
    """Return the winner for a settled state, or None while still playing."""
    if state == RoundState.PLAYING:
        return None
    if state == RoundState.ROUND_END:
        return compare_hands(player_hand, dealer_hand)
    return _SETTLED_WINNERS[state]


class BlackjackRound:
    """
    Single-player blackjack against a fixed-policy dealer.

    The engine is UI-agnostic: it never prints or reads input. Callers drive
    it through start_round/player_hit/player_stand (or play) and observe it
    through RoundResult snapshots and events.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": _trigger_name(dest), "source": source.name.lower(), "dest": dest.name.lower()}
        for source, targets in VALID_TRANSITIONS.items()
        for dest in targets
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rng: Random | None = None,
        dealer_stands_on: int = DEALER_STANDS_ON,
        player_policy: Policy | None = None,
    ) -> None:
        """
        Initialize a round engine.

        Args:
            deck: Deck to play with (a fresh 52-card deck if not provided)
            rng: Random number generator for a fresh deck, for reproducible games
            dealer_stands_on: Dealer draws while below this total
            player_policy: Decision policy used by play() when no other is given
        """
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.player = Participant("Player", policy=player_policy or always_stand)
        self.dealer = Participant("Dealer", policy=dealer_policy(dealer_stands_on))
        self.events = EventEmitter()
        self.round_number = 0
        self._dealt = False

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="playing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def in_progress(self) -> bool:
        """Check if a round has been dealt and awaits player decisions."""
        return self._dealt and self.state == RoundState.PLAYING

    @property
    def winner(self) -> Winner | None:
        """Return the winner of the settled round, if any."""
        if self.round_number == 0:
            return None
        return winner_for(self.state, self.player.hand, self.dealer.hand)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def result(self) -> RoundResult:
        """Return a snapshot of the current round."""
        return RoundResult(
            state=self.state,
            player_total=self.player.hand_value,
            dealer_total=self.dealer.hand_value,
            player_cards=tuple(self.player.hand),
            dealer_cards=tuple(self.dealer.hand),
            winner=self.winner,
        )

    def start_round(self) -> RoundResult:
        """
        Set up a fresh round and deal the opening cards.

        Hands are cleared, the deck is rebuilt and shuffled, then two cards
        each are dealt alternately starting with the player. The round may
        already be settled when this returns.

        Raises:
            DeckExhausted: If the deck runs out during the opening deal; the
                round is then not in progress and rejects player actions.
        """
        self._dealt = False
        self.player.hand.clear()
        self.dealer.hand.clear()
        self.events.clear_history()
        self.new_round()
        self.round_number += 1

        self.deck.reset()
        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(self.deck))

        # Deal: player, dealer, player, dealer
        for _ in range(2):
            self._deal_to(self.player)
            self._deal_to(self.dealer)
        self._dealt = True

        self.events.emit_new(
            EventType.ROUND_STARTED,
            round_number=self.round_number,
            player_value=self.player.hand_value,
            dealer_value=self.dealer.hand_value,
        )

        self._evaluate()
        return self.result()

    def player_hit(self) -> RoundResult:
        """
        Deal one card to the player and re-check the round.

        Raises:
            RoundNotInProgress: If the round is not in the playing phase.
            DeckExhausted: If the deck is empty; no hand is changed.
        """
        self._require_playing(Decision.HIT)

        self._deal_to(self.player)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player.hand_value)

        self._evaluate()
        return self.result()

    def player_stand(self) -> RoundResult:
        """
        End the player's turn, play the dealer and settle the round.

        Raises:
            RoundNotInProgress: If the round is not in the playing phase.
        """
        self._require_playing(Decision.STAND)

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.hand_value)
        self._play_dealer()

        if not self._evaluate():
            # Both turns done with nothing settled: decide on totals
            self.finish()
            self._settle()
        return self.result()

    def apply(self, decision: Decision | str) -> RoundResult:
        """
        Carry out a player decision.

        Raises:
            InvalidDecision: If ``decision`` is not hit or stand.
        """
        try:
            choice = Decision.parse(decision)
        except InvalidDecision:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Decision must be hit or stand",
                decision=repr(decision),
            )
            raise

        if choice == Decision.HIT:
            return self.player_hit()
        return self.player_stand()

    def play(self, policy: Policy | None = None) -> RoundResult:
        """
        Play a whole round, asking ``policy`` (or the player's own) for decisions.

        The policy is called with the player's hand each time a decision is
        needed and blocks for as long as it likes.
        """
        decide = policy or self.player.policy
        result = self.start_round()
        while not result.is_over:
            result = self.apply(decide(self.player.hand))
        return result

    def _require_playing(self, decision: Decision) -> None:
        """Reject player actions outside the playing phase."""
        if not self.in_progress:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"Cannot {decision} in current state",
                state=self.state.name,
                round_number=self.round_number,
            )
            raise RoundNotInProgress(self.state)

    def _deal_to(self, participant: Participant) -> Card:
        """Move the top card of the deck into a participant's hand."""
        try:
            card = self.deck.deal()
        except DeckExhausted:
            self.events.emit_new(EventType.DECK_EXHAUSTED, hand=participant.name.lower())
            raise

        participant.hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=participant.name.lower(),
            hand_value=participant.hand_value,
        )
        return card

    def _play_dealer(self) -> None:
        """Dealer draws according to its fixed policy."""
        while self.dealer.decide() == Decision.HIT:
            self._deal_to(self.dealer)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer.hand_value)

        if not self.dealer.hand.is_busted:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.hand_value)

    def _evaluate(self) -> bool:
        """
        Recompute the round state from both hand totals.

        Returns:
            True if the round is settled
        """
        if self.state != RoundState.PLAYING:
            return True

        target = evaluate_state(self.player.hand_value, self.dealer.hand_value)
        if target == RoundState.PLAYING:
            return False

        self.events.emit_new(
            _SETTLEMENT_EVENTS[target],
            player_value=self.player.hand_value,
            dealer_value=self.dealer.hand_value,
        )
        self.trigger(f"settle_{target.name.lower()}")
        self._settle()
        return True

    def _settle(self) -> None:
        """Announce the outcome of a settled round."""
        winner = self.winner
        if winner is None:
            return

        self.events.emit_new(
            _OUTCOME_EVENTS[winner],
            player_value=self.player.hand_value,
            dealer_value=self.dealer.hand_value,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            state=self.state.name,
            winner=winner.value,
            player_value=self.player.hand_value,
            dealer_value=self.dealer.hand_value,
        )
