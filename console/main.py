"""Terminal blackjack: prompts, announcements and the play-again loop."""

from typing import Callable

from config import AppConfig, config as default_config
from core.errors import InvalidDecision
from core.game import BlackjackRound, GameEvent, RoundResult, RoundState
from core.hand import Winner
from core.players import Decision

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]

DECISION_PROMPT = "Do you want to (h)it or (s)tand? "
AGAIN_PROMPT = "\nWould you like to play again? (y/n): "


def announce(result: RoundResult) -> str:
    """Describe a round result for the player."""
    player = result.player_total
    dealer = result.dealer_total

    if result.state == RoundState.PLAYING:
        return "The game continues..."
    if result.state == RoundState.PLAYER_BLACKJACK:
        return "Congratulations! You got a Blackjack!"
    if result.state == RoundState.DEALER_BLACKJACK:
        return "Dealer got a Blackjack. Better luck next time!"
    if result.state == RoundState.PLAYER_BUST:
        return f"You busted with a hand value of {player}"
    if result.state == RoundState.DEALER_BUST:
        return f"Dealer busted with a hand value of {dealer}"

    if result.winner == Winner.PLAYER:
        return f"You win with a hand value of {player} vs dealer's {dealer}"
    if result.winner == Winner.DEALER:
        return f"Dealer wins with a hand value of {dealer} vs your {player}"
    return f"It's a tie with both having a hand value of {player}"


class ConsoleApp:
    """Reads decisions from a terminal and renders round results."""

    def __init__(
        self,
        game: BlackjackRound | None = None,
        app_config: AppConfig | None = None,
        read: ReadFn = input,
        write: WriteFn = print,
    ) -> None:
        self.config = app_config or default_config
        self.game = game or BlackjackRound(
            rng=self.config.game.make_rng(),
            dealer_stands_on=self.config.game.dealer_stands_on,
        )
        self._read = read
        self._write = write

        if self.config.debug:
            self.game.subscribe(self._echo_event)

    def _echo_event(self, event: GameEvent) -> None:
        self._write(f"[debug] {event}")

    def prompt_decision(self) -> Decision:
        """Ask until the player types a valid hit/stand choice."""
        while True:
            raw = self._read(DECISION_PROMPT)
            try:
                return Decision.parse(raw)
            except InvalidDecision:
                self._write("Invalid choice. Please choose 'h' or 's'.")

    def play_round(self) -> RoundResult:
        """Play one round to completion."""
        result = self.game.start_round()
        self._write(f"Player initial hand value: {result.player_total}")
        self._write(f"Dealer initial hand value: {result.dealer_total}")

        while not result.is_over:
            self._write(f"Your hand value: {result.player_total}")
            decision = self.prompt_decision()
            result = self.game.apply(decision)
            if decision == Decision.HIT:
                self._write(f"Player hand value after hit: {result.player_total}")

        self._write(announce(result))
        return result

    def wants_another(self) -> bool:
        """Ask whether to deal another round."""
        return self._read(AGAIN_PROMPT).strip().lower() == "y"

    def run(self) -> int:
        """Play rounds until the player declines; returns the exit code."""
        try:
            while True:
                self._write("Welcome to Blackjack!")
                self.play_round()
                if not self.wants_another():
                    break
        except (EOFError, KeyboardInterrupt):
            self._write("")
        self._write("Thanks for playing! Goodbye!")
        return 0


def main() -> int:
    """Console entry point."""
    return ConsoleApp().run()


if __name__ == "__main__":
    raise SystemExit(main())
