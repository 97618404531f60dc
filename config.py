"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from random import Random


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means a system-seeded shuffle."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"BLACKJACK_SEED must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Round configuration."""

    dealer_stands_on: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_STANDS_ON", "17"))
    )
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate settings."""
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 2 and 21")

    def make_rng(self) -> Random:
        """Build the shuffling RNG, seeded only when a seed is configured."""
        return Random(self.seed) if self.seed is not None else Random()


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
