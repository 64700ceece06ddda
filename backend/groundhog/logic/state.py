"""
Game state models for Groundhog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from groundhog.logic.enums import CardAnimation, GameMode, GameState

if TYPE_CHECKING:
    from groundhog.logic.cards import Card


@dataclass
class GameStats:
    """Running statistics of the current session."""

    score: int = 0
    time_remaining: float = 0  # seconds, only meaningful in timed mode
    correct_matches: int = 0
    incorrect_matches: int = 0
    total_attempts: int = 0

    @property
    def accuracy(self) -> float:
        """Percentage of correct taps, 0 when nothing was tapped yet."""
        if self.total_attempts == 0:
            return 0.0
        return self.correct_matches / self.total_attempts * 100

    @property
    def formatted_time_remaining(self) -> str:
        return format_seconds(self.time_remaining)

    def reset(self, time_remaining: float = 0) -> None:
        self.score = 0
        self.time_remaining = time_remaining
        self.correct_matches = 0
        self.incorrect_matches = 0
        self.total_attempts = 0


@dataclass
class GameSession:
    """
    Mutable state of one game session, owned exclusively by the engine.
    """

    state: GameState = GameState.READY
    mode: GameMode = GameMode.INFINITE
    top_cards: list[Card] = field(default_factory=list)
    bottom_cards: list[Card] = field(default_factory=list)
    revealed_card: Card | None = None  # top-grid card currently face-up
    animations: dict[str, CardAnimation] = field(default_factory=dict)  # card_id -> tag
    stats: GameStats = field(default_factory=GameStats)
    started_at: float | None = None  # scheduler clock at start()
    session_id: str | None = None


def format_seconds(seconds: float) -> str:
    """Format a duration as MM:SS, truncating fractional seconds."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"
