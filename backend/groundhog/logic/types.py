"""
Pydantic view models for observable engine state.

Views are immutable snapshots that a presentation layer can poll and diff
instead of binding to live engine fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from groundhog.logic.enums import CardAnimation, CardSuit, GameMode, GameState

if TYPE_CHECKING:
    from groundhog.logic.cards import Card
    from groundhog.logic.state import GameSession, GameStats


class CardView(BaseModel):
    """Observable state of one card."""

    model_config = ConfigDict(frozen=True)

    card_id: str
    suit: CardSuit
    value: int
    is_flipped: bool
    row: int
    col: int
    image_name: str

    @classmethod
    def from_card(cls, card: Card) -> CardView:
        return cls(
            card_id=card.card_id,
            suit=card.suit,
            value=card.value,
            is_flipped=card.is_flipped,
            row=card.position.row,
            col=card.position.col,
            image_name=card.image_name,
        )


class StatsView(BaseModel):
    """Observable running statistics."""

    model_config = ConfigDict(frozen=True)

    score: int
    time_remaining: float
    formatted_time_remaining: str
    correct_matches: int
    incorrect_matches: int
    total_attempts: int
    accuracy: float

    @classmethod
    def from_stats(cls, stats: GameStats) -> StatsView:
        return cls(
            score=stats.score,
            time_remaining=stats.time_remaining,
            formatted_time_remaining=stats.formatted_time_remaining,
            correct_matches=stats.correct_matches,
            incorrect_matches=stats.incorrect_matches,
            total_attempts=stats.total_attempts,
            accuracy=stats.accuracy,
        )


class GameView(BaseModel):
    """Complete observable state of the engine at one instant."""

    model_config = ConfigDict(frozen=True)

    state: GameState
    mode: GameMode
    stats: StatsView
    top_cards: list[CardView] = Field(default_factory=list)
    bottom_cards: list[CardView] = Field(default_factory=list)
    revealed_card_id: str | None = None
    animations: dict[str, CardAnimation] = Field(default_factory=dict)

    @classmethod
    def from_session(cls, session: GameSession) -> GameView:
        revealed = session.revealed_card
        return cls(
            state=session.state,
            mode=session.mode,
            stats=StatsView.from_stats(session.stats),
            top_cards=[CardView.from_card(c) for c in session.top_cards],
            bottom_cards=[CardView.from_card(c) for c in session.bottom_cards],
            revealed_card_id=revealed.card_id if revealed is not None else None,
            animations=dict(session.animations),
        )
