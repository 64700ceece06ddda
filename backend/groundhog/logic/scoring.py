"""
Tap adjudication and score bookkeeping.

A tap on a bottom-grid card is compared by face against the revealed top card.
A match awards score_increment; a miss deducts it, never taking the score below 0.
Every adjudicated tap counts as an attempt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from groundhog.logic.cards import Card
    from groundhog.logic.settings import GameSettings
    from groundhog.logic.state import GameStats


@dataclass(frozen=True)
class TapResult:
    """Outcome of a single adjudicated tap."""

    is_correct: bool
    score_delta: int
    score: int


def apply_tap(stats: GameStats, tapped: Card, revealed: Card, settings: GameSettings) -> TapResult:
    """Score a tap against the revealed card, mutating stats in place."""
    stats.total_attempts += 1
    previous = stats.score

    is_correct = tapped.matches(revealed)
    if is_correct:
        stats.correct_matches += 1
        stats.score += settings.score_increment
    else:
        stats.incorrect_matches += 1
        stats.score = max(0, stats.score - settings.score_increment)

    return TapResult(
        is_correct=is_correct,
        score_delta=stats.score - previous,
        score=stats.score,
    )
