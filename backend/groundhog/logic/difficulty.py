"""
Score-driven difficulty curve for the reveal scheduler.

The delay before each reveal is drawn uniformly from a window that shrinks
linearly as the score approaches max_difficulty_score:

    score 0    -> [1.0, 3.0] seconds
    score 200+ -> [0.3, 1.0] seconds

The window is recomputed before every reveal, so difficulty follows the
current score rather than elapsed time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import random

    from groundhog.logic.settings import GameSettings


def difficulty_progress(score: int, settings: GameSettings) -> float:
    """Normalized difficulty in [0, 1]."""
    return min(1.0, max(0, score) / settings.max_difficulty_score)


def reveal_interval_bounds(score: int, settings: GameSettings) -> tuple[float, float]:
    """Return the (min_delay, max_delay) window for the next reveal."""
    progress = difficulty_progress(score, settings)
    min_delay = settings.initial_min_interval - (settings.initial_min_interval - settings.final_min_interval) * progress
    max_delay = settings.initial_max_interval - (settings.initial_max_interval - settings.final_max_interval) * progress
    return min_delay, max_delay


def next_reveal_delay(score: int, settings: GameSettings, rng: random.Random) -> float:
    min_delay, max_delay = reveal_interval_bounds(score, settings)
    return rng.uniform(min_delay, max_delay)
