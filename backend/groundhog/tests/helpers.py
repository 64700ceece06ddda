"""Shared helpers for engine tests."""

from groundhog.logic.cards import Card
from groundhog.logic.settings import GameSettings
from groundhog.session.engine import GameEngine
from groundhog.tests.mocks import ManualScheduler

# Fixed reveal cadence: a reveal every 5s, shown for 2s, regardless of score.
FIXED_CADENCE_SETTINGS = GameSettings(
    initial_min_interval=5.0,
    initial_max_interval=5.0,
    final_min_interval=5.0,
    final_max_interval=5.0,
)


def reveal_next(engine: GameEngine, scheduler: ManualScheduler) -> Card:
    """Advance the clock until the engine has a revealed top card and return it."""
    assert scheduler.advance_until(lambda: engine.revealed_card is not None), "no card was revealed"
    revealed = engine.revealed_card
    assert revealed is not None
    return revealed


def matching_bottom_card(engine: GameEngine) -> Card:
    revealed = engine.revealed_card
    assert revealed is not None
    return next(c for c in engine.bottom_cards if c.matches(revealed))


def non_matching_bottom_card(engine: GameEngine) -> Card:
    revealed = engine.revealed_card
    assert revealed is not None
    return next(c for c in engine.bottom_cards if not c.matches(revealed))
