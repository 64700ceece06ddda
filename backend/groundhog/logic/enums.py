"""
String enum definitions for Groundhog game concepts.
"""

from enum import Enum


class GameMode(str, Enum):
    """Game modes available to the player.

    Values are persisted verbatim on score records, so they must stay stable.
    """

    INFINITE = "Infinite Mode"
    TIMED = "Timed Mode"

    @property
    def description(self) -> str:
        return _MODE_DESCRIPTIONS[self]

    @property
    def icon(self) -> str:
        return _MODE_ICONS[self]


_MODE_DESCRIPTIONS: dict[GameMode, str] = {
    GameMode.INFINITE: "Play endlessly until you quit. Score accumulates over time.",
    GameMode.TIMED: "Race against time! 120 seconds to achieve your best score.",
}

_MODE_ICONS: dict[GameMode, str] = {
    GameMode.INFINITE: "infinity",
    GameMode.TIMED: "timer",
}


class GameState(str, Enum):
    """Lifecycle state of a game session."""

    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


class CardSuit(str, Enum):
    """Card suits. Three regular suits run 1-9, the special suit runs 1-7."""

    CIRCLE = "circle"
    ZI = "zi"
    BAMBOO = "bamboo"
    SPECIAL = "speceal"  # spelled as in the card asset names

    @property
    def value_range(self) -> range:
        if self is CardSuit.SPECIAL:
            return range(1, 8)
        return range(1, 10)


REGULAR_SUITS: tuple[CardSuit, ...] = (CardSuit.CIRCLE, CardSuit.ZI, CardSuit.BAMBOO)


class CardAnimation(str, Enum):
    """Transient per-card animation tags consumed by the presentation layer."""

    FLIP = "flip"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class TimerSlot(str, Enum):
    """Named timer slots owned by a single engine."""

    REVEAL = "reveal"
    REVERT = "revert"
    TICK = "tick"
