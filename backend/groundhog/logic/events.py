"""Domain event models emitted by the game engine to its subscribers.

Subscribers receive events synchronously, after the engine has applied the
state change the event describes. Events are immutable and carry only plain
identifiers, so subscribers cannot mutate engine state through them.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict

from groundhog.logic.enums import CardAnimation, GameMode, GameState


class EventType(StrEnum):
    """Types of engine events."""

    STATE_CHANGED = "state_changed"
    CARD_REVEALED = "card_revealed"
    CARD_HIDDEN = "card_hidden"
    TAP_RESOLVED = "tap_resolved"
    TIME_TICK = "time_tick"
    ANIMATION_CHANGED = "animation_changed"
    SCORE_SUBMITTED = "score_submitted"


class GameEvent(BaseModel):
    """Base class for all engine events."""

    model_config = ConfigDict(frozen=True)

    type: EventType


class StateChangedEvent(GameEvent):
    """The session moved to a new lifecycle state."""

    type: Literal[EventType.STATE_CHANGED] = EventType.STATE_CHANGED
    previous: GameState
    state: GameState
    mode: GameMode


class CardRevealedEvent(GameEvent):
    """A top-grid card was flipped face-up by the scheduler."""

    type: Literal[EventType.CARD_REVEALED] = EventType.CARD_REVEALED
    card_id: str


class CardHiddenEvent(GameEvent):
    """A revealed top-grid card was flipped back face-down."""

    type: Literal[EventType.CARD_HIDDEN] = EventType.CARD_HIDDEN
    card_id: str


class TapResolvedEvent(GameEvent):
    """A bottom-grid tap was adjudicated."""

    type: Literal[EventType.TAP_RESOLVED] = EventType.TAP_RESOLVED
    card_id: str
    is_correct: bool
    score_delta: int
    score: int


class TimeTickEvent(GameEvent):
    """The timed-mode countdown advanced."""

    type: Literal[EventType.TIME_TICK] = EventType.TIME_TICK
    time_remaining: float


class AnimationChangedEvent(GameEvent):
    """A card's animation tag was set (animation) or cleared (None)."""

    type: Literal[EventType.ANIMATION_CHANGED] = EventType.ANIMATION_CHANGED
    card_id: str
    animation: CardAnimation | None = None


class ScoreSubmittedEvent(GameEvent):
    """A final score was handed to the leaderboard."""

    type: Literal[EventType.SCORE_SUBMITTED] = EventType.SCORE_SUBMITTED
    score: int
    mode: GameMode


EngineEvent = (
    StateChangedEvent
    | CardRevealedEvent
    | CardHiddenEvent
    | TapResolvedEvent
    | TimeTickEvent
    | AnimationChangedEvent
    | ScoreSubmittedEvent
)

EventListener = Callable[[EngineEvent], None]
