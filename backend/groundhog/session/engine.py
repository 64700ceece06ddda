"""
Game session engine: lifecycle, reveal scheduling, tap adjudication and countdown.

The engine owns one GameSession at a time. Callers drive it through the
action methods (start, pause, resume, end, reset, handle_tap) and observe it
either by subscribing to events or by polling snapshot().

Timing rules:
- while playing, a random top-grid card is revealed after a score-dependent
  delay; the previously revealed card is hidden first, in the same callback,
  so at most one top card is face-up at any time
- a revealed card hides itself after card_display_seconds unless superseded
- in timed mode the countdown ticks every tick_seconds and ends the game at 0
- pausing cancels every pending timer; resuming schedules fresh ones

Misapplied actions are silently ignored. Every timer callback re-checks that
the session is still playing before it touches state.
"""

from __future__ import annotations

import random
from datetime import UTC, datetime
from uuid import uuid4
from typing import TYPE_CHECKING

import structlog

from groundhog.logic.deck import deal_grids
from groundhog.logic.difficulty import next_reveal_delay
from groundhog.logic.enums import CardAnimation, GameMode, GameState, TimerSlot
from groundhog.logic.events import (
    AnimationChangedEvent,
    CardHiddenEvent,
    CardRevealedEvent,
    ScoreSubmittedEvent,
    StateChangedEvent,
    TapResolvedEvent,
    TimeTickEvent,
)
from groundhog.logic.scoring import apply_tap
from groundhog.logic.settings import GameSettings, validate_settings
from groundhog.logic.state import GameSession, GameStats
from groundhog.logic.timer import AsyncioScheduler
from groundhog.logic.types import GameView
from groundhog.session.timer_manager import TimerManager, animation_slot
from shared.dal.models import ScoreRecord
from shared.logging import bind_session_context, clear_session_context

if TYPE_CHECKING:
    from collections.abc import Callable

    from groundhog.logic.cards import Card
    from groundhog.logic.events import EngineEvent, EventListener
    from groundhog.logic.timer import Scheduler
    from shared.dal.leaderboard_repository import LeaderboardRepository

logger = structlog.get_logger()


class GameEngine:
    """Drive the full lifecycle of one game session and adjudicate player taps."""

    def __init__(
        self,
        leaderboard: LeaderboardRepository | None = None,
        *,
        scheduler: Scheduler | None = None,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        validate_settings(self._settings)
        self._leaderboard = leaderboard
        self._timers = TimerManager(scheduler or AsyncioScheduler())
        self._rng = rng or random.Random()  # noqa: S311
        self._listeners: list[EventListener] = []
        self._session = GameSession()
        self._deal()

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def session_id(self) -> str | None:
        """Id of the current session, None until the first start()."""
        return self._session.session_id

    @property
    def state(self) -> GameState:
        return self._session.state

    @property
    def mode(self) -> GameMode:
        return self._session.mode

    @property
    def stats(self) -> GameStats:
        return self._session.stats

    @property
    def top_cards(self) -> list[Card]:
        return list(self._session.top_cards)

    @property
    def bottom_cards(self) -> list[Card]:
        return list(self._session.bottom_cards)

    @property
    def revealed_card(self) -> Card | None:
        return self._session.revealed_card

    @property
    def is_showing_card(self) -> bool:
        return self._session.revealed_card is not None

    @property
    def animations(self) -> dict[str, CardAnimation]:
        return dict(self._session.animations)

    def snapshot(self) -> GameView:
        """Return an immutable view of all observable state."""
        return GameView.from_session(self._session)

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register a listener for engine events. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Lifecycle actions
    # ------------------------------------------------------------------

    def start(self, mode: GameMode) -> None:
        """Start a fresh session in the given mode, from any state."""
        session = self._session
        previous = session.state
        self._stop_timers()

        session.mode = mode
        session.state = GameState.PLAYING
        session.revealed_card = None
        session.stats.reset(time_remaining=self._settings.timed_mode_seconds if mode == GameMode.TIMED else 0)
        session.started_at = self._timers.scheduler.time()
        session.session_id = uuid4().hex[:12]
        self._deal()

        bind_session_context(session.session_id, mode)
        logger.info("game started")
        self._emit(StateChangedEvent(previous=previous, state=session.state, mode=mode))

        if mode == GameMode.TIMED:
            self._start_countdown()
        self._schedule_next_reveal()

    def pause(self) -> None:
        """Pause a playing session; pending timers are cancelled, not frozen."""
        if self._session.state != GameState.PLAYING:
            logger.debug("pause ignored", state=self._session.state)
            return
        self._session.state = GameState.PAUSED
        self._stop_timers()
        logger.info("game paused", time_remaining=self._session.stats.time_remaining)
        self._emit(StateChangedEvent(previous=GameState.PLAYING, state=GameState.PAUSED, mode=self._session.mode))

    def resume(self) -> None:
        """Resume a paused session with freshly scheduled timers."""
        session = self._session
        if session.state != GameState.PAUSED:
            logger.debug("resume ignored", state=session.state)
            return
        session.state = GameState.PLAYING
        logger.info("game resumed", time_remaining=session.stats.time_remaining)
        self._emit(StateChangedEvent(previous=GameState.PAUSED, state=GameState.PLAYING, mode=session.mode))

        if session.mode == GameMode.TIMED:
            self._start_countdown()
        if session.revealed_card is not None:
            self._start_revert_timer(session.revealed_card)
        self._schedule_next_reveal()

    def end(self) -> None:
        """Finish the session and submit a positive score to the leaderboard."""
        session = self._session
        if session.state == GameState.FINISHED:
            logger.debug("end ignored, game already finished")
            return
        previous = session.state
        session.state = GameState.FINISHED
        self._stop_timers()
        logger.info("game ended", score=session.stats.score)
        self._emit(StateChangedEvent(previous=previous, state=GameState.FINISHED, mode=session.mode))

        if session.stats.score > 0:
            self._submit_score()

    def reset(self) -> None:
        """Return to the ready state with cleared statistics and a new deck."""
        session = self._session
        previous = session.state
        self._stop_timers()
        session.state = GameState.READY
        session.stats.reset()
        session.revealed_card = None
        session.started_at = None
        session.session_id = None
        self._deal()
        logger.info("game reset")
        clear_session_context()
        self._emit(StateChangedEvent(previous=previous, state=GameState.READY, mode=session.mode))

    def handle_tap(self, card: Card) -> None:
        """Adjudicate a tapped card by face against the revealed top card.

        The card_id only keys the tap animation; any card showing the same
        suit and value as the revealed one counts as a match.
        """
        session = self._session
        revealed = session.revealed_card
        if session.state != GameState.PLAYING or revealed is None:
            logger.debug("tap ignored", state=session.state, showing_card=revealed is not None)
            return

        result = apply_tap(session.stats, card, revealed, self._settings)
        logger.debug("tap resolved", correct=result.is_correct, score=result.score)

        animation = CardAnimation.CORRECT if result.is_correct else CardAnimation.INCORRECT
        self._set_animation(card.card_id, animation, self._settings.tap_animation_seconds)
        if result.is_correct:
            self._hide_card(revealed)

        self._emit(
            TapResolvedEvent(
                card_id=card.card_id,
                is_correct=result.is_correct,
                score_delta=result.score_delta,
                score=result.score,
            ),
        )

    # ------------------------------------------------------------------
    # Reveal scheduler
    # ------------------------------------------------------------------

    def _schedule_next_reveal(self) -> None:
        if self._session.state != GameState.PLAYING:
            return
        delay = next_reveal_delay(self._session.stats.score, self._settings, self._rng)
        self._timers.start(TimerSlot.REVEAL, delay, self._on_reveal_timer)

    def _on_reveal_timer(self) -> None:
        session = self._session
        if session.state != GameState.PLAYING or not session.top_cards:
            return
        if session.revealed_card is not None:
            self._hide_card(session.revealed_card)
        self._reveal_card(self._rng.choice(session.top_cards))
        self._schedule_next_reveal()

    def _reveal_card(self, card: Card) -> None:
        card.is_flipped = True
        self._session.revealed_card = card
        self._set_animation(card.card_id, CardAnimation.FLIP, self._settings.flip_animation_seconds)
        self._start_revert_timer(card)
        logger.debug("card revealed", card_id=card.card_id, suit=card.suit, value=card.value)
        self._emit(CardRevealedEvent(card_id=card.card_id))

    def _start_revert_timer(self, card: Card) -> None:
        card_id = card.card_id
        self._timers.start(TimerSlot.REVERT, self._settings.card_display_seconds, lambda: self._on_revert_timer(card_id))

    def _on_revert_timer(self, card_id: str) -> None:
        revealed = self._session.revealed_card
        if self._session.state != GameState.PLAYING or revealed is None:
            return
        if revealed.card_id == card_id:
            self._hide_card(revealed)

    def _hide_card(self, card: Card) -> None:
        card.is_flipped = False
        if self._session.revealed_card is card:
            self._session.revealed_card = None
            self._timers.cancel(TimerSlot.REVERT)
        self._set_animation(card.card_id, CardAnimation.FLIP, self._settings.flip_animation_seconds)
        self._emit(CardHiddenEvent(card_id=card.card_id))

    # ------------------------------------------------------------------
    # Countdown
    # ------------------------------------------------------------------

    def _start_countdown(self) -> None:
        self._timers.start(TimerSlot.TICK, self._settings.tick_seconds, self._on_tick)

    def _on_tick(self) -> None:
        stats = self._session.stats
        if self._session.state != GameState.PLAYING:
            return
        remaining = stats.time_remaining - self._settings.tick_seconds
        if remaining <= 0:
            stats.time_remaining = 0
            self._emit(TimeTickEvent(time_remaining=0))
            self.end()
            return
        stats.time_remaining = remaining
        self._emit(TimeTickEvent(time_remaining=remaining))
        self._start_countdown()

    # ------------------------------------------------------------------
    # Animations, timers, dealing
    # ------------------------------------------------------------------

    def _set_animation(self, card_id: str, animation: CardAnimation, duration: float) -> None:
        self._session.animations[card_id] = animation
        self._emit(AnimationChangedEvent(card_id=card_id, animation=animation))
        self._timers.start(animation_slot(card_id), duration, lambda: self._clear_animation(card_id))

    def _clear_animation(self, card_id: str) -> None:
        if self._session.animations.pop(card_id, None) is not None:
            self._emit(AnimationChangedEvent(card_id=card_id, animation=None))

    def _stop_timers(self) -> None:
        """Cancel every pending timer and drop animation tags whose clear timer was cancelled."""
        self._timers.cancel_all()
        for card_id in list(self._session.animations):
            self._clear_animation(card_id)

    def _deal(self) -> None:
        top, bottom = deal_grids(self._rng, self._settings.grid_size)
        self._session.top_cards = top
        self._session.bottom_cards = bottom

    # ------------------------------------------------------------------
    # Leaderboard & events
    # ------------------------------------------------------------------

    def _submit_score(self) -> None:
        """Best-effort hand-off of the final score to the leaderboard."""
        session = self._session
        duration = None
        if session.started_at is not None:
            duration = self._timers.scheduler.time() - session.started_at
        record = ScoreRecord(
            score=session.stats.score,
            mode=session.mode.value,
            date=datetime.now(UTC),
            duration=duration,
        )
        if self._leaderboard is None:
            return
        try:
            self._leaderboard.add_score(record)
        except Exception:
            logger.exception("failed to submit score", score=record.score)
            return
        self._emit(ScoreSubmittedEvent(score=record.score, mode=session.mode))

    def _emit(self, event: EngineEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("event listener failed", event_type=event.type)
