"""Manage named timers for a single game engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from groundhog.logic.enums import TimerSlot

if TYPE_CHECKING:
    from collections.abc import Callable

    from groundhog.logic.timer import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

_ANIMATION_PREFIX = "animation:"


def animation_slot(card_id: str) -> str:
    """Timer slot name for clearing a card's animation tag."""
    return f"{_ANIMATION_PREFIX}{card_id}"


def _slot_name(slot: TimerSlot | str) -> str:
    return slot.value if isinstance(slot, TimerSlot) else slot


class TimerManager:
    """Manage timer lifecycle for one engine.

    Timers live in named slots: the reveal scheduler, the auto-revert of the
    revealed card, the countdown tick, and one animation-clear timer per card.
    Starting a timer in an occupied slot cancels the previous one, so each
    slot holds at most one pending callback. This class does NOT inspect game
    state -- the engine decides when timers start and stop.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handles: dict[str, TimerHandle] = {}

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def start(self, slot: TimerSlot | str, delay: float, callback: Callable[[], None]) -> None:
        """Schedule callback in the given slot, replacing any pending timer there."""
        name = _slot_name(slot)
        self.cancel(name)

        def _fire() -> None:
            handle = self._handles.get(name)
            if handle is current:
                del self._handles[name]
            callback()

        current = self._scheduler.call_later(delay, _fire)
        self._handles[name] = current

    def cancel(self, slot: TimerSlot | str) -> None:
        """Cancel the pending timer in a slot, if any."""
        name = _slot_name(slot)
        handle = self._handles.pop(name, None)
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        """Cancel every pending timer owned by the engine."""
        handles = list(self._handles.values())
        self._handles.clear()
        for handle in handles:
            handle.cancel()
        if handles:
            logger.debug("cancelled %d pending timers", len(handles))

    def is_active(self, slot: TimerSlot | str) -> bool:
        name = _slot_name(slot)
        return name in self._handles

    def active_names(self) -> list[str]:
        """Names of slots with a pending timer."""
        return sorted(self._handles)
