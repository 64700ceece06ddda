"""Abstract interface for leaderboard persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import ScoreRecord


class LeaderboardRepository(ABC):
    """Abstract interface for ranked score persistence.

    Implementations keep records sorted by descending score and never raise
    on storage failures: the leaderboard is best-effort.
    """

    @abstractmethod
    def add_score(self, record: ScoreRecord) -> None: ...

    @abstractmethod
    def top_scores(self, mode: str, limit: int = 10) -> list[ScoreRecord]: ...

    @abstractmethod
    def clear_all(self) -> None: ...
