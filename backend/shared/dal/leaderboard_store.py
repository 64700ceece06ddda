"""Blob-backed leaderboard storing all score records as one JSON array."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from shared.dal.leaderboard_repository import LeaderboardRepository
from shared.dal.models import ScoreRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

    from shared.storage import BlobStorage

logger = logging.getLogger(__name__)

DEFAULT_LEADERBOARD_KEY = "GroundhogScores"
DEFAULT_MAX_ENTRIES = 100

_RECORDS_ADAPTER = TypeAdapter(list[ScoreRecord])


def _mode_tag(mode: str | Enum) -> str:
    return mode.value if isinstance(mode, Enum) else mode


class LeaderboardStore(LeaderboardRepository):
    """Ranked score history persisted under a single blob key.

    Loads the collection once on construction and writes the whole collection
    back after every mutation. The in-memory list is always sorted by
    descending score and capped at max_entries, so reads never re-sort.

    A missing or unreadable blob yields an empty leaderboard, and write
    failures are logged and swallowed: losing a score must never interrupt
    a game.
    """

    def __init__(
        self,
        storage: BlobStorage,
        key: str = DEFAULT_LEADERBOARD_KEY,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        self._storage = storage
        self._key = key
        self._max_entries = max_entries
        self._scores: list[ScoreRecord] = self._load()

    @property
    def scores(self) -> list[ScoreRecord]:
        """All records in ranked order."""
        return list(self._scores)

    def add_score(self, record: ScoreRecord) -> None:
        """Insert a record, keep the top max_entries by score, and persist."""
        self._scores.append(record)
        # stable sort: equal scores keep insertion order
        self._scores.sort(key=lambda r: r.score, reverse=True)
        del self._scores[self._max_entries :]
        self._save()

    def top_scores(self, mode: str | Enum, limit: int = 10) -> list[ScoreRecord]:
        """Return the best `limit` records recorded under a mode tag."""
        tag = _mode_tag(mode)
        return [r for r in self._scores if r.mode == tag][: max(0, limit)]

    def ranked(self, mode: str | Enum, limit: int = 10) -> Iterator[tuple[int, ScoreRecord]]:
        """Yield (rank, record) pairs for a mode, ranks starting at 1."""
        yield from enumerate(self.top_scores(mode, limit), start=1)

    def clear_all(self) -> None:
        """Remove every record and persist the empty collection."""
        self._scores.clear()
        self._save()

    def _load(self) -> list[ScoreRecord]:
        try:
            data = self._storage.read(self._key)
        except (OSError, ValueError):
            logger.warning("Failed to read leaderboard blob %r, starting empty", self._key, exc_info=True)
            return []

        if data is None:
            return []

        try:
            records = _RECORDS_ADAPTER.validate_json(data)
        except ValidationError:
            logger.warning("Corrupt leaderboard blob %r, starting empty", self._key)
            return []

        records.sort(key=lambda r: r.score, reverse=True)
        return records[: self._max_entries]

    def _save(self) -> None:
        try:
            self._storage.write(self._key, _RECORDS_ADAPTER.dump_json(self._scores))
        except (OSError, ValueError):  # fmt: skip
            logger.exception("Failed to save leaderboard %r", self._key)
