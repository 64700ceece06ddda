"""Data access layer: repository interfaces and shared persistence models."""

from shared.dal.leaderboard_repository import LeaderboardRepository
from shared.dal.leaderboard_store import LeaderboardStore
from shared.dal.models import ScoreRecord

__all__ = [
    "LeaderboardRepository",
    "LeaderboardStore",
    "ScoreRecord",
]
