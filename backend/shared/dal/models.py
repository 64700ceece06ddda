"""Persistence models for the data access layer."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class ScoreRecord(BaseModel, frozen=True):
    """Final score of one finished game, as kept on the leaderboard."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    score: int
    mode: str  # opaque mode tag, e.g. "Infinite Mode" | "Timed Mode"
    date: datetime
    duration: float | None = None  # seconds from start to end of the session

    @property
    def formatted_date(self) -> str:
        """Medium date plus short time, e.g. 'Mar 15, 2025 at 10:30 AM'."""
        return f"{self.date:%b} {self.date.day}, {self.date:%Y} at {self.date:%I:%M %p}"

    @property
    def formatted_duration(self) -> str:
        if self.duration is None:
            return "N/A"
        total = int(self.duration)
        return f"{total // 60:02d}:{total % 60:02d}"
