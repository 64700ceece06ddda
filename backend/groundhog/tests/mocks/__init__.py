from groundhog.tests.mocks.leaderboard import FailingLeaderboard, RecordingLeaderboard
from groundhog.tests.mocks.scheduler import ManualScheduler, ManualTimerHandle

__all__ = [
    "FailingLeaderboard",
    "ManualScheduler",
    "ManualTimerHandle",
    "RecordingLeaderboard",
]
