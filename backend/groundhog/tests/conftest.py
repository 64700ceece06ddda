import random

import pytest

from groundhog.logic.events import EngineEvent
from groundhog.session.engine import GameEngine
from groundhog.tests.helpers import FIXED_CADENCE_SETTINGS
from groundhog.tests.mocks import ManualScheduler, RecordingLeaderboard


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def leaderboard():
    return RecordingLeaderboard()


@pytest.fixture
def engine(scheduler, leaderboard):
    return GameEngine(leaderboard, scheduler=scheduler, rng=random.Random(1234))


@pytest.fixture
def fixed_engine(scheduler, leaderboard):
    """Engine with a deterministic reveal cadence (first reveal at t=5)."""
    return GameEngine(leaderboard, scheduler=scheduler, settings=FIXED_CADENCE_SETTINGS, rng=random.Random(99))


@pytest.fixture
def event_log(engine):
    events: list[EngineEvent] = []
    engine.subscribe(events.append)
    return events
