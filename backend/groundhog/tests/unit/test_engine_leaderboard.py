import random
from datetime import UTC, datetime

from groundhog.logic.enums import GameMode, GameState
from groundhog.logic.events import EventType
from groundhog.session.engine import GameEngine
from groundhog.tests.helpers import matching_bottom_card, reveal_next
from groundhog.tests.mocks import FailingLeaderboard
from shared.dal.leaderboard_store import LeaderboardStore
from shared.storage import InMemoryBlobStorage


def _score_points(engine, scheduler, hits: int) -> None:
    for _ in range(hits):
        reveal_next(engine, scheduler)
        engine.handle_tap(matching_bottom_card(engine))


class TestScoreSubmission:
    def test_end_with_score_submits_one_record(self, engine, scheduler, leaderboard):
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 2)
        elapsed = scheduler.time()

        engine.end()

        assert len(leaderboard.records) == 1
        record = leaderboard.records[0]
        assert record.score == 10
        assert record.mode == GameMode.INFINITE.value
        assert record.duration == elapsed
        assert record.date.tzinfo is not None
        assert (datetime.now(UTC) - record.date).total_seconds() < 60

    def test_end_with_zero_score_submits_nothing(self, engine, scheduler, leaderboard):
        engine.start(GameMode.INFINITE)
        scheduler.advance(10)

        engine.end()

        assert leaderboard.records == []

    def test_score_lost_to_misses_submits_nothing(self, engine, scheduler, leaderboard):
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 1)
        reveal_next(engine, scheduler)
        engine.handle_tap(next(c for c in engine.bottom_cards if not c.matches(engine.revealed_card)))

        engine.end()

        assert leaderboard.records == []

    def test_second_end_does_not_submit_again(self, engine, scheduler, leaderboard):
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 1)

        engine.end()
        engine.end()

        assert len(leaderboard.records) == 1

    def test_each_finished_session_submits_its_own_record(self, engine, scheduler, leaderboard):
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 1)
        engine.end()
        engine.start(GameMode.TIMED)
        _score_points(engine, scheduler, 3)
        engine.end()

        assert [(r.score, r.mode) for r in leaderboard.records] == [(5, "Infinite Mode"), (15, "Timed Mode")]

    def test_submission_emits_event(self, engine, scheduler, event_log):
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 1)

        engine.end()

        submitted = [e for e in event_log if e.type == EventType.SCORE_SUBMITTED]
        assert len(submitted) == 1
        assert submitted[0].score == 5
        assert submitted[0].mode == GameMode.INFINITE


class TestSubmissionFailures:
    def test_failing_leaderboard_does_not_break_end(self, scheduler):
        engine = GameEngine(FailingLeaderboard(), scheduler=scheduler, rng=random.Random(3))
        events = []
        engine.subscribe(events.append)
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 1)

        engine.end()

        assert engine.state == GameState.FINISHED
        assert not any(e.type == EventType.SCORE_SUBMITTED for e in events)

    def test_engine_without_leaderboard(self, scheduler):
        engine = GameEngine(scheduler=scheduler, rng=random.Random(3))
        engine.start(GameMode.INFINITE)
        _score_points(engine, scheduler, 1)

        engine.end()

        assert engine.state == GameState.FINISHED


class TestWithLeaderboardStore:
    def test_scores_ranked_across_sessions(self, scheduler):
        store = LeaderboardStore(InMemoryBlobStorage())
        engine = GameEngine(store, scheduler=scheduler, rng=random.Random(11))

        for hits in (1, 3, 2):
            engine.start(GameMode.INFINITE)
            _score_points(engine, scheduler, hits)
            engine.end()

        assert [r.score for r in store.top_scores(GameMode.INFINITE)] == [15, 10, 5]
        assert store.top_scores(GameMode.TIMED) == []
