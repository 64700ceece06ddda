from groundhog.logic.enums import CardAnimation, GameMode, GameState
from groundhog.logic.events import EventType, StateChangedEvent
from groundhog.tests.helpers import matching_bottom_card, reveal_next


class TestSubscriptions:
    def test_start_emits_state_change(self, engine, event_log):
        engine.start(GameMode.TIMED)

        assert event_log[0] == StateChangedEvent(
            previous=GameState.READY,
            state=GameState.PLAYING,
            mode=GameMode.TIMED,
        )

    def test_lifecycle_event_sequence(self, engine, event_log):
        engine.start(GameMode.INFINITE)
        engine.pause()
        engine.resume()
        engine.end()
        engine.reset()

        states = [e.state for e in event_log if e.type == EventType.STATE_CHANGED]
        assert states == [
            GameState.PLAYING,
            GameState.PAUSED,
            GameState.PLAYING,
            GameState.FINISHED,
            GameState.READY,
        ]

    def test_ignored_actions_emit_nothing(self, engine, event_log):
        engine.pause()
        engine.resume()
        engine.handle_tap(engine.bottom_cards[0])

        assert event_log == []

    def test_unsubscribe_stops_delivery(self, engine):
        received = []
        unsubscribe = engine.subscribe(received.append)
        unsubscribe()
        unsubscribe()

        engine.start(GameMode.INFINITE)

        assert received == []

    def test_failing_listener_does_not_affect_others(self, engine):
        def broken(_event):
            raise RuntimeError("listener crashed")

        received = []
        engine.subscribe(broken)
        engine.subscribe(received.append)

        engine.start(GameMode.INFINITE)

        assert engine.state == GameState.PLAYING
        assert len(received) == 1

    def test_tap_and_card_events(self, engine, scheduler, event_log):
        engine.start(GameMode.INFINITE)
        revealed = reveal_next(engine, scheduler)
        tapped = matching_bottom_card(engine)
        event_log.clear()

        engine.handle_tap(tapped)

        types = [e.type for e in event_log]
        assert EventType.TAP_RESOLVED in types
        assert EventType.CARD_HIDDEN in types
        tap = next(e for e in event_log if e.type == EventType.TAP_RESOLVED)
        assert tap.card_id == tapped.card_id
        assert tap.is_correct is True
        assert tap.score_delta == 5
        hidden = next(e for e in event_log if e.type == EventType.CARD_HIDDEN)
        assert hidden.card_id == revealed.card_id


class TestSnapshot:
    def test_snapshot_reflects_observable_state(self, engine, scheduler):
        engine.start(GameMode.TIMED)
        revealed = reveal_next(engine, scheduler)

        view = engine.snapshot()

        assert view.state == GameState.PLAYING
        assert view.mode == GameMode.TIMED
        assert view.revealed_card_id == revealed.card_id
        assert view.animations[revealed.card_id] == CardAnimation.FLIP
        assert len(view.top_cards) == 16
        assert len(view.bottom_cards) == 16
        flipped = [c for c in view.top_cards if c.is_flipped]
        assert [c.card_id for c in flipped] == [revealed.card_id]
        assert view.stats.score == 0
        assert view.stats.accuracy == 0.0

    def test_snapshot_is_detached_from_engine(self, engine, scheduler):
        engine.start(GameMode.INFINITE)
        view = engine.snapshot()

        reveal_next(engine, scheduler)

        assert view.revealed_card_id is None
        assert all(not c.is_flipped for c in view.top_cards)

    def test_snapshot_serializes_to_json(self, engine):
        engine.start(GameMode.INFINITE)

        payload = engine.snapshot().model_dump(mode="json")

        assert payload["state"] == "playing"
        assert payload["mode"] == "Infinite Mode"
        assert {"row", "col", "suit", "value", "image_name"} <= payload["top_cards"][0].keys()
