"""Tests for the timer screen controller wiring."""

import pytest

from intervaltimer.app import IntervalTimerApp, attach_console
from intervaltimer.timer.models import CueKind, TimerConfiguration, TimerStatus

from helpers import SignalCollector, run_ticks


class _RecordingSink:
    def __init__(self):
        self.events = []

    def play_cue(self, event):
        self.events.append(event)


@pytest.fixture
def sink():
    return _RecordingSink()


@pytest.fixture
def screen(qapp, store, sink):
    app = IntervalTimerApp(parent=None, store=store, sink=sink)
    yield app
    app.close()


class TestStartup:

    def test_defaults_when_store_empty(self, screen):
        assert screen.configuration == TimerConfiguration()
        assert screen.engine.remaining == 60
        assert screen.engine.status == TimerStatus.IDLE

    def test_loads_saved_configuration(self, qapp, store, sink):
        store.save(TimerConfiguration(90, 10))
        app = IntervalTimerApp(parent=None, store=store, sink=sink)
        assert app.configuration == TimerConfiguration(90, 10)
        assert app.engine.remaining == 90
        app.close()

    def test_builds_cue_sink_when_not_given(self, qapp, store, tmp_path):
        app = IntervalTimerApp(parent=None, store=store, sounds_dir=tmp_path, complete_repeats=3)
        assert app.sink.complete_repeats == 3
        assert (tmp_path / "timer_ding.wav").exists()
        app.close()


class TestCommands:

    def test_cues_reach_the_sink(self, screen, sink):
        screen.commit_edit(0, 6, 0, 2)
        screen.primary_action()
        run_ticks(screen.engine, 6)
        assert [e.kind for e in sink.events] == [CueKind.GET_READY, CueKind.COMPLETE]

    def test_primary_action_cycle(self, screen):
        screen.primary_action()
        run_ticks(screen.engine, 3)
        screen.primary_action()
        assert screen.engine.status == TimerStatus.PAUSED
        assert screen.engine.remaining == 57
        screen.primary_action()
        assert screen.engine.status == TimerStatus.RUNNING
        assert screen.engine.remaining == 57

    def test_commit_draft_persists(self, screen, store):
        draft = screen.open_edit()
        draft.set_text("main_minutes", "2")
        draft.set_text("main_seconds", "99")
        screen.commit_draft(draft)
        assert store.load() == TimerConfiguration(179, 5)
        assert screen.engine.remaining == 179

    def test_cancel_keeps_configuration(self, screen, store):
        draft = screen.open_edit()
        draft.set_text("main_minutes", "9")
        screen.cancel_edit()
        assert screen.configuration == TimerConfiguration()
        assert store.load() is None


class TestClose:

    def test_close_stops_delivery(self, screen, sink):
        ticks = SignalCollector()
        screen.engine.tick.connect(ticks)
        screen.primary_action()
        screen.close()

        assert not screen.engine.clock.is_active
        screen.engine.clock.tick.emit()
        assert len(ticks) == 0
        assert sink.events == []

    def test_close_is_idempotent(self, screen):
        screen.close()
        screen.close()


class TestConsoleRun:

    def test_complete_cue_reaches_sink_before_close(self, screen, sink):
        lines: list[str] = []
        finished: list[bool] = []
        attach_console(screen, lambda: finished.append(True), echo=lines.append)

        screen.commit_edit(0, 2, 0, 1)
        screen.primary_action()
        run_ticks(screen.engine, 2)

        assert [e.kind for e in sink.events] == [CueKind.GET_READY, CueKind.COMPLETE]
        assert screen.is_closed
        assert not screen.engine.clock.is_active
        assert finished == [True]
        assert lines == ["0:01", "Get ready!", "0:00", "Done."]

    def test_zero_duration_finishes_immediately(self, screen, sink):
        finished: list[bool] = []
        attach_console(screen, lambda: finished.append(True), echo=lambda line: None)

        screen.commit_edit(0, 0, 0, 5)
        screen.primary_action()

        assert [e.kind for e in sink.events] == [CueKind.COMPLETE]
        assert screen.is_closed
        assert finished == [True]

    def test_nothing_delivered_after_finish(self, screen, sink):
        lines: list[str] = []
        attach_console(screen, lambda: None, echo=lines.append)

        screen.commit_edit(0, 1, 0, 5)
        screen.primary_action()
        run_ticks(screen.engine, 1)
        count = len(lines)

        screen.engine.clock.tick.emit()
        assert len(lines) == count
        assert len(sink.events) == 1
