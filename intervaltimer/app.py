"""Timer screen controller.

One :class:`IntervalTimerApp` lives for as long as the timer screen is
shown.  It owns the engine, its clock, the configuration store and the cue
sink, and exposes the command surface the presentation layer calls.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from PyQt6.QtCore import QObject

from .audio.sounds import CueSink, DEFAULT_COMPLETE_REPEATS
from .settings import ConfigurationStore, load_configuration
from .timer.clock import ClockDriver, TICK_INTERVAL_MS
from .timer.edit import EditDraft
from .timer.engine import TimerEngine, format_time
from .timer.models import CueEvent, CueKind, TimerConfiguration


logger = logging.getLogger(__name__)


class IntervalTimerApp(QObject):
    """Wires engine → sink and engine → store for one timer screen."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        store: ConfigurationStore | None = None,
        sink: CueSink | None = None,
        sounds_dir: Path | None = None,
        complete_repeats: int = DEFAULT_COMPLETE_REPEATS,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        # ── settings ──────────────────────────────────────────────────
        self._store = store or ConfigurationStore()
        config = load_configuration(self._store)
        logger.info(
            "Loaded timer configuration: main=%ss get_ready=%ss",
            config.main_duration_seconds, config.get_ready_offset_seconds,
        )

        # ── engine ────────────────────────────────────────────────────
        self._clock = ClockDriver(self, interval_ms=interval_ms)
        self._engine = TimerEngine(
            self, config=config, clock=self._clock, store=self._store,
        )

        # ── cue sink ──────────────────────────────────────────────────
        self._sink = sink or CueSink(
            self, sounds_dir=sounds_dir, complete_repeats=complete_repeats,
        )
        self._engine.cue.connect(self._sink.play_cue)
        self._closed = False

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def sink(self) -> CueSink:
        return self._sink

    @property
    def configuration(self) -> TimerConfiguration:
        return self._engine.configuration

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ── commands ──────────────────────────────────────────────────────

    def primary_action(self) -> None:
        self._engine.primary_action()

    def open_edit(self) -> EditDraft:
        return self._engine.open_edit()

    def commit_edit(
        self,
        main_minutes: int,
        main_seconds: int,
        get_ready_minutes: int,
        get_ready_seconds: int,
    ) -> TimerConfiguration:
        return self._engine.commit_edit(
            main_minutes, main_seconds, get_ready_minutes, get_ready_seconds,
        )

    def commit_draft(self, draft: EditDraft) -> TimerConfiguration:
        return self.commit_edit(
            draft.main_minutes, draft.main_seconds,
            draft.get_ready_minutes, draft.get_ready_seconds,
        )

    def cancel_edit(self) -> None:
        self._engine.cancel_edit()

    def close(self) -> None:
        """Tear down the screen: no ticks or cues are delivered afterwards.

        Audio already playing is left to finish.
        """
        if self._closed:
            return
        self._closed = True
        self._engine.cue.disconnect(self._sink.play_cue)
        self._engine.shutdown()


def attach_console(
    screen: IntervalTimerApp,
    on_finished: Callable[[], None],
    echo: Callable[[str], None] = print,
) -> None:
    """Echo a run to the console and close *screen* once it completes.

    The close is triggered by the ``complete`` cue, after the sink
    (connected when the screen was built) has received it.
    """
    engine = screen.engine

    def _on_cue(event: CueEvent) -> None:
        if event.kind == CueKind.GET_READY:
            echo("Get ready!")
        elif event.kind == CueKind.COMPLETE:
            echo("Done.")
            screen.close()
            on_finished()

    engine.tick.connect(lambda remaining: echo(format_time(remaining)))
    engine.cue.connect(_on_cue)
