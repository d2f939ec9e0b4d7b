"""Interval timer state machine.

States
------
IDLE        Not running, showing the full configured duration.
RUNNING     Counting down, one tick per second.
PAUSED      Frozen mid-run; remembers the remaining time and fired cues.
COMPLETED   Reached 0:00 and emitted the completion cue.

Transitions
-----------
IDLE | COMPLETED → RUNNING     (start; full reset of the countdown)
RUNNING → PAUSED              (pause)
PAUSED → RUNNING              (resume)
RUNNING → COMPLETED           (tick reaching 0)
Any → IDLE                    (commit_edit)

Cues
----
``get-ready`` fires once per run on the tick whose decrement lands on the
configured offset.  ``complete`` fires once, on the tick reaching 0.  With
an offset of 0 both fire on the final tick, get-ready first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from .clock import ClockDriver
from .edit import EditDraft
from .models import CueEvent, CueKind, TimerConfiguration, TimerState, TimerStatus

if TYPE_CHECKING:
    from ..settings import ConfigurationStore


logger = logging.getLogger(__name__)

_PRIMARY_ACTION_LABELS: dict[TimerStatus, str] = {
    TimerStatus.IDLE: "Start",
    TimerStatus.COMPLETED: "Start",
    TimerStatus.RUNNING: "Pause",
    TimerStatus.PAUSED: "Resume",
}


def format_time(seconds: int) -> str:
    """Format a second count as ``m:ss``."""
    mins, secs = divmod(max(0, seconds), 60)
    return f"{mins}:{secs:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Countdown with a get-ready cue point, driven by a :class:`ClockDriver`.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every decrement while running.
    state_changed(new_status: TimerStatus)
        Emitted on every status transition.
    cue(event: CueEvent)
        The get-ready / complete cue stream, for the sound sink.
    configuration_changed(config: TimerConfiguration)
        Emitted after an edit is committed.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    cue = pyqtSignal(object)
    configuration_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        config: TimerConfiguration | None = None,
        clock: ClockDriver | None = None,
        store: ConfigurationStore | None = None,
    ) -> None:
        super().__init__(parent)

        # ── configuration ─────────────────────────────────────────────
        self._config: TimerConfiguration = config or TimerConfiguration()
        self._store = store

        # ── countdown state ───────────────────────────────────────────
        self._status: TimerStatus = TimerStatus.IDLE
        self._remaining: int = self._config.main_duration_seconds
        self._get_ready_fired: bool = False
        self._editing: bool = False
        self._shut_down: bool = False

        # ── clock ─────────────────────────────────────────────────────
        self._clock = clock or ClockDriver(self)
        self._clock.tick.connect(self._on_tick)

        self._primary_actions = {
            TimerStatus.IDLE: self.start,
            TimerStatus.COMPLETED: self.start,
            TimerStatus.PAUSED: self.resume,
            TimerStatus.RUNNING: self.pause,
        }

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def configuration(self) -> TimerConfiguration:
        return self._config

    @property
    def get_ready_cue_fired(self) -> bool:
        return self._get_ready_fired

    @property
    def clock(self) -> ClockDriver:
        return self._clock

    @property
    def is_running(self) -> bool:
        return self._status == TimerStatus.RUNNING

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def can_edit(self) -> bool:
        """Editing is offered whenever the countdown is not ticking."""
        return self._status != TimerStatus.RUNNING

    @property
    def primary_action_label(self) -> str:
        return _PRIMARY_ACTION_LABELS[self._status]

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current run."""
        total = self._config.main_duration_seconds
        if total <= 0:
            return 0.0
        return max(0.0, min(1.0, (total - self._remaining) / total))

    @property
    def get_ready_marker_angle(self) -> float | None:
        """Where the get-ready tick sits on the progress ring.

        Degrees clockwise from 12 o'clock, or ``None`` when the cue point
        cannot be reached (offset 0 or at/after the full duration).
        """
        total = self._config.main_duration_seconds
        offset = self._config.get_ready_offset_seconds
        if not 0 < offset < total:
            return None
        return (total - offset) / total * 360.0

    def snapshot(self) -> TimerState:
        return TimerState(
            status=self._status,
            remaining_seconds=self._remaining,
            get_ready_cue_fired=self._get_ready_fired,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def primary_action(self) -> None:
        """Start, pause or resume depending on the current status."""
        self._primary_actions[self._status]()

    def start(self) -> None:
        """Begin a fresh run.  Only valid from IDLE or COMPLETED."""
        if self._status not in (TimerStatus.IDLE, TimerStatus.COMPLETED):
            return
        self._remaining = self._config.main_duration_seconds
        self._get_ready_fired = False

        if self._remaining == 0:
            # Nothing to count down: complete without waiting for a tick.
            self._set_status(TimerStatus.RUNNING)
            self._complete()
            return

        self._set_status(TimerStatus.RUNNING)
        self._clock.activate()

    def pause(self) -> None:
        """Freeze the countdown.  Only valid from RUNNING."""
        if self._status != TimerStatus.RUNNING:
            return
        self._clock.deactivate()
        self._set_status(TimerStatus.PAUSED)

    def resume(self) -> None:
        """Continue from the frozen remaining time.  Only valid from PAUSED."""
        if self._status != TimerStatus.PAUSED:
            return
        self._set_status(TimerStatus.RUNNING)
        self._clock.activate()

    def open_edit(self) -> EditDraft:
        """Return a form draft prefilled with the current configuration."""
        self._editing = True
        return EditDraft.from_configuration(self._config)

    def commit_edit(
        self,
        main_minutes: int,
        main_seconds: int,
        get_ready_minutes: int,
        get_ready_seconds: int,
    ) -> TimerConfiguration:
        """Apply edited durations, stop any run and reset to IDLE.

        Inputs are clamped at the edit boundary first.  The new
        configuration is persisted best-effort through the store.
        """
        config = EditDraft(
            main_minutes, main_seconds, get_ready_minutes, get_ready_seconds,
        ).to_configuration()
        self.apply_configuration(config)
        self._editing = False

        if self._store is not None and not self._store.save(config):
            logger.warning("Could not persist timer configuration %s", config)

        self.configuration_changed.emit(config)
        return config

    def cancel_edit(self) -> None:
        """Close the edit form without touching configuration or state."""
        self._editing = False

    def apply_configuration(self, config: TimerConfiguration) -> None:
        """Replace the configuration and reset the countdown to IDLE."""
        self._clock.deactivate()
        self._config = config
        self._remaining = config.main_duration_seconds
        self._get_ready_fired = False
        self._set_status(TimerStatus.IDLE)

    def shutdown(self) -> None:
        """Stop the clock; the engine delivers nothing afterwards.

        Safe to call more than once.
        """
        self._clock.deactivate()
        if self._shut_down:
            return
        self._shut_down = True
        self._clock.tick.disconnect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._status != TimerStatus.RUNNING:
            return

        self._remaining = max(0, self._remaining - 1)
        self.tick.emit(self._remaining)

        if (
            not self._get_ready_fired
            and self._remaining == self._config.get_ready_offset_seconds
        ):
            self._get_ready_fired = True
            self._emit_cue(CueKind.GET_READY)

        if self._remaining == 0:
            self._complete()

    def _complete(self) -> None:
        self._clock.deactivate()
        self._set_status(TimerStatus.COMPLETED)
        self._emit_cue(CueKind.COMPLETE)

    def _emit_cue(self, kind: CueKind) -> None:
        logger.debug("Cue %s at %s remaining", kind.value, self._remaining)
        self.cue.emit(CueEvent(kind))

    def _set_status(self, new_status: TimerStatus) -> None:
        if new_status == self._status:
            return
        logger.debug("Timer %s → %s", self._status.value, new_status.value)
        self._status = new_status
        self.state_changed.emit(new_status)
