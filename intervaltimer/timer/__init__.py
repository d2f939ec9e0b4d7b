"""Timer package."""

from .clock import ClockDriver, TICK_INTERVAL_MS
from .edit import EditDraft, parse_field, MAX_MINUTES, MAX_SECONDS
from .engine import TimerEngine, format_time
from .models import (
    CueEvent,
    CueKind,
    TimerConfiguration,
    TimerState,
    TimerStatus,
    DEFAULT_MAIN_SECONDS,
    DEFAULT_GET_READY_SECONDS,
)

__all__ = [
    "ClockDriver",
    "TICK_INTERVAL_MS",
    "EditDraft",
    "parse_field",
    "MAX_MINUTES",
    "MAX_SECONDS",
    "TimerEngine",
    "format_time",
    "CueEvent",
    "CueKind",
    "TimerConfiguration",
    "TimerState",
    "TimerStatus",
    "DEFAULT_MAIN_SECONDS",
    "DEFAULT_GET_READY_SECONDS",
]
