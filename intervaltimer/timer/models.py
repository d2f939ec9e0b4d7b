"""Value types shared by the timer engine, the edit form and the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


# ── enums ─────────────────────────────────────────────────────────────────


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class CueKind(Enum):
    GET_READY = "get-ready"
    COMPLETE = "complete"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_MAIN_SECONDS = 60         # 1:00
DEFAULT_GET_READY_SECONDS = 5     # 0:05


# ── value types ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerConfiguration:
    """The two configured durations, in whole seconds.

    No ordering is enforced between them.  An offset at or above the main
    duration is legal; the get-ready cue just never fires.
    """

    main_duration_seconds: int = DEFAULT_MAIN_SECONDS
    get_ready_offset_seconds: int = DEFAULT_GET_READY_SECONDS

    def __post_init__(self) -> None:
        if self.main_duration_seconds < 0 or self.get_ready_offset_seconds < 0:
            raise ValueError(
                "durations must be >= 0, got "
                f"main={self.main_duration_seconds} "
                f"get_ready={self.get_ready_offset_seconds}"
            )

    @classmethod
    def from_parts(
        cls,
        main_minutes: int,
        main_seconds: int,
        get_ready_minutes: int,
        get_ready_seconds: int,
    ) -> TimerConfiguration:
        return cls(
            main_duration_seconds=main_minutes * 60 + main_seconds,
            get_ready_offset_seconds=get_ready_minutes * 60 + get_ready_seconds,
        )

    @property
    def main_minutes(self) -> int:
        return self.main_duration_seconds // 60

    @property
    def main_seconds(self) -> int:
        return self.main_duration_seconds % 60

    @property
    def get_ready_minutes(self) -> int:
        return self.get_ready_offset_seconds // 60

    @property
    def get_ready_seconds(self) -> int:
        return self.get_ready_offset_seconds % 60


@dataclass(frozen=True)
class TimerState:
    """Read-only snapshot of the engine's countdown state."""

    status: TimerStatus
    remaining_seconds: int
    get_ready_cue_fired: bool


@dataclass(frozen=True)
class CueEvent:
    kind: CueKind
    at: datetime = field(default_factory=datetime.now)
