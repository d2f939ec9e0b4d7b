"""Edit-form boundary: everything typed into the form is clamped here
before it can reach :meth:`TimerEngine.commit_edit`.

Seconds fields are clamped to 0-59 and minutes fields to 0-999 (the form
takes at most three digits).  Non-numeric text parses as 0.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import TimerConfiguration


MAX_MINUTES = 999
MAX_SECONDS = 59

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str | None) -> int | None:
    """Leading integer of *text* (``"12abc"`` → 12), or ``None``."""
    match = _LEADING_INT.match(text or "")
    if match is None:
        return None
    return int(match.group(1))


def parse_field(text: str) -> int:
    """Parse the leading integer of *text*; 0 when there is none."""
    value = parse_leading_int(text)
    return 0 if value is None else value


def clamp_minutes(value: int) -> int:
    return max(0, min(value, MAX_MINUTES))


def clamp_seconds(value: int) -> int:
    return max(0, min(value, MAX_SECONDS))


@dataclass
class EditDraft:
    """Mutable form state for the "Edit Timers" dialog."""

    main_minutes: int = 0
    main_seconds: int = 0
    get_ready_minutes: int = 0
    get_ready_seconds: int = 0

    @classmethod
    def from_configuration(cls, config: TimerConfiguration) -> EditDraft:
        return cls(
            main_minutes=config.main_minutes,
            main_seconds=config.main_seconds,
            get_ready_minutes=config.get_ready_minutes,
            get_ready_seconds=config.get_ready_seconds,
        )

    def set_text(self, name: str, text: str) -> int:
        """Update field *name* from raw form text and return the stored value."""
        if name not in ("main_minutes", "main_seconds",
                        "get_ready_minutes", "get_ready_seconds"):
            raise ValueError(f"unknown edit field {name!r}")
        value = parse_field(text)
        value = clamp_seconds(value) if name.endswith("_seconds") else clamp_minutes(value)
        setattr(self, name, value)
        return value

    def clamped(self) -> EditDraft:
        return EditDraft(
            main_minutes=clamp_minutes(self.main_minutes),
            main_seconds=clamp_seconds(self.main_seconds),
            get_ready_minutes=clamp_minutes(self.get_ready_minutes),
            get_ready_seconds=clamp_seconds(self.get_ready_seconds),
        )

    def to_configuration(self) -> TimerConfiguration:
        c = self.clamped()
        return TimerConfiguration.from_parts(
            c.main_minutes, c.main_seconds,
            c.get_ready_minutes, c.get_ready_seconds,
        )
