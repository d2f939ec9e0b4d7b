"""Shared test helpers for IntervalTimer."""

from intervaltimer.timer.engine import TimerEngine
from intervaltimer.timer.models import CueKind


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def kinds(self) -> list[CueKind]:
        """For a collector on ``TimerEngine.cue``: the cue kinds in order."""
        return [event.kind for event in self.items]

    def count(self, kind: CueKind) -> int:
        return sum(1 for event in self.items if event.kind == kind)

    def clear(self):
        self.items.clear()


def run_ticks(engine: TimerEngine, count: int) -> None:
    """Deliver *count* clock ticks synchronously."""
    for _ in range(count):
        engine._on_tick()
