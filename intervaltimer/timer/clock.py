"""One-second clock that drives the timer engine."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


TICK_INTERVAL_MS = 1000


class ClockDriver(QObject):
    """Emits ``tick`` once per interval while active.

    ``QTimer.stop()`` runs on the owning thread, so no tick is delivered
    after :meth:`deactivate` returns.
    """

    tick = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self.tick)

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def activate(self) -> None:
        """Start ticking.  No-op if already active."""
        if self._qt_timer.isActive():
            return
        self._qt_timer.start()

    def deactivate(self) -> None:
        """Stop ticking.  No-op if already inactive."""
        if not self._qt_timer.isActive():
            return
        self._qt_timer.stop()
