"""Allow running IntervalTimer as a module: python -m intervaltimer.

Runs one interval with the stored configuration, printing the remaining
time each second, and exits once the completion cue has played.
"""

import logging
import sys

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .app import IntervalTimerApp, attach_console
from .timer.engine import format_time

# Lets the completion ding ring out before the event loop stops.
_EXIT_DELAY_MS = 1500


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("IntervalTimer")
    app.setOrganizationName("IntervalTimer")

    screen = IntervalTimerApp()
    attach_console(screen, lambda: QTimer.singleShot(_EXIT_DELAY_MS, app.quit))

    print(format_time(screen.engine.remaining))
    screen.primary_action()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
