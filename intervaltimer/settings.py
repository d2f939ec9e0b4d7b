"""Persistent timer configuration.

The two durations are stored as four independent keys (minutes and
seconds of each), as text, in the ``preferences`` table::

    store = ConfigurationStore()
    config = load_configuration(store)
    store.save(config)

Each key falls back to its own default when missing or unreadable, so a
partially written store still loads.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .database.db import get_session
from .database.models import Preference
from .timer.edit import parse_leading_int
from .timer.models import (
    DEFAULT_GET_READY_SECONDS,
    DEFAULT_MAIN_SECONDS,
    TimerConfiguration,
)


logger = logging.getLogger(__name__)

MAIN_MINUTES_KEY = "@timer_main_minutes"
MAIN_SECONDS_KEY = "@timer_main_seconds"
GET_READY_MINUTES_KEY = "@timer_get_ready_minutes"
GET_READY_SECONDS_KEY = "@timer_get_ready_seconds"

STORAGE_KEYS = (
    MAIN_MINUTES_KEY,
    MAIN_SECONDS_KEY,
    GET_READY_MINUTES_KEY,
    GET_READY_SECONDS_KEY,
)

DEFAULT_VALUES: dict[str, int] = {
    MAIN_MINUTES_KEY: DEFAULT_MAIN_SECONDS // 60,
    MAIN_SECONDS_KEY: DEFAULT_MAIN_SECONDS % 60,
    GET_READY_MINUTES_KEY: DEFAULT_GET_READY_SECONDS // 60,
    GET_READY_SECONDS_KEY: DEFAULT_GET_READY_SECONDS % 60,
}


def _parse_stored(key: str, raw: str | None) -> int:
    """Stored text → non-negative int, or the key's default.

    Only the leading integer is read, so ``"12abc"`` loads as 12.
    """
    if raw is None:
        return DEFAULT_VALUES[key]
    value = parse_leading_int(raw)
    if value is None:
        logger.debug("Ignoring non-numeric value %r for %s", raw, key)
        return DEFAULT_VALUES[key]
    if value < 0:
        logger.debug("Ignoring negative value %r for %s", raw, key)
        return DEFAULT_VALUES[key]
    return value


class ConfigurationStore:
    """Reads and writes :class:`TimerConfiguration` through the database."""

    def load(self) -> TimerConfiguration | None:
        """Last saved configuration, or ``None`` if nothing is stored or
        the database cannot be read."""
        try:
            with get_session() as db:
                rows = (
                    db.query(Preference)
                    .filter(Preference.key.in_(STORAGE_KEYS))
                    .all()
                )
                stored = {row.key: row.value for row in rows}
        except (SQLAlchemyError, OSError):
            logger.warning("Could not read timer configuration", exc_info=True)
            return None

        if not stored:
            return None

        values = {key: _parse_stored(key, stored.get(key)) for key in STORAGE_KEYS}
        return TimerConfiguration.from_parts(
            values[MAIN_MINUTES_KEY],
            values[MAIN_SECONDS_KEY],
            values[GET_READY_MINUTES_KEY],
            values[GET_READY_SECONDS_KEY],
        )

    def save(self, config: TimerConfiguration) -> bool:
        """Write all four keys.  Returns ``False`` instead of raising."""
        values = {
            MAIN_MINUTES_KEY: config.main_minutes,
            MAIN_SECONDS_KEY: config.main_seconds,
            GET_READY_MINUTES_KEY: config.get_ready_minutes,
            GET_READY_SECONDS_KEY: config.get_ready_seconds,
        }
        try:
            with get_session() as db:
                for key, value in values.items():
                    db.merge(Preference(key=key, value=str(value)))
        except (SQLAlchemyError, OSError):
            logger.debug("Timer configuration write failed", exc_info=True)
            return False
        return True


def load_configuration(store: ConfigurationStore) -> TimerConfiguration:
    """Load from *store*, falling back to the built-in defaults."""
    return store.load() or TimerConfiguration()
