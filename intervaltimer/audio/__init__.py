"""Audio package."""

from .sounds import CueSink, SOUND_NAMES

__all__ = ["CueSink", "SOUND_NAMES"]
