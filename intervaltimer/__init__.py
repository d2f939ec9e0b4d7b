"""IntervalTimer: interval countdown with a get-ready cue."""

__version__ = "0.1.0"
