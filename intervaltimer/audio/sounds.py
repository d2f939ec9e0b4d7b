"""Cue sounds: numpy synthesis and QSoundEffect playback.

Both cue sounds are generated programmatically as WAV files using
sine-wave synthesis with ADSR envelopes.  Files are cached to disk so
subsequent launches skip synthesis.

Sound names
-----------
- ``get_ready``  — single short beep, warns the interval is nearly over
- ``timer_ding`` — bright bell strike when the countdown reaches 0:00
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from ..timer.models import CueEvent, CueKind


logger = logging.getLogger(__name__)

# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "IntervalTimer"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SOUND_NAMES = ("get_ready", "timer_ding")

SAMPLE_RATE = 44100

# Per-cue volume, scaled by the sink's master volume.
GET_READY_VOLUME = 0.8
TIMER_DING_VOLUME = 1.0

DEFAULT_COMPLETE_REPEATS = 1

_CUE_SOUNDS: dict[CueKind, tuple[str, float]] = {
    CueKind.GET_READY: ("get_ready", GET_READY_VOLUME),
    CueKind.COMPLETE: ("timer_ding", TIMER_DING_VOLUME),
}


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit mono PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_beep() -> bytes:
    """Get ready — one 880 Hz beep, 150 ms, crisp attack."""
    tone = _sine(880.0, 0.15) * 0.5
    env = _make_envelope(len(tone), attack=60, decay=300, sustain_level=0.6, release=1200)
    return _to_wav_bytes(np.concatenate([tone * env, np.zeros(int(SAMPLE_RATE * 0.05))]))


def _generate_ding() -> bytes:
    """Timer done — bell strike (E6) with inharmonic overtones, long decay."""
    duration = 1.2
    base = _sine(1318.51, duration) * 0.45
    # Bell partials sit above the octave
    overtone = _sine(1318.51 * 2.76, duration) * 0.12
    shimmer = _sine(1318.51 * 5.4, duration) * 0.05
    combined = base + overtone + shimmer
    env = _make_envelope(
        len(combined),
        attack=int(SAMPLE_RATE * 0.005),
        decay=int(SAMPLE_RATE * 0.25),
        sustain_level=0.35,
        release=int(SAMPLE_RATE * 0.9),
    )
    return _to_wav_bytes(combined * env)


_GENERATORS: dict[str, callable] = {
    "get_ready": _generate_beep,
    "timer_ding": _generate_ding,
}


# ═══════════════════════════════════════════════════════════════════════════
#  CUE SINK
# ═══════════════════════════════════════════════════════════════════════════


class CueSink(QObject):
    """Plays the sound for each cue the timer engine emits.

    Usage::

        sink = CueSink(parent=self, complete_repeats=3)
        engine.cue.connect(sink.play_cue)

    Playback problems are logged and never raised back to the engine.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        complete_repeats: int = DEFAULT_COMPLETE_REPEATS,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 1.0  # master, 0.0–1.0
        self._complete_repeats = max(1, complete_repeats)
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, QSoundEffect] = {}

        try:
            self._ensure_wav_files()
        except OSError:
            logger.warning("Could not write cue sounds to %s", self._sounds_dir, exc_info=True)
        self._load_effects()

    # ── public API ────────────────────────────────────────────────────

    @property
    def volume(self) -> int:
        """Master volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def complete_repeats(self) -> int:
        return self._complete_repeats

    def set_volume(self, level: int) -> None:
        """Set master volume (0-100)."""
        self._volume = max(0, min(level, 100)) / 100.0
        for name, cue_volume in _CUE_SOUNDS.values():
            effect = self._effects.get(name)
            if effect is not None:
                effect.setVolume(cue_volume * self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def set_complete_repeats(self, count: int) -> None:
        self._complete_repeats = max(1, count)

    def play_cue(self, event: CueEvent) -> None:
        """Slot for ``TimerEngine.cue``."""
        name, _ = _CUE_SOUNDS[event.kind]
        repeats = self._complete_repeats if event.kind == CueKind.COMPLETE else 1
        self.play(name, repeats=repeats)

    def play(self, name: str, *, repeats: int = 1) -> bool:
        """Play a sound by name.  Returns whether playback was started."""
        if not self._enabled:
            return False
        effect = self._effects.get(name)
        if effect is None:
            logger.warning("Cue sound %r is not loaded", name)
            return False
        try:
            effect.setLoopCount(repeats)
            effect.play()
        except Exception:
            logger.warning("Playing cue sound %r failed", name, exc_info=True)
            return False
        return True

    def stop(self) -> None:
        """Stop anything currently playing."""
        for effect in self._effects.values():
            effect.stop()

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_files(self) -> None:
        """Generate any missing WAV files to the cache directory."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        for name, gen_fn in _GENERATORS.items():
            path = self._sounds_dir / f"{name}.wav"
            if not path.exists():
                path.write_bytes(gen_fn())

    def _load_effects(self) -> None:
        """Create QSoundEffect instances from cached WAV files."""
        for name, cue_volume in _CUE_SOUNDS.values():
            path = self._sounds_dir / f"{name}.wav"
            if path.exists():
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(cue_volume * self._volume)
                self._effects[name] = effect
