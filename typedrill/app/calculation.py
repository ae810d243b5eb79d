# app/calculation.py
from __future__ import annotations

CHARS_PER_WORD = 5.0
WPM_MIN = 0.0
WPM_MAX = 999.0


def _clamp(value: float) -> float:
    return max(WPM_MIN, min(WPM_MAX, value))


def wpm_gross(chars: int, seconds: float) -> float:
    """
    Raw WPM: (chars / 5) / minutes, ignoring correctness.
    Clamped to [0, 999]; an empty interval counts as infinitely fast.
    """
    if seconds <= 0:
        return WPM_MAX if chars > 0 else WPM_MIN
    return _clamp((chars / CHARS_PER_WORD) / (seconds / 60.0))


def wpm_net(chars: int, misses: int, seconds: float) -> float:
    """
    Gross WPM minus one word per minute for every miss.
    """
    if seconds <= 0:
        return wpm_gross(chars, seconds) if misses == 0 else WPM_MIN
    return _clamp(wpm_gross(chars, seconds) - misses / (seconds / 60.0))
