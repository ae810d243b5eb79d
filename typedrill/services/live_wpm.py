# services/live_wpm.py
from collections import deque

from typedrill.app.calculation import wpm_gross
from typedrill.app.timer import Clock, monotonic

WINDOW_SECONDS = 1.0


class LiveWPM:
    """
    Keypress rate over the last second.

    Recomputed at most once per window; between recomputes `value()` returns
    the cached reading.
    """

    def __init__(self, clock: Clock = monotonic):
        self._clock = clock
        self._presses = deque()
        self._last_query = clock()
        self._last_wpm = 0.0

    def __len__(self) -> int:
        return len(self._presses)

    def press(self):
        now = self._clock()
        self._purge(now)
        self._presses.append(now)

    def _purge(self, now: float):
        while self._presses and now - self._presses[0] >= WINDOW_SECONDS:
            self._presses.popleft()

    def value(self) -> float:
        if not self._presses:
            return 0.0

        now = self._clock()
        if now - self._last_query < WINDOW_SECONDS:
            return self._last_wpm
        self._last_query = now
        self._purge(now)

        self._last_wpm = wpm_gross(len(self._presses), WINDOW_SECONDS)
        return self._last_wpm
