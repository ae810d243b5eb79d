# core/chrono.py
from PySide6.QtCore import QElapsedTimer

# frames slower than this show the performance indicator fully red
FRAME_BUDGET_SEC = 0.1


class FrameTimer:
    """Measures how long the last frame took to draw."""

    def __init__(self):
        self._t = QElapsedTimer()
        self._last = 0.0

    def begin(self):
        self._t.start()

    def end(self) -> float:
        if self._t.isValid():
            self._last = self._t.nsecsElapsed() / 1e9
        return self._last

    def load(self) -> float:
        """Last frame time as a fraction of the frame budget, clamped to [0, 1]."""
        return max(0.0, min(1.0, self._last / FRAME_BUDGET_SEC))
