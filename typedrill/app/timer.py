from typing import Callable, Optional

from PySide6.QtCore import QElapsedTimer

Clock = Callable[[], float]

_reference = QElapsedTimer()
_reference.start()


def monotonic() -> float:
    """Seconds since process start, from Qt's monotonic high-resolution clock."""
    return _reference.nsecsElapsed() / 1e9


class HighResTimer:
    """Test timer. Unset until the first keypress, then never restarted."""

    def __init__(self, clock: Clock = monotonic):
        self._clock = clock
        self._started_at: Optional[float] = None

    @property
    def is_started(self) -> bool:
        return self._started_at is not None

    def start(self):
        if self._started_at is None:
            self._started_at = self._clock()

    def elapsed_sec(self) -> float:
        if self._started_at is None:
            return 0.0
        return max(0.0, self._clock() - self._started_at)
