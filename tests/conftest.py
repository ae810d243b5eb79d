"""Shared fakes: a controllable clock, a recording terminal writer and a scripted event source."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest

from typedrill.ui.events import KeyCode, KeyEvent, ResizeEvent, Size, Style


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingWriter:
    """Keeps the last frame as a grid of cells plus a log of every call."""

    def __init__(self):
        self.calls: List[Tuple] = []
        self.cells: Dict[Tuple[int, int], Tuple[str, Optional[Style]]] = {}
        self.x = 0
        self.y = 0
        self.cursor_visible = True
        self.flushes = 0
        self.clears = 0

    def move_to(self, x: int, y: int) -> None:
        self.calls.append(("move_to", x, y))
        self.x, self.y = x, y

    def write(self, text: str, style: Optional[Style] = None) -> None:
        self.calls.append(("write", text, style))
        for ch in text:
            self.cells[(self.x, self.y)] = (ch, style)
            self.x += 1

    def hide_cursor(self) -> None:
        self.calls.append(("hide_cursor",))
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.calls.append(("show_cursor",))
        self.cursor_visible = True

    def clear(self) -> None:
        self.calls.append(("clear",))
        self.cells.clear()
        self.clears += 1

    def flush(self) -> None:
        self.calls.append(("flush",))
        self.flushes += 1

    def row(self, y: int) -> str:
        xs = sorted(x for (x, yy) in self.cells if yy == y)
        return "".join(self.cells[(x, y)][0] for x in xs)

    def written_text(self) -> str:
        return "".join(c[1] for c in self.calls if c[0] == "write")


class ScriptedEvents:
    """
    Replays a script of (seconds_to_advance, event_or_None) pairs, one per poll.
    Running past the end of the script is a test bug, so it fails loudly.
    """

    def __init__(self, clock: FakeClock, script, size: Size = Size(80, 24)):
        self.clock = clock
        self.script = list(script)
        self._size = size
        self.polls = 0

    def size(self) -> Size:
        return self._size

    def poll(self, timeout: float):
        self.polls += 1
        if not self.script:
            raise AssertionError("event script exhausted")
        dt, event = self.script.pop(0)
        self.clock.advance(dt)
        if isinstance(event, ResizeTo):
            self._size = event.size
            return ResizeEvent(event.size)
        return event


class ResizeTo:
    def __init__(self, width: int, height: int):
        self.size = Size(width, height)


def keys(text: str, dt: float = 0.1):
    """Script entries typing `text` one character every `dt` seconds."""
    return [(dt, KeyEvent.of(ch)) for ch in text]


BACKSPACE = KeyEvent(KeyCode.BACKSPACE)
ESCAPE = KeyEvent(KeyCode.ESCAPE)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("TYPEDRILL_HOME", str(tmp_path / "home"))
    return tmp_path / "home"
