# ui/events.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple, Union

RGB = Tuple[int, int, int]


class KeyCode(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    ENTER = "enter"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: Optional[str] = None

    @classmethod
    def of(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch)


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ResizeEvent:
    size: Size


Event = Union[KeyEvent, ResizeEvent]


@dataclass(frozen=True)
class Style:
    fg: Optional[RGB] = None
    bg: Optional[RGB] = None
    italic: bool = False


class EventSource(Protocol):
    def poll(self, timeout: float) -> Optional[Event]:
        """Next event, or None if nothing arrived within `timeout` seconds."""
        ...

    def size(self) -> Size:
        ...


class TerminalWriter(Protocol):
    def move_to(self, x: int, y: int) -> None: ...

    def write(self, text: str, style: Optional[Style] = None) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear(self) -> None: ...

    def flush(self) -> None: ...
