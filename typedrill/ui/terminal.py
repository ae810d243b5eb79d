# ui/terminal.py
from __future__ import annotations
from typing import Dict, Optional, Tuple, Union
import curses
import logging

from typedrill.ui.events import RGB, Event, KeyCode, KeyEvent, ResizeEvent, Size, Style

log = logging.getLogger(__name__)

ESC_DELAY_MS = 25

_BASIC_COLORS = {
    curses.COLOR_BLACK: (0, 0, 0),
    curses.COLOR_RED: (205, 0, 0),
    curses.COLOR_GREEN: (0, 205, 0),
    curses.COLOR_YELLOW: (205, 205, 0),
    curses.COLOR_BLUE: (0, 0, 238),
    curses.COLOR_MAGENTA: (205, 0, 205),
    curses.COLOR_CYAN: (0, 205, 205),
    curses.COLOR_WHITE: (229, 229, 229),
}


def rgb_to_xterm256(rgb: RGB) -> int:
    """Nearest entry of the 6x6x6 xterm colour cube."""
    r, g, b = (round(c / 255 * 5) for c in rgb)
    return 16 + 36 * r + 6 * g + b


def rgb_to_basic(rgb: RGB) -> int:
    def dist(color: int) -> int:
        ref = _BASIC_COLORS[color]
        return sum((a - b) ** 2 for a, b in zip(rgb, ref))

    return min(_BASIC_COLORS, key=dist)


def translate_key(ch: Union[str, int]) -> Optional[Event]:
    """Map a curses get_wch() result to a key event. Resizes are handled by the caller."""
    if isinstance(ch, int):
        if ch in (curses.KEY_BACKSPACE, curses.KEY_DC):
            return KeyEvent(KeyCode.BACKSPACE)
        if ch == curses.KEY_ENTER:
            return KeyEvent(KeyCode.ENTER)
        return KeyEvent(KeyCode.OTHER)
    if ch == "\x1b":
        return KeyEvent(KeyCode.ESCAPE)
    if ch in ("\x7f", "\b"):
        return KeyEvent(KeyCode.BACKSPACE)
    if ch in ("\n", "\r"):
        return KeyEvent(KeyCode.ENTER)
    if ch.isprintable():
        return KeyEvent(KeyCode.CHAR, ch)
    return KeyEvent(KeyCode.OTHER)


class CursesTerminal:
    """Event source and frame writer on top of a curses screen."""

    def __init__(self, stdscr):
        self._scr = stdscr
        self._x = 0
        self._y = 0
        self._pairs: Dict[Tuple[int, int], int] = {}
        self._cursor_ok = True

        self._scr.keypad(True)
        curses.set_escdelay(ESC_DELAY_MS)
        self._colors = 0
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            self._colors = curses.COLORS

    # ---------- events ----------
    def size(self) -> Size:
        h, w = self._scr.getmaxyx()
        return Size(w, h)

    def poll(self, timeout: float) -> Optional[Event]:
        self._scr.timeout(max(0, int(timeout * 1000)))
        try:
            ch = self._scr.get_wch()
        except curses.error:
            # get_wch signals "no input before the timeout" with an error
            return None
        if ch == curses.KEY_RESIZE:
            curses.update_lines_cols()
            return ResizeEvent(self.size())
        return translate_key(ch)

    # ---------- output ----------
    def move_to(self, x: int, y: int) -> None:
        self._x, self._y = x, y
        h, w = self._scr.getmaxyx()
        if 0 <= x < w and 0 <= y < h:
            self._scr.move(y, x)

    def write(self, text: str, style: Optional[Style] = None) -> None:
        h, w = self._scr.getmaxyx()
        room = w - self._x
        if self._y == h - 1:
            room -= 1  # curses refuses to write the bottom-right cell
        if self._y >= h or self._x < 0 or room <= 0:
            self._x += len(text)
            return
        self._scr.addstr(self._y, self._x, text[:room], self._attr(style))
        self._x += len(text)

    def hide_cursor(self) -> None:
        self._set_cursor(0)

    def show_cursor(self) -> None:
        self._set_cursor(1)

    def clear(self) -> None:
        self._scr.clear()
        self._x = self._y = 0

    def flush(self) -> None:
        self._scr.refresh()

    # ---------- helpers ----------
    def _set_cursor(self, visibility: int):
        if not self._cursor_ok:
            return
        try:
            curses.curs_set(visibility)
        except curses.error:
            log.info("Terminal does not support cursor visibility changes")
            self._cursor_ok = False

    def _color(self, rgb: Optional[RGB]) -> int:
        if rgb is None:
            return -1
        if self._colors >= 256:
            return rgb_to_xterm256(rgb)
        return rgb_to_basic(rgb)

    def _attr(self, style: Optional[Style]) -> int:
        if style is None:
            return curses.A_NORMAL
        attr = curses.A_ITALIC if style.italic else curses.A_NORMAL
        if not self._colors:
            return attr
        key = (self._color(style.fg), self._color(style.bg))
        pair = self._pairs.get(key)
        if pair is None:
            if len(self._pairs) + 1 >= curses.COLOR_PAIRS:
                return attr
            pair = len(self._pairs) + 1
            curses.init_pair(pair, *key)
            self._pairs[key] = pair
        return attr | curses.color_pair(pair)
