# ui/layout.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from typedrill.app.state import Letter, LetterState
from typedrill.app.themes import RGB, Theme, hex_to_rgb
from typedrill.ui.events import Point, Size, Style, TerminalWriter

TRUNCATION_MARKER = "..."
# rows reserved above the textbox for the mode badge and the status line
HEADER_ROWS = 2
# hit highlights finish fading this many letters behind the cursor
FADE_SPAN = 50.0


@dataclass(frozen=True)
class TextLimits:
    origin: Point
    size: Size  # (line width in cells, line count)

    @property
    def line_width(self) -> int:
        return self.size.width

    @property
    def line_count(self) -> int:
        return self.size.height


def compute_limits(viewport: Size, phrase_len: int, pad_x: int, pad_y: int, max_lines: int) -> TextLimits:
    """
    Place the textbox: centred on the phrase's width when it fits on one line,
    never closer than `pad_x` to the left edge.
    """
    centred = max(viewport.width // 2 - phrase_len // 2 - pad_x, 0)
    origin = Point(max(centred, pad_x), pad_y + HEADER_ROWS)
    line_width = max(viewport.width - 2 * pad_x, 1)
    return TextLimits(origin=origin, size=Size(line_width, max_lines))


def move_to_wrap(pos: int, limits: TextLimits) -> Point:
    """Screen cell of cursor index `pos` once the phrase is wrapped."""
    return Point(
        limits.origin.x + pos % limits.line_width,
        limits.origin.y + pos // limits.line_width,
    )


def color_lerp(a: RGB, b: RGB, t: float) -> RGB:
    t = max(0.0, min(1.0, t))
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def letter_style(letter: Letter, age: int, theme: Theme) -> Style:
    if letter.state is LetterState.HIT:
        bg = color_lerp(hex_to_rgb(theme.hit_fresh), hex_to_rgb(theme.hit_faded), age / FADE_SPAN)
        return Style(fg=hex_to_rgb(theme.hit_fg), bg=bg, italic=True)
    if letter.state is LetterState.MISS:
        return Style(fg=hex_to_rgb(theme.miss_fg), bg=hex_to_rgb(theme.miss_bg))
    return Style(fg=hex_to_rgb(theme.untyped_fg), bg=hex_to_rgb(theme.untyped_bg))


def render_textbox(
    writer: TerminalWriter,
    letters: Sequence[Letter],
    cursor: int,
    limits: TextLimits,
    viewport: Size,
    theme: Theme,
) -> int:
    """
    Draw the letters wrapped to the textbox. Letters past the last line are
    replaced by a truncation marker. Returns how many letters were drawn.
    """
    writer.move_to(limits.origin.x, limits.origin.y)
    on_line = 0
    lines = 0
    drawn = 0
    for idx, letter in enumerate(letters):
        if on_line >= limits.line_width:
            lines += 1
            on_line = 0
            writer.move_to(limits.origin.x, limits.origin.y + lines)

        if lines >= limits.line_count:
            writer.move_to(viewport.width // 2, limits.origin.y + lines)
            writer.write(TRUNCATION_MARKER)
            break

        writer.write(letter.char, letter_style(letter, cursor - idx, theme))
        on_line += 1
        drawn += 1
    return drawn
