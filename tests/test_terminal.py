"""Tests for the curses adapter's pure helpers."""

import curses

import pytest

from typedrill.ui.events import KeyCode, KeyEvent
from typedrill.ui.terminal import rgb_to_basic, rgb_to_xterm256, translate_key


class TestTranslateKey:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("a", KeyEvent(KeyCode.CHAR, "a")),
            (" ", KeyEvent(KeyCode.CHAR, " ")),
            ("\x1b", KeyEvent(KeyCode.ESCAPE)),
            ("\x7f", KeyEvent(KeyCode.BACKSPACE)),
            ("\b", KeyEvent(KeyCode.BACKSPACE)),
            ("\n", KeyEvent(KeyCode.ENTER)),
            ("\t", KeyEvent(KeyCode.OTHER)),
            (curses.KEY_BACKSPACE, KeyEvent(KeyCode.BACKSPACE)),
            (curses.KEY_ENTER, KeyEvent(KeyCode.ENTER)),
            (curses.KEY_LEFT, KeyEvent(KeyCode.OTHER)),
        ],
    )
    def test_mapping(self, raw, expected):
        assert translate_key(raw) == expected

    def test_unicode_letters_are_characters(self):
        assert translate_key("é") == KeyEvent(KeyCode.CHAR, "é")


class TestColours:
    def test_cube_corners(self):
        assert rgb_to_xterm256((0, 0, 0)) == 16
        assert rgb_to_xterm256((255, 255, 255)) == 231
        assert rgb_to_xterm256((255, 0, 0)) == 196

    def test_basic_nearest(self):
        assert rgb_to_basic((250, 10, 10)) == curses.COLOR_RED
        assert rgb_to_basic((10, 10, 10)) == curses.COLOR_BLACK
        assert rgb_to_basic((30, 200, 30)) == curses.COLOR_GREEN
