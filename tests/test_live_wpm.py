"""Tests for the sliding-window live WPM estimator."""

import pytest

from typedrill.app.calculation import wpm_gross
from typedrill.services.live_wpm import WINDOW_SECONDS, LiveWPM


class TestLiveWPM:
    def test_empty_is_zero(self, clock):
        live = LiveWPM(clock)
        clock.advance(5.0)
        assert live.value() == 0.0

    def test_ten_presses_over_one_second(self, clock):
        live = LiveWPM(clock)
        start = clock.now
        for i in range(10):
            clock.now = start + i / 9
            live.press()
        clock.now = start + 1.0
        # the press exactly one window old has aged out
        assert live.value() == pytest.approx(wpm_gross(9, WINDOW_SECONDS))
        assert len(live) == 9

    def test_cached_within_window(self, clock):
        live = LiveWPM(clock)
        clock.advance(1.0)
        live.press()
        first = live.value()
        assert first == pytest.approx(wpm_gross(1, WINDOW_SECONDS))

        for _ in range(20):
            live.press()
        clock.advance(0.5)
        assert live.value() == first

    def test_recomputes_after_window(self, clock):
        live = LiveWPM(clock)
        clock.now = 101.0
        live.press()
        live.value()

        clock.now = 101.25
        for _ in range(5):
            live.press()
        clock.now = 102.0
        assert live.value() == pytest.approx(wpm_gross(5, WINDOW_SECONDS))

    def test_old_presses_purged(self, clock):
        live = LiveWPM(clock)
        for _ in range(4):
            live.press()
        clock.advance(3.0)
        assert live.value() == 0.0
        assert len(live) == 0

    def test_first_reading_waits_one_window(self, clock):
        live = LiveWPM(clock)
        live.press()
        clock.advance(0.5)
        assert live.value() == 0.0

    def test_presses_alone_keep_window_bounded(self, clock):
        live = LiveWPM(clock)
        for _ in range(400):
            clock.advance(0.1)
            live.press()
        # ten presses per second, never queried
        assert len(live) <= 11
