"""Tests for profile names and the test timer."""

import pytest

from typedrill.app.timer import HighResTimer, monotonic
from typedrill.app.validation import MAX_PROFILE_LEN, sanitize_profile_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("guest", "guest"),
        ("  Ann Lee ", "ann_lee"),
        ("r@b!n-2", "rbn-2"),
        ("", "guest"),
        ("???", "guest"),
    ],
)
def test_profile_names(raw, expected):
    assert sanitize_profile_name(raw) == expected


def test_profile_name_is_truncated():
    assert len(sanitize_profile_name("x" * 100)) == MAX_PROFILE_LEN


class TestTimer:
    def test_unset_until_started(self, clock):
        timer = HighResTimer(clock)
        clock.advance(5.0)
        assert not timer.is_started
        assert timer.elapsed_sec() == 0.0

    def test_start_only_once(self, clock):
        timer = HighResTimer(clock)
        timer.start()
        clock.advance(2.0)
        timer.start()
        clock.advance(1.0)
        assert timer.is_started
        assert timer.elapsed_sec() == pytest.approx(3.0)

    def test_monotonic_clock_never_goes_back(self):
        first = monotonic()
        assert monotonic() >= first >= 0.0
