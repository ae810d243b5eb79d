"""Tests for the command line entry point. The curses screen is replaced by a stub."""

import pytest

from typedrill import main as cli
from typedrill.app.errors import ConfigError
from typedrill.app.state import TestOutcome, TimeMode, WordsMode
from typedrill.utils.db_helper import profile_stats, recent_results, upsert_profile


def finished(mode=WordsMode(25), net=48.0):
    return TestOutcome(length=120, wordlist="code python", mode=mode, hits=118, misses=2, elapsed=30.0, wpm=(50.0, net))


@pytest.fixture
def screen(monkeypatch):
    """Stands in for curses.wrapper; returns whatever `result` holds."""
    calls = []

    class Screen:
        result = finished()

        def __call__(self, func, renderer, settings):
            calls.append((renderer, settings))
            return self.result

    stub = Screen()
    stub.calls = calls
    monkeypatch.setattr(cli.curses, "wrapper", stub)
    return stub


class TestArgs:
    def test_defaults(self):
        args = cli.parse_args([])
        assert (args.mode, args.words, args.seconds, args.profile) == ("words", 25, 30, "guest")
        assert cli.build_mode(args) == WordsMode(25)

    def test_time_mode(self):
        assert cli.build_mode(cli.parse_args(["--mode", "time", "--seconds", "15"])) == TimeMode(15.0)

    @pytest.mark.parametrize("argv", [["--words", "0"], ["--seconds", "-3"], ["--wordlist", "klingon"]])
    def test_rejects_bad_values(self, argv):
        with pytest.raises(SystemExit):
            cli.parse_args(argv)


def test_completed_test_is_recorded(home, screen, capsys):
    assert cli.run(cli.parse_args(["--wordlist", "code_python"])) == 0

    out = capsys.readouterr().out
    assert "GROSS: 50.00 wpm" in out
    renderer, settings = screen.calls[0]
    assert len(renderer.engine.letters) > 0
    assert settings.max_lines == 2

    pid = upsert_profile("guest")
    assert recent_results(pid, 5) == [finished()]
    assert (home / "settings.json").exists()


def test_new_pb_is_announced(home, screen, capsys):
    args = cli.parse_args(["--wordlist", "code_python"])
    cli.run(args)
    screen.result = finished(net=60.0)
    cli.run(args)
    assert "new pb!" in capsys.readouterr().out
    assert profile_stats(upsert_profile("guest")).pb == 60.0


def test_cancelled_test_is_not_recorded(home, screen, capsys):
    screen.result = None
    assert cli.run(cli.parse_args(["--wordlist", "code_python", "--profile", "ann"])) == 0
    assert "Test cancelled." in capsys.readouterr().out
    assert profile_stats(upsert_profile("ann")).total_tests == 0


def test_time_mode_phrase(home, screen):
    cli.run(cli.parse_args(["--wordlist", "code_c", "--mode", "time", "--no-profile"]))
    renderer, _ = screen.calls[0]
    assert len(renderer.engine.letters) > 100
    assert not (home / "profile.db").exists()


def test_stats(home, screen, capsys):
    cli.run(cli.parse_args(["--wordlist", "code_python"]))
    capsys.readouterr()

    assert cli.run(cli.parse_args(["--stats"])) == 0
    out = capsys.readouterr().out
    assert "total tests taken" in out
    assert "words 25" in out
    assert len(screen.calls) == 1


def test_stats_without_profile(home, capsys):
    assert cli.run(cli.parse_args(["--stats", "--no-profile"])) == 0
    assert "No profile selected." in capsys.readouterr().out


def test_main_reports_errors(home, monkeypatch, capsys):
    def broken(args):
        raise ConfigError("settings are unreadable")

    monkeypatch.setattr(cli, "run", broken)
    monkeypatch.setattr(cli.sys, "excepthook", cli.sys.excepthook)
    assert cli.main([]) == 1
    assert "settings are unreadable" in capsys.readouterr().err
