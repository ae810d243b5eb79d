# main.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional
import argparse
import curses
import logging
import sys

from typedrill import __version__
from typedrill.app.config import (
    RECENT_COUNT,
    SHOW_RECENT,
    THEME,
    WORDLIST,
    SessionSettings,
    load_config,
    save_config,
)
from typedrill.app.errors import TypedrillError
from typedrill.app.state import TestMode, TestOutcome, TimeMode, WordsMode
from typedrill.app.themes import load_custom_themes, theme_by_name
from typedrill.app.validation import sanitize_profile_name
from typedrill.ui.session_summary import recent_lines, stats_lines, summary_lines
from typedrill.ui.terminal import CursesTerminal
from typedrill.ui.test_ui import TestRenderer
from typedrill.utils.db_helper import insert_result, profile_stats, recent_results, upsert_profile
from typedrill.utils.file_handler import Wordlist, data_dir, load_tokens, phrase_for_mode

log = logging.getLogger("typedrill")


def setup_logging(log_path: Path) -> None:
    # the test screen owns the terminal, so logs only go to the file
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.FileHandler(log_path, encoding="utf-8")],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        sys.stderr.write(f"{exctype.__name__}: {value} (see {log_path})\n")
        sys.exit(1)

    sys.excepthook = excepthook


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="typedrill", description="Terminal typing speed drill.")
    ap.add_argument("--mode", choices=("words", "time"), default="words")
    ap.add_argument("--words", type=_positive_int, default=25, help="phrase length in words mode")
    ap.add_argument("--seconds", type=_positive_int, default=30, help="time budget in time mode")
    ap.add_argument(
        "--wordlist",
        choices=[w.name.lower() for w in Wordlist],
        help="override the configured wordlist for this run",
    )
    ap.add_argument("--profile", default="guest", help="profile to record results to")
    ap.add_argument("--no-profile", action="store_true", help="run without recording results")
    ap.add_argument("--stats", action="store_true", help="print profile statistics and exit")
    ap.add_argument("--config", type=Path, help="settings file (default: <data dir>/settings.json)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap.parse_args(argv)


def build_mode(args: argparse.Namespace) -> TestMode:
    if args.mode == "time":
        return TimeMode(float(args.seconds))
    return WordsMode(args.words)


def _run_test(stdscr, renderer: TestRenderer, settings: SessionSettings) -> Optional[TestOutcome]:
    term = CursesTerminal(stdscr)
    return renderer.render(term, term, settings)


def run(args: argparse.Namespace) -> int:
    home = data_dir()
    load_custom_themes(home / "themes.json")

    config_path = args.config or home / "settings.json"
    config = load_config(config_path)
    if not config_path.exists():
        save_config(config, config_path)
    if args.wordlist:
        config.set(WORDLIST, args.wordlist.upper())

    profile_id = None
    if not args.no_profile:
        name = sanitize_profile_name(args.profile)
        profile_id = upsert_profile(name)
        log.info("Using profile %r", name)

    if args.stats:
        if profile_id is None:
            print("No profile selected.")
            return 0
        for line in stats_lines(profile_stats(profile_id)):
            print(line)
        print()
        for line in recent_lines(recent_results(profile_id, config.get_int(RECENT_COUNT))):
            print(line)
        return 0

    mode = build_mode(args)
    wordlist = Wordlist.from_name(config.get_select(WORDLIST))
    phrase = phrase_for_mode(mode, load_tokens(wordlist))
    renderer = TestRenderer(phrase, mode, wordlist.value, theme=theme_by_name(config.get_select(THEME)))
    previous_pb = profile_stats(profile_id).pb if profile_id is not None else None

    outcome = curses.wrapper(_run_test, renderer, config.session_settings())
    if outcome is None:
        print("Test cancelled.")
        return 0

    for line in summary_lines(outcome, previous_pb):
        print(line)

    if profile_id is not None:
        insert_result(profile_id, outcome)
        if config.get_bool(SHOW_RECENT):
            print()
            for line in recent_lines(recent_results(profile_id, config.get_int(RECENT_COUNT))):
                print(line)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(data_dir() / "typedrill.log")
    try:
        return run(args)
    except TypedrillError as e:
        log.error("%s", e)
        print(f"typedrill: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
