# ui/session_summary.py
from __future__ import annotations
from typing import List, Optional, Sequence

from typedrill.app.state import TestOutcome
from typedrill.utils.db_helper import ProfileStatistics


def summary_lines(outcome: TestOutcome, previous_pb: Optional[float] = None) -> List[str]:
    """Result report shown once a test completes."""
    lines = [
        f"GROSS: {outcome.gross:.2f} wpm",
        f"NET:   {outcome.net:.2f} wpm ({outcome.misses}X)",
        f"ACC:   {outcome.accuracy:.1f} %  in {outcome.elapsed:.1f} s",
    ]
    if previous_pb is not None and outcome.net > previous_pb:
        lines.append("new pb!")
    return lines


def stats_lines(stats: ProfileStatistics) -> List[str]:
    rows = [
        ("total tests taken", f"{stats.total_tests}"),
        ("average gross", f"{stats.average_gross_wpm:.1f}wpm"),
        ("average net", f"{stats.average_net_wpm:.1f}wpm"),
        ("personal best", f"{stats.pb:.1f}wpm"),
    ]
    return [f"|{label:^32}| {value}" for label, value in rows]


def recent_lines(outcomes: Sequence[TestOutcome]) -> List[str]:
    if not outcomes:
        return ["no tests recorded yet"]
    return [
        f"{str(o.mode):<12} {o.wordlist:<16} {o.gross:>6.1f} gross {o.net:>6.1f} net {o.misses:>3}X"
        for o in outcomes
    ]
