# app/state.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Tuple, Union


class LetterState(Enum):
    UNTYPED = "untyped"
    HIT = "hit"
    MISS = "miss"


@dataclass(frozen=True)
class Letter:
    """One character slot of the phrase. The character never changes, only the state."""

    char: str
    state: LetterState = LetterState.UNTYPED

    @property
    def is_untyped(self) -> bool:
        return self.state is LetterState.UNTYPED

    def hit(self) -> "Letter":
        return replace(self, state=LetterState.HIT)

    def miss(self) -> "Letter":
        return replace(self, state=LetterState.MISS)

    def reset(self) -> "Letter":
        return replace(self, state=LetterState.UNTYPED)


@dataclass(frozen=True)
class WordsMode:
    count: int

    def __str__(self) -> str:
        return f"words {self.count}"


@dataclass(frozen=True)
class TimeMode:
    seconds: float

    def __str__(self) -> str:
        return f"time {int(self.seconds)}s"


TestMode = Union[WordsMode, TimeMode]


def mode_to_str(mode: TestMode) -> str:
    if isinstance(mode, WordsMode):
        return f"words:{mode.count}"
    return f"time:{mode.seconds:g}"


def mode_from_str(raw: str) -> TestMode:
    kind, _, value = raw.partition(":")
    if kind == "words":
        return WordsMode(int(value))
    if kind == "time":
        return TimeMode(float(value))
    raise ValueError(f"Unknown test mode: {raw!r}")


@dataclass(frozen=True)
class TestOutcome:
    """Result of a completed test. Never produced for an aborted one."""

    __test__ = False  # keep pytest from collecting this as a test class

    length: int
    wordlist: str
    mode: TestMode
    hits: int
    misses: int
    elapsed: float
    wpm: Tuple[float, float]

    @property
    def gross(self) -> float:
        return self.wpm[0]

    @property
    def net(self) -> float:
        return self.wpm[1]

    @property
    def accuracy(self) -> float:
        typed = self.hits + self.misses
        if typed == 0:
            return 100.0
        return 100.0 * self.hits / typed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": self.length,
            "wordlist": self.wordlist,
            "mode": mode_to_str(self.mode),
            "hits": self.hits,
            "misses": self.misses,
            "elapsed": self.elapsed,
            "gross": self.gross,
            "net": self.net,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "TestOutcome":
        return TestOutcome(
            length=int(data["length"]),
            wordlist=str(data["wordlist"]),
            mode=mode_from_str(data["mode"]),
            hits=int(data["hits"]),
            misses=int(data["misses"]),
            elapsed=float(data["elapsed"]),
            wpm=(float(data["gross"]), float(data["net"])),
        )
