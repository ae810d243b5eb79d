from __future__ import annotations
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
import logging
import os
import random

from wordfreq import top_n_list

from typedrill.app.errors import WordlistError
from typedrill.app.state import TestMode, WordsMode

log = logging.getLogger(__name__)

# time mode phrases just need to outlast the clock
TIME_MODE_WORDS = 100

_WORDLIST_DIR = Path(__file__).resolve().parent.parent / "assets" / "wordlists"


class Wordlist(Enum):
    ENGLISH_1K = "english 1k"
    ENGLISH_5K = "english 5k"
    ENGLISH_10K = "english 10k"
    CODE_PYTHON = "code python"
    CODE_C = "code c"
    CODE_JS = "code javascript"

    @classmethod
    def from_name(cls, name: str) -> "Wordlist":
        try:
            return cls[name.upper()]
        except KeyError:
            raise WordlistError(f"Unknown wordlist: {name}") from None


_FREQUENCY_SIZES = {
    Wordlist.ENGLISH_1K: 1000,
    Wordlist.ENGLISH_5K: 5000,
    Wordlist.ENGLISH_10K: 10000,
}

_BUNDLED_FILES = {
    Wordlist.CODE_PYTHON: "code_python.txt",
    Wordlist.CODE_C: "code_c.txt",
    Wordlist.CODE_JS: "code_javascript.txt",
}


def data_dir() -> Path:
    """Directory holding settings, the profile database and the log file."""
    root = Path(os.environ.get("TYPEDRILL_HOME") or Path.home() / ".typedrill")
    root.mkdir(parents=True, exist_ok=True)
    return root


def _read_bundled(filename: str) -> List[str]:
    p = _WORDLIST_DIR / filename
    try:
        txt = p.read_text(encoding="utf-8")
    except OSError as e:
        raise WordlistError(f"Failed to read wordlist {p}: {e}") from e
    return [ln.strip() for ln in txt.splitlines() if ln.strip()]


@lru_cache(maxsize=None)
def _load_tokens(wordlist: Wordlist) -> tuple:
    if wordlist in _FREQUENCY_SIZES:
        words = top_n_list("en", _FREQUENCY_SIZES[wordlist])
        tokens = [w for w in words if w.isascii() and w.isalpha()]
    else:
        tokens = _read_bundled(_BUNDLED_FILES[wordlist])
    if not tokens:
        raise WordlistError(f"Wordlist {wordlist.value} is empty")
    log.debug("Loaded %d tokens for %s", len(tokens), wordlist.value)
    return tuple(tokens)


def load_tokens(wordlist: Wordlist) -> List[str]:
    return list(_load_tokens(wordlist))


def tokens_to_phrase(n: int, tokens: List[str], rng: Optional[random.Random] = None) -> str:
    """Pick `n` random tokens (with replacement) and join them with single spaces."""
    if not tokens:
        raise WordlistError("Cannot build a phrase from an empty wordlist")
    rng = rng or random.Random()
    return " ".join(rng.choice(tokens) for _ in range(n))


def phrase_for_mode(mode: TestMode, tokens: List[str], rng: Optional[random.Random] = None) -> str:
    if isinstance(mode, WordsMode):
        return tokens_to_phrase(mode.count, tokens, rng)
    return tokens_to_phrase(TIME_MODE_WORDS, tokens, rng)
