# app/themes.py
from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Tuple
import json
import logging

log = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass
class Theme:
    name: str
    untyped_fg: str
    untyped_bg: str
    hit_fg: str
    hit_fresh: str
    hit_faded: str
    miss_fg: str
    miss_bg: str
    badge_fg: str
    words_badge: str
    time_badge: str
    panel: str
    perf_good: str
    perf_bad: str


# -------- Built-in themes --------
THEMES: List[Theme] = [
    Theme(
        name="Classic",
        untyped_fg="#4b4b4b",
        untyped_bg="#bebebe",
        hit_fg="#000000",
        hit_fresh="#5aff32",
        hit_faded="#1ec81e",
        miss_fg="#000000",
        miss_bg="#e03131",
        badge_fg="#ffffff",
        words_badge="#8b008b",
        time_badge="#006400",
        panel="#3a3a3a",
        perf_good="#00ff00",
        perf_bad="#ff0000",
    ),
    Theme(
        name="Nord",
        untyped_fg="#4c566a",
        untyped_bg="#d8dee9",
        hit_fg="#2e3440",
        hit_fresh="#a3be8c",
        hit_faded="#8fbcbb",
        miss_fg="#2e3440",
        miss_bg="#bf616a",
        badge_fg="#eceff4",
        words_badge="#b48ead",
        time_badge="#5e81ac",
        panel="#3b4252",
        perf_good="#a3be8c",
        perf_bad="#bf616a",
    ),
]

DEFAULT_THEME_INDEX = 0
_BUILTIN_COUNT = len(THEMES)


# -------- helpers --------
def hex_to_rgb(hex_color: str) -> RGB:
    h = hex_color.lstrip("#")
    if len(h) != 6:
        raise ValueError(f"Bad colour {hex_color!r}")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _theme_from_dict(d: Dict[str, Any]) -> Theme:
    required = {f.name for f in fields(Theme)}
    missing = required - set(d.keys())
    if missing:
        raise ValueError(f"Missing theme keys: {', '.join(sorted(missing))}")
    values = {name: str(d[name]) for name in required}
    for name, value in values.items():
        if name != "name":
            hex_to_rgb(value)
    return Theme(**values)


# -------- public API --------
def theme_names() -> List[str]:
    return [t.name for t in THEMES]


def theme_by_name(name: str) -> Theme:
    for t in THEMES:
        if t.name == name:
            return t
    return THEMES[DEFAULT_THEME_INDEX]


def load_custom_themes(path: Path) -> int:
    """Append extra themes from a JSON list file. Returns how many were added."""
    if not path.exists():
        return 0
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Failed to read custom themes from %s: %s", path, e)
        return 0
    if not isinstance(data, list):
        log.warning("Ignoring %s: expected a list of themes", path)
        return 0
    del THEMES[_BUILTIN_COUNT:]
    added = 0
    for item in data:
        try:
            THEMES.append(_theme_from_dict(item))
            added += 1
        except (AttributeError, TypeError, ValueError) as e:
            log.warning("Skipping custom theme: %s", e)
    return added
