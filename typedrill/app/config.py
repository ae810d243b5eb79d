# app/config.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union
import json
import logging

from typedrill.app.errors import ConfigError
from typedrill.app.themes import theme_names
from typedrill.utils.file_handler import Wordlist

log = logging.getLogger(__name__)

SHOW_PERFORMANCE = "show performance indicator"
SHOW_LIVE_WPM = "show live words per minute"
SHOW_RECENT = "show recent tests"
RECENT_COUNT = "recent test count"
LINE_LIMIT = "test line limit"
WORDLIST = "wordlist"
THEME = "theme"


@dataclass
class BoolValue:
    v: bool

    @property
    def value(self) -> bool:
        return self.v


@dataclass
class IntValue:
    v: int
    min: int
    max: int

    @property
    def value(self) -> int:
        return self.v


@dataclass
class SelectValue:
    options: List[str] = field(default_factory=list)
    selected: int = 0

    @property
    def value(self) -> str:
        return self.options[self.selected]


ConfigValue = Union[BoolValue, IntValue, SelectValue]


@dataclass(frozen=True)
class SessionSettings:
    """Read-only snapshot of the settings a single test session needs."""

    show_live_wpm: bool = True
    show_performance: bool = True
    max_lines: int = 2


def _defaults() -> Dict[str, ConfigValue]:
    return {
        SHOW_PERFORMANCE: BoolValue(True),
        SHOW_LIVE_WPM: BoolValue(True),
        SHOW_RECENT: BoolValue(True),
        RECENT_COUNT: IntValue(3, min=0, max=10),
        LINE_LIMIT: IntValue(2, min=1, max=4),
        WORDLIST: SelectValue([w.name for w in Wordlist]),
        THEME: SelectValue(theme_names()),
    }


class Config:
    """Ordered key/value settings with typed, bounded values."""

    def __init__(self, values: Dict[str, ConfigValue]):
        self._values = values

    @classmethod
    def default(cls) -> "Config":
        return cls(_defaults())

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def get(self, key: str) -> ConfigValue:
        try:
            return self._values[key]
        except KeyError:
            raise ConfigError(f"no element '{key}' found in configuration") from None

    def get_bool(self, key: str) -> bool:
        item = self.get(key)
        if not isinstance(item, BoolValue):
            raise ConfigError(f"'{key}' is not a boolean setting")
        return item.v

    def get_int(self, key: str) -> int:
        item = self.get(key)
        if not isinstance(item, IntValue):
            raise ConfigError(f"'{key}' is not an integer setting")
        return item.v

    def get_select(self, key: str) -> str:
        item = self.get(key)
        if not isinstance(item, SelectValue):
            raise ConfigError(f"'{key}' is not a select setting")
        return item.value

    def set(self, key: str, value: Any) -> None:
        item = self.get(key)
        if isinstance(item, BoolValue):
            if not isinstance(value, bool):
                raise ConfigError(f"'{key}' expects true/false, got {value!r}")
            item.v = value
        elif isinstance(item, IntValue):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"'{key}' expects an integer, got {value!r}")
            if not item.min <= value <= item.max:
                raise ConfigError(
                    f"'{key}' must be between {item.min} and {item.max}, got {value}"
                )
            item.v = value
        else:
            if value not in item.options:
                raise ConfigError(
                    f"'{key}' must be one of {', '.join(item.options)}, got {value!r}"
                )
            item.selected = item.options.index(value)

    def session_settings(self) -> SessionSettings:
        return SessionSettings(
            show_live_wpm=self.get_bool(SHOW_LIVE_WPM),
            show_performance=self.get_bool(SHOW_PERFORMANCE),
            max_lines=self.get_int(LINE_LIMIT),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {key: item.value for key, item in self._values.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        config = cls.default()
        for key, value in data.items():
            if key not in config._values:
                log.debug("Ignoring unknown setting %r", key)
                continue
            try:
                config.set(key, value)
            except ConfigError as e:
                log.warning("Keeping default for %r: %s", key, e)
        return config


def load_config(path: Path) -> Config:
    if not path.exists():
        return Config.default()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Failed to load settings from %s, using defaults: %s", path, e)
        return Config.default()
    if not isinstance(data, dict):
        log.warning("Settings file %s is not an object, using defaults", path)
        return Config.default()
    return Config.from_dict(data)


def save_config(config: Config, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to save settings to {path}: {e}") from e
