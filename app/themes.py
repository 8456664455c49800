# app/themes.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping

from app.errors import ConfigError


class StyleRole(Enum):
    BACKGROUND = "background"
    TYPED = "typed"
    ERROR = "error"
    UNTYPED = "untyped"
    HEADER = "header"
    KEYBIND = "keybind"
    TIMER = "timer"
    CARET = "caret"
    LIVE_WPM = "live_wpm"


@dataclass(frozen=True)
class Theme:
    name: str
    colors: Mapping[StyleRole, str]

    def __post_init__(self):
        missing = set(StyleRole) - set(self.colors)
        if missing:
            names = ", ".join(sorted(r.value for r in missing))
            raise ConfigError(f"Theme {self.name!r} is missing colours: {names}")

    def color(self, role: StyleRole) -> str:
        return self.colors[role]


# -------- Built-in themes --------
THEMES: List[Theme] = [
    Theme(
        name="Terminal",
        colors={
            StyleRole.BACKGROUND: "#000000",
            StyleRole.TYPED: "#ffffff",
            StyleRole.ERROR: "#ff5555",
            StyleRole.UNTYPED: "#595959",
            StyleRole.HEADER: "#ffffff",
            StyleRole.KEYBIND: "#595959",
            StyleRole.TIMER: "#ff0000",
            StyleRole.CARET: "#eab308",
            StyleRole.LIVE_WPM: "#22c55e",
        },
    ),
    Theme(
        name="Monkeytype Dark",
        colors={
            StyleRole.BACKGROUND: "#0f1115",
            StyleRole.TYPED: "#e5e7eb",
            StyleRole.ERROR: "#ef4444",
            StyleRole.UNTYPED: "#6b7280",
            StyleRole.HEADER: "#e5e7eb",
            StyleRole.KEYBIND: "#6b7280",
            StyleRole.TIMER: "#eab308",
            StyleRole.CARET: "#eab308",
            StyleRole.LIVE_WPM: "#eab308",
        },
    ),
    Theme(
        name="Nord",
        colors={
            StyleRole.BACKGROUND: "#2e3440",
            StyleRole.TYPED: "#eceff4",
            StyleRole.ERROR: "#bf616a",
            StyleRole.UNTYPED: "#4c566a",
            StyleRole.HEADER: "#eceff4",
            StyleRole.KEYBIND: "#88c0d0",
            StyleRole.TIMER: "#bf616a",
            StyleRole.CARET: "#ebcb8b",
            StyleRole.LIVE_WPM: "#a3be8c",
        },
    ),
]

THEMES_BY_NAME: Dict[str, Theme] = {t.name: t for t in THEMES}
DEFAULT_THEME = THEMES[0]


def get_theme(name: str) -> Theme:
    try:
        return THEMES_BY_NAME[name]
    except KeyError:
        raise ConfigError(f"Unknown theme {name!r}; choose from {', '.join(THEMES_BY_NAME)}")
