# app/events.py
from __future__ import annotations
from dataclasses import dataclass


class Event:
    """Anything delivered to SessionState.dispatch()."""


@dataclass(frozen=True)
class Character(Event):
    char: str


@dataclass(frozen=True)
class Backspace(Event):
    pass


@dataclass(frozen=True)
class Tick(Event):
    pass


@dataclass(frozen=True)
class Reset(Event):
    pass


@dataclass(frozen=True)
class CycleDuration(Event):
    pass


@dataclass(frozen=True)
class ToggleLiveScore(Event):
    pass


@dataclass(frozen=True)
class Quit(Event):
    pass

