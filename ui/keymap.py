# ui/keymap.py
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt

from app.events import (
    Backspace, Character, CycleDuration, Event, Quit, Reset, ToggleLiveScore,
)

_BY_KEY = {
    Qt.Key_Escape: Quit,
    Qt.Key_Return: Reset,
    Qt.Key_Enter: Reset,
    Qt.Key_Backspace: Backspace,
}

_BY_TEXT = {
    "1": CycleDuration,
    "2": ToggleLiveScore,
}

_BLOCKING_MODIFIERS = (Qt.ControlModifier, Qt.AltModifier, Qt.MetaModifier)


def event_for_key(key, text: str = "", modifiers=Qt.NoModifier) -> Optional[Event]:
    """Translate a key press into a session event, or None if it means nothing here."""
    if any(modifiers & m for m in _BLOCKING_MODIFIERS):
        return None
    if key in _BY_KEY:
        return _BY_KEY[key]()
    if text in _BY_TEXT:
        return _BY_TEXT[text]()
    if len(text) == 1:
        # InputProcessor decides whether the character is acceptable
        return Character(text)
    return None
