# services/typing_engine.py
from dataclasses import dataclass

from app.events import Backspace, Character
from app.state import Session, Status
from app.validation import is_printable_key


@dataclass(frozen=True)
class KeyResult:
    accepted: bool
    typed: str
    backspace_errors: int
    started: bool = False


class InputProcessor:
    """Applies a single Character/Backspace keystroke against a Session without mutating it."""

    def process_key(self, session: Session, key) -> KeyResult:
        if isinstance(key, Character):
            return self._character(session, key.char)
        if isinstance(key, Backspace):
            return self._backspace(session)
        return self._ignored(session)

    def _character(self, session: Session, ch: str) -> KeyResult:
        if not is_printable_key(ch):
            return self._ignored(session)
        if session.status is Status.FINISHED or len(session.typed) >= len(session.target):
            return self._ignored(session)
        return KeyResult(
            accepted=True,
            typed=session.typed + ch,
            backspace_errors=session.backspace_errors,
            started=session.status is Status.IDLE,
        )

    def _backspace(self, session: Session) -> KeyResult:
        if session.status is Status.FINISHED:
            return self._ignored(session)
        # counted even when nothing is left to delete
        return KeyResult(
            accepted=True,
            typed=session.typed[:-1],
            backspace_errors=session.backspace_errors + 1,
        )

    @staticmethod
    def _ignored(session: Session) -> KeyResult:
        return KeyResult(False, session.typed, session.backspace_errors)
