# services/session_state.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from app.events import (
    Backspace, Character, CycleDuration, Event, Quit, Reset, Tick, ToggleLiveScore,
)
from app.state import Session, SessionSnapshot, Status
from services.corpus import WordCorpus
from services.typing_engine import InputProcessor

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    before: Status
    after: Status
    started: bool = False
    finished: bool = False


class SessionState:
    """
    The session state machine. Every mutation of the Session goes through dispatch();
    callers only ever see snapshots.
    """

    def __init__(
        self,
        corpus: WordCorpus,
        durations: Sequence[int] = (15, 30, 45),
        duration: int = 30,
        word_count: int = 50,
        live_score: bool = False,
        processor: Optional[InputProcessor] = None,
    ):
        if duration not in durations:
            raise ValueError(f"duration {duration} is not in {tuple(durations)}")
        self.corpus = corpus
        self.durations = tuple(durations)
        self.word_count = word_count
        self.processor = processor or InputProcessor()
        self.closed = False
        self._session = Session(
            target=corpus.sample(word_count),
            duration=duration,
            live_score_enabled=live_score,
        )

    @property
    def status(self) -> Status:
        return self._session.status

    def snapshot(self) -> SessionSnapshot:
        return self._session.snapshot()

    def dispatch(self, event: Event) -> Transition:
        before = self._session.status
        if self.closed:
            return Transition(before, before)

        if isinstance(event, (Character, Backspace)):
            return self._on_key(event)
        if isinstance(event, Tick):
            return self._on_tick()
        if isinstance(event, Reset):
            self._restart(self._session.duration)
        elif isinstance(event, CycleDuration):
            self._restart(self._next_duration())
        elif isinstance(event, ToggleLiveScore):
            self._session.live_score_enabled = not self._session.live_score_enabled
        elif isinstance(event, Quit):
            self.closed = True
            log.info("Session closed")
        return Transition(before, self._session.status)

    def _on_key(self, event) -> Transition:
        s = self._session
        before = s.status
        result = self.processor.process_key(s, event)
        if not result.accepted:
            return Transition(before, before)
        s.typed = result.typed
        s.backspace_errors = result.backspace_errors
        if result.started:
            s.status = Status.ACTIVE
            log.info("Session started (%ss)", s.duration)
        return Transition(before, s.status, started=result.started)

    def _on_tick(self) -> Transition:
        s = self._session
        if s.status is not Status.ACTIVE:
            return Transition(s.status, s.status)
        if s.time_left > 0:
            s.time_left -= 1
        log.debug("Tick: %ss left", s.time_left)
        if s.time_left == 0:
            s.status = Status.FINISHED
            log.info("Session finished after %ss", s.duration)
            return Transition(Status.ACTIVE, Status.FINISHED, finished=True)
        return Transition(Status.ACTIVE, Status.ACTIVE)

    def _next_duration(self) -> int:
        idx = self.durations.index(self._session.duration)
        return self.durations[(idx + 1) % len(self.durations)]

    def _restart(self, duration: int):
        if duration != self._session.duration:
            log.info("Duration set to %ss", duration)
        self._session.restart(self.corpus.sample(self.word_count), duration)
        log.info("Session reset")
