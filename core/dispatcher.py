# core/dispatcher.py
from __future__ import annotations
import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from app.calculation import Score, score
from app.events import Event, Tick
from app.state import SessionSnapshot, Status
from core.chrono import TickTimer
from services.session_state import SessionState, Transition

log = logging.getLogger(__name__)


class SessionController(QObject):
    """
    Serial dispatcher and the only mutator of the session.
    Events posted while another event is being handled are queued and run after it commits.
    """

    changed = Signal(object)  # SessionSnapshot
    finished = Signal(object, object, object)  # SessionSnapshot, Score, [(elapsed, wpm)]
    quitRequested = Signal()

    def __init__(self, state: SessionState, timer: Optional[TickTimer] = None, parent=None):
        super().__init__(parent)
        self.state = state
        self.timer = timer or TickTimer(parent=self)
        self.timer.ticked.connect(self._on_ticked)
        self._queue: Deque[Event] = deque()
        self._draining = False
        self.wpm_series: List[Tuple[int, float]] = []

    def snapshot(self) -> SessionSnapshot:
        return self.state.snapshot()

    def score(self) -> Score:
        return score(self.state.snapshot())

    def post(self, event: Event):
        self._queue.append(event)
        if self._draining:
            return
        self._draining = True
        try:
            while self._queue:
                self._handle(self._queue.popleft())
        finally:
            self._draining = False

    def _on_ticked(self):
        self.post(Tick())

    def _handle(self, event: Event):
        was_closed = self.state.closed
        tr = self.state.dispatch(event)
        self._gate_timer(event, tr)

        snap = self.state.snapshot()
        if tr.started or (tr.after is Status.IDLE and tr.before is not Status.IDLE):
            self.wpm_series.clear()
        if isinstance(event, Tick) and tr.before is Status.ACTIVE:
            self._record_live_score(snap)

        self.changed.emit(snap)
        if tr.finished:
            final = score(snap)
            log.info("Final score: %.1f WPM, %.1f%% accuracy", final.wpm, final.accuracy * 100.0)
            self.finished.emit(snap, final, list(self.wpm_series))
        if self.state.closed and not was_closed:
            self._queue.clear()
            self.quitRequested.emit()

    def _gate_timer(self, event: Event, tr: Transition):
        # the only place a tick gets scheduled
        if tr.started:
            self.timer.arm()
        elif isinstance(event, Tick) and tr.before is Status.ACTIVE and tr.after is Status.ACTIVE:
            self.timer.arm()

    def _record_live_score(self, snap: SessionSnapshot):
        if not snap.live_score_enabled:
            return
        live = score(snap)
        self.wpm_series.append((snap.elapsed, live.wpm))
        log.debug("Live WPM at %ss: %.1f", snap.elapsed, live.wpm)
