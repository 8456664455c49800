import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication, QObject, Signal

from services.session_state import SessionState


class ScriptedCorpus:
    """Hands out fixed passages in order, repeating the last one."""

    def __init__(self, *passages):
        self.passages = list(passages) or ["cat dog"]
        self.calls = 0

    def sample(self, n):
        text = self.passages[min(self.calls, len(self.passages) - 1)]
        self.calls += 1
        return text


class FakeTimer(QObject):
    ticked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.arms = 0

    def arm(self):
        self.arms += 1


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def make_state():
    def _make(*passages, duration=30, durations=(15, 30, 45), live_score=False):
        return SessionState(
            ScriptedCorpus(*passages),
            durations=durations,
            duration=duration,
            word_count=2,
            live_score=live_score,
        )

    return _make


@pytest.fixture
def fake_timer(qapp):
    return FakeTimer()
