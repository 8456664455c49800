# core/chrono.py
from PySide6.QtCore import QObject, QTimer, Signal


class TickTimer(QObject):
    """
    One-shot, one-second scheduler. Each arm() yields at most one `ticked`
    emission; re-arming while a shot is pending replaces it.
    """

    ticked = Signal()

    def __init__(self, interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._t = QTimer(self)
        self._t.setSingleShot(True)
        self._t.setInterval(interval_ms)
        self._t.timeout.connect(self._on_timeout)

    def arm(self):
        self._t.start()

    def _on_timeout(self):
        self.ticked.emit()
