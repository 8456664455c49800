from __future__ import annotations
from html import escape

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout

from app.calculation import score
from app.state import SessionSnapshot, Status
from app.themes import DEFAULT_THEME, StyleRole, Theme
from ui.keymap import event_for_key

PANE_WIDTH_CHARS = 54
SPACER = "-" * PANE_WIDTH_CHARS


class TypingView(QWidget):
    """
    Renders a SessionSnapshot as a fixed-width terminal pane and turns key presses
    into session events. Holds no session state of its own.
    """

    eventRequested = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.StrongFocus)
        self._theme = DEFAULT_THEME
        self._snapshot: SessionSnapshot | None = None

        font = QFont("Monospace")
        font.setStyleHint(QFont.TypeWriter)
        font.setPointSize(16)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(12)

        self.lblSpacer = QLabel(SPACER, self)
        self.lblLine = QLabel(self)
        self.lblLine.setObjectName("lblLine")
        self.lblLine.setTextFormat(Qt.RichText)
        self.lblLine.setWordWrap(True)
        self.lblTimer = QLabel(self)
        self.lblTimer.setObjectName("lblTimer")
        self.lblTimer.setAlignment(Qt.AlignHCenter)
        self.lblWPM = QLabel(self)
        self.lblWPM.setObjectName("lblWPM")
        self.lblWPM.setAlignment(Qt.AlignHCenter)

        for lbl in (self.lblSpacer, self.lblLine, self.lblTimer, self.lblWPM):
            lbl.setFont(font)
            root.addWidget(lbl)
        root.addStretch(1)

        metrics_width = self.lblLine.fontMetrics().horizontalAdvance("x" * PANE_WIDTH_CHARS)
        self.lblLine.setFixedWidth(metrics_width)

    def set_theme(self, theme: Theme):
        self._theme = theme
        c = theme.color
        self.setStyleSheet(
            f"""
            QLabel {{ color: {c(StyleRole.HEADER)}; }}
            QLabel#lblTimer {{ color: {c(StyleRole.TIMER)}; }}
            QLabel#lblWPM   {{ color: {c(StyleRole.LIVE_WPM)}; }}
            """
        )
        if self._snapshot is not None:
            self.render(self._snapshot)

    def render(self, snap: SessionSnapshot):
        self._snapshot = snap
        self.lblLine.setText(self._passage_html(snap))
        self.lblTimer.setText(f"{snap.time_left}s")
        if snap.live_score_enabled:
            self.lblWPM.setText(f"{score(snap).wpm:0.1f} WPM")
            self.lblWPM.setVisible(True)
        else:
            self.lblWPM.setVisible(False)

    def _passage_html(self, snap: SessionSnapshot) -> str:
        c = self._theme.color
        ok, err, mut = c(StyleRole.TYPED), c(StyleRole.ERROR), c(StyleRole.UNTYPED)

        def span(txt: str, color: str, underline: bool = False) -> str:
            style = f"color:{color}"
            if underline:
                style += "; text-decoration: underline"
            return f'<span style="{style}">{escape(txt)}</span>'

        parts: list[str] = []
        for i, ch in enumerate(snap.typed):
            if ch == snap.target[i]:
                parts.append(span(snap.target[i], ok))
            else:
                parts.append(span(snap.target[i], err, underline=True))

        if snap.status is not Status.FINISHED:
            parts.append(f'<span style="color:{c(StyleRole.CARET)}">|</span>')
        parts.append(span(snap.target[len(snap.typed):], mut))
        return "".join(parts)

    def keyPressEvent(self, ev):
        event = event_for_key(ev.key(), ev.text(), ev.modifiers())
        if event is None:
            return super().keyPressEvent(ev)
        ev.accept()
        self.eventRequested.emit(event)
