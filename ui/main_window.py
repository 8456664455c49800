# ui/main_window.py
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout
from PySide6.QtCore import Qt

from app.themes import DEFAULT_THEME, StyleRole, Theme
from core.dispatcher import SessionController
from ui.session_summary import SessionSummary
from ui.typing_view import TypingView
from ui.widgets import KeybindBar

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, controller: SessionController, theme: Theme = DEFAULT_THEME):
        super().__init__()
        self.setWindowTitle("Typemaster")
        self.resize(760, 420)
        self.controller = controller
        self.theme = theme
        self._summary = None

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 24, 16, 16)
        root_v.setSpacing(12)

        self.keybinds = KeybindBar(root)
        self.view = TypingView(root)

        pane = QVBoxLayout()
        pane.addWidget(self.keybinds)
        pane.addWidget(self.view, 1)
        pane_h = QHBoxLayout()
        pane_h.addStretch(1)
        pane_h.addLayout(pane)
        pane_h.addStretch(1)
        root_v.addLayout(pane_h, 1)
        self.setCentralWidget(root)
        self.menuBar().setVisible(False)

        # Connect signals
        self.view.eventRequested.connect(self.controller.post)
        self.controller.changed.connect(self.view.render)
        self.controller.finished.connect(self._on_finished)
        self.controller.quitRequested.connect(self.close)

        self._apply_theme(theme)
        self.view.render(self.controller.snapshot())

        # the typing view must own the keyboard
        self.setFocusPolicy(Qt.NoFocus)
        self.view.setFocus()

    def _apply_theme(self, theme: Theme):
        self.theme = theme
        self.keybinds.set_theme(theme)
        self.view.set_theme(theme)
        self.setStyleSheet(
            f"QWidget {{ background: {theme.color(StyleRole.BACKGROUND)}; "
            f"color: {theme.color(StyleRole.HEADER)}; }}"
        )
        self.setWindowTitle(f"Typemaster — {theme.name}")

    def _on_finished(self, snapshot, final, series):
        self.setWindowTitle(f"Typemaster — {final.wpm:.1f} WPM")
        self._summary = SessionSummary(snapshot, final, series, theme=self.theme, parent=self)
        self._summary.finished.connect(lambda _result: self.view.setFocus())
        self._summary.open()
