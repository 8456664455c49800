# ui/session_summary.py
from __future__ import annotations
from typing import Sequence, Tuple

import pyqtgraph as pg
from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton

from app.calculation import Score, smooth
from app.state import SessionSnapshot
from app.themes import DEFAULT_THEME, StyleRole, Theme
from utils.graph_helper import setup_wpm_plot, update_curve


class SessionSummary(QDialog):
    """
    Final WPM and accuracy for a finished session, plus the live-WPM curve
    when live score was switched on during the run.
    """

    def __init__(
        self,
        snapshot: SessionSnapshot,
        final: Score,
        series: Sequence[Tuple[int, float]],
        theme: Theme = DEFAULT_THEME,
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Session Summary")
        self.resize(560, 360)

        root = QVBoxLayout(self)
        root.addWidget(QLabel(f"WPM: {final.wpm:.1f}"))
        root.addWidget(QLabel(f"Accuracy: {final.accuracy * 100.0:.1f}%"))
        root.addWidget(QLabel(f"Backspaces: {snapshot.backspace_errors}"))
        root.addWidget(QLabel(f"Time: {snapshot.duration}s"))

        if series:
            plot = pg.PlotWidget()
            curve = setup_wpm_plot(plot, theme.color(StyleRole.LIVE_WPM))
            times = [float(t) for t, _ in series]
            wpms = smooth([float(w) for _, w in series])
            update_curve(curve, times, wpms)
            root.addWidget(plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
