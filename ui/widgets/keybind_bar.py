from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from app.themes import StyleRole, Theme

KEYBINDS = (
    ("esc", "Exit"),
    ("enter", "Reset"),
    ("1", "Length"),
    ("2", "Live WPM"),
)


class KeybindBar(QLabel):
    """The ` esc Exit |  enter Reset | ...` hint line above the passage."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("keybindBar")
        self.setTextFormat(Qt.RichText)

    def set_theme(self, theme: Theme):
        key_col = theme.color(StyleRole.KEYBIND)
        head_col = theme.color(StyleRole.HEADER)
        parts = []
        for key, label in KEYBINDS:
            parts.append(
                f'<span style="color:{key_col}">{key}</span>'
                f'<span style="color:{head_col}"> {label}</span>'
            )
        sep = f'<span style="color:{head_col}"> &nbsp;|&nbsp; </span>'
        self.setText(sep.join(parts))
