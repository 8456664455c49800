from .keybind_bar import KeybindBar, KEYBINDS

__all__ = ["KeybindBar", "KEYBINDS"]
