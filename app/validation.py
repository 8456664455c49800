import string

PRINTABLE_KEYS = frozenset(string.ascii_letters + " ")


def is_printable_key(ch: str) -> bool:
    """True for a single ASCII letter or the space character."""
    return len(ch) == 1 and ch in PRINTABLE_KEYS


def is_typeable_word(word: str) -> bool:
    """True when every character of a non-empty word can be entered as a key."""
    return bool(word) and all(ch in PRINTABLE_KEYS and ch != " " for ch in word)
