# services/corpus.py
from __future__ import annotations
import logging
import random
from typing import Iterable, Optional, Tuple

from app.errors import EmptyCorpus
from app.validation import is_typeable_word

log = logging.getLogger(__name__)


class WordCorpus:
    """
    Immutable pool of candidate words.
    Pass a seeded random.Random to get repeatable passages.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        stripped = [w.strip() for w in words if w and w.strip()]
        self._words: Tuple[str, ...] = tuple(w for w in stripped if is_typeable_word(w))
        skipped = len(stripped) - len(self._words)
        if skipped:
            log.warning("Skipped %d word(s) with characters outside A-Z, a-z", skipped)
        if not self._words:
            raise EmptyCorpus("word corpus has no typeable words to sample from")
        self._rng = rng or random.Random()
        log.debug("Corpus ready with %d words", len(self._words))

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def sample(self, n: int) -> str:
        """Return n words drawn uniformly with replacement, joined by single spaces."""
        if n < 0:
            raise ValueError("cannot sample a negative number of words")
        return " ".join(self._rng.choices(self._words, k=n))
