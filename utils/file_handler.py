import logging
from pathlib import Path
from typing import List, Union

from app.errors import CorpusUnavailable, EmptyCorpus

log = logging.getLogger(__name__)


def load_words(path: Union[str, Path]) -> List[str]:
    """One word per line; surrounding whitespace and blank lines are dropped."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusUnavailable(f"cannot read word list {p}: {e}") from e

    words = [line.strip() for line in raw.replace("\r\n", "\n").split("\n")]
    words = [w for w in words if w]
    if not words:
        raise EmptyCorpus(f"word list {p} is empty")
    log.info("Loaded %d words from %s", len(words), p)
    return words
