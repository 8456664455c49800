# app/config.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from app.errors import ConfigError

DURATION_CYCLE: Tuple[int, ...] = (15, 30, 45)
DEFAULT_DURATION = 30
DEFAULT_WORD_COUNT = 50
LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_WORDS_FILE = Path(__file__).resolve().parent.parent / "assets" / "words.txt"


@dataclass(frozen=True)
class Settings:
    words_file: Path = DEFAULT_WORDS_FILE
    word_count: int = DEFAULT_WORD_COUNT
    durations: Tuple[int, ...] = DURATION_CYCLE
    duration: int = DEFAULT_DURATION
    seed: Optional[int] = None
    live_score: bool = False
    theme: str = "Terminal"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.word_count <= 0:
            raise ConfigError("word count must be positive")
        if not self.durations or any(d <= 0 for d in self.durations):
            raise ConfigError("durations must be positive seconds")
        if self.duration not in self.durations:
            choices = ", ".join(str(d) for d in self.durations)
            raise ConfigError(f"duration must be one of: {choices}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log level must be one of: {', '.join(LOG_LEVELS)}")


def settings_from_args(args) -> Settings:
    """Build Settings from an argparse namespace, keeping defaults for missing attributes."""
    defaults = Settings()
    return Settings(
        words_file=Path(getattr(args, "words_file", None) or defaults.words_file),
        word_count=getattr(args, "words", defaults.word_count),
        duration=getattr(args, "duration", defaults.duration),
        seed=getattr(args, "seed", defaults.seed),
        live_score=bool(getattr(args, "live_wpm", defaults.live_score)),
        theme=getattr(args, "theme", defaults.theme),
        log_level=str(getattr(args, "log_level", defaults.log_level)).upper(),
    )
