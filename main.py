# main.py
from __future__ import annotations
import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import DEFAULT_DURATION, DEFAULT_WORD_COUNT, DURATION_CYCLE, LOG_LEVELS, Settings, settings_from_args
from app.errors import ConfigError, CorpusError
from app.themes import THEMES_BY_NAME, get_theme
from core.dispatcher import SessionController
from services.corpus import WordCorpus
from services.session_state import SessionState
from ui.main_window import MainWindow
from utils.file_handler import load_words

log = logging.getLogger("typemaster")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("app.log", encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        if QApplication.instance() is not None:
            QMessageBox.critical(None, "Application Error", f"{exctype.__name__}: {value}")
        # exit with non-zero so run scripts don't think it succeeded
        sys.exit(1)

    sys.excepthook = excepthook


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typemaster",
        description="Timed typing test: type the passage, get WPM and accuracy.",
    )
    parser.add_argument("--words-file", default=None, help="Word list, one word per line.")
    parser.add_argument("--words", type=int, default=DEFAULT_WORD_COUNT, help="Words per passage.")
    parser.add_argument(
        "--duration",
        type=int,
        default=DEFAULT_DURATION,
        choices=DURATION_CYCLE,
        help="Starting session length in seconds.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed for repeatable passages.")
    parser.add_argument("--live-wpm", action="store_true", help="Show live WPM from the start.")
    parser.add_argument("--theme", default="Terminal", choices=sorted(THEMES_BY_NAME), help="Colour theme.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    return parser


def build_controller(settings: Settings) -> SessionController:
    """Load the corpus and wire up the session. Corpus errors propagate to the caller."""
    words = load_words(settings.words_file)
    corpus = WordCorpus(words, rng=random.Random(settings.seed))
    state = SessionState(
        corpus,
        durations=settings.durations,
        duration=settings.duration,
        word_count=settings.word_count,
        live_score=settings.live_score,
    )
    return SessionController(state)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(settings.log_level)

    # Create the application
    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Typemaster")
    app.setOrganizationName("Typemaster")

    try:
        controller = build_controller(settings)
    except CorpusError as e:
        log.exception("Cannot start a session")
        print(f"typemaster: {e}", file=sys.stderr)
        return 1

    win = MainWindow(controller, theme=get_theme(settings.theme))
    controller.quitRequested.connect(app.quit)
    win.show()

    # Start the event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
