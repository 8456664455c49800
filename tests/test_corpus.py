"""Tests for services.corpus and utils.file_handler – word loading and sampling."""

import logging
import random

import pytest

from app.config import DEFAULT_WORDS_FILE
from app.events import Character
from app.errors import CorpusUnavailable, EmptyCorpus
from services.corpus import WordCorpus
from services.session_state import SessionState
from utils.file_handler import load_words

WORDS = ["cat", "dog", "bird", "fish"]


class TestWordCorpus:
    @pytest.mark.parametrize("n", [0, 1, 2, 7, 50])
    def test_sample_returns_n_words_from_corpus(self, n):
        corpus = WordCorpus(WORDS, rng=random.Random(1))
        text = corpus.sample(n)
        tokens = text.split(" ") if text else []
        assert len(tokens) == n
        assert all(t in WORDS for t in tokens)

    def test_sample_zero_is_empty_string(self):
        assert WordCorpus(WORDS).sample(0) == ""

    def test_single_spaces_between_words(self):
        text = WordCorpus(WORDS, rng=random.Random(3)).sample(10)
        assert "  " not in text
        assert text == text.strip()

    def test_same_seed_same_passage(self):
        a = WordCorpus(WORDS, rng=random.Random(42)).sample(20)
        b = WordCorpus(WORDS, rng=random.Random(42)).sample(20)
        assert a == b

    def test_samples_with_replacement(self):
        text = WordCorpus(["only"], rng=random.Random(0)).sample(3)
        assert text == "only only only"

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            WordCorpus(WORDS).sample(-1)

    def test_empty_corpus_raises(self):
        with pytest.raises(EmptyCorpus):
            WordCorpus([])

    def test_blank_entries_dropped(self):
        corpus = WordCorpus(["", "  ", "cat", " dog "])
        assert corpus.words == ("cat", "dog")
        assert len(corpus) == 2

    def test_all_blank_is_empty(self):
        with pytest.raises(EmptyCorpus):
            WordCorpus(["", "   "])

    @pytest.mark.parametrize("word", ["don't", "caf\u00e9", "x2", "well-known", "a.b"])
    def test_untypeable_words_dropped(self, word):
        corpus = WordCorpus(["cat", word, "dog"])
        assert corpus.words == ("cat", "dog")

    def test_untypeable_words_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="services.corpus"):
            WordCorpus(["cat", "don't", "x2"])
        assert "Skipped 2 word" in caplog.text

    def test_only_untypeable_words_is_empty(self):
        with pytest.raises(EmptyCorpus):
            WordCorpus(["don't", "caf\u00e9"])

    def test_every_sampled_key_is_accepted(self, tmp_path):
        p = tmp_path / "words.txt"
        p.write_text("don't\ncat\n", encoding="utf-8")
        state = SessionState(WordCorpus(load_words(p), rng=random.Random(5)), word_count=4)
        target = state.snapshot().target
        for ch in target:
            state.dispatch(Character(ch))
        assert state.snapshot().typed == target == "cat cat cat cat"


class TestLoadWords:
    def test_one_word_per_line(self, tmp_path):
        p = tmp_path / "words.txt"
        p.write_text("cat\ndog\n\nbird\n", encoding="utf-8")
        assert load_words(p) == ["cat", "dog", "bird"]

    def test_crlf_and_padding(self, tmp_path):
        p = tmp_path / "words.txt"
        p.write_bytes(b"  cat \r\ndog\r\n")
        assert load_words(str(p)) == ["cat", "dog"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CorpusUnavailable):
            load_words(tmp_path / "nope.txt")

    def test_empty_file(self, tmp_path):
        p = tmp_path / "words.txt"
        p.write_text("\n\n  \n", encoding="utf-8")
        with pytest.raises(EmptyCorpus):
            load_words(p)

    def test_bundled_word_list(self):
        words = load_words(DEFAULT_WORDS_FILE)
        assert len(words) > 100
        assert all(w.isalpha() for w in words)
