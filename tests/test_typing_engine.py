"""Tests for services.typing_engine – keystroke classification."""

import pytest

from app.events import Backspace, Character, Reset, Tick
from app.state import Session, Status
from services.typing_engine import InputProcessor


@pytest.fixture
def proc():
    return InputProcessor()


def session(typed="", status=Status.ACTIVE, target="cat dog", errors=0):
    return Session(target=target, duration=30, typed=typed, status=status, backspace_errors=errors)


class TestCharacters:
    def test_appends_letter(self, proc):
        r = proc.process_key(session("ca"), Character("t"))
        assert r.accepted and r.typed == "cat" and not r.started

    def test_space_accepted(self, proc):
        assert proc.process_key(session("cat"), Character(" ")).typed == "cat "

    def test_wrong_letter_still_appended(self, proc):
        assert proc.process_key(session("c"), Character("x")).typed == "cx"

    @pytest.mark.parametrize("ch", ["1", ".", "\t", "\n", "é", "ab", ""])
    def test_non_printable_ignored(self, proc, ch):
        r = proc.process_key(session("c"), Character(ch))
        assert not r.accepted and r.typed == "c"

    def test_full_target_rejects_more(self, proc):
        r = proc.process_key(session("cat dog"), Character("s"))
        assert not r.accepted and r.typed == "cat dog"

    def test_finished_rejects(self, proc):
        r = proc.process_key(session("ca", status=Status.FINISHED), Character("t"))
        assert not r.accepted

    def test_first_character_in_idle_starts(self, proc):
        r = proc.process_key(session(status=Status.IDLE), Character("c"))
        assert r.accepted and r.started

    def test_empty_target_never_starts(self, proc):
        r = proc.process_key(session(status=Status.IDLE, target=""), Character("c"))
        assert not r.accepted and not r.started


class TestBackspace:
    def test_removes_last_and_counts(self, proc):
        r = proc.process_key(session("cx", errors=2), Backspace())
        assert r.typed == "c" and r.backspace_errors == 3

    def test_counts_even_when_removing_correct_key(self, proc):
        r = proc.process_key(session("ca"), Backspace())
        assert r.typed == "c" and r.backspace_errors == 1

    def test_counts_on_empty_typed(self, proc):
        r = proc.process_key(session(""), Backspace())
        assert r.accepted and r.typed == "" and r.backspace_errors == 1

    def test_finished_rejects(self, proc):
        r = proc.process_key(session("ca", status=Status.FINISHED), Backspace())
        assert not r.accepted and r.typed == "ca" and r.backspace_errors == 0

    def test_never_starts(self, proc):
        assert not proc.process_key(session(status=Status.IDLE), Backspace()).started


class TestOtherEvents:
    @pytest.mark.parametrize("event", [Tick(), Reset()])
    def test_ignored(self, proc, event):
        r = proc.process_key(session("ca"), event)
        assert not r.accepted and r.typed == "ca"
