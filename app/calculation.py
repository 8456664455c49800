from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence


@dataclass(frozen=True)
class Score:
    wpm: float
    accuracy: float


def round_half_away(value: float, places: int = 1) -> float:
    """Round to `places` decimals, halves away from zero (2.25 -> 2.3, -2.25 -> -2.3)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def correct_chars(typed: str, target: str) -> int:
    return sum(1 for a, b in zip(typed, target) if a == b)


def accuracy(typed: str, target: str, backspace_errors: int) -> float:
    """
    correct matches / (typed length + backspace errors).
    Every backspace counts against the typist, even one that removed a correct key.
    """
    denominator = len(typed) + backspace_errors
    if denominator <= 0:
        return 0.0
    return correct_chars(typed, target) / denominator


def wpm(typed: str, target: str, time_left: int, duration: int, backspace_errors: int) -> float:
    """
    Words of the attempted part of the target per elapsed minute, scaled by accuracy.
    Only the target prefix the typist reached contributes words.
    """
    if not typed:
        return 0.0
    elapsed = duration - time_left
    if elapsed <= 0:
        return 0.0
    word_count = len(target[: len(typed)].split())
    raw = (word_count / elapsed) * 60.0
    return round_half_away(raw * accuracy(typed, target, backspace_errors), 1)


def score(snapshot) -> Score:
    """Score any object exposing typed/target/time_left/duration/backspace_errors."""
    return Score(
        wpm=wpm(
            snapshot.typed,
            snapshot.target,
            snapshot.time_left,
            snapshot.duration,
            snapshot.backspace_errors,
        ),
        accuracy=accuracy(snapshot.typed, snapshot.target, snapshot.backspace_errors),
    )


def smooth(values: Sequence[float], factor: float = 0.25) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
