from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Status(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class Session:
    target: str
    duration: int
    typed: str = ""
    status: Status = Status.IDLE
    time_left: Optional[int] = None
    backspace_errors: int = 0
    live_score_enabled: bool = False

    def __post_init__(self):
        if self.time_left is None:
            self.time_left = self.duration
        elif not 0 <= self.time_left <= self.duration:
            raise ValueError(f"time_left {self.time_left} outside 0..{self.duration}")

    def restart(self, target: str, duration: int):
        self.target = target
        self.duration = duration
        self.typed = ""
        self.status = Status.IDLE
        self.time_left = duration
        self.backspace_errors = 0

    def snapshot(self) -> "SessionSnapshot":
        return SessionSnapshot(
            status=self.status,
            typed=self.typed,
            target=self.target,
            time_left=self.time_left,
            duration=self.duration,
            live_score_enabled=self.live_score_enabled,
            backspace_errors=self.backspace_errors,
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a Session handed to rendering and scoring."""

    status: Status
    typed: str
    target: str
    time_left: int
    duration: int
    live_score_enabled: bool
    backspace_errors: int

    @property
    def elapsed(self) -> int:
        return self.duration - self.time_left
