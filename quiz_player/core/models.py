"""Domain models for the quiz player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, slots=True)
class Choice:
    """One selectable answer and whether it is the right one."""

    label: str
    is_correct: bool = False


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly one correct choice."""

    prompt: str
    choices: tuple[Choice, ...]

    @property
    def correct_index(self) -> int:
        return next(idx for idx, choice in enumerate(self.choices) if choice.is_correct)

    @property
    def choice_labels(self) -> tuple[str, ...]:
        return tuple(choice.label for choice in self.choices)


class Phase(Enum):
    """Position of a quiz attempt in the controller's state machine."""

    NOT_STARTED = auto()
    AWAITING_ANSWER = auto()
    SHOWING_FEEDBACK = auto()
    FINISHED = auto()


@dataclass(slots=True)
class SessionState:
    """Mutable state of a single quiz attempt.

    A new instance is created for every start so nothing from a previous
    attempt (feedback lock, score) can leak into the next one.
    """

    current_index: int = 0
    score: int = 0
    input_locked: bool = False
    phase: Phase = Phase.NOT_STARTED
