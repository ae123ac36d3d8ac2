"""Pure-data render instructions the controller hands to the view layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Screen(Enum):
    """Top-level screens of the quiz window."""

    START = auto()
    QUIZ = auto()
    RESULT = auto()


class ChoiceState(Enum):
    """Visual state of an answer while feedback is displayed."""

    CORRECT = auto()
    INCORRECT_SELECTED = auto()
    NEUTRAL = auto()


@dataclass(frozen=True, slots=True)
class ScreenTransition:
    to: Screen


@dataclass(frozen=True, slots=True)
class RenderQuestion:
    """Everything needed to draw the question at the current position.

    ``progress_percent`` counts completed questions, so it is 0 for the first
    question and never reaches 100 while a question is on screen.
    """

    question_number: int
    total_questions: int
    progress_percent: float
    prompt: str
    choice_labels: tuple[str, ...]
    score: int = 0


@dataclass(frozen=True, slots=True)
class ChoiceFeedback:
    label: str
    state: ChoiceState


@dataclass(frozen=True, slots=True)
class RenderFeedback:
    per_choice_state: tuple[ChoiceFeedback, ...]
    score: int = 0


@dataclass(frozen=True, slots=True)
class RenderResult:
    score: int
    total: int
    message: str
