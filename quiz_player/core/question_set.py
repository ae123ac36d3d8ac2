"""Validation for the question set a quiz session is built from."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_player.constants.quiz_constants import MIN_CHOICES_PER_QUESTION
from quiz_player.core.models import Choice, Question


class QuestionSetError(ValueError):
    """Raised when a question set cannot be used to run a quiz."""


def build_question_set(questions: Iterable[Question]) -> tuple[Question, ...]:
    """Validate and normalize questions into an immutable question set."""
    prepared = tuple(
        _prepare_question(question, number)
        for number, question in enumerate(questions, start=1)
    )
    if not prepared:
        raise QuestionSetError("Quiz must contain at least one question.")
    return prepared


def _prepare_question(question: Question, number: int) -> Question:
    cleaned_prompt = question.prompt.strip()
    if not cleaned_prompt:
        raise QuestionSetError(f"Question {number}: prompt must not be empty.")

    choices = _validate_choices(question.choices, number)
    return Question(prompt=cleaned_prompt, choices=choices)


def _validate_choices(choices: Iterable[Choice], number: int) -> tuple[Choice, ...]:
    cleaned = tuple(
        Choice(label=choice.label.strip(), is_correct=bool(choice.is_correct))
        for choice in choices
    )
    if len(cleaned) < MIN_CHOICES_PER_QUESTION:
        raise QuestionSetError(
            f"Question {number}: needs at least {MIN_CHOICES_PER_QUESTION} choices, got {len(cleaned)}."
        )
    if any(not choice.label for choice in cleaned):
        raise QuestionSetError(f"Question {number}: choice text cannot be empty.")

    correct_count = sum(1 for choice in cleaned if choice.is_correct)
    if correct_count != 1:
        raise QuestionSetError(
            f"Question {number}: exactly one choice must be correct, found {correct_count}."
        )
    return cleaned
