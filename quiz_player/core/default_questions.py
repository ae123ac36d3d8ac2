"""Built-in question set used when no quiz file is supplied."""

from __future__ import annotations

from quiz_player.core.models import Choice, Question


DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        prompt="What is the capital of France?",
        choices=(
            Choice("London"),
            Choice("Berlin"),
            Choice("Paris", is_correct=True),
            Choice("Madrid"),
        ),
    ),
    Question(
        prompt="Which planet is known as the Red Planet?",
        choices=(
            Choice("Venus"),
            Choice("Mars", is_correct=True),
            Choice("Jupiter"),
            Choice("Saturn"),
        ),
    ),
    Question(
        prompt="What is the largest ocean on Earth?",
        choices=(
            Choice("Atlantic Ocean"),
            Choice("Indian Ocean"),
            Choice("Arctic Ocean"),
            Choice("Pacific Ocean", is_correct=True),
        ),
    ),
    Question(
        prompt="Which of these is NOT a programming language?",
        choices=(
            Choice("Java"),
            Choice("Python"),
            Choice("Banana", is_correct=True),
            Choice("JavaScript"),
        ),
    ),
    Question(
        prompt="What is the chemical symbol for gold?",
        choices=(
            Choice("Go"),
            Choice("Gd"),
            Choice("Au", is_correct=True),
            Choice("Ag"),
        ),
    ),
)
