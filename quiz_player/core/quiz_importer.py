"""Utilities for importing quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text (supports markdown). Additional lines until the
       next marker are treated as part of the question.
    A: First choice
    B: Second choice
    C: Third choice (optional, letters continue in order)
    CORRECT: A|B|...

Example:

    Q: What is the chemical symbol for gold?
    A: Go
    B: Gd
    C: Au
    D: Ag
    CORRECT: C

Every question needs at least two choices and a CORRECT line naming one of
them. Whether the resulting questions form a playable quiz is decided later
by ``build_question_set``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from string import ascii_uppercase

from quiz_player.constants.quiz_constants import MIN_CHOICES_PER_QUESTION
from quiz_player.core.models import Choice, Question


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[Question]


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuizImportError(f"Quiz file is not valid UTF-8: {exc}") from exc
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block, number) for number, block in enumerate(blocks, start=1) if block]


def _parse_block(block: str, number: int) -> Question:
    prompt_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            prompt_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in ascii_uppercase and line[1] == ":":
            letter = line[0].upper()
            if letter in options:
                raise QuizImportError(f"Question {number}: choice {letter} is defined twice.")
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            prompt_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Question {number}: encountered text outside of a known section: '{line}'."
            )

    prompt = "\n".join(prompt_lines).strip()
    if not prompt:
        raise QuizImportError(f"Question {number}: question text missing (Q: ...)")

    letters = list(ascii_uppercase[: len(options)])
    if sorted(options) != letters:
        raise QuizImportError(
            f"Question {number}: choices must use consecutive letters starting at A."
        )
    if len(letters) < MIN_CHOICES_PER_QUESTION:
        raise QuizImportError(
            f"Question {number}: at least {MIN_CHOICES_PER_QUESTION} choices are required."
        )

    if correct_letter is None:
        raise QuizImportError(f"Question {number}: CORRECT line is missing.")
    if correct_letter not in letters:
        raise QuizImportError(
            f"Question {number}: CORRECT must be one of {', '.join(letters)}."
        )

    choices = tuple(
        Choice(label=options[letter].strip(), is_correct=letter == correct_letter)
        for letter in letters
    )
    return Question(prompt=prompt, choices=choices)
