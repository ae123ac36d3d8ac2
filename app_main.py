"""Application entry point for QuizPlayer."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_player.constants.quiz_constants import DEFAULT_QUIZ_FILE
from quiz_player.core.default_questions import DEFAULT_QUESTIONS
from quiz_player.core.models import Question
from quiz_player.core.question_set import QuestionSetError, build_question_set
from quiz_player.core.quiz_importer import QuizImportError, load_quiz_from_file
from quiz_player.styling.color_palette import Theme
from quiz_player.ui.quiz_main_window import QuizMainWindow
from quiz_player.utils.logging_config import configure_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a multiple-choice quiz.")
    parser.add_argument(
        "quiz_file",
        nargs="?",
        type=Path,
        help=f"Quiz text file to play (defaults to ./{DEFAULT_QUIZ_FILE} or the built-in quiz).",
    )
    parser.add_argument("--theme", choices=("light", "dark"), default="light")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
    )
    # Qt consumes its own flags (e.g. -platform), so leave unknown ones for QApplication.
    args, _unknown = parser.parse_known_args(argv)
    return args


def _resolve_questions(quiz_file: Path | None) -> tuple[Question, ...]:
    """Pick the question set: explicit file, default file in the CWD, or built-in."""
    if quiz_file is None:
        default_path = Path(DEFAULT_QUIZ_FILE)
        if not default_path.exists():
            return build_question_set(DEFAULT_QUESTIONS)
        quiz_file = default_path
    imported = load_quiz_from_file(quiz_file)
    return build_question_set(imported.questions)


def main(argv: list[str] | None = None) -> int:
    """Initialize logging, load the quiz, and launch the Qt UI."""
    argv = sys.argv[1:] if argv is None else argv
    args = _parse_args(argv)
    logger = configure_logging(args.log_level)
    logger.info("Starting QuizPlayer…")

    try:
        questions = _resolve_questions(args.quiz_file)
    except (OSError, QuizImportError, QuestionSetError) as exc:
        logger.error("Could not load quiz: %s", exc)
        return 2
    logger.info("Loaded %d questions", len(questions))

    app = QApplication([sys.argv[0], *argv])
    theme = Theme.DARK if args.theme == "dark" else Theme.LIGHT
    window = QuizMainWindow(questions=questions, theme=theme)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
