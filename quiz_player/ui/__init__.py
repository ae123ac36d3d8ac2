"""Qt UI components for the quiz player."""

from .dialog_helpers import show_error, show_info
from .question_renderer import render_prompt
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizMainWindow",
    "render_prompt",
    "show_error",
    "show_info",
]
