"""Qt main window hosting the start, question and result screens."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from quiz_player.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_player.constants.ui_constants import (
    IMPORT_DIALOG_TITLE,
    IMPORT_FILE_FILTER,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from quiz_player.core.models import Phase, Question
from quiz_player.core.question_set import QuestionSetError
from quiz_player.core.quiz_controller import QuizController
from quiz_player.core.quiz_importer import QuizImportError, load_quiz_from_file
from quiz_player.core.render_instructions import (
    RenderFeedback,
    RenderQuestion,
    RenderResult,
    Screen,
    ScreenTransition,
)
from quiz_player.core.services.scheduler import QtScheduler, Scheduler
from quiz_player.styling.color_palette import Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.components.question_panel import QuestionPanel
from quiz_player.ui.components.result_panel import ResultPanel
from quiz_player.ui.components.start_panel import StartPanel
from quiz_player.ui.dialog_helpers import show_error, show_info

logger = logging.getLogger(__name__)

_SCREEN_INDEX = {
    Screen.START: 0,
    Screen.QUIZ: 1,
    Screen.RESULT: 2,
}


class QuizMainWindow(QMainWindow):
    """Main Qt window; renders whatever the quiz controller instructs."""

    def __init__(
        self,
        questions: Iterable[Question],
        scheduler: Scheduler | None = None,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self._theme = theme
        self._scheduler = scheduler or QtScheduler(self)
        self._last_import_dir: Path = Path.home()

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.controller = self._create_controller(questions)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.screen_stack = QStackedWidget(self)
        self.start_panel = StartPanel(
            on_start=self._handle_start,
            on_load_quiz=self._handle_load_quiz,
            on_help=self._handle_help,
            on_about=self._handle_about,
            theme=self._theme,
            parent=self,
        )
        self.question_panel = QuestionPanel(
            on_answer_selected=self._handle_answer_selected,
            theme=self._theme,
            parent=self,
        )
        self.result_panel = ResultPanel(on_restart=self._handle_restart, parent=self)

        self.screen_stack.addWidget(self.start_panel)
        self.screen_stack.addWidget(self.question_panel)
        self.screen_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.screen_stack)

        self.show_screen(ScreenTransition(to=Screen.START))

    def _create_controller(self, questions: Iterable[Question]) -> QuizController:
        controller = QuizController(questions, view=self, scheduler=self._scheduler)
        self.start_panel.set_question_count(controller.total_questions)
        return controller

    def load_questions(self, questions: Iterable[Question]) -> None:
        """Swap in a new question set. Only allowed before a quiz is running."""
        if self.controller.phase is not Phase.NOT_STARTED:
            raise RuntimeError("Questions can only be replaced before the quiz starts.")
        self.controller = self._create_controller(questions)

    # --- QuizView ---

    def show_screen(self, transition: ScreenTransition) -> None:
        self.screen_stack.setCurrentIndex(_SCREEN_INDEX[transition.to])

    def render_question(self, instruction: RenderQuestion) -> None:
        self.question_panel.show_question(instruction)

    def render_feedback(self, instruction: RenderFeedback) -> None:
        self.question_panel.show_feedback(instruction)

    def render_result(self, instruction: RenderResult) -> None:
        self.result_panel.show_result(instruction)

    # --- User events ---

    def _handle_start(self) -> None:
        self.controller.start()

    def _handle_restart(self) -> None:
        self.controller.restart()

    def _handle_answer_selected(self, choice_index: int) -> None:
        self.controller.select_answer(choice_index)

    def _handle_load_quiz(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            IMPORT_DIALOG_TITLE,
            str(self._last_import_dir),
            IMPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            imported = load_quiz_from_file(Path(file_path))
        except (OSError, QuizImportError) as exc:
            show_error(self, "Import failed", str(exc))
            return

        try:
            self.load_questions(imported.questions)
        except QuestionSetError as exc:
            show_error(self, "Quiz rejected", str(exc))
            return

        self._last_import_dir = imported.source_path.parent
        logger.info("Loaded %d questions from %s", len(imported.questions), imported.source_path)
        show_info(self, "Quiz loaded", f"Loaded {len(imported.questions)} questions.")

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)
