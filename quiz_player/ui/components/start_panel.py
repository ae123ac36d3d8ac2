"""Component for the welcome screen shown before a quiz starts."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.ui_constants import (
    ABOUT_BUTTON,
    HELP_BUTTON,
    LOAD_BUTTON,
    START_BUTTON,
    START_DESCRIPTION,
    START_QUESTION_COUNT_TEMPLATE,
    START_TITLE,
)
from quiz_player.styling.color_palette import Theme
from quiz_player.styling.styles import Styles


class StartPanel(QWidget):
    """UI component with the start button and quiz file loading."""

    def __init__(
        self,
        on_start: Callable[[], None],
        on_load_quiz: Callable[[], None],
        on_help: Callable[[], None],
        on_about: Callable[[], None],
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_load_quiz = on_load_quiz
        self.on_help = on_help
        self.on_about = on_about
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(START_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel(START_DESCRIPTION, self)
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        self.question_count_label = QLabel(START_QUESTION_COUNT_TEMPLATE.format(count=0), self)
        self.question_count_label.setAlignment(Qt.AlignCenter)
        self.question_count_label.setStyleSheet(Styles.get_secondary_label_style(self._theme))
        layout.addWidget(self.question_count_label)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button)

        secondary_row = QHBoxLayout()
        self.load_button = QPushButton(LOAD_BUTTON, self)
        self.load_button.clicked.connect(self.on_load_quiz)
        secondary_row.addWidget(self.load_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self.on_help)
        secondary_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        secondary_row.addWidget(self.about_button)
        layout.addLayout(secondary_row)

    def set_question_count(self, count: int) -> None:
        self.question_count_label.setText(START_QUESTION_COUNT_TEMPLATE.format(count=count))
