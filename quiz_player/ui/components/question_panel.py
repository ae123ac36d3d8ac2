"""Component that shows the active question and its answer buttons."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.ui_constants import QUESTION_COUNTER_TEMPLATE, SCORE_TEMPLATE
from quiz_player.core.render_instructions import ChoiceState, RenderFeedback, RenderQuestion
from quiz_player.styling.color_palette import Theme
from quiz_player.styling.styles import Styles
from quiz_player.ui.question_renderer import render_prompt

_PROGRESS_RESOLUTION = 1000


class QuestionPanel(QWidget):
    """UI component for answering one question at a time."""

    def __init__(
        self,
        on_answer_selected: Callable[[int], None],
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer_selected = on_answer_selected
        self._theme = theme
        self.answer_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        info_row = QHBoxLayout()
        self.counter_label = QLabel("", self)
        self.counter_label.setStyleSheet(Styles.get_secondary_label_style(self._theme))
        info_row.addWidget(self.counter_label)
        info_row.addStretch()
        self.score_label = QLabel(SCORE_TEMPLATE.format(score=0), self)
        self.score_label.setStyleSheet(Styles.get_secondary_label_style(self._theme))
        info_row.addWidget(self.score_label)
        layout.addLayout(info_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, _PROGRESS_RESOLUTION)
        self.progress_bar.setValue(0)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.prompt_label = QLabel("", self)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        layout.addWidget(self.prompt_label)

        self.answers_layout = QVBoxLayout()
        layout.addLayout(self.answers_layout)
        layout.addStretch()

    def show_question(self, instruction: RenderQuestion) -> None:
        self.counter_label.setText(
            QUESTION_COUNTER_TEMPLATE.format(
                number=instruction.question_number,
                total=instruction.total_questions,
            )
        )
        self.score_label.setText(SCORE_TEMPLATE.format(score=instruction.score))
        self.progress_bar.setValue(
            round(instruction.progress_percent / 100 * _PROGRESS_RESOLUTION)
        )
        self.prompt_label.setText(render_prompt(instruction.prompt))
        self._rebuild_answer_buttons(instruction.choice_labels)

    def show_feedback(self, instruction: RenderFeedback) -> None:
        self.score_label.setText(SCORE_TEMPLATE.format(score=instruction.score))
        for button, feedback in zip(self.answer_buttons, instruction.per_choice_state):
            button.setStyleSheet(Styles.get_answer_button_style(feedback.state, self._theme))

    def _rebuild_answer_buttons(self, labels: tuple[str, ...]) -> None:
        while self.answers_layout.count():
            item = self.answers_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.answer_buttons = []
        for idx, label in enumerate(labels):
            button = QPushButton(label, self)
            button.setStyleSheet(Styles.get_answer_button_style(ChoiceState.NEUTRAL, self._theme))
            button.clicked.connect(lambda _checked=False, index=idx: self.on_answer_selected(index))
            self.answers_layout.addWidget(button)
            self.answer_buttons.append(button)
