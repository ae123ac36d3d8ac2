"""Component for the end-of-quiz result screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_player.constants.ui_constants import (
    RESTART_BUTTON,
    RESULT_SCORE_TEMPLATE,
    RESULT_TITLE,
)
from quiz_player.core.render_instructions import RenderResult
from quiz_player.styling.styles import Styles


class ResultPanel(QWidget):
    """UI component showing the final score and a restart button."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(RESULT_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def show_result(self, instruction: RenderResult) -> None:
        self.score_label.setText(
            RESULT_SCORE_TEMPLATE.format(score=instruction.score, total=instruction.total)
        )
        self.message_label.setText(instruction.message)
