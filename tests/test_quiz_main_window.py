from __future__ import annotations

from pathlib import Path

import pytest

from helpers import ManualScheduler, make_question
from quiz_player.constants.ui_constants import QUESTION_COUNTER_TEMPLATE
from quiz_player.core.default_questions import DEFAULT_QUESTIONS
from quiz_player.core.models import Choice, Phase, Question
from quiz_player.core.question_set import QuestionSetError
from quiz_player.core.quiz_importer import ImportedQuiz
from quiz_player.core.render_instructions import ChoiceState
from quiz_player.styling.styles import Styles
from quiz_player.ui import quiz_main_window as window_module
from quiz_player.ui.quiz_main_window import QuizMainWindow


@pytest.fixture
def window(qapp, scheduler: ManualScheduler):
    win = QuizMainWindow(questions=DEFAULT_QUESTIONS, scheduler=scheduler)
    yield win
    win.close()
    win.deleteLater()


def test_window_opens_on_start_screen(window: QuizMainWindow) -> None:
    assert window.screen_stack.currentWidget() is window.start_panel
    assert window.start_panel.question_count_label.text() == "5 question(s) loaded"
    assert window.controller.phase is Phase.NOT_STARTED


def test_start_button_shows_first_question(window: QuizMainWindow) -> None:
    window.start_panel.start_button.click()

    panel = window.question_panel
    assert window.screen_stack.currentWidget() is panel
    assert panel.counter_label.text() == QUESTION_COUNTER_TEMPLATE.format(number=1, total=5)
    assert panel.progress_bar.value() == 0
    assert "What is the capital of France?" in panel.prompt_label.text()
    assert [button.text() for button in panel.answer_buttons] == [
        "London",
        "Berlin",
        "Paris",
        "Madrid",
    ]


def test_answer_click_colors_buttons_and_waits_for_timer(
    window: QuizMainWindow, scheduler: ManualScheduler
) -> None:
    window.start_panel.start_button.click()
    buttons = window.question_panel.answer_buttons

    buttons[1].click()
    buttons[2].click()

    assert buttons[2].styleSheet() == Styles.get_answer_button_style(ChoiceState.CORRECT)
    assert buttons[1].styleSheet() == Styles.get_answer_button_style(
        ChoiceState.INCORRECT_SELECTED
    )
    assert buttons[0].styleSheet() == Styles.get_answer_button_style(ChoiceState.NEUTRAL)
    assert window.controller.state.score == 0
    assert len(scheduler.pending) == 1

    scheduler.fire_next()
    panel = window.question_panel
    assert panel.counter_label.text() == QUESTION_COUNTER_TEMPLATE.format(number=2, total=5)
    assert panel.progress_bar.value() == 200
    assert [button.text() for button in panel.answer_buttons] == [
        "Venus",
        "Mars",
        "Jupiter",
        "Saturn",
    ]


def test_full_run_shows_result_and_restart(
    window: QuizMainWindow, scheduler: ManualScheduler
) -> None:
    window.start_panel.start_button.click()
    for question in DEFAULT_QUESTIONS:
        window.question_panel.answer_buttons[question.correct_index].click()
        scheduler.fire_next()

    assert window.screen_stack.currentWidget() is window.result_panel
    assert window.result_panel.score_label.text() == "You scored 5 out of 5"
    assert window.result_panel.message_label.text() == "Perfect! You're a genius!"

    window.result_panel.restart_button.click()

    assert window.screen_stack.currentWidget() is window.question_panel
    assert window.controller.state.score == 0
    assert window.question_panel.score_label.text() == "Score: 0"
    assert window.question_panel.counter_label.text() == QUESTION_COUNTER_TEMPLATE.format(
        number=1, total=5
    )


def test_load_questions_replaces_quiz(window: QuizMainWindow) -> None:
    window.load_questions([make_question("New?", ["a", "b"], correct=1)])

    assert window.controller.total_questions == 1
    assert window.start_panel.question_count_label.text() == "1 question(s) loaded"


def test_load_questions_rejects_bad_set_and_keeps_current(window: QuizMainWindow) -> None:
    original = window.controller

    with pytest.raises(QuestionSetError):
        window.load_questions([])

    assert window.controller is original


def test_load_questions_refused_mid_quiz(window: QuizMainWindow) -> None:
    window.start_panel.start_button.click()

    with pytest.raises(RuntimeError):
        window.load_questions([make_question("New?", ["a", "b"], correct=1)])


def test_load_quiz_button_reports_import_errors(
    window: QuizMainWindow, tmp_path: Path, monkeypatch
) -> None:
    bad_file = tmp_path / "bad.txt"
    bad_file.write_text("Q: Missing choices\nCORRECT: A\n", encoding="utf-8")
    errors: list[tuple[str, str]] = []
    monkeypatch.setattr(
        window_module.QFileDialog,
        "getOpenFileName",
        lambda *args, **kwargs: (str(bad_file), ""),
    )
    monkeypatch.setattr(
        window_module, "show_error", lambda parent, title, message: errors.append((title, message))
    )

    window.start_panel.load_button.click()

    assert errors and errors[0][0] == "Import failed"
    assert window.controller.total_questions == 5


def test_load_quiz_button_loads_file(
    window: QuizMainWindow, tmp_path: Path, monkeypatch
) -> None:
    quiz_file = tmp_path / "quiz.txt"
    quiz_file.write_text("Q: One?\nA: yes\nB: no\nCORRECT: A\n", encoding="utf-8")
    infos: list[str] = []
    monkeypatch.setattr(
        window_module.QFileDialog,
        "getOpenFileName",
        lambda *args, **kwargs: (str(quiz_file), ""),
    )
    monkeypatch.setattr(
        window_module, "show_info", lambda parent, title, message: infos.append(title)
    )

    window.start_panel.load_button.click()

    assert infos == ["Quiz loaded"]
    assert window.controller.total_questions == 1
    assert window.controller.questions[0].prompt == "One?"


def test_load_quiz_button_reports_rejected_question_set(
    window: QuizMainWindow, tmp_path: Path, monkeypatch
) -> None:
    quiz_file = tmp_path / "quiz.txt"
    errors: list[tuple[str, str]] = []
    blank_choices = Question(prompt="Blank?", choices=(Choice(" ", is_correct=True), Choice(" ")))
    original = window.controller
    monkeypatch.setattr(
        window_module.QFileDialog,
        "getOpenFileName",
        lambda *args, **kwargs: (str(quiz_file), ""),
    )
    monkeypatch.setattr(
        window_module,
        "load_quiz_from_file",
        lambda path: ImportedQuiz(source_path=path, questions=[blank_choices]),
    )
    monkeypatch.setattr(
        window_module, "show_error", lambda parent, title, message: errors.append((title, message))
    )

    window.start_panel.load_button.click()

    assert [title for title, _message in errors] == ["Quiz rejected"]
    assert window.controller is original


def test_load_quiz_button_reports_non_utf8_file(
    window: QuizMainWindow, tmp_path: Path, monkeypatch
) -> None:
    quiz_file = tmp_path / "latin1.txt"
    quiz_file.write_bytes("Q: Caf\xe9?\nA: oui\nB: non\nCORRECT: A\n".encode("latin-1"))
    errors: list[tuple[str, str]] = []
    original = window.controller
    monkeypatch.setattr(
        window_module.QFileDialog,
        "getOpenFileName",
        lambda *args, **kwargs: (str(quiz_file), ""),
    )
    monkeypatch.setattr(
        window_module, "show_error", lambda parent, title, message: errors.append((title, message))
    )

    window.start_panel.load_button.click()

    assert len(errors) == 1
    assert errors[0][0] == "Import failed"
    assert "not valid UTF-8" in errors[0][1]
    assert window.controller is original
