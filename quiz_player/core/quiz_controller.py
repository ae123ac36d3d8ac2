"""State machine driving a single-player quiz attempt.

The controller owns the question set and the current ``SessionState`` and
reacts to three user events (start, answer selected, restart) plus one
self-scheduled advance. It never touches widgets directly: every visible
change is emitted as a render instruction to a ``QuizView``.

Events that arrive in a phase without a handler for them are dropped. The
``input_locked`` flag is the only guard against a second answer arriving
while feedback is on screen; advance is guarded purely by the phase check.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Protocol

from quiz_player.constants.quiz_constants import FEEDBACK_DELAY_MS
from quiz_player.core.models import Phase, Question, SessionState
from quiz_player.core.question_set import build_question_set
from quiz_player.core.render_instructions import (
    ChoiceFeedback,
    ChoiceState,
    RenderFeedback,
    RenderQuestion,
    RenderResult,
    Screen,
    ScreenTransition,
)
from quiz_player.core.services.scheduler import Scheduler
from quiz_player.core.services.scoring import progress_percent, result_message

logger = logging.getLogger(__name__)

_STARTABLE_PHASES = (Phase.NOT_STARTED, Phase.FINISHED)


class QuizView(Protocol):
    """Receiver for the controller's render instructions."""

    def show_screen(self, transition: ScreenTransition) -> None: ...

    def render_question(self, instruction: RenderQuestion) -> None: ...

    def render_feedback(self, instruction: RenderFeedback) -> None: ...

    def render_result(self, instruction: RenderResult) -> None: ...


class QuizController:
    """Runs one quiz attempt at a time over a fixed question set."""

    def __init__(
        self,
        questions: Iterable[Question],
        view: QuizView,
        scheduler: Scheduler,
        *,
        feedback_delay_ms: int = FEEDBACK_DELAY_MS,
    ) -> None:
        self._questions = build_question_set(questions)
        self._view = view
        self._scheduler = scheduler
        self._feedback_delay_ms = feedback_delay_ms
        self._state = SessionState()

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def current_question(self) -> Question | None:
        if self._state.phase not in (Phase.AWAITING_ANSWER, Phase.SHOWING_FEEDBACK):
            return None
        return self._questions[self._state.current_index]

    # --- Inbound events ---

    def start(self) -> None:
        if self._state.phase not in _STARTABLE_PHASES:
            logger.debug("Ignoring start request in phase %s", self._state.phase.name)
            return
        self._begin_attempt()

    def restart(self) -> None:
        if self._state.phase not in _STARTABLE_PHASES:
            logger.debug("Ignoring restart request in phase %s", self._state.phase.name)
            return
        self._begin_attempt()

    def select_answer(self, choice_index: int) -> None:
        state = self._state
        if state.phase is not Phase.AWAITING_ANSWER or state.input_locked:
            logger.debug(
                "Ignoring answer %s in phase %s (locked=%s)",
                choice_index,
                state.phase.name,
                state.input_locked,
            )
            return

        question = self._questions[state.current_index]
        if not 0 <= choice_index < len(question.choices):
            logger.warning(
                "Ignoring answer %s: question %d only has %d choices",
                choice_index,
                state.current_index + 1,
                len(question.choices),
            )
            return

        state.input_locked = True
        state.phase = Phase.SHOWING_FEEDBACK
        is_correct = question.choices[choice_index].is_correct
        if is_correct:
            state.score += 1
        logger.debug(
            "Question %d answered with choice %d (correct=%s, score=%d)",
            state.current_index + 1,
            choice_index,
            is_correct,
            state.score,
        )

        self._view.render_feedback(
            RenderFeedback(
                per_choice_state=_feedback_for(question, choice_index),
                score=state.score,
            )
        )
        self._scheduler.schedule_once(self._feedback_delay_ms, self._advance)

    # --- Internal transitions ---

    def _begin_attempt(self) -> None:
        self._state = SessionState(phase=Phase.AWAITING_ANSWER)
        logger.debug("Starting quiz attempt with %d questions", self.total_questions)
        self._view.show_screen(ScreenTransition(to=Screen.QUIZ))
        self._render_current_question()

    def _advance(self) -> None:
        state = self._state
        if state.phase is not Phase.SHOWING_FEEDBACK:
            logger.debug("Ignoring advance in phase %s", state.phase.name)
            return

        state.current_index += 1
        if state.current_index < self.total_questions:
            state.input_locked = False
            state.phase = Phase.AWAITING_ANSWER
            self._render_current_question()
            return

        state.phase = Phase.FINISHED
        message = result_message(state.score, self.total_questions)
        logger.debug("Quiz finished with score %d/%d", state.score, self.total_questions)
        self._view.show_screen(ScreenTransition(to=Screen.RESULT))
        self._view.render_result(
            RenderResult(score=state.score, total=self.total_questions, message=message)
        )

    def _render_current_question(self) -> None:
        state = self._state
        question = self._questions[state.current_index]
        self._view.render_question(
            RenderQuestion(
                question_number=state.current_index + 1,
                total_questions=self.total_questions,
                progress_percent=progress_percent(state.current_index, self.total_questions),
                prompt=question.prompt,
                choice_labels=question.choice_labels,
                score=state.score,
            )
        )


def _feedback_for(question: Question, selected_index: int) -> tuple[ChoiceFeedback, ...]:
    feedback: list[ChoiceFeedback] = []
    for idx, choice in enumerate(question.choices):
        if choice.is_correct:
            state = ChoiceState.CORRECT
        elif idx == selected_index:
            state = ChoiceState.INCORRECT_SELECTED
        else:
            state = ChoiceState.NEUTRAL
        feedback.append(ChoiceFeedback(label=choice.label, state=state))
    return tuple(feedback)
