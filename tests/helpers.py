"""Fakes shared by the controller and window tests."""

from __future__ import annotations

from typing import Callable

from quiz_player.core.models import Choice, Question


class ManualScheduler:
    """Collects scheduled callbacks so tests decide when time passes."""

    def __init__(self) -> None:
        self.pending: list[tuple[int, Callable[[], None]]] = []

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending.append((delay_ms, callback))

    def fire_next(self) -> None:
        _delay, callback = self.pending.pop(0)
        callback()

    def fire_all(self) -> None:
        while self.pending:
            self.fire_next()


class RecordingView:
    """QuizView that keeps every instruction it receives, in order."""

    def __init__(self) -> None:
        self.events: list[object] = []

    def show_screen(self, transition) -> None:
        self.events.append(transition)

    def render_question(self, instruction) -> None:
        self.events.append(instruction)

    def render_feedback(self, instruction) -> None:
        self.events.append(instruction)

    def render_result(self, instruction) -> None:
        self.events.append(instruction)

    def last(self, kind: type):
        for event in reversed(self.events):
            if isinstance(event, kind):
                return event
        return None

    def of_type(self, kind: type) -> list:
        return [event for event in self.events if isinstance(event, kind)]


def make_question(prompt: str, labels: list[str], correct: int) -> Question:
    return Question(
        prompt=prompt,
        choices=tuple(
            Choice(label, is_correct=idx == correct) for idx, label in enumerate(labels)
        ),
    )
