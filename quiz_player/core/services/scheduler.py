"""Deferred-callback capability used by the quiz controller."""

from __future__ import annotations

from typing import Callable, Protocol

from PySide6.QtCore import QObject, QTimer


class Scheduler(Protocol):
    """Runs a callback once after a delay. Scheduled callbacks cannot be cancelled."""

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


class QtScheduler:
    """Scheduler backed by the Qt event loop."""

    def __init__(self, context: QObject | None = None) -> None:
        # Callbacks bound to a context are dropped if the context is destroyed first.
        self._context = context

    def schedule_once(self, delay_ms: int, callback: Callable[[], None]) -> None:
        if self._context is None:
            QTimer.singleShot(delay_ms, callback)
        else:
            QTimer.singleShot(delay_ms, self._context, callback)
