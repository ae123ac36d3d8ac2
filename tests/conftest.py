from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent
ROOT = TESTS_DIR.parent
for extra in (TESTS_DIR, ROOT):
    path_str = str(extra)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

# Widgets are created without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from helpers import ManualScheduler, RecordingView, make_question  # noqa: E402
from quiz_player.core.models import Question  # noqa: E402


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def five_questions() -> list[Question]:
    return [
        make_question(f"Question {n + 1}?", ["w", "x", "y", "z"], correct=n % 4)
        for n in range(5)
    ]


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
