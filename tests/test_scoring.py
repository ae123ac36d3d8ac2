from __future__ import annotations

import pytest

from quiz_player.core.services.scoring import progress_percent, result_message, score_percentage


@pytest.mark.parametrize(
    ("score", "total", "expected"),
    [
        (5, 5, "Perfect! You're a genius!"),
        (1, 1, "Perfect! You're a genius!"),
        (4, 5, "Great job! You know your stuff!"),
        (9, 10, "Great job! You know your stuff!"),
        (3, 5, "Good effort! Keep learning!"),
        (2, 5, "Not bad! Try again to improve!"),
        (1, 3, "Keep studying! You'll get better!"),
        (1, 5, "Keep studying! You'll get better!"),
        (0, 5, "Keep studying! You'll get better!"),
    ],
)
def test_result_message_tiers(score: int, total: int, expected: str) -> None:
    assert result_message(score, total) == expected


def test_exact_thresholds_are_inclusive() -> None:
    assert result_message(8, 10) == "Great job! You know your stuff!"
    assert result_message(6, 10) == "Good effort! Keep learning!"
    assert result_message(4, 10) == "Not bad! Try again to improve!"
    assert result_message(79, 100) == "Good effort! Keep learning!"


def test_progress_percent() -> None:
    assert progress_percent(0, 5) == 0
    assert progress_percent(4, 5) == pytest.approx(80.0)
    assert progress_percent(2, 3) == pytest.approx(66.6667, rel=1e-4)
    assert progress_percent(0, 0) == 0.0


def test_score_percentage() -> None:
    assert score_percentage(4, 5) == 80.0
    assert score_percentage(0, 0) == 0.0
