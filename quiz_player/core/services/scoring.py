"""Progress and result calculations for a quiz attempt."""

from __future__ import annotations

from quiz_player.constants.quiz_constants import (
    FALLBACK_RESULT_MESSAGE,
    PERFECT_SCORE_MESSAGE,
    RESULT_MESSAGE_TIERS,
)


def progress_percent(completed: int, total: int) -> float:
    """Share of questions already completed, from 0 to 100."""
    if total <= 0:
        return 0.0
    return completed * 100 / total


def score_percentage(score: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return score * 100 / total


def result_message(score: int, total: int) -> str:
    """Pick the closing message for a final score."""
    percentage = score_percentage(score, total)
    if total > 0 and score == total:
        return PERFECT_SCORE_MESSAGE
    for threshold, message in RESULT_MESSAGE_TIERS:
        if percentage >= threshold:
            return message
    return FALLBACK_RESULT_MESSAGE
