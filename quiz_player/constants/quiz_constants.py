"""Quiz-related constants shared across UI and core layers."""

FEEDBACK_DELAY_MS: int = 1000
MIN_CHOICES_PER_QUESTION: int = 2
DEFAULT_QUIZ_FILE: str = "quiz_questions.txt"

# Evaluated top-down; the first threshold the percentage reaches wins.
PERFECT_SCORE_MESSAGE: str = "Perfect! You're a genius!"
RESULT_MESSAGE_TIERS: tuple[tuple[float, str], ...] = (
    (80.0, "Great job! You know your stuff!"),
    (60.0, "Good effort! Keep learning!"),
    (40.0, "Not bad! Try again to improve!"),
)
FALLBACK_RESULT_MESSAGE: str = "Keep studying! You'll get better!"
