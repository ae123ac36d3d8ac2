"""Static metadata describing QuizPlayer."""

APP_NAME = "QuizPlayer"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizPlayer is a small desktop quiz built with Qt. "
    "Answer one multiple-choice question at a time and see how you did at the end."
)

HELP_TEXT = (
    "Click an answer to lock it in. The correct answer lights up green and a wrong pick "
    "turns red, then the next question appears after a moment.\n\n"
    "You can load your own quiz from a .txt file using this format:\n\n"
    "Q: What is the capital of France?\n"
    "A: London\nB: Paris\nC: Berlin\nD: Madrid\n"
    "CORRECT: B\n\n"
    "Q: Which planet is known as the Red Planet?\n"
    "A: Venus\nB: Mars\n"
    "CORRECT: B"
)
