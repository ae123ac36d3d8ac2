"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizPlayer"
WINDOW_MIN_WIDTH: int = 560
WINDOW_MIN_HEIGHT: int = 480

START_TITLE: str = "Quiz Time!"
START_DESCRIPTION: str = "Test your knowledge with these fun questions."
START_QUESTION_COUNT_TEMPLATE: str = "{count} question(s) loaded"
START_BUTTON: str = "Start Quiz"
LOAD_BUTTON: str = "Load Quiz File"
HELP_BUTTON: str = "Help"
ABOUT_BUTTON: str = "About"

QUESTION_COUNTER_TEMPLATE: str = "Question {number} of {total}"
SCORE_TEMPLATE: str = "Score: {score}"

RESULT_TITLE: str = "Quiz Results"
RESULT_SCORE_TEMPLATE: str = "You scored {score} out of {total}"
RESTART_BUTTON: str = "Restart Quiz"

IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.txt);;All files (*.*)"
