"""Centralized styles and font definitions for the application."""

from quiz_player.core.render_instructions import ChoiceState

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: #FFFFFF;
                border: none;
                border-radius: 8px;
                padding: 10px 18px;
            }}
            QProgressBar {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: none;
                border-radius: 5px;
                max-height: 10px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-radius: 5px;
            }}
        """

    @staticmethod
    def get_answer_button_style(
        state: ChoiceState = ChoiceState.NEUTRAL,
        theme: Theme = Theme.LIGHT,
    ) -> str:
        if state is ChoiceState.CORRECT:
            background = ColorPalette.CORRECT_BG.get(theme)
            border = ColorPalette.CORRECT_BORDER.get(theme)
        elif state is ChoiceState.INCORRECT_SELECTED:
            background = ColorPalette.INCORRECT_BG.get(theme)
            border = ColorPalette.INCORRECT_BORDER.get(theme)
        else:
            background = ColorPalette.ANSWER_BG.get(theme)
            border = ColorPalette.BORDER_PRIMARY.get(theme)
        return f"""
            QPushButton {{
                background-color: {background};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {border};
                border-radius: 10px;
                padding: 12px;
                text-align: left;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.ANSWER_HOVER_BG.get(theme) if state is ChoiceState.NEUTRAL else background};
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"
