"""Color palette for QuizPlayer supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#1F2933",      # Charcoal
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#666666",      # Dark Gray
        dark="#AAAAAA"        # Light Gray
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#2D2D2D"        # Slightly lighter dark
    )

    ACCENT_PRIMARY = ThemeColors(
        light="#E86A33",      # Orange
        dark="#FF8C5A"        # Lighter Orange
    )

    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    ANSWER_BG = ThemeColors(
        light="#F0F4F8",      # Pale Blue Gray
        dark="#3A3A3A"        # Medium Dark Gray
    )

    ANSWER_HOVER_BG = ThemeColors(
        light="#DCE6F0",      # Light Blue Gray
        dark="#505050"        # Medium Gray
    )

    # Feedback colors
    CORRECT_BG = ThemeColors(
        light="#E6FFF0",      # Mint
        dark="#1E4D2B"        # Deep Green
    )

    CORRECT_BORDER = ThemeColors(
        light="#A3F0C4",      # Light Green
        dark="#6FCF6F"        # Green
    )

    INCORRECT_BG = ThemeColors(
        light="#FFF0F0",      # Blush
        dark="#5C1F1F"        # Deep Red
    )

    INCORRECT_BORDER = ThemeColors(
        light="#FFBDBD",      # Light Red
        dark="#FF6B6B"        # Red
    )
