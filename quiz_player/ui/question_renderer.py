"""Question rendering utilities for displaying quiz prompts."""

from __future__ import annotations

from quiz_player.core.markdown_renderer import renderer


def render_prompt(prompt: str, font_size: int = 16) -> str:
    """Render a question prompt as rich text for a QLabel.

    Args:
        prompt: The question text (supports Markdown)
        font_size: Font size in points for the prompt (default 16)

    Returns:
        HTML string ready for display in a rich-text QLabel
    """
    fragment = renderer.render_fragment(prompt)
    return f'<div style="font-size: {font_size}pt; font-weight: 600;">{fragment}</div>'
