"""Render suggestion messages for the terminal with click."""

from __future__ import annotations

import click

from argsuggest.suggest.types import StyledSpan, StyleTag, SuggestionMessage

STYLE_COLORS: dict[StyleTag, str] = {
    StyleTag.OPTION_SUGGESTION: "blue",
    StyleTag.COMMAND_SUGGESTION: "green",
}


def render_span(span: StyledSpan, *, color: bool = True) -> str:
    """Return span text, coloured by its style tag when color is true."""
    if span.style is None or not color:
        return span.text
    return click.style(span.text, fg=STYLE_COLORS[span.style])


def render_message(message: SuggestionMessage, *, color: bool = True) -> str:
    """
    Render a suggestion message as a string for display.

    Args:
        message: The structured message.
        color: Whether styled spans get ANSI colours. When False the result
            equals ``message.text``.

    Returns:
        The rendered message.
    """
    return "".join(render_span(span, color=color) for span in message.spans)
