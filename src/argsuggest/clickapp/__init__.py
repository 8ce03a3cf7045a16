"""Adapters that connect the suggestion engine to click applications."""

from argsuggest.clickapp.groups import (
    SuggestingCommand,
    SuggestingGroup,
    SuggestionMixin,
    suggesting_group,
)
from argsuggest.clickapp.styling import STYLE_COLORS, render_message, render_span
from argsuggest.clickapp.vocabulary import (
    VocabularyProvider,
    build_command_vocabulary,
    option_name,
)

__all__ = [
    "STYLE_COLORS",
    "SuggestingCommand",
    "SuggestingGroup",
    "SuggestionMixin",
    "VocabularyProvider",
    "build_command_vocabulary",
    "option_name",
    "render_message",
    "render_span",
    "suggesting_group",
]
