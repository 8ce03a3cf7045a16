"""Did-you-mean suggestions for unrecognized command-line arguments."""

from argsuggest.suggest.candidates import suggestion_candidates
from argsuggest.suggest.distance import levenshtein_distance
from argsuggest.suggest.matching import rank_candidates, select_suggestion
from argsuggest.suggest.message import (
    ArgumentClassifier,
    argument_suggestion,
    display_noun,
    suggestion_message,
    suggestion_style,
)
from argsuggest.suggest.tokens import classify_argument
from argsuggest.suggest.types import (
    EMPTY_VOCABULARY,
    ArgumentKind,
    CommandVocabulary,
    StyledSpan,
    StyleTag,
    SuggestionMessage,
)

__all__ = [
    "EMPTY_VOCABULARY",
    "ArgumentClassifier",
    "ArgumentKind",
    "CommandVocabulary",
    "StyleTag",
    "StyledSpan",
    "SuggestionMessage",
    "argument_suggestion",
    "classify_argument",
    "display_noun",
    "levenshtein_distance",
    "rank_candidates",
    "select_suggestion",
    "suggestion_candidates",
    "suggestion_message",
    "suggestion_style",
]
