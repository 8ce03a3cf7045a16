"""Suggestion messages for unrecognized arguments.

Ties together classification, candidate selection and formatting. The result
is a structured message; turning style tags into terminal colours is left to a
renderer such as ``argsuggest.clickapp.styling``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias, assert_never

from argsuggest.logging import get_logger
from argsuggest.suggest.candidates import suggestion_candidates
from argsuggest.suggest.matching import select_suggestion
from argsuggest.suggest.tokens import classify_argument
from argsuggest.suggest.types import (
    ArgumentKind,
    CommandVocabulary,
    StyledSpan,
    StyleTag,
    SuggestionMessage,
)

ArgumentClassifier: TypeAlias = Callable[[str], ArgumentKind]

_logger = get_logger("suggest.message")


def display_noun(kind: ArgumentKind) -> str:
    """Return the word used for an argument of this kind in messages."""
    match kind:
        case ArgumentKind.POSITIONAL:
            return "command"
        case ArgumentKind.FLAG | ArgumentKind.OPTION:
            return "option"
        case _:
            assert_never(kind)


def suggestion_style(kind: ArgumentKind) -> StyleTag:
    """Return the accent a suggestion for this kind of argument is shown with."""
    match kind:
        case ArgumentKind.FLAG | ArgumentKind.OPTION:
            return StyleTag.OPTION_SUGGESTION
        case ArgumentKind.POSITIONAL:
            return StyleTag.COMMAND_SUGGESTION
        case _:
            assert_never(kind)


def suggestion_message(
    suggestion: str | None, kind: ArgumentKind, token: str
) -> SuggestionMessage:
    """
    Format the message for an unrecognized argument.

    Args:
        suggestion: The closest candidate, or None when there is none.
        kind: The kind of the unrecognized argument.
        token: The unrecognized argument.

    Returns:
        ``Unknown <noun>: `<token>``` followed, when a suggestion exists, by a
        ``Did you mean: <suggestion>`` line with the suggestion as its own
        styled span.
    """
    spans = [StyledSpan(f"Unknown {display_noun(kind)}: `{token}`")]
    if suggestion is not None:
        spans.append(StyledSpan("\nDid you mean: "))
        spans.append(StyledSpan(suggestion, suggestion_style(kind)))
    return SuggestionMessage(
        token=token, kind=kind, suggestion=suggestion, spans=tuple(spans)
    )


def argument_suggestion(
    arguments: Sequence[str],
    vocabulary: CommandVocabulary,
    *,
    classify: ArgumentClassifier = classify_argument,
) -> SuggestionMessage:
    """
    Build the suggestion message for a list of unrecognized arguments.

    Only the first argument is considered.

    Args:
        arguments: The unrecognized arguments, in command-line order.
        vocabulary: Names accepted by the command that rejected them.
        classify: Maps an argument to its kind.

    Returns:
        The structured suggestion message.

    Raises:
        ValueError: If arguments is empty.
    """
    if not arguments:
        raise ValueError("argument_suggestion requires at least one argument")

    token = arguments[0]
    kind = classify(token)
    candidates = suggestion_candidates(kind, vocabulary)
    suggestion = select_suggestion(token, candidates)
    _logger.debug(
        "Suggestion for %r (%s) from %d candidates: %r",
        token,
        kind,
        len(candidates),
        suggestion,
    )

    if not isinstance(kind, ArgumentKind):
        # Anything that is not a positional argument is reported as an option
        kind = ArgumentKind.OPTION
    return suggestion_message(suggestion, kind, token)
