"""Build the list of names an unrecognized argument is compared against."""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from argsuggest.logging import get_logger
from argsuggest.suggest.types import ArgumentKind, CommandVocabulary

_logger = get_logger("suggest.candidates")


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated names while preserving order."""
    return tuple(dict.fromkeys(names))


def suggestion_candidates(
    kind: ArgumentKind, vocabulary: CommandVocabulary
) -> tuple[str, ...]:
    """
    Return the names eligible as suggestions for an argument of the given kind.

    Flags and options are compared against the command's option names,
    positional arguments against its subcommand names. A kind outside
    ArgumentKind yields no candidates.
    """
    if not isinstance(kind, ArgumentKind):
        _logger.warning("Unexpected argument kind %r; no candidates available", kind)
        return ()

    match kind:
        case ArgumentKind.FLAG | ArgumentKind.OPTION:
            return _unique(vocabulary.options)
        case ArgumentKind.POSITIONAL:
            return _unique(vocabulary.subcommands)
        case _:
            assert_never(kind)
