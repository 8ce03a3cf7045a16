"""Default lexical classifier for command-line arguments."""

from __future__ import annotations

from argsuggest.suggest.types import ArgumentKind


def classify_argument(token: str) -> ArgumentKind:
    """
    Classify an argument by its shape.

    ``--name=value`` is an option, any other dash-prefixed token is a flag,
    everything else (including a lone ``-``) is a positional argument.
    """
    if token.startswith("--") and "=" in token:
        return ArgumentKind.OPTION
    if token.startswith("-") and len(token) > 1:
        return ArgumentKind.FLAG
    return ArgumentKind.POSITIONAL
