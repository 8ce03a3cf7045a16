"""Type definitions for the suggestion engine."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import NamedTuple


class _StrEnum(str, Enum):
    """String-valued enum that behaves like str at runtime."""

    def __str__(self) -> str:
        return str(self.value)


class ArgumentKind(_StrEnum):
    """Lexical classification of an unrecognized argument."""

    FLAG = "flag"
    OPTION = "option"
    POSITIONAL = "positional"


class StyleTag(_StrEnum):
    """Presentation accent attached to a span of a suggestion message."""

    OPTION_SUGGESTION = "highlight-a"
    COMMAND_SUGGESTION = "highlight-b"


class StyledSpan(NamedTuple):
    """A piece of message text with an optional style tag."""

    text: str
    style: StyleTag | None = None


@dataclasses.dataclass(frozen=True)
class CommandVocabulary:
    """Snapshot of the names a command accepts.

    Both sequences keep the order in which the registry enumerates them
    (registration order for click commands).
    """

    options: tuple[str, ...] = ()
    subcommands: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Callers may pass lists or generators
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "subcommands", tuple(self.subcommands))


EMPTY_VOCABULARY = CommandVocabulary()


class SuggestionMessage(NamedTuple):
    """Structured "did you mean" message for one unrecognized argument."""

    token: str  # The unrecognized argument as the user typed it
    kind: ArgumentKind
    suggestion: str | None  # Drawn verbatim from the candidate list
    spans: tuple[StyledSpan, ...]

    @property
    def text(self) -> str:
        """The message without any styling."""
        return "".join(span.text for span in self.spans)

    def __str__(self) -> str:
        return self.text
