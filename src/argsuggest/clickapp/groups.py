"""click command classes that add did-you-mean suggestions to usage errors.

Example::

    @click.group(cls=SuggestingGroup)
    def cli() -> None: ...

Subcommands declared with ``@cli.command()`` and ``@cli.group()`` pick up the
same behaviour.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

import click

from argsuggest.clickapp.styling import render_message
from argsuggest.clickapp.vocabulary import VocabularyProvider, build_command_vocabulary
from argsuggest.error_handling import wrap_handler
from argsuggest.logging import get_logger
from argsuggest.suggest.message import argument_suggestion
from argsuggest.suggest.tokens import classify_argument
from argsuggest.suggest.types import ArgumentKind

__all__ = [
    "SuggestingCommand",
    "SuggestingGroup",
    "SuggestionMixin",
]

_logger = get_logger("clickapp.groups")


@wrap_handler(
    logger=_logger,
    feature_name="argument suggestion",
    default_factory=lambda: None,
)
def _suggestion_text(
    command: SuggestionMixin, ctx: click.Context, arguments: Sequence[str]
) -> str | None:
    vocabulary = command.vocabulary_provider(command, ctx)  # type: ignore[arg-type]
    message = argument_suggestion(arguments, vocabulary)
    color = command.suggestion_color
    if color is None:
        color = ctx.color is not False
    return render_message(message, color=color)


class SuggestionMixin:
    """
    Mixin for click commands that replaces "no such option" errors with a
    suggestion message naming the closest known option.
    """

    vocabulary_provider: ClassVar[VocabularyProvider] = staticmethod(
        build_command_vocabulary
    )
    # None defers to the context's colour setting
    suggestion_color: ClassVar[bool | None] = None

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)  # type: ignore[misc]
        except click.NoSuchOption as error:
            text = _suggestion_text(self, ctx, [error.option_name])
            if text is None:
                raise
            raise click.UsageError(text, ctx=error.ctx or ctx) from error


class SuggestingCommand(SuggestionMixin, click.Command):
    """click Command with option suggestions."""


class SuggestingGroup(SuggestionMixin, click.Group):
    """click Group with option and subcommand suggestions."""

    command_class = SuggestingCommand
    group_class = type

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as error:
            token = click.utils.make_str(args[0])
            # Option-shaped tokens were already handled by parse_args
            if classify_argument(token) is not ArgumentKind.POSITIONAL:
                raise
            text = _suggestion_text(self, ctx, [token])
            if text is None:
                raise
            raise click.UsageError(text, ctx=error.ctx or ctx) from error


def suggesting_group(name: str | None = None, **attrs: Any) -> Any:
    """Shortcut for ``click.group(name, cls=SuggestingGroup, **attrs)``."""
    attrs.setdefault("cls", SuggestingGroup)
    return click.group(name, **attrs)
