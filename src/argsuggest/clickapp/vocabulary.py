"""Command vocabulary snapshots for click commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import click

from argsuggest.logging import get_logger
from argsuggest.suggest.types import CommandVocabulary

VocabularyProvider: TypeAlias = Callable[
    [click.Command, click.Context | None], CommandVocabulary
]

__all__ = [
    "VocabularyProvider",
    "build_command_vocabulary",
    "option_name",
]

_logger = get_logger("clickapp.vocabulary")


def option_name(param: click.Option) -> str:
    """Return the primary spelling of an option: its first long form if any."""
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0]


def _option_names(command: click.Command, ctx: click.Context) -> list[str]:
    names: list[str] = []
    for param in command.get_params(ctx):
        if not isinstance(param, click.Option):
            continue
        if getattr(param, "hidden", False):
            continue
        if not param.opts:
            continue
        names.append(option_name(param))
    return names


def _subcommand_names(command: click.Command) -> list[str]:
    """Visible subcommand names in the order they were added to the group."""
    if not isinstance(command, click.Group):
        return []
    return [
        name
        for name, subcommand in command.commands.items()
        if not getattr(subcommand, "hidden", False)
    ]


def build_command_vocabulary(
    command: click.Command, ctx: click.Context | None = None
) -> CommandVocabulary:
    """
    Snapshot the option and subcommand names a click command accepts.

    Args:
        command: The command that rejected an argument.
        ctx: The command's context. A fresh one is created when omitted; it is
            needed to resolve the automatic help option.

    Returns:
        The vocabulary, in declaration/registration order.
    """
    if ctx is None:
        ctx = click.Context(command)
    vocabulary = CommandVocabulary(
        options=_option_names(command, ctx),
        subcommands=_subcommand_names(command),
    )
    _logger.debug(
        "Vocabulary for %r: %d options, %d subcommands",
        command.name,
        len(vocabulary.options),
        len(vocabulary.subcommands),
    )
    return vocabulary
