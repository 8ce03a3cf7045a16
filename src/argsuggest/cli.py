"""Command-line interface for argsuggest.

Explains which suggestion a click application would print for an
unrecognized argument::

    argsuggest mypkg.cli:main instal
    argsuggest mypkg.cli:main --command remote --ranking -- --varbose
"""

from __future__ import annotations

import argparse
import dataclasses
import importlib
from collections.abc import Sequence
from pathlib import Path

import click

from argsuggest.clickapp.styling import render_message
from argsuggest.clickapp.vocabulary import build_command_vocabulary
from argsuggest.logging import configure_logging, get_logger
from argsuggest.suggest.candidates import suggestion_candidates
from argsuggest.suggest.matching import rank_candidates
from argsuggest.suggest.message import argument_suggestion


@dataclasses.dataclass(frozen=True)
class CliArgs:
    """Parsed command-line arguments."""

    target: str
    token: str
    command_path: tuple[str, ...]
    ranking: bool
    color: bool
    log_level: str
    log_file: Path | None
    debug: bool


def parse_args(argv: Sequence[str] | None = None) -> CliArgs:
    """
    Parse command-line arguments.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Parsed arguments as CliArgs dataclass.
    """
    parser = argparse.ArgumentParser(
        prog="argsuggest",
        description="Show the did-you-mean suggestion for an unrecognized argument",
    )

    parser.add_argument(
        "target",
        help="click command to inspect, as 'package.module:attribute'",
    )

    parser.add_argument(
        "token",
        help="The unrecognized argument (put '--' before option-like tokens)",
    )

    parser.add_argument(
        "--command",
        dest="command_path",
        action="append",
        default=[],
        metavar="NAME",
        help="Subcommand to descend into before suggesting (repeatable)",
    )

    parser.add_argument(
        "--ranking",
        action="store_true",
        help="Also print every candidate with its edit distance",
    )

    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Colour the suggestion (default: no colour)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: INFO, or DEBUG if --debug is set)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file path (default: stderr)",
    )

    parser.add_argument(
        "-v",
        "--debug",
        action="store_true",
        help="Enable debug mode (sets log level to DEBUG unless --log-level is specified)",
    )

    args = parser.parse_args(argv)

    # Determine log level: explicit --log-level wins, otherwise --debug sets DEBUG
    if args.log_level is not None:
        log_level = args.log_level
    elif args.debug:
        log_level = "DEBUG"
    else:
        log_level = "INFO"

    return CliArgs(
        target=args.target,
        token=args.token,
        command_path=tuple(args.command_path),
        ranking=args.ranking,
        color=args.color,
        log_level=log_level,
        log_file=args.log_file,
        debug=args.debug,
    )


def load_command(target: str) -> click.Command:
    """
    Import the click command named by ``package.module:attribute``.

    Raises:
        ValueError: If target has no ':' separator.
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute does not exist.
        TypeError: If the attribute is not a click command.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Target must look like 'package.module:attribute': {target}")

    obj: object = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if not isinstance(obj, click.Command):
        raise TypeError(f"{target} is not a click command: {type(obj).__name__}")
    return obj


def run(argv: Sequence[str] | None = None) -> int:
    """
    Print the suggestion message for an unrecognized argument.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)

    configure_logging(level=args.log_level, log_file=args.log_file)
    logger = get_logger("cli")
    logger.debug("Configuration: %s", args)

    try:
        try:
            command = load_command(args.target)
        except (ValueError, ImportError, AttributeError, TypeError) as error:
            logger.error("Cannot load %s: %s", args.target, error)
            return 1

        ctx = click.Context(command, info_name=command.name, color=args.color)
        for name in args.command_path:
            subcommand = None
            if isinstance(command, click.Group):
                subcommand = command.get_command(ctx, name)
            if subcommand is None:
                # Report the broken path the same way the application would
                message = argument_suggestion(
                    [name], build_command_vocabulary(command, ctx)
                )
                click.echo(render_message(message, color=args.color), color=args.color)
                return 1
            ctx = click.Context(subcommand, info_name=name, parent=ctx, color=args.color)
            command = subcommand

        vocabulary = build_command_vocabulary(command, ctx)
        message = argument_suggestion([args.token], vocabulary)
        click.echo(render_message(message, color=args.color), color=args.color)

        if args.ranking:
            candidates = suggestion_candidates(message.kind, vocabulary)
            for candidate, distance in rank_candidates(args.token, candidates):
                click.echo(f"{distance:>4}  {candidate}")

        return 0

    except Exception:
        logger.critical("Fatal error while building suggestion", exc_info=True)
        return 1


def main() -> None:
    """Console script entry point."""
    raise SystemExit(run())
