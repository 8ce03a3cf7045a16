"""Tests for click vocabulary snapshots."""

from __future__ import annotations

import logging

import click
import pytest

from argsuggest.clickapp.vocabulary import build_command_vocabulary, option_name


@pytest.fixture
def group() -> click.Group:
    @click.group()
    @click.option("-v", "--verbose", is_flag=True)
    @click.option("--color/--no-color", default=True)
    @click.option("--token", hidden=True)
    @click.option("-q", is_flag=True)
    def cli(verbose: bool, color: bool, token: str | None, q: bool) -> None:
        pass

    @cli.command()
    def zeta() -> None:
        pass

    @cli.command()
    def alpha() -> None:
        pass

    @cli.command(hidden=True)
    def internal() -> None:
        pass

    @cli.group()
    def mid() -> None:
        pass

    return cli


class TestOptionName:
    def test_prefers_long_spelling(self) -> None:
        assert option_name(click.Option(["-v", "--verbose"], is_flag=True)) == "--verbose"

    def test_short_only(self) -> None:
        assert option_name(click.Option(["-q"], is_flag=True)) == "-q"

    def test_secondary_spelling_ignored(self) -> None:
        assert option_name(click.Option(["--color/--no-color"])) == "--color"


class TestBuildCommandVocabulary:
    def test_options_in_declaration_order(self, group: click.Group) -> None:
        vocabulary = build_command_vocabulary(group)
        assert vocabulary.options == ("--verbose", "--color", "-q", "--help")

    def test_hidden_option_excluded(self, group: click.Group) -> None:
        assert "--token" not in build_command_vocabulary(group).options

    def test_subcommands_in_registration_order(self, group: click.Group) -> None:
        vocabulary = build_command_vocabulary(group)
        assert vocabulary.subcommands == ("zeta", "alpha", "mid")

    def test_plain_command_has_no_subcommands(self) -> None:
        @click.command()
        @click.option("--force", is_flag=True)
        def cmd(force: bool) -> None:
            pass

        vocabulary = build_command_vocabulary(cmd)
        assert vocabulary.options == ("--force", "--help")
        assert vocabulary.subcommands == ()

    def test_uses_context_help_option_names(self) -> None:
        @click.command(context_settings={"help_option_names": ["-h", "--assist"]})
        def cmd() -> None:
            pass

        ctx = click.Context(cmd, help_option_names=["-h", "--assist"])
        assert build_command_vocabulary(cmd, ctx).options == ("--assist",)

    def test_arguments_ignored(self) -> None:
        @click.command()
        @click.argument("path")
        def cmd(path: str) -> None:
            pass

        assert build_command_vocabulary(cmd).options == ("--help",)

    def test_snapshot_is_detached(self, group: click.Group) -> None:
        vocabulary = build_command_vocabulary(group)

        @group.command()
        def later() -> None:
            pass

        assert "later" not in vocabulary.subcommands
        assert "later" in build_command_vocabulary(group).subcommands

    def test_logs_sizes(
        self, group: click.Group, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="argsuggest"):
            build_command_vocabulary(group)

        assert "4 options, 3 subcommands" in caplog.text
