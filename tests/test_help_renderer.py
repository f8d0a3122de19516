from __future__ import annotations

from types import SimpleNamespace

import click
import typer

import keycloakify_cli.cli.help as cli_help
from keycloakify_cli.catalog import CATALOG
from keycloakify_cli.cli import app


def _root_context() -> click.Context:
    group = typer.main.get_command(app)
    return click.Context(group, info_name="keycloakify")


def test_command_rows_follow_catalog_order():
    rows = cli_help.command_help_rows(_root_context())

    assert [row[0] for row in rows] == CATALOG.names()


def test_command_rows_hint_command_specific_option():
    rows = {row[0]: row for row in cli_help.command_help_rows(_root_context())}

    assert rows["start-keycloak"][1] == "--port"
    assert rows["eject-file"][1] == "--file"
    assert rows["build"][1] == ""
    assert rows["build"][2] == "Build the theme (default subcommand)."


def test_root_option_rows_show_help_flags():
    rows = cli_help.option_help_rows(_root_context())

    assert rows == [("--help", "-h", "Show this message and exit.")]


def test_global_option_rows():
    rows = cli_help.global_option_rows(CATALOG.global_options)

    assert rows[0][0] == "--project"
    assert rows[0][1] == "-p"
    assert rows[0][2].startswith("For monorepos")


def test_format_short_options():
    option = click.Option(["--project", "-p"])
    assert cli_help.format_short_options(option) == "-p"
    assert cli_help.primary_long_option(option) == "--project"


def test_root_help_page_sections(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for section in ("Usage", "Commands", "Options", "Global options", "Examples"):
        assert section in result.stdout
    assert "--project" in result.stdout
    assert "keycloakify [OPTIONS] COMMAND [ARGS]..." in result.stdout


def test_root_help_lists_every_command(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in CATALOG.names():
        assert name in result.stdout


def test_option_detection_does_not_depend_on_click_classes():
    foreign_option = SimpleNamespace(param_type_name="option")
    foreign_argument = SimpleNamespace(param_type_name="argument")

    assert cli_help.is_option(foreign_option)
    assert not cli_help.is_option(foreign_argument)
    assert cli_help.is_option(click.Option(["--port"]))
    assert not cli_help.is_option(click.Argument(["name"]))
