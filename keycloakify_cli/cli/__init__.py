"""Keycloakify command-line interface."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import typer

from keycloakify_cli import PROG_NAME, __description__
from keycloakify_cli.fallback import run_fallback, should_fall_back

from . import commands
from .common import fallback_command
from .help import show_root_help

app = typer.Typer(
    help=__description__,
    context_settings={"help_option_names": []},
    rich_markup_mode="rich",
    add_completion=False,
)

commands.register(app)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    help_: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
    ),
) -> None:
    if help_ or ctx.invoked_subcommand is None:
        show_root_help(ctx)
        raise typer.Exit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console entry point: fall back to ``build`` or hand argv to Typer."""
    rest = list(sys.argv[1:] if argv is None else argv)
    if should_fall_back(rest):
        sys.exit(run_fallback(rest, fallback_command()))
    app(args=rest, prog_name=PROG_NAME)


__all__ = ["app", "main"]
